import pathlib


# === World Frame ===
WORLD_ORIGIN = (0.0, 0.0, 0.0)  # m, always the zero vector
WORLD_ID = "world"

# === Numerics ===
F64_DELTA = 0.000001  # max difference for two floats to still count as close

# === Output ===
OUTDIR = pathlib.Path("out")  # diagnostics write CSVs and PNGs here
