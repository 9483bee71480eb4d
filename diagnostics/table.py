# diagnostics/table.py
import datetime as dt
import logging

import pandas as pd

import config as cfg

logger = logging.getLogger(__name__)

POINT_COLUMNS = ["frame", "depth", "x", "y", "z",
                 "world_x", "world_y", "world_z",
                 "world_r", "world_phi_deg", "world_theta_deg"]
FRAME_COLUMNS = ["frame", "parent", "depth", "world_x", "world_y", "world_z"]


def points_table(points) -> pd.DataFrame:
    """
    One row per VectorPoint: its frame, the local cartesian components and
    the point resolved into world coordinates (cartesian and polar).
    """
    points = list(points)
    if not points:
        raise ValueError("points_table needs at least one VectorPoint")
    rows = []
    for p in points:
        local = p.vector.to_cartesian()
        world = p.to_world().vector.to_cartesian()
        world_polar = world.to_polar()
        rows.append((p.frame.id, p.frame.depth, local.x, local.y, local.z,
                     world.x, world.y, world.z,
                     world_polar.r, world_polar.phi, world_polar.theta))
    return pd.DataFrame(rows, columns=POINT_COLUMNS)


def frames_table(frames) -> pd.DataFrame:
    """One row per frame with its parent id, depth and origin in world coordinates."""
    frames = sorted(set(frames))
    if not frames:
        raise ValueError("frames_table needs at least one frame")
    rows = []
    for f in frames:
        off = f.world_offset()
        rows.append((f.id, f.parent.id if f.parent is not None else None, f.depth, off.x, off.y, off.z))
    return pd.DataFrame(rows, columns=FRAME_COLUMNS)


def save_csv(df: pd.DataFrame, stem="points"):
    outdir = cfg.OUTDIR
    outdir.mkdir(parents=True, exist_ok=True)
    stamp = dt.datetime.now().strftime("%Y%m%d_%H%M%S")
    out = outdir / f"{stem}_{stamp}.csv"
    df.to_csv(out, index=False)
    logger.info("Saved %d rows to %s", len(df), out)
    return out
