# diagnostics/plots.py
import logging

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401

import config as cfg

logger = logging.getLogger(__name__)


def _save(fig, name):
    cfg.OUTDIR.mkdir(parents=True, exist_ok=True)
    p = cfg.OUTDIR / name
    fig.tight_layout()
    fig.savefig(p, dpi=150)
    plt.close(fig)
    logger.info("Saved plot %s", p)
    return p.resolve()


def plot_frames(frames, points=(), name="frames.png", title="Frames (world coordinates)"):
    """
    3D plot of frame origins resolved into the world frame, with a segment
    from every frame to its parent, plus any VectorPoints given.
    Axes follow the East/North/Up convention of CartesianVector.
    """
    frames = sorted(set(frames))
    points = list(points)
    if not frames and not points:
        raise ValueError("Nothing to plot: no frames and no points given")

    fig = plt.figure(figsize=(8, 6))
    ax = fig.add_subplot(111, projection="3d")

    for f in frames:
        o = f.world_offset()
        ax.scatter([o.x], [o.y], [o.z], marker="^")
        ax.text(o.x, o.y, o.z, f" {f.id}")
        if f.parent is not None:
            po = f.parent.world_offset()
            ax.plot([po.x, o.x], [po.y, o.y], [po.z, o.z], ls=":", color="grey")

    if points:
        world = [p.to_world().vector.to_cartesian() for p in points]
        ax.scatter([w.x for w in world], [w.y for w in world], [w.z for w in world],
                   marker="o", label="points")
        ax.legend()

    ax.set_xlabel("East X [m]"); ax.set_ylabel("North Y [m]"); ax.set_zlabel("Up Z [m]")
    ax.set_title(title)
    return _save(fig, name)
