# utils/angles.py
import math
from typing import Optional

import config as cfg


def wrap(value: float, period: float) -> float:
    """Euclidean remainder of ``value`` in ``[0, period)``.

    Python's float ``%`` already follows the sign of the divisor, but a tiny
    negative value can round up to exactly ``period``; fold that back to 0.
    """
    out = value % period
    if out >= period:
        return 0.0
    return out + 0.0  # -0.0 -> 0.0


def equal_with_delta(a: float, b: float, delta: Optional[float] = None) -> bool:
    """True when ``|a - b|`` does not exceed ``delta`` (default ``F64_DELTA``)."""
    if delta is None:
        delta = cfg.F64_DELTA
    return abs(a - b) <= delta


def check_finite(*values: float) -> None:
    for v in values:
        if not math.isfinite(v):
            raise ValueError(f"Vector components must be finite, got {v}")
