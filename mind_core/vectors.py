import math
from typing import Optional

import numpy as np

from .types import Vector


def _scaled(vec: Vector) -> Optional[np.ndarray]:
    arr = np.asarray(vec, dtype=np.float64)
    scale = float(np.max(np.abs(arr)))
    if not math.isfinite(scale) or scale == 0.0:
        return None
    return arr / scale


def cosine_similarity(a: Optional[Vector], b: Optional[Vector]) -> float:
    """
    Cosine of the angle between two vectors.

    Returns 0.0 when either vector is missing, the lengths differ, or either
    vector has zero magnitude. Never raises and never returns NaN.
    """
    if a is None or b is None or len(a) != len(b) or len(a) == 0:
        return 0.0

    # dividing by the largest component keeps the squared norms clear of
    # overflow and underflow without changing the angle
    sa = _scaled(a)
    sb = _scaled(b)
    if sa is None or sb is None:
        return 0.0

    score = float(np.dot(sa, sb) / (np.linalg.norm(sa) * np.linalg.norm(sb)))
    if not math.isfinite(score):
        return 0.0

    # rounding can push parallel vectors a hair past 1.0
    return max(-1.0, min(1.0, score))
