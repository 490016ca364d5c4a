from typing import Tuple
import numpy as np
from .types import PMFNumericError


def nonzero_bounding_box(table: np.ndarray, relative_mass_threshold: float = 0.0) -> Tuple[np.ndarray, np.ndarray]:
    """
    Tightest axis-aligned box containing every cell above the threshold.

    A cell counts when its value exceeds ``relative_mass_threshold`` times the
    total mass of ``table``.

    Parameters:
    -----------
    table : np.ndarray
        Dense grid of nonnegative masses
    relative_mass_threshold : float
        Fraction of the total mass at or below which a cell is ignored

    Returns:
    --------
    (first, last) : Tuple[np.ndarray, np.ndarray]
        Inclusive per-axis start and end offsets into ``table`` (int64).
        Both are empty for a rank-0 grid.
    """
    table = np.asarray(table, dtype=np.float64)
    if table.ndim == 0:
        empty = np.zeros(0, dtype=np.int64)
        return empty, empty.copy()

    cutoff = relative_mass_threshold * float(table.sum())
    mask = table > cutoff
    if not mask.any():
        raise PMFNumericError(f"No cell exceeds the bounding-box cutoff {cutoff:.3e}")

    first = np.empty(table.ndim, dtype=np.int64)
    last = np.empty(table.ndim, dtype=np.int64)
    for axis in range(table.ndim):
        others = tuple(a for a in range(table.ndim) if a != axis)
        hits = np.flatnonzero(mask.any(axis=others))
        first[axis] = hits[0]
        last[axis] = hits[-1]
    return first, last
