"""
Dense grid helpers.

A grid is a contiguous float64 numpy array. The helpers here cover the grid
operations PMFs need: shrinking to a sub-block, reordering and flipping axes,
and p-norm reduction over a subset of axes.
"""

from typing import Sequence
import numpy as np
from .types import PMFShapeError


def as_grid(table) -> np.ndarray:
    """Coerce ``table`` to a C-ordered float64 array (no copy if it already is one; 0-d stays 0-d)."""
    return np.asarray(table, dtype=np.float64, order="C")


def as_support(vector) -> np.ndarray:
    return np.array(vector, dtype=np.int64).reshape(-1)


def verify_permutation(order: Sequence[int], dimension: int) -> None:
    order = list(order)
    if len(order) != dimension:
        raise PMFShapeError(f"Permutation must have length {dimension}, got {len(order)}: {order}")
    if sorted(order) != list(range(dimension)):
        raise PMFShapeError(f"{order} is not a permutation of range({dimension})")


def verify_subpermutation(axes: Sequence[int], dimension: int) -> None:
    axes = list(axes)
    if len(set(axes)) != len(axes):
        raise PMFShapeError(f"Axes must not repeat, got {axes}")
    bad = [a for a in axes if not 0 <= a < dimension]
    if bad:
        raise PMFShapeError(f"Axes {bad} out of range for dimension {dimension}")


def inverse_permutation(order: Sequence[int]) -> list:
    inv = [0] * len(order)
    for i, axis in enumerate(order):
        inv[axis] = i
    return inv


def shrink(table: np.ndarray, start: np.ndarray, shape: np.ndarray) -> np.ndarray:
    """Return a contiguous copy of the block ``table[start : start + shape]``."""
    region = tuple(slice(int(s), int(s) + int(n)) for s, n in zip(start, shape))
    return np.array(table[region], dtype=np.float64, order="C")


def transpose(table: np.ndarray, new_order: Sequence[int]) -> np.ndarray:
    """Axis ``i`` of the result is axis ``new_order[i]`` of ``table``."""
    return np.array(np.transpose(table, tuple(int(a) for a in new_order)), order="C")


def flip_all_axes(table: np.ndarray) -> np.ndarray:
    """Reverse every axis: cell ``i`` moves to ``shape - 1 - i``."""
    if table.ndim == 0:
        return table.copy()
    return np.ascontiguousarray(np.flip(table))


def p_marginal(table: np.ndarray, axes_to_keep: Sequence[int], p: float) -> np.ndarray:
    """
    Reduce every axis not in ``axes_to_keep`` with the p-norm (Σ x^p)^(1/p).

    The kept axes appear in the result in the order given. p == 1 is the plain
    sum and p == inf the maximum. Other p are computed relative to the
    per-cell maximum so that large exponents do not underflow.
    """
    keep = [int(a) for a in axes_to_keep]
    dropped = [a for a in range(table.ndim) if a not in keep]
    kept_shape = tuple(table.shape[a] for a in keep)
    blocks = np.transpose(table, keep + dropped).reshape(kept_shape + (-1,))

    if p == 1.0:
        return np.ascontiguousarray(blocks.sum(axis=-1))
    if np.isinf(p):
        return np.ascontiguousarray(blocks.max(axis=-1))

    scale = blocks.max(axis=-1, keepdims=True)
    scale = np.where(scale > 0.0, scale, 1.0)
    reduced = np.power(np.power(blocks / scale, p).sum(axis=-1), 1.0 / p)
    return np.ascontiguousarray(reduced * scale[..., 0])
