"""
Discrete probability mass functions over integer lattices.

A PMF couples a dense grid of masses with the lattice coordinate of the grid's
cell [0, ..., 0]. Every public construction path normalizes the grid to unit
mass and trims it to the tightest box holding nonzero mass; copies and
transpositions keep both properties without recomputing them.
"""

import logging
from typing import Sequence
import numpy as np
from . import tensor as _tensor
from .bounding_box import nonzero_bounding_box
from .config import get_checks
from .kernels import check_exponent, p_convolve
from .types import ConvolutionMethod, PMFNumericError, PMFShapeError

logger = logging.getLogger(__name__)


class PMF:
    """
    Normalized mass grid anchored at an integer support origin.

    PMF() is the dimension-0 unit PMF. PMF(first_support, table) normalizes
    ``table`` and narrows it to its nonzero bounding box. With ``copy=False``
    the caller hands ``table`` over: a writeable float64 C-ordered table is
    normalized in place and, if already tight, kept as the PMF's grid.
    """

    mass_threshold_for_normalization = 0.0
    relative_mass_threshold_for_bounding_box = 0.0

    def __init__(self, first_support=None, table=None, copy: bool = True):
        if first_support is None and table is None:
            self._first_support = np.zeros(0, dtype=np.int64)
            self._table = np.ones((), dtype=np.float64)
            return
        if first_support is None or table is None:
            raise PMFShapeError("PMF needs both first_support and table (or neither)")

        sup = _tensor.as_support(first_support)
        tab = _tensor.as_grid(table)
        checks = get_checks()
        if checks.shape_check and sup.size != tab.ndim:
            raise PMFShapeError(f"first_support has length {sup.size} but table has rank {tab.ndim}")
        if checks.numeric_check and not np.all(tab >= 0.0):
            raise PMFNumericError("PMF must be constructed from a nonnegative table")

        # Normalizing out of place is the one copy made for copy=True
        in_place = not copy and tab.flags.writeable
        self._first_support, self._table = self._trimmed(sup, self._normalized(tab, in_place))

    @classmethod
    def _from_normalized(cls, first_support: np.ndarray, table: np.ndarray) -> "PMF":
        # Trusted path: table already sums to 1 and is tight around its support.
        result = cls.__new__(cls)
        result._first_support = first_support
        result._table = table
        return result

    # ------------------------------------------------------------------
    # invariant restoration

    @classmethod
    def _normalized(cls, table: np.ndarray, in_place: bool = False) -> np.ndarray:
        tot = float(table.sum())
        if get_checks().numeric_check and not tot > cls.mass_threshold_for_normalization:
            raise PMFNumericError(f"Cannot normalize table with total mass {tot:.3e}")
        if in_place:
            table /= tot
            return table
        return np.asarray(table / tot)

    @classmethod
    def _trimmed(cls, first_support: np.ndarray, table: np.ndarray):
        """Cut a normalized (origin, table) pair down to its nonzero bounding box."""
        first, last = nonzero_bounding_box(table, cls.relative_mass_threshold_for_bounding_box)
        shape = last - first + 1
        if np.all(first == 0) and np.array_equal(shape, table.shape):
            return first_support, table
        # Dropped cells may carry mass under a positive threshold, so renormalize
        table = cls._normalized(_tensor.shrink(table, first, shape), in_place=True)
        return first_support + first, table

    # ------------------------------------------------------------------
    # queries

    @property
    def dimension(self) -> int:
        return int(self._first_support.size)

    @property
    def first_support(self) -> np.ndarray:
        return self._first_support.copy()

    @property
    def last_support(self) -> np.ndarray:
        return self._first_support + np.array(self._table.shape, dtype=np.int64) - 1

    @property
    def table(self) -> np.ndarray:
        """Read-only view of the normalized grid."""
        view = self._table.view()
        view.flags.writeable = False
        return view

    # ------------------------------------------------------------------
    # transforms

    def narrow(self, new_first_support, new_last_support) -> None:
        """
        Shrink the support to its intersection with [new_first, new_last] and renormalize.

        Raises PMFShapeError (shape checks) if the box has the wrong length,
        is inverted, or does not meet the current support.
        """
        new_first = _tensor.as_support(new_first_support)
        new_last = _tensor.as_support(new_last_support)
        checks = get_checks()
        if checks.shape_check:
            if new_first.size != self.dimension or new_last.size != self.dimension:
                raise PMFShapeError(
                    f"Narrowing box has lengths {new_first.size}, {new_last.size}; PMF has dimension {self.dimension}")
            if np.any(new_first > new_last):
                raise PMFShapeError(f"Narrowing box {new_first} to {new_last} is inverted")

        intersecting_first = np.maximum(self._first_support, new_first)
        intersecting_last = np.minimum(self.last_support, new_last)
        new_shape = intersecting_last - intersecting_first + 1
        if checks.shape_check and np.any(new_shape <= 0):
            raise PMFShapeError(f"Narrowing to {new_first} {new_last} results in empty PMF")

        logger.debug("narrow %s..%s -> %s..%s", self._first_support, self.last_support,
                     intersecting_first, intersecting_last)
        table = _tensor.shrink(self._table, intersecting_first - self._first_support, new_shape)
        table = self._normalized(table, in_place=True)
        first, table = self._trimmed(intersecting_first, table)
        self._table, self._first_support = table, first

    def _transposed_parts(self, new_order: Sequence[int]):
        order = [int(a) for a in new_order]
        if get_checks().shape_check:
            _tensor.verify_permutation(order, self.dimension)
        first = self._first_support[order] if order else self._first_support.copy()
        return first, _tensor.transpose(self._table, order)

    def transpose(self, new_order: Sequence[int]) -> None:
        """Reorder axes in place; mass and support shape are untouched."""
        self._first_support, self._table = self._transposed_parts(new_order)

    def transposed(self, new_order: Sequence[int]) -> "PMF":
        return PMF._from_normalized(*self._transposed_parts(new_order))

    def marginal(self, axes_to_keep: Sequence[int], p: float = 1.0) -> "PMF":
        """
        PMF over ``axes_to_keep`` (in that order), reducing the other axes with the p-norm.

        Keeping every axis is a pure transposition; keeping none gives PMF().
        """
        axes = [int(a) for a in axes_to_keep]
        checks = get_checks()
        if checks.shape_check:
            _tensor.verify_subpermutation(axes, self.dimension)
        if checks.numeric_check:
            check_exponent(p)

        if len(axes) == self.dimension:
            # All axes kept: transpose to avoid the power sums and renormalization
            logger.debug("marginal keeps all %d axes; transposing", self.dimension)
            return self.transposed(axes)
        if not axes:
            return PMF()

        return PMF(self._first_support[axes], _tensor.p_marginal(self._table, axes, p), copy=False)

    # ------------------------------------------------------------------
    # value semantics

    def copy(self) -> "PMF":
        return PMF._from_normalized(self._first_support.copy(), self._table.copy())

    def __copy__(self) -> "PMF":
        return self.copy()

    def __deepcopy__(self, memo) -> "PMF":
        return self.copy()

    def __str__(self) -> str:
        first = np.array2string(self._first_support, separator=", ")
        last = np.array2string(self.last_support, separator=", ")
        return f"PMF:{{{first} to {last}}} {np.array2string(self._table)}"

    def __repr__(self) -> str:
        return f"PMF(first_support={self._first_support.tolist()}, shape={self._table.shape})"


def add(lhs: PMF, rhs: PMF, p: float = 1.0, method: ConvolutionMethod = ConvolutionMethod.AUTO) -> PMF:
    """
    Distribution of lhs + rhs (elementwise) for independent PMFs of equal dimension.

    The grids are p-convolved; the support origin is the sum of the origins.
    """
    if get_checks().shape_check and lhs.dimension != rhs.dimension:
        raise PMFShapeError(f"add expects PMFs of equal dimension, got {lhs.dimension} and {rhs.dimension}")
    return PMF(lhs.first_support + rhs.first_support,
               p_convolve(lhs.table, rhs.table, p, method), copy=False)


def subtract(lhs: PMF, rhs: PMF, p: float = 1.0, method: ConvolutionMethod = ConvolutionMethod.AUTO) -> PMF:
    """
    Distribution of lhs - rhs (elementwise) for independent PMFs of equal dimension.

    rhs is flipped along every axis so that adding the flipped grid realizes
    the subtraction; the origin is the smallest reachable difference.
    """
    if get_checks().shape_check and lhs.dimension != rhs.dimension:
        raise PMFShapeError(f"subtract expects PMFs of equal dimension, got {lhs.dimension} and {rhs.dimension}")
    flipped = _tensor.flip_all_axes(rhs.table)
    return PMF(lhs.first_support - rhs.last_support,
               p_convolve(lhs.table, flipped, p, method), copy=False)


p_add = add
p_sub = subtract
