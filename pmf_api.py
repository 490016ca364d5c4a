from typing import Sequence
import numpy as np

from lattice_pmf import kernels as _impl_kernels
from lattice_pmf import selfconv as _impl_selfconv
from lattice_pmf.bounding_box import nonzero_bounding_box
from lattice_pmf.config import CheckConfig, checks, get_checks, set_checks
from lattice_pmf.pmf import PMF, add, subtract, p_add, p_sub
from lattice_pmf.types import P_SUM, P_MAX, ConvolutionMethod, PMFShapeError, PMFNumericError

__all__ = [
    'PMF', 'add', 'subtract', 'p_add', 'p_sub', 'self_add', 'p_convolve',
    'point_mass', 'uniform', 'nonzero_bounding_box',
    'P_SUM', 'P_MAX', 'ConvolutionMethod', 'PMFShapeError', 'PMFNumericError',
    'CheckConfig', 'checks', 'get_checks', 'set_checks',
]


def p_convolve(lhs: np.ndarray, rhs: np.ndarray, p: float = P_SUM,
               method: ConvolutionMethod = ConvolutionMethod.AUTO) -> np.ndarray:
    """
    Generalized convolution of two raw grids.

    Parameters:
    -----------
    lhs, rhs : np.ndarray
        Nonnegative grids of equal rank
    p : float
        Combination exponent (default: P_SUM, ordinary convolution)
    method : ConvolutionMethod
        Numeric strategy (default: AUTO)

    Returns:
    --------
    np.ndarray
        Unnormalized grid of shape lhs.shape + rhs.shape - 1
    """
    return _impl_kernels.p_convolve(lhs, rhs, p, method)


def self_add(base: PMF, T: int, p: float = P_SUM,
             method: ConvolutionMethod = ConvolutionMethod.AUTO) -> PMF:
    """
    Distribution of the sum of T independent copies of ``base``.

    Uses exponentiation-by-squaring: O(log T) additions instead of O(T).

    Parameters:
    -----------
    base: PMF to add to itself
    T: Number of summands (must be >= 1)
    p: Combination exponent (default: P_SUM)
    method: Numeric convolution strategy (default: AUTO)

    Returns:
    --------
    PMF of the T-fold sum

    Usage:
    ------
    die = uniform([1], [6])
    three_dice = self_add(die, T=3)
    """
    return _impl_selfconv.self_add_core(base, int(T), p, method)


def point_mass(location: Sequence[int]) -> PMF:
    """PMF with all of its mass on the lattice point ``location``."""
    location = np.asarray(location, dtype=np.int64).reshape(-1)
    return PMF(location, np.ones((1,) * location.size))


def uniform(first_support: Sequence[int], last_support: Sequence[int]) -> PMF:
    """Uniform PMF over the inclusive box [first_support, last_support]."""
    first = np.asarray(first_support, dtype=np.int64).reshape(-1)
    last = np.asarray(last_support, dtype=np.int64).reshape(-1)
    if first.shape != last.shape or np.any(last < first):
        raise PMFShapeError(f"Invalid support box {first.tolist()} to {last.tolist()}")
    return PMF(first, np.ones(tuple(int(n) for n in last - first + 1)))
