"""
Moment computation utilities for lattice PMFs.

This module provides functions to compute statistical moments of PMFs over
lattice coordinates, useful for checking combinations against closed-form
results (means add under add, variances add for independent summands).
"""

import numpy as np
from pmf_api import PMF


def _axis_coordinates_and_masses(pmf: PMF, axis: int):
    if not 0 <= axis < pmf.dimension:
        raise ValueError(f"Axis {axis} out of range for PMF of dimension {pmf.dimension}")
    table = pmf.table
    others = tuple(a for a in range(pmf.dimension) if a != axis)
    masses = table.sum(axis=others) if others else np.asarray(table)
    coords = pmf.first_support[axis] + np.arange(table.shape[axis], dtype=np.float64)
    return coords, masses


def compute_alpha_moment(pmf: PMF, alpha: float, axis: int = 0) -> float:
    """
    Compute the alpha-th moment of one coordinate of a PMF.

    The alpha-th moment is defined as E[X^α] = Σ x^α * p(x) where x runs over
    the lattice coordinates along ``axis`` and p is the marginal mass there.

    Parameters:
    -----------
    pmf : PMF
        Lattice PMF
    alpha : float
        Power for the moment computation (must be >= 0)
    axis : int
        Coordinate to take the moment of

    Returns:
    --------
    float
        The alpha-th moment E[X^α], or nan if x^α is not finite somewhere
        (e.g. a fractional power of a negative coordinate)

    Notes:
    ------
    - For alpha = 0, returns 1.0 (sum of probabilities)
    - For alpha = 1, returns the expectation E[X]
    """
    if alpha < 0:
        raise ValueError(f"Alpha must be >= 0, got {alpha}")

    coords, masses = _axis_coordinates_and_masses(pmf, axis)

    if alpha == 0:
        return 1.0

    if alpha == 1:
        return float(np.sum(coords * masses))

    with np.errstate(invalid="ignore", over="ignore"):
        x_power = np.power(coords, alpha)

    if not np.all(np.isfinite(x_power)):
        return np.nan

    return float(np.sum(x_power * masses))


def compute_mean(pmf: PMF) -> np.ndarray:
    """Vector of per-axis expectations."""
    return np.array([compute_alpha_moment(pmf, 1.0, axis) for axis in range(pmf.dimension)],
                    dtype=np.float64)


def compute_variance(pmf: PMF) -> np.ndarray:
    """Vector of per-axis variances, computed around the mean."""
    out = np.zeros(pmf.dimension, dtype=np.float64)
    for axis in range(pmf.dimension):
        coords, masses = _axis_coordinates_and_masses(pmf, axis)
        mean = np.sum(coords * masses)
        out[axis] = np.sum((coords - mean) ** 2 * masses)
    return out


def compute_covariance(pmf: PMF) -> np.ndarray:
    """Covariance matrix (dimension x dimension) of the lattice coordinates."""
    d = pmf.dimension
    if d == 0:
        return np.zeros((0, 0), dtype=np.float64)
    table = pmf.table
    coords = np.indices(table.shape, dtype=np.float64).reshape(d, -1)
    coords += pmf.first_support[:, None]
    weights = np.asarray(table).reshape(-1)
    centered = coords - (coords @ weights)[:, None]
    return (centered * weights) @ centered.T


def compute_moment_sequence(pmf: PMF, alpha_values: np.ndarray, axis: int = 0) -> np.ndarray:
    """
    Compute a sequence of moments for different alpha values.

    Parameters:
    -----------
    pmf : PMF
        Lattice PMF
    alpha_values : np.ndarray
        Array of alpha values to compute moments for
    axis : int
        Coordinate to take the moments of

    Returns:
    --------
    np.ndarray
        Array of moments corresponding to alpha_values
    """
    alpha_values = np.asarray(alpha_values, dtype=float)
    moments = np.zeros_like(alpha_values, dtype=float)

    for i, alpha in enumerate(alpha_values):
        moments[i] = compute_alpha_moment(pmf, alpha, axis)

    return moments
