import numpy as np
import pytest
from evaluation import compute_alpha_moment, compute_covariance, compute_mean, compute_moment_sequence, compute_variance
from pmf_api import PMF, point_mass, self_add, subtract, uniform

def test_die_mean_and_variance():
    die = uniform([1], [6])
    assert np.allclose(compute_mean(die), [3.5])
    assert np.allclose(compute_variance(die), [35.0 / 12.0])

def test_moments_add_under_self_add():
    die = uniform([1], [6])
    three = self_add(die, 3)
    assert np.allclose(compute_mean(three), [10.5])
    assert np.allclose(compute_variance(three), [35.0 / 4.0])

def test_difference_of_dice_is_centered():
    die = uniform([1], [6])
    D = subtract(die, die)
    assert np.allclose(compute_mean(D), [0.0], atol=1e-12)
    assert np.allclose(compute_variance(D), [35.0 / 6.0])

def test_covariance_of_independent_axes(rng):
    x = rng.random(4) + 0.1
    y = rng.random(3) + 0.1
    pmf = PMF([-2, 5], np.outer(x, y))
    cov = compute_covariance(pmf)
    assert cov.shape == (2, 2)
    assert np.isclose(cov[0, 1], 0.0, atol=1e-12)
    assert np.allclose(np.diag(cov), compute_variance(pmf))

def test_covariance_of_correlated_axes():
    pmf = PMF([0, 0], np.eye(3))
    cov = compute_covariance(pmf)
    assert np.allclose(cov, np.full((2, 2), 2.0 / 3.0))

def test_moment_sequence_of_point_mass():
    seq = compute_moment_sequence(point_mass([3]), np.array([0.0, 1.0, 2.0]))
    assert np.allclose(seq, [1.0, 3.0, 9.0])

def test_fractional_moment_of_negative_support_is_nan():
    pmf = PMF([-2], [1.0, 1.0])
    assert np.isnan(compute_alpha_moment(pmf, 0.5))
    assert np.isclose(compute_alpha_moment(pmf, 2.0), 2.5)

def test_invalid_arguments():
    pmf = uniform([0, 0], [1, 1])
    with pytest.raises(ValueError):
        compute_alpha_moment(pmf, -1.0)
    with pytest.raises(ValueError):
        compute_alpha_moment(pmf, 1.0, axis=2)
    assert compute_mean(PMF()).shape == (0,)
    assert compute_covariance(PMF()).shape == (0, 0)
