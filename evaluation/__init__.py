"""
Evaluation utilities for lattice PMFs.

This package contains summaries of PMFs (moments, means, covariances) used to
check combined distributions against closed-form expectations.
"""

from .moments import (
    compute_alpha_moment,
    compute_mean,
    compute_variance,
    compute_covariance,
    compute_moment_sequence,
)

__all__ = [
    'compute_alpha_moment',
    'compute_mean',
    'compute_variance',
    'compute_covariance',
    'compute_moment_sequence',
]
