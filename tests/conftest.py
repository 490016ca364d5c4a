import sys
from pathlib import Path

# Add project root to path so we can import pmf_api
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import numpy as np
import pytest

TOL_MICRO = 1e-12
TOL_MASS = 1e-9

@pytest.fixture(scope="session")
def rng():
    return np.random.default_rng(12345)

def positive_table(rng, shape) -> np.ndarray:
    # Strictly positive entries so that no boundary layer gets trimmed
    return rng.random(shape) + 0.1

def assert_normalized(pmf, tol: float = TOL_MASS):
    total = float(np.sum(pmf.table))
    if abs(total - 1.0) > tol:
        raise AssertionError(f"PMF not normalized: sum={total:.15f}, |err|={abs(total - 1.0):.3e}")

def assert_minimal_support(pmf, relative_threshold: float = 0.0):
    table = np.asarray(pmf.table)
    cutoff = relative_threshold * float(table.sum())
    for axis in range(table.ndim):
        for index in (0, table.shape[axis] - 1):
            layer = np.take(table, index, axis=axis)
            if not np.any(layer > cutoff):
                raise AssertionError(f"Boundary layer {index} along axis {axis} is negligible")

def assert_support(pmf, first, last):
    assert pmf.first_support.tolist() == list(first)
    assert pmf.last_support.tolist() == list(last)
