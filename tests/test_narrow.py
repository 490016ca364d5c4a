import numpy as np
import pytest
from pmf_api import PMF, PMFShapeError
from tests.conftest import assert_normalized, assert_minimal_support, assert_support

def test_narrow_inside_support_renormalizes():
    pmf = PMF([0], [1.0, 2.0, 3.0, 4.0])
    pmf.narrow([1], [2])
    assert_support(pmf, [1], [2])
    assert np.allclose(pmf.table, [0.4, 0.6])
    assert_normalized(pmf)

def test_narrow_clamps_to_current_support():
    pmf = PMF([0], [1.0, 2.0, 3.0, 4.0])
    pmf.narrow([-5], [1])
    assert_support(pmf, [0], [1])
    assert np.allclose(pmf.table, [1.0 / 3.0, 2.0 / 3.0])

def test_narrow_box_covering_support_is_a_no_op():
    pmf = PMF([2], [1.0, 3.0])
    pmf.narrow([-100], [100])
    assert_support(pmf, [2], [3])
    assert np.allclose(pmf.table, [0.25, 0.75])

def test_narrow_2d():
    pmf = PMF([0, 0], np.ones((3, 3)))
    pmf.narrow([1, -4], [5, 0])
    assert_support(pmf, [1, 0], [2, 0])
    assert pmf.table.shape == (2, 1)
    assert np.allclose(pmf.table, 0.5)

def test_narrow_disjoint_box_fails():
    pmf = PMF([0], [1.0, 2.0, 3.0])
    with pytest.raises(PMFShapeError, match="empty PMF"):
        pmf.narrow([10], [12])
    # Failed narrowing leaves the PMF untouched
    assert_support(pmf, [0], [2])
    assert_normalized(pmf)

def test_narrow_disjoint_along_one_axis_fails():
    pmf = PMF([0, 0], np.ones((2, 2)))
    with pytest.raises(PMFShapeError):
        pmf.narrow([0, 5], [1, 6])

def test_narrow_inverted_box_fails():
    pmf = PMF([0], [1.0, 2.0, 3.0])
    with pytest.raises(PMFShapeError):
        pmf.narrow([2], [1])

def test_narrow_wrong_length_fails():
    pmf = PMF([0], [1.0, 2.0, 3.0])
    with pytest.raises(PMFShapeError):
        pmf.narrow([0, 0], [1, 1])

def test_narrow_retrims_exposed_zero_edges():
    pmf = PMF([0], [0.5, 0.0, 0.5])
    pmf.narrow([0], [1])
    assert_support(pmf, [0], [0])
    assert np.allclose(pmf.table, [1.0])
    assert_minimal_support(pmf)

def test_narrow_retrims_2d():
    table = np.array([[1.0, 0.0, 1.0],
                      [0.0, 0.0, 1.0],
                      [1.0, 1.0, 1.0]])
    pmf = PMF([5, 5], table)
    pmf.narrow([5, 5], [6, 6])
    assert_support(pmf, [5, 5], [5, 5])
    assert pmf.table.shape == (1, 1)
    assert_normalized(pmf)
    assert_minimal_support(pmf)
