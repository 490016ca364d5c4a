"""
Core implementation of multi-dimensional lattice PMFs.

Users normally import from the ``pmf_api`` module, which re-exports the
public surface of this package.
"""

from .types import P_SUM, P_MAX, ConvolutionMethod, PMFShapeError, PMFNumericError
from .config import CheckConfig, checks, get_checks, set_checks
from .bounding_box import nonzero_bounding_box
from .kernels import p_convolve
from .pmf import PMF, add, subtract, p_add, p_sub
from .selfconv import self_add_core

__all__ = [
    'P_SUM', 'P_MAX', 'ConvolutionMethod', 'PMFShapeError', 'PMFNumericError',
    'CheckConfig', 'checks', 'get_checks', 'set_checks',
    'nonzero_bounding_box', 'p_convolve',
    'PMF', 'add', 'subtract', 'p_add', 'p_sub',
    'self_add_core',
]
