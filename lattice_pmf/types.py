"""
Common types, enums and errors for the lattice PMF library.

This module contains the shared enums, exponent constants and exception types
to avoid circular imports and provide a single source of truth.
"""

from enum import Enum
import numpy as np

# Exponent constants for p-convolution and p-marginalization
P_SUM = 1.0     # Ordinary sum-product convolution / marginal sum
P_MAX = np.inf  # Max-product convolution / marginal max

# Enums
class ConvolutionMethod(Enum):
    """Numeric strategy for p-convolution."""
    AUTO = "auto"      # DIRECT unless p == 1 and the pair count is large
    DIRECT = "direct"  # Exact pairwise kernel (numba), any p
    FFT = "fft"        # FFT convolution (scipy), p == 1 only

# Errors
class PMFShapeError(ValueError):
    """Rank, permutation or support-box arguments are malformed."""

class PMFNumericError(ValueError):
    """Grid entries are negative or the total mass is not positive."""
