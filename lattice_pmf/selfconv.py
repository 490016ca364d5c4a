import logging
from .pmf import PMF, add
from .types import ConvolutionMethod

logger = logging.getLogger(__name__)


def self_add_core(base: PMF, T: int, p: float, method: ConvolutionMethod) -> PMF:
    """
    Add a PMF to itself T times using exponentiation-by-squaring.

    Computes the distribution of X_1 + X_2 + ... + X_T where the X_i are
    independent copies of ``base``. Each intermediate result is trimmed to its
    own nonzero support, so the grids grow only as far as the mass does.

    Parameters:
    -----------
    base: Base distribution
    T: Number of summands (must be >= 1)
    p: Combination exponent passed to every add
    method: Numeric convolution strategy

    Returns:
    --------
    result: PMF of the T-fold sum
    """
    if T < 1:
        raise ValueError(f"T must be >= 1, got {T}")

    if T == 1:
        return base.copy()

    # Binary exponentiation
    base_pmf = base
    acc_pmf = None
    while T > 0:
        if T & 1:  # If bit is set
            if acc_pmf is None:
                acc_pmf = base_pmf
            else:
                acc_pmf = add(acc_pmf, base_pmf, p, method)
        T >>= 1
        if T > 0:
            base_pmf = add(base_pmf, base_pmf, p, method)
            logger.debug("self_add squared base to support %s..%s",
                         base_pmf.first_support, base_pmf.last_support)

    return acc_pmf
