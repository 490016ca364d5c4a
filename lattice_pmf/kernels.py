import logging
import numpy as np
from numba import njit
from scipy import signal
from .config import get_checks
from .types import ConvolutionMethod, PMFNumericError, PMFShapeError

logger = logging.getLogger(__name__)

# AUTO switches to FFT (p == 1 only) above this many nonzero cell pairs
DIRECT_PAIR_LIMIT = 1_000_000


def check_exponent(p: float) -> None:
    """Raise PMFNumericError unless p is a positive number (inf allowed)."""
    if np.isnan(p) or p <= 0.0:
        raise PMFNumericError(f"p must be > 0, got {p}")


@njit(cache=True)
def _p_convolve_kernel_numba(pos_a: np.ndarray, val_a: np.ndarray,
                             pos_b: np.ndarray, val_b: np.ndarray,
                             out_size: int, p: float):
    """
    Numba kernel for pairwise p-convolution over flattened positions.

    Returns: accumulated out (sum of products, max of products or sum of
    products raised to p; the caller takes the 1/p root).
    """
    out = np.zeros(out_size, dtype=np.float64)
    use_max = np.isinf(p)

    for i in range(pos_a.size):
        for j in range(pos_b.size):
            k = pos_a[i] + pos_b[j]
            mass = val_a[i] * val_b[j]

            if use_max:
                if mass > out[k]:
                    out[k] = mass
            elif p == 1.0:
                out[k] += mass
            else:
                out[k] += mass ** p

    return out


def _flat_nonzeros(table: np.ndarray, strides: np.ndarray):
    # Positions of nonzero cells in the row-major layout given by strides
    idx = np.nonzero(table)
    pos = np.zeros(idx[0].size, dtype=np.int64)
    for axis, coords in enumerate(idx):
        pos += coords.astype(np.int64) * strides[axis]
    return pos, np.ascontiguousarray(table[idx], dtype=np.float64)


def _row_major_strides(shape) -> np.ndarray:
    strides = np.ones(len(shape), dtype=np.int64)
    for axis in range(len(shape) - 2, -1, -1):
        strides[axis] = strides[axis + 1] * shape[axis + 1]
    return strides


def _direct_p_convolve(lhs: np.ndarray, rhs: np.ndarray, out_shape, p: float) -> np.ndarray:
    # Both inputs are embedded into the output layout: since each output axis
    # is long enough for i + j, flat positions add without carrying.
    strides = _row_major_strides(out_shape)
    pos_a, val_a = _flat_nonzeros(lhs, strides)
    pos_b, val_b = _flat_nonzeros(rhs, strides)
    out_size = int(np.prod(out_shape))
    if pos_a.size == 0 or pos_b.size == 0:
        return np.zeros(out_shape, dtype=np.float64)

    powered = not (p == 1.0 or np.isinf(p))
    scale = 1.0
    if powered:
        scale_a = float(val_a.max())
        scale_b = float(val_b.max())
        val_a = val_a / scale_a
        val_b = val_b / scale_b
        scale = scale_a * scale_b

    out = _p_convolve_kernel_numba(pos_a, val_a, pos_b, val_b, out_size, float(p))
    if powered:
        out = np.power(out, 1.0 / p) * scale
    return out.reshape(out_shape)


def _fft_convolve(lhs: np.ndarray, rhs: np.ndarray) -> np.ndarray:
    out = signal.fftconvolve(lhs, rhs, mode="full")
    lhs_mask, rhs_mask = lhs > 0.0, rhs > 0.0
    if not (lhs_mask.any() and rhs_mask.any()):
        return np.zeros(out.shape, dtype=np.float64)
    # Cells no nonzero pair lands on are exactly 0; every other cell holds at
    # least the product of the two smallest positive inputs.
    reach = signal.fftconvolve(lhs_mask.astype(np.float64), rhs_mask.astype(np.float64), mode="full") > 0.5
    floor = float(lhs[lhs_mask].min()) * float(rhs[rhs_mask].min())
    out[~reach] = 0.0
    out[reach] = np.maximum(out[reach], floor)
    return np.ascontiguousarray(out, dtype=np.float64)


def p_convolve(lhs: np.ndarray, rhs: np.ndarray, p: float = 1.0,
               method: ConvolutionMethod = ConvolutionMethod.AUTO) -> np.ndarray:
    """
    Generalized convolution of two grids of equal rank.

    Cell m of the result is (Σ_{i+j=m} (lhs[i] * rhs[j])^p)^(1/p). p == 1 is
    ordinary discrete convolution and p == inf is max-product convolution.

    Parameters:
    -----------
    lhs, rhs : np.ndarray
        Nonnegative grids with the same number of dimensions
    p : float
        Combination exponent (> 0, inf allowed)
    method : ConvolutionMethod
        AUTO, DIRECT (exact, any p) or FFT (p == 1 only)

    Returns:
    --------
    np.ndarray
        Grid of shape lhs.shape + rhs.shape - 1
    """
    lhs = np.asarray(lhs, dtype=np.float64, order="C")
    rhs = np.asarray(rhs, dtype=np.float64, order="C")
    checks = get_checks()
    if checks.shape_check and lhs.ndim != rhs.ndim:
        raise PMFShapeError(f"p_convolve expects grids of equal rank, got {lhs.ndim} and {rhs.ndim}")
    if checks.numeric_check:
        check_exponent(p)

    if lhs.ndim == 0:
        return np.array(float(lhs) * float(rhs), dtype=np.float64)

    out_shape = tuple(int(a + b - 1) for a, b in zip(lhs.shape, rhs.shape))

    if method == ConvolutionMethod.AUTO:
        pairs = int(np.count_nonzero(lhs)) * int(np.count_nonzero(rhs))
        if p == 1.0 and pairs > DIRECT_PAIR_LIMIT:
            method = ConvolutionMethod.FFT
        else:
            method = ConvolutionMethod.DIRECT

    logger.debug("p_convolve %s x %s -> %s, p=%g, method=%s",
                 lhs.shape, rhs.shape, out_shape, p, method.value)

    if method == ConvolutionMethod.FFT:
        if p != 1.0:
            raise PMFNumericError(f"FFT convolution only supports p == 1, got p={p}")
        return _fft_convolve(lhs, rhs)
    return _direct_p_convolve(lhs, rhs, out_shape, p)
