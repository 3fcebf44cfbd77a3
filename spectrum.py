"""
Spectral transform of a time series.

The frequency series served to clients is the real part of the forward DFT,
in natural (unshifted) bin order, with no window and no normalisation.
The imaginary parts are computed and then dropped.
"""

import numpy as np
from numpy.typing import ArrayLike

import config


def fourier_transform(series: ArrayLike) -> np.ndarray:
    """Forward DFT of a real series as complex coefficients."""
    arr = np.asarray(series, dtype=np.float64)
    if arr.ndim != 1:
        raise ValueError(f"series must be 1-D, got shape {arr.shape}")

    # real samples, zero imaginary component
    return np.fft.fft(arr.astype(np.complex128))


def inverse_fourier_transform(coefficients: ArrayLike) -> np.ndarray:
    """Inverse of :func:`fourier_transform` (complex in, complex out)."""
    return np.fft.ifft(np.asarray(coefficients, dtype=np.complex128))


def frequency_transform(series: ArrayLike) -> np.ndarray:
    """
    Transform amplitude-over-time values into amplitude per frequency bin.

    Returns the real component of each DFT coefficient as a read-only
    float64 array of the same length as ``series``.
    """
    output = np.ascontiguousarray(fourier_transform(series).real)
    output.flags.writeable = False
    return output


def frequency_axis(length: int = config.ITERATIONS,
                   span: float = config.FREQUENCY_SPAN) -> np.ndarray:
    """Evenly spaced x-coordinates i * (span / length) for i in 0..length-1."""
    step = span / length
    return np.arange(length, dtype=np.float64) * step


def time_axis(length: int = config.ITERATIONS) -> np.ndarray:
    return frequency_axis(length, config.TIME_SPAN)
