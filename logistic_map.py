"""
Logistic map sequence generator.

Iterates x(n+1) = r * x(n) * (1 - x(n)) from a fixed seed and records
iterates 1..N (the seed itself is never part of the output).
"""

import operator

import numpy as np

import config


def iterate(rate: float, x: float) -> float:
    """Single step of the recurrence."""
    return rate * x * (1 - x)


def logistic_map(rate: float, iterations: int = config.ITERATIONS,
                 start: float = config.START) -> np.ndarray:
    """
    Generate the logistic map series for the given growth rate.

    No bounds checking is done on ``rate``: values outside [0, 4] simply
    diverge, and overflow shows up as inf/nan in the output.

    Args:
        rate: Growth rate r.
        iterations: Number of iterates to record.
        start: Seed x0.

    Returns:
        Read-only float64 array of length ``iterations``.
    """
    message = f"iterations must be a non-negative integer, got {iterations!r}"
    try:
        count = operator.index(iterations)
    except TypeError:
        raise ValueError(message) from None
    if isinstance(iterations, bool) or count < 0:
        raise ValueError(message)

    # Plain Python floats keep the evaluation order (and IEEE-754 overflow
    # to inf) identical on every run.
    rate = float(rate)
    x = float(start)
    series = np.empty(count, dtype=np.float64)
    for i in range(count):
        x = iterate(rate, x)
        series[i] = x

    series.flags.writeable = False
    return series
