"""
Descriptive statistics for a single numeric column.

Computes the summary record shown in the histogram statistics panel and used
by the binning heuristics (range, std_dev, iqr).

Conventions (documented):
  1. Population moments: variance divides by n, not n - 1.
  2. Quartiles use linear interpolation at index p/100 * (n - 1) on the
     numerically sorted copy.
  3. Mode ties go to the value that first reached the running maximum count
     in input order, not to the smallest value.
  4. Skewness and excess kurtosis are 0.0 when std_dev is 0 (flat data).
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from typing import Any, Optional, Sequence

import numpy as np


@dataclass(frozen=True)
class StatisticsSummary:
    """Immutable summary of a dataset.

    Invariants: min <= q1 <= median <= q3 <= max, std_dev >= 0,
    variance == std_dev ** 2.
    """

    count: int
    mean: float
    median: float
    mode: float
    variance: float
    std_dev: float
    min: float
    max: float
    range: float
    q1: float
    q3: float
    iqr: float
    skewness: float
    kurtosis: float

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a plain dict (field name -> value)."""
        return asdict(self)


# -----------------------------------------------------------------------------
# Helpers
# -----------------------------------------------------------------------------


def percentile(sorted_values: Sequence[float], p: float) -> float:
    """Linear-interpolation percentile of an ascending sequence.

    index = p/100 * (n - 1); the result interpolates between the elements at
    floor(index) and ceil(index) by the fractional part. Indices below 0 clamp
    to the first element and indices at or past n - 1 to the last.

    Args:
        sorted_values: Non-empty values in ascending order.
        p: Percentile in [0, 100].

    Returns:
        Interpolated value as float.
    """
    n = len(sorted_values)
    index = (p / 100.0) * (n - 1)
    lower = math.floor(index)
    upper = math.ceil(index)
    weight = index - lower

    if upper >= n:
        return float(sorted_values[n - 1])
    if lower < 0:
        return float(sorted_values[0])

    lo = float(sorted_values[lower])
    hi = float(sorted_values[upper])
    return lo + (hi - lo) * weight


def calculate_mode(values: Sequence[float]) -> Optional[float]:
    """Most frequent value; ties resolved by first to reach the max count.

    Returns None for an empty sequence.
    """
    frequency: dict[float, int] = {}
    max_freq = 0
    mode: Optional[float] = None
    for val in values:
        frequency[val] = frequency.get(val, 0) + 1
        if frequency[val] > max_freq:
            max_freq = frequency[val]
            mode = val
    return None if mode is None else float(mode)


def _standardized_moment(values: np.ndarray, mean: float, std_dev: float, order: int) -> float:
    """Mean of ((x - mean) / std_dev) ** order; 0.0 when std_dev is 0."""
    if std_dev == 0:
        return 0.0
    z = (values - mean) / std_dev
    return float(np.mean(z ** order))


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------


def compute_statistics(data: Optional[Sequence[float]]) -> Optional[StatisticsSummary]:
    """Compute the StatisticsSummary for a dataset.

    Args:
        data: Ordered finite numbers (list, tuple, numpy array or pandas
            Series). Non-finite values must already be filtered out
            (see nicehist.stats.frames.clean_numeric).

    Returns:
        StatisticsSummary, or None when data is None or empty.
    """
    if data is None or len(data) == 0:
        return None

    values = np.asarray(data, dtype=float)
    n = int(values.size)
    sorted_values = np.sort(values)

    mean = float(np.sum(values) / n)

    mid = n // 2
    if n % 2 != 0:
        median = float(sorted_values[mid])
    else:
        median = float((sorted_values[mid - 1] + sorted_values[mid]) / 2)

    variance = float(np.sum((values - mean) ** 2) / n)
    std_dev = math.sqrt(variance)

    min_ = float(sorted_values[0])
    max_ = float(sorted_values[n - 1])

    q1 = percentile(sorted_values, 25)
    q3 = percentile(sorted_values, 75)

    skewness = _standardized_moment(values, mean, std_dev, 3)
    kurtosis = _standardized_moment(values, mean, std_dev, 4) - 3.0 if std_dev != 0 else 0.0

    return StatisticsSummary(
        count=n,
        mean=mean,
        median=median,
        mode=calculate_mode(values.tolist()),
        variance=variance,
        std_dev=std_dev,
        min=min_,
        max=max_,
        range=max_ - min_,
        q1=q1,
        q3=q3,
        iqr=q3 - q1,
        skewness=skewness,
        kurtosis=kurtosis,
    )
