"""Normal distribution overlay for a histogram.

Samples the normal density fitted to (mean, std_dev) over the data range
padded by 5% on each side, scaled by the histogram's total area
(sum of count * bin width) so the curve shares the bars' count axis.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Sequence

from nicehist.stats.binning import Bin
from nicehist.stats.statistics import StatisticsSummary

CURVE_PADDING_FRACTION = 0.05


@dataclass(frozen=True)
class CurvePoint:
    """One (x, y) sample of the overlay curve."""

    x: float
    y: float


def normal_pdf(x: float, mean: float, std_dev: float) -> float:
    """Normal probability density at x; 0.0 when std_dev is 0."""
    if std_dev == 0:
        return 0.0
    coefficient = 1 / (std_dev * math.sqrt(2 * math.pi))
    exponent = -((x - mean) ** 2) / (2 * std_dev ** 2)
    return coefficient * math.exp(exponent)


def histogram_area(bins: Sequence[Bin]) -> float:
    """Total bar area: sum of count * (x1 - x0)."""
    return sum(b.count * (b.x1 - b.x0) for b in bins)


def generate_normal_curve(
    stats: Optional[StatisticsSummary],
    bins: Optional[Sequence[Bin]],
    num_points: int = 100,
) -> list[CurvePoint]:
    """Sample the area-scaled normal curve for overlay on a histogram.

    Args:
        stats: Statistics of the plotted dataset.
        bins: Bins of the plotted dataset.
        num_points: Number of sampling intervals; num_points + 1 points are
            returned.

    Returns:
        Points in ascending x; [] when stats or bins are missing or
        std_dev is 0.
    """
    if stats is None or not bins:
        return []
    if stats.std_dev == 0:
        return []

    padding = (stats.max - stats.min) * CURVE_PADDING_FRACTION
    start = stats.min - padding
    end = stats.max + padding
    step = (end - start) / num_points
    total_area = histogram_area(bins)

    return [
        CurvePoint(x=x, y=normal_pdf(x, stats.mean, stats.std_dev) * total_area)
        for x in (start + i * step for i in range(num_points + 1))
    ]
