"""
Histogram binning: bin-count heuristics, bin edges and point assignment.

Resolution order for bin count / width:
  1. Fixed Count with a supplied count: width = range / count.
  2. Fixed Width with a supplied positive width: count = ceil(range / width).
  3. Otherwise the bin-count heuristic keyed by method; width = range / count.
Then count is floored at 1, and a zero-range dataset always gets a single bin
of width 1.

Bins are equal-width and contiguous, [x0, x1) except the last which is closed.
A point goes to floor((v - min) / width) clamped into [0, count - 1], which
is what puts the dataset max into the last bin.
"""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Union

import numpy as np

from nicehist.stats.statistics import StatisticsSummary, compute_statistics
from nicehist.utils.logging import get_logger

logger = get_logger(__name__)

# Used when a fixed count is supplied but does not parse to a positive int.
DEFAULT_FIXED_BIN_COUNT = 10

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


class BinMethod(str, Enum):
    """User-facing bin method selector values."""

    STURGES = "Auto (Sturges)"
    SCOTT = "Auto (Scott)"
    FREEDMAN_DIACONIS = "Auto (Freedman-Diaconis)"
    FIXED_COUNT = "Fixed Count"
    FIXED_WIDTH = "Fixed Width"


@dataclass(frozen=True)
class BinConfig:
    """Immutable binning options passed into generate_bins.

    bin_count and bin_width may be numbers or raw text tokens from a
    configuration surface; they are only read for the matching fixed method.
    """

    method: str = BinMethod.STURGES.value
    bin_count: Optional[Union[int, str]] = None
    bin_width: Optional[Union[float, str]] = None


@dataclass(frozen=True)
class Bin:
    """One histogram bin over [x0, x1) (closed on the right for the last bin)."""

    x0: float
    x1: float
    count: int
    values: tuple[float, ...]
    frequency: int
    relative_frequency: float
    cumulative_count: int
    cumulative_frequency: float

    @property
    def midpoint(self) -> float:
        return (self.x0 + self.x1) / 2


# -----------------------------------------------------------------------------
# Bin-count heuristics
# -----------------------------------------------------------------------------


def _sturges(n: int) -> int:
    return math.ceil(math.log2(n) + 1)


def _method_key(method: Union[str, BinMethod, None]) -> str:
    if isinstance(method, BinMethod):
        method = method.value
    return str(method or "").strip().lower()


def _bin_count_from_stats(n: int, stats: StatisticsSummary, method: Union[str, BinMethod, None]) -> int:
    key = _method_key(method)

    if key in ("sturges", "auto (sturges)"):
        return _sturges(n)

    if key in ("scott", "auto (scott)"):
        if stats.std_dev == 0:
            return 1
        scott_width = 3.5 * stats.std_dev / n ** (1 / 3)
        return math.ceil(stats.range / scott_width)

    if key in ("freedman-diaconis", "auto (freedman-diaconis)"):
        if stats.iqr == 0:
            return _sturges(n)
        fd_width = 2 * stats.iqr / n ** (1 / 3)
        return math.ceil(stats.range / fd_width)

    if key == "sqrt":
        return math.ceil(math.sqrt(n))

    if key == "rice":
        return math.ceil(2 * n ** (1 / 3))

    logger.debug(f"Unrecognized bin method {method!r}; using Sturges")
    return _sturges(n)


def calculate_bin_count(data: Optional[Sequence[float]], method: Union[str, BinMethod, None] = "sturges") -> int:
    """Suggested number of bins for data using a named heuristic.

    Method names match case-insensitively and accept both the heuristic name
    and its "Auto (Name)" label: sturges, scott, freedman-diaconis, plus the
    sqrt and rice aliases. Anything else falls back to Sturges.

    Args:
        data: Dataset values.
        method: Heuristic name.

    Returns:
        Bin count; 1 for empty data.
    """
    if data is None or len(data) == 0:
        return 1
    stats = compute_statistics(data)
    if stats is None:
        return 1
    return _bin_count_from_stats(stats.count, stats, method)


# -----------------------------------------------------------------------------
# Config token parsing
# -----------------------------------------------------------------------------


def _parse_bin_count(token: Union[int, str]) -> int:
    """Leading integer of token (e.g. "12", "12.7", "12 bins"); 10 if none or <= 0."""
    if isinstance(token, (int, np.integer)) and not isinstance(token, bool):
        count = int(token)
    else:
        m = _LEADING_INT_RE.match(str(token))
        count = int(m.group(1)) if m else 0
    if count <= 0:
        logger.warning(f"Invalid fixed bin count {token!r}; using {DEFAULT_FIXED_BIN_COUNT}")
        return DEFAULT_FIXED_BIN_COUNT
    return count


def _parse_bin_width(token: Union[float, str]) -> Optional[float]:
    """Positive finite float from token, or None when it does not parse."""
    try:
        width = float(token)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(width) or width <= 0:
        return None
    return width


def resolve_bin_layout(stats: StatisticsSummary, config: BinConfig) -> tuple[int, float]:
    """Resolve (bin_count, bin_width) from dataset statistics and config.

    Args:
        stats: Statistics of the dataset.
        config: Binning options.

    Returns:
        (bin_count, bin_width) with bin_count >= 1 and bin_width > 0.
    """
    method = _method_key(config.method)
    bin_count: Optional[int] = None
    bin_width = 0.0

    if method == _method_key(BinMethod.FIXED_COUNT) and config.bin_count:
        bin_count = _parse_bin_count(config.bin_count)
        bin_width = stats.range / bin_count
    elif method == _method_key(BinMethod.FIXED_WIDTH) and config.bin_width:
        width = _parse_bin_width(config.bin_width)
        if width is not None:
            bin_width = width
            bin_count = math.ceil(stats.range / bin_width)
        else:
            logger.warning(f"Invalid fixed bin width {config.bin_width!r}; using Sturges")

    if bin_count is None:
        bin_count = _bin_count_from_stats(stats.count, stats, config.method)
        bin_width = stats.range / max(1, bin_count)

    bin_count = max(1, bin_count)

    if stats.range == 0:
        bin_count = 1
        bin_width = 1.0

    return bin_count, bin_width


# -----------------------------------------------------------------------------
# Bin generation
# -----------------------------------------------------------------------------


def generate_bins(data: Optional[Sequence[float]], config: Optional[BinConfig] = None) -> list[Bin]:
    """Partition data into contiguous equal-width bins.

    Args:
        data: Ordered finite numbers.
        config: Binning options; defaults to BinConfig() (Sturges).

    Returns:
        Bins in ascending x0 order; [] when data is None or empty.
    """
    if data is None or len(data) == 0:
        return []
    if config is None:
        config = BinConfig()

    stats = compute_statistics(data)
    if stats is None:
        return []

    bin_count, bin_width = resolve_bin_layout(stats, config)
    start = stats.min
    logger.debug(
        f"generate_bins: n={stats.count}, method={config.method!r}, "
        f"bin_count={bin_count}, bin_width={bin_width}"
    )

    assigned: list[list[float]] = [[] for _ in range(bin_count)]
    for value in np.asarray(data, dtype=float).tolist():
        index = math.floor((value - start) / bin_width)
        if index >= bin_count:
            index = bin_count - 1
        if index < 0:
            index = 0
        assigned[index].append(value)

    total = stats.count
    bins: list[Bin] = []
    cumulative = 0
    for i, members in enumerate(assigned):
        count = len(members)
        cumulative += count
        bins.append(
            Bin(
                x0=start + i * bin_width,
                x1=start + (i + 1) * bin_width,
                count=count,
                values=tuple(members),
                frequency=count,
                relative_frequency=count / total * 100,
                cumulative_count=cumulative,
                cumulative_frequency=cumulative / total * 100,
            )
        )
    return bins
