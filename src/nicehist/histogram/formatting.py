"""Display-string formatting for histogram labels, hover text and stats.

Consumes already-computed numbers only. Formats match the chart's
NumberFormat options; missing or NaN values render as an em dash.
"""

from __future__ import annotations

import math
from typing import Optional, Union

from nicehist.histogram.histogram_state import BinLabelFormat, NumberFormat
from nicehist.stats.binning import Bin
from nicehist.stats.statistics import StatisticsSummary

MISSING = "—"


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def format_number(
    value: Optional[float],
    decimals: int = 2,
    fmt: Union[str, NumberFormat] = NumberFormat.AUTO,
) -> str:
    """Format a number for display.

    Args:
        value: Number to format (None/NaN -> em dash).
        decimals: Decimal places for the Auto format when the value is small
            and not an integer.
        fmt: NumberFormat member or its string value.

    Returns:
        Display string, e.g. "1,234", "12.3K", "$4.5M".
    """
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return MISSING
    value = float(value)
    if math.isinf(value):
        return "∞" if value > 0 else "-∞"

    if fmt == NumberFormat.INTEGER:
        return f"{_round_half_up(value):,}"
    if fmt == NumberFormat.ONE_DECIMAL:
        return f"{value:,.1f}"
    if fmt == NumberFormat.TWO_DECIMALS:
        return f"{value:,.2f}"
    if fmt == NumberFormat.CURRENCY:
        if abs(value) >= 1_000_000:
            return f"${value / 1_000_000:.1f}M"
        if abs(value) >= 1000:
            return f"${value / 1000:.1f}K"
        return f"${value:.2f}"
    if fmt == NumberFormat.THOUSANDS:
        return f"{value / 1000:.1f}K"
    if fmt == NumberFormat.MILLIONS:
        return f"{value / 1_000_000:.2f}M"

    # Auto
    abs_value = abs(value)
    if abs_value >= 1_000_000:
        return f"{value / 1_000_000:.1f}M"
    if abs_value >= 10_000:
        return f"{value / 1000:.1f}K"
    if value.is_integer() or abs_value >= 100:
        return f"{_round_half_up(value):,}"
    return f"{value:.{decimals}f}"


def stats_panel_items(
    stats: Optional[StatisticsSummary],
    number_format: Union[str, NumberFormat] = NumberFormat.AUTO,
) -> list[tuple[str, str]]:
    """(label, text) pairs for the statistics panel; [] when stats is None."""
    if stats is None:
        return []
    return [
        ("N", f"{stats.count:,}"),
        ("Mean", format_number(stats.mean, 2, number_format)),
        ("Median", format_number(stats.median, 2, number_format)),
        ("Std Dev", format_number(stats.std_dev, 2, number_format)),
        ("Range", format_bin_range(stats.min, stats.max, 2, number_format)),
    ]


def bin_midpoint(bin: Bin) -> float:
    return bin.midpoint


def format_bin_range(
    x0: float,
    x1: float,
    decimals: int = 1,
    number_format: Union[str, NumberFormat] = NumberFormat.AUTO,
) -> str:
    """Range text for hover/tooltips, e.g. "10.0 – 20.0"."""
    return f"{format_number(x0, decimals, number_format)} – {format_number(x1, decimals, number_format)}"


def format_bin_label(
    bin: Bin,
    label_format: Union[str, BinLabelFormat] = BinLabelFormat.RANGE,
    number_format: Union[str, NumberFormat] = NumberFormat.AUTO,
) -> str:
    """X-axis tick label for a bin: actual values, never "bin 1, bin 2"."""
    x0 = format_number(bin.x0, 1, number_format)
    x1 = format_number(bin.x1, 1, number_format)
    if label_format == BinLabelFormat.MIDPOINT:
        return format_number(bin_midpoint(bin), 1, number_format)
    if label_format == BinLabelFormat.LOWER_BOUND:
        return x0
    if label_format == BinLabelFormat.UPPER_BOUND:
        return x1
    return f"{x0}–{x1}"
