"""Unit tests for display formatting."""

from __future__ import annotations

import pytest

from nicehist.histogram.formatting import (
    MISSING,
    format_bin_label,
    format_bin_range,
    format_number,
    stats_panel_items,
)
from nicehist.histogram.histogram_state import BinLabelFormat, NumberFormat
from nicehist.stats.binning import BinConfig, generate_bins
from nicehist.stats.statistics import compute_statistics


@pytest.mark.parametrize(
    "value, expected",
    [
        (1_234_567, "1.2M"),
        (12_345, "12.3K"),
        (1234, "1,234"),
        (150.4, "150"),
        (3.14159, "3.14"),
        (-0.5, "-0.50"),
    ],
)
def test_format_number_auto(value, expected):
    assert format_number(value) == expected


@pytest.mark.parametrize(
    "value, fmt, expected",
    [
        (2.5, NumberFormat.INTEGER, "3"),
        (1234.56, NumberFormat.ONE_DECIMAL, "1,234.6"),
        (1234.5, NumberFormat.TWO_DECIMALS, "1,234.50"),
        (1500, NumberFormat.CURRENCY, "$1.5K"),
        (2_500_000, NumberFormat.CURRENCY, "$2.5M"),
        (12.5, NumberFormat.CURRENCY, "$12.50"),
        (2500, NumberFormat.THOUSANDS, "2.5K"),
        (2_500_000, "Millions (M)", "2.50M"),
    ],
)
def test_format_number_formats(value, fmt, expected):
    assert format_number(value, fmt=fmt) == expected


def test_format_number_missing():
    assert format_number(None) == MISSING
    assert format_number(float("nan")) == MISSING


def test_format_bin_label_variants():
    b = generate_bins([0, 10, 20, 30, 40], BinConfig(method="Fixed Count", bin_count=4))[1]
    assert format_bin_label(b) == "10–20"
    assert format_bin_label(b, BinLabelFormat.MIDPOINT) == "15"
    assert format_bin_label(b, BinLabelFormat.LOWER_BOUND) == "10"
    assert format_bin_label(b, BinLabelFormat.UPPER_BOUND) == "20"


def test_format_bin_range():
    assert format_bin_range(0.24, 0.76) == "0.2 – 0.8"
    assert format_bin_range(10, 20) == "10 – 20"


def test_stats_panel_items(stepped_data):
    assert stats_panel_items(None) == []
    items = dict(stats_panel_items(compute_statistics(stepped_data)))
    assert items["N"] == "10"
    assert items["Mean"] == "3"
    assert items["Std Dev"] == "1"
    assert items["Range"] == "1 – 4"
