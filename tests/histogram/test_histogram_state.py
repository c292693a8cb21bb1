"""Unit tests for HistogramState serialization and chart-type helpers."""

from __future__ import annotations

import pytest

from nicehist.histogram.histogram_state import (
    BinLabelFormat,
    ChartType,
    HistogramState,
    NumberFormat,
    bar_value,
    default_y_label,
)
from nicehist.stats.binning import BinConfig, BinMethod, generate_bins


def test_defaults_match_editor_panel():
    state = HistogramState()
    assert state.bin_method is BinMethod.STURGES
    assert state.bin_count == "10"
    assert state.chart_type is ChartType.FREQUENCY
    assert state.color_scheme == "Ocean Blue"
    assert state.show_gridlines is True
    assert state.show_stats is True
    assert state.show_normal_curve is False


def test_bin_config_is_immutable_value():
    state = HistogramState(bin_method=BinMethod.FIXED_COUNT, bin_count="4")
    config = state.bin_config()
    assert config == BinConfig(method="Fixed Count", bin_count="4", bin_width="")
    with pytest.raises(Exception):  # FrozenInstanceError
        config.method = "Auto (Scott)"  # type: ignore[misc]


def test_to_dict_uses_enum_values():
    d = HistogramState(chart_type=ChartType.CUMULATIVE_PERCENT).to_dict()
    assert d["chart_type"] == "Cumulative (%)"
    assert d["bin_method"] == "Auto (Sturges)"
    assert d["x_axis_format"] == "Range (10–20)"


def test_from_dict_round_trip():
    state = HistogramState(
        bin_method=BinMethod.FIXED_WIDTH,
        bin_width="2.5",
        chart_type=ChartType.RELATIVE_FREQUENCY,
        show_mean=True,
        x_axis_format=BinLabelFormat.MIDPOINT,
        number_format=NumberFormat.ONE_DECIMAL,
        chart_title="Latency",
    )
    assert HistogramState.from_dict(state.to_dict()) == state


def test_from_dict_unknown_values_fall_back():
    state = HistogramState.from_dict({
        "bin_method": "Auto (Magic)",
        "chart_type": "Pie",
        "number_format": None,
        "unexpected": 1,
    })
    assert state.bin_method is BinMethod.STURGES
    assert state.chart_type is ChartType.FREQUENCY
    assert state.number_format is NumberFormat.AUTO


def test_from_dict_numeric_tokens_become_text():
    state = HistogramState.from_dict({"bin_method": "Fixed Count", "bin_count": 12})
    assert state.bin_count == "12"
    assert len(generate_bins(list(range(100)), state.bin_config())) == 12


def test_bar_value_per_chart_type(stepped_data):
    b = generate_bins(stepped_data)[1]
    assert bar_value(b, ChartType.FREQUENCY) == 2
    assert bar_value(b, ChartType.RELATIVE_FREQUENCY) == pytest.approx(20.0)
    assert bar_value(b, ChartType.CUMULATIVE) == 3
    assert bar_value(b, ChartType.CUMULATIVE_PERCENT) == pytest.approx(30.0)


def test_default_y_label():
    assert default_y_label(ChartType.FREQUENCY) == "Frequency"
    assert default_y_label(ChartType.CUMULATIVE) == "Cumulative Count"
    assert ChartType.CUMULATIVE_PERCENT.is_percent
    assert ChartType.CUMULATIVE_PERCENT.is_cumulative
    assert not ChartType.FREQUENCY.is_percent
