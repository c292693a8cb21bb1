"""Tests for histogram_plot_plotly."""

from __future__ import annotations

import base64
from typing import Any

import numpy as np

from nicehist.histogram.figure import histogram_plot_plotly
from nicehist.histogram.histogram_state import ChartType, HistogramState
from nicehist.stats.binning import generate_bins
from nicehist.stats.statistics import compute_statistics


def _decode_plotly_array(obj: Any) -> np.ndarray:
    """Decode plotly binary serialization (dtype + bdata) if present."""
    if isinstance(obj, dict) and "bdata" in obj and "dtype" in obj:
        b = base64.b64decode(obj["bdata"])
        return np.frombuffer(b, dtype=np.dtype(obj["dtype"])).copy()
    return np.asarray(obj)


def _figure(data, **state_kwargs) -> dict:
    return histogram_plot_plotly(
        generate_bins(data),
        compute_statistics(data),
        state=HistogramState(**state_kwargs),
        column_name="Latency",
    )


def test_empty_bins_returns_valid_dict():
    d = histogram_plot_plotly([], None)
    assert isinstance(d, dict)
    assert "data" in d
    assert "layout" in d
    assert len(d["data"]) == 0


def test_bars_follow_bins(stepped_data):
    d = _figure(stepped_data)
    bar = d["data"][0]
    assert bar["type"] == "bar"
    assert _decode_plotly_array(bar["y"]).tolist() == [1, 2, 0, 3, 4]
    assert list(d["layout"]["xaxis"]["ticktext"])[0] == "1–1.6"
    assert d["layout"]["yaxis"]["title"]["text"] == "Frequency"
    assert "Distribution of Latency" in d["layout"]["title"]["text"]


def test_chart_type_changes_bar_heights(stepped_data):
    d = _figure(stepped_data, chart_type=ChartType.CUMULATIVE)
    assert _decode_plotly_array(d["data"][0]["y"]).tolist() == [1, 3, 3, 6, 10]
    assert d["layout"]["yaxis"]["title"]["text"] == "Cumulative Count"


def test_normal_curve_only_for_frequency(normal_sample):
    d = _figure(normal_sample, show_normal_curve=True)
    assert len(d["data"]) == 2
    assert d["data"][1]["name"] == "Normal Dist."
    assert len(_decode_plotly_array(d["data"][1]["x"])) == 101

    d_rel = _figure(normal_sample, show_normal_curve=True, chart_type=ChartType.RELATIVE_FREQUENCY)
    assert len(d_rel["data"]) == 1


def test_normal_curve_skipped_for_flat_data(flat_data):
    d = _figure(flat_data, show_normal_curve=True)
    assert len(d["data"]) == 1


def test_mean_median_and_std_overlays(normal_sample):
    d = _figure(normal_sample, show_mean=True, show_median=True, show_std_dev=True)
    shapes = d["layout"]["shapes"]
    assert len(shapes) == 3
    annotations = [a["text"] for a in d["layout"]["annotations"]]
    assert any(t.startswith("μ = ") for t in annotations)
    assert any(t.startswith("Med = ") for t in annotations)


def test_stats_panel_in_title(stepped_data):
    d = _figure(stepped_data, show_stats=True, chart_title="Custom")
    title = d["layout"]["title"]["text"]
    assert title.startswith("Custom")
    assert "N 10" in title
    d_off = _figure(stepped_data, show_stats=False)
    assert "<sup>" not in d_off["layout"]["title"]["text"]


def test_dark_theme(stepped_data):
    d = histogram_plot_plotly(generate_bins(stepped_data), compute_statistics(stepped_data), theme="dark")
    assert d["layout"]["paper_bgcolor"] == "#000000"
