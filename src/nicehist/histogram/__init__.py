"""Histogram chart: state, formatting, Plotly figure and NiceGUI widget."""

from nicehist.histogram.figure import histogram_plot_plotly
from nicehist.histogram.histogram_state import (
    BinLabelFormat,
    ChartType,
    HistogramState,
    NumberFormat,
)
from nicehist.histogram.histogram_widget import HistogramWidget, OnHistogramChange

__all__ = [
    "BinLabelFormat",
    "ChartType",
    "HistogramState",
    "HistogramWidget",
    "NumberFormat",
    "OnHistogramChange",
    "histogram_plot_plotly",
]
