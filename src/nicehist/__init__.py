"""
nicehist: histogram statistics, binning and a NiceGUI histogram widget.

This package provides:
- compute_statistics / generate_bins / generate_normal_curve: the pure
  statistics-and-binning engine (nicehist.stats)
- histogram_plot_plotly and HistogramWidget: rendering of its outputs
- Logging utilities for library and application use

For logging configuration in standalone scripts/demos:
    ```python
    from nicehist.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```
"""

import logging

from nicehist.utils.logging import configure_logging, get_logger

from nicehist.stats import (
    Bin,
    BinConfig,
    BinMethod,
    CurvePoint,
    StatisticsSummary,
    calculate_bin_count,
    compute_statistics,
    generate_bins,
    generate_normal_curve,
)
from nicehist.histogram import HistogramState, HistogramWidget, histogram_plot_plotly

# NullHandler so records don't reach root when no application configured
# logging. Scripts call configure_logging() to add a real handler.
_logger = logging.getLogger("nicehist")
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = [
    "Bin",
    "BinConfig",
    "BinMethod",
    "CurvePoint",
    "HistogramState",
    "HistogramWidget",
    "StatisticsSummary",
    "calculate_bin_count",
    "compute_statistics",
    "configure_logging",
    "generate_bins",
    "generate_normal_curve",
    "get_logger",
    "histogram_plot_plotly",
]

__version__ = "0.1.0"
