"""Statistics and binning engine.

Pure numpy/pandas computations with no UI dependency:
statistics (summary record), binning (bin-count heuristics and bins),
normal_curve (overlay sampling) and frames (input cleaning, tabular views).
"""

from nicehist.stats.binning import (
    Bin,
    BinConfig,
    BinMethod,
    calculate_bin_count,
    generate_bins,
)
from nicehist.stats.frames import bins_table, clean_numeric, summary_table
from nicehist.stats.normal_curve import CurvePoint, generate_normal_curve, normal_pdf
from nicehist.stats.statistics import StatisticsSummary, compute_statistics, percentile

__all__ = [
    "Bin",
    "BinConfig",
    "BinMethod",
    "CurvePoint",
    "StatisticsSummary",
    "bins_table",
    "calculate_bin_count",
    "clean_numeric",
    "compute_statistics",
    "generate_bins",
    "generate_normal_curve",
    "normal_pdf",
    "percentile",
    "summary_table",
]
