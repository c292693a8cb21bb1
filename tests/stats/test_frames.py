"""Unit tests for clean_numeric and the pandas tabular views."""

from __future__ import annotations

import numpy as np
import pandas as pd

from nicehist.stats.binning import generate_bins
from nicehist.stats.frames import BINS_COLUMNS, bins_table, clean_numeric, summary_table
from nicehist.stats.statistics import compute_statistics


def test_clean_numeric_drops_missing_and_non_finite():
    raw = [1, "2", None, "abc", float("nan"), float("inf"), -float("inf"), 3.5]
    out = clean_numeric(raw)
    assert out.dtype == np.float64
    assert out.tolist() == [1.0, 2.0, 3.5]


def test_clean_numeric_preserves_order_for_series():
    s = pd.Series([3.0, np.nan, 1.0, 2.0])
    assert clean_numeric(s).tolist() == [3.0, 1.0, 2.0]


def test_clean_numeric_none_and_empty():
    assert clean_numeric(None).size == 0
    assert clean_numeric([]).size == 0
    assert compute_statistics(clean_numeric(["x", None])) is None


def test_summary_table(stepped_data):
    assert summary_table(None).empty
    table = summary_table(compute_statistics(stepped_data))
    assert len(table) == 1
    assert table.loc[0, "mean"] == 3.0
    assert table.loc[0, "count"] == 10
    assert "std_dev" in table.columns


def test_bins_table(stepped_data):
    bins = generate_bins(stepped_data)
    table = bins_table(bins)
    assert list(table.columns) == BINS_COLUMNS
    assert len(table) == len(bins)
    assert table["count"].sum() == 10
    assert table["cumulative_count"].iloc[-1] == 10
    assert table["midpoint"].tolist() == [b.midpoint for b in bins]


def test_bins_table_empty():
    table = bins_table([])
    assert table.empty
    assert list(table.columns) == BINS_COLUMNS
