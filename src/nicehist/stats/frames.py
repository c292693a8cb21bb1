"""
pandas views of the statistics engine's inputs and outputs.

clean_numeric is the input boundary: raw column values (possibly strings,
None, NaN or inf) are coerced and filtered down to the finite numbers the
engine expects, in their original order.

summary_table and bins_table give tabular views for reports and data tables;
they never recompute anything.
"""

from __future__ import annotations

from typing import Any, Iterable, Optional, Sequence

import numpy as np
import pandas as pd

from nicehist.stats.binning import Bin
from nicehist.stats.statistics import StatisticsSummary

BINS_COLUMNS = [
    "x0",
    "x1",
    "midpoint",
    "count",
    "frequency",
    "relative_frequency",
    "cumulative_count",
    "cumulative_frequency",
]


def clean_numeric(values: Optional[Iterable[Any]]) -> np.ndarray:
    """Coerce values to float and drop missing / non-finite entries.

    Args:
        values: Raw column values (list, numpy array or pandas Series).

    Returns:
        1D float array of the finite values, input order preserved.
    """
    if values is None:
        return np.array([], dtype=float)
    s = pd.to_numeric(pd.Series(list(values), dtype=object), errors="coerce")
    arr = s.to_numpy(dtype=float, na_value=np.nan)
    return arr[np.isfinite(arr)]


def summary_table(stats: Optional[StatisticsSummary]) -> pd.DataFrame:
    """One-row DataFrame of the summary; empty DataFrame for None."""
    if stats is None:
        return pd.DataFrame()
    return pd.DataFrame([stats.to_dict()])


def bins_table(bins: Sequence[Bin]) -> pd.DataFrame:
    """One row per bin (edges, midpoint, counts, frequencies); values omitted."""
    rows = [
        {
            "x0": b.x0,
            "x1": b.x1,
            "midpoint": b.midpoint,
            "count": b.count,
            "frequency": b.frequency,
            "relative_frequency": b.relative_frequency,
            "cumulative_count": b.cumulative_count,
            "cumulative_frequency": b.cumulative_frequency,
        }
        for b in bins
    ]
    return pd.DataFrame(rows, columns=BINS_COLUMNS)
