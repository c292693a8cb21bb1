"""Histogram widget for a single numeric column.

Self-contained NiceGUI widget with bin method / bin count / chart type
controls, a normal-curve toggle and a Plotly histogram. Uses Plotly dicts
only for ui.plotly (never go.Figure).

Statistics and bins are computed once per data or binning change and reused
across redraws (chart type, theme and overlay changes only redraw).
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, Callable, Iterable, Optional, Union

import numpy as np
import plotly.graph_objects as go
from nicegui import ui

from nicehist.histogram.figure import histogram_plot_plotly
from nicehist.histogram.histogram_state import ChartType, HistogramState
from nicehist.histogram.theme import ThemeMode, resolve_theme
from nicehist.stats.binning import Bin, BinMethod, generate_bins
from nicehist.stats.frames import clean_numeric
from nicehist.stats.statistics import StatisticsSummary, compute_statistics
from nicehist.utils.logging import get_logger

logger = get_logger(__name__)

OnHistogramChange = Callable[[HistogramState], None]


def _safe_call(func: Callable, *args, **kwargs) -> None:
    """Safely call a function, catching 'client deleted' RuntimeErrors only."""
    try:
        func(*args, **kwargs)
    except RuntimeError as e:
        if "deleted" not in str(e).lower():
            raise


class HistogramWidget:
    """Reusable histogram widget.

    Displays binning and chart-type controls above a Plotly histogram.
    Emits the updated HistogramState via on_change when the user edits a
    control.
    """

    def __init__(
        self,
        *,
        on_change: Optional[OnHistogramChange] = None,
        state: Optional[HistogramState] = None,
        theme: Union[str, ThemeMode] = "light",
        column_name: str = "Value",
    ) -> None:
        self._on_change = on_change
        self._state = state or HistogramState()
        self._theme = resolve_theme(theme)
        self._column_name = column_name
        self._values: np.ndarray = np.array([], dtype=float)
        self._stats: Optional[StatisticsSummary] = None
        self._bins: list[Bin] = []
        self._updating_programmatically = False

        self._bin_method_select: Optional[ui.select] = None
        self._bin_count_input: Optional[ui.input] = None
        self._chart_type_select: Optional[ui.select] = None
        self._normal_curve_checkbox: Optional[ui.checkbox] = None
        self._histogram_plot: Optional[ui.plotly] = None

    @property
    def state(self) -> HistogramState:
        return self._state

    @property
    def stats(self) -> Optional[StatisticsSummary]:
        return self._stats

    @property
    def bins(self) -> list[Bin]:
        return self._bins

    def render(self) -> None:
        """Create the histogram controls and plot inside the current container."""
        self._updating_programmatically = False

        # Row 1: binning controls
        with ui.row().classes("w-full gap-4 items-center"):
            self._bin_method_select = ui.select(
                [m.value for m in BinMethod],
                value=self._state.bin_method.value,
                label="Bin Method",
            ).classes("flex-1")
            self._bin_method_select.on("update:model-value", self._on_bin_method_change)

            self._bin_count_input = ui.input(
                label="Bin Count / Width",
                value=self._binning_text(),
            ).classes("w-32")
            self._bin_count_input.on("blur", self._on_bin_count_change)

        # Row 2: display controls
        with ui.row().classes("w-full gap-4 items-center"):
            self._chart_type_select = ui.select(
                [c.value for c in ChartType],
                value=self._state.chart_type.value,
                label="Chart Type",
            ).classes("flex-1")
            self._chart_type_select.on("update:model-value", self._on_chart_type_change)

            self._normal_curve_checkbox = ui.checkbox("Normal curve", value=self._state.show_normal_curve)
            self._normal_curve_checkbox.on("update:model-value", self._on_normal_curve_toggle)

        # Row 3: plot (Plotly dict only)
        self._histogram_plot = ui.plotly(go.Figure().to_dict()).classes("w-full h-96")
        self._update_histogram()

    def set_data(self, values: Optional[Iterable[Any]]) -> None:
        """Replace the plotted column; non-numeric and non-finite values are dropped."""
        _safe_call(self._set_data_impl, values)

    def _set_data_impl(self, values: Optional[Iterable[Any]]) -> None:
        self._values = clean_numeric(values)
        logger.info(f"HistogramWidget.set_data: {len(self._values)} numeric values")
        self._stats = compute_statistics(self._values)
        self._rebin()
        self._update_histogram()

    def set_state(self, state: HistogramState) -> None:
        """Update controls and plot from a HistogramState."""
        _safe_call(self._set_state_impl, state)

    def _set_state_impl(self, state: HistogramState) -> None:
        rebin = state.bin_config() != self._state.bin_config()
        self._state = state
        self._updating_programmatically = True
        try:
            if self._bin_method_select is not None:
                self._bin_method_select.value = state.bin_method.value
            if self._bin_count_input is not None:
                self._bin_count_input.value = self._binning_text()
            if self._chart_type_select is not None:
                self._chart_type_select.value = state.chart_type.value
            if self._normal_curve_checkbox is not None:
                self._normal_curve_checkbox.value = state.show_normal_curve
        finally:
            self._updating_programmatically = False
        if rebin:
            self._rebin()
        self._update_histogram()

    def set_theme(self, theme: Union[str, ThemeMode]) -> None:
        """Update theme for the histogram."""
        _safe_call(self._set_theme_impl, theme)

    def _set_theme_impl(self, theme: Union[str, ThemeMode]) -> None:
        self._theme = resolve_theme(theme)
        self._update_histogram()

    def _binning_text(self) -> str:
        if self._state.bin_method is BinMethod.FIXED_WIDTH:
            return self._state.bin_width
        return self._state.bin_count

    def _rebin(self) -> None:
        self._bins = generate_bins(self._values, self._state.bin_config())

    def _update_histogram(self) -> None:
        if self._histogram_plot is None:
            return
        fig_dict = histogram_plot_plotly(
            self._bins,
            self._stats,
            state=self._state,
            theme=self._theme,
            column_name=self._column_name,
        )
        try:
            self._histogram_plot.update_figure(fig_dict)
        except RuntimeError as e:
            if "deleted" not in str(e).lower():
                raise

    def _apply(self, state: HistogramState, *, rebin: bool) -> None:
        self._state = state
        if rebin:
            self._rebin()
        self._update_histogram()
        self._emit(state)

    def _on_bin_method_change(self) -> None:
        if self._updating_programmatically or self._bin_method_select is None:
            return
        method = BinMethod(self._bin_method_select.value)
        self._apply(replace(self._state, bin_method=method), rebin=True)
        if self._bin_count_input is not None:
            self._updating_programmatically = True
            try:
                self._bin_count_input.value = self._binning_text()
            finally:
                self._updating_programmatically = False

    def _on_bin_count_change(self) -> None:
        if self._updating_programmatically or self._bin_count_input is None:
            return
        text = str(self._bin_count_input.value or "").strip()
        if self._state.bin_method is BinMethod.FIXED_WIDTH:
            new_state = replace(self._state, bin_width=text)
        else:
            new_state = replace(self._state, bin_count=text)
        self._apply(new_state, rebin=True)

    def _on_chart_type_change(self) -> None:
        if self._updating_programmatically or self._chart_type_select is None:
            return
        chart_type = ChartType(self._chart_type_select.value)
        self._apply(replace(self._state, chart_type=chart_type), rebin=False)

    def _on_normal_curve_toggle(self) -> None:
        if self._updating_programmatically or self._normal_curve_checkbox is None:
            return
        show = bool(self._normal_curve_checkbox.value)
        self._apply(replace(self._state, show_normal_curve=show), rebin=False)

    def _emit(self, state: HistogramState) -> None:
        if self._on_change is not None:
            self._on_change(state)
