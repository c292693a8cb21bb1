"""Histogram figure for precomputed bins and statistics.

Returns Plotly figure dict (never go.Figure) for ui.plotly / update_figure.
Bars, tick labels and overlays are drawn from the engine's outputs only;
nothing here recomputes statistics.
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

import plotly.graph_objects as go

from nicehist.histogram.formatting import format_bin_label, format_bin_range, format_number, stats_panel_items
from nicehist.histogram.histogram_state import ChartType, HistogramState, bar_value, default_y_label
from nicehist.histogram.theme import (
    BAR_GAP_OPTIONS,
    MEAN_COLOR,
    MEDIAN_COLOR,
    NORMAL_CURVE_COLOR,
    STD_DEV_FILL,
    ThemeMode,
    get_color_scheme,
    get_grid_color,
    get_theme_colors,
    get_theme_template,
    resolve_theme,
)
from nicehist.stats.binning import Bin
from nicehist.stats.normal_curve import generate_normal_curve
from nicehist.stats.statistics import StatisticsSummary
from nicehist.utils.logging import get_logger

logger = get_logger(__name__)


def _hover_text(bin: Bin, state: HistogramState) -> str:
    fmt = state.number_format
    lines = []
    if state.show_bin_range_in_tooltip:
        lines.append(f"<b>{format_bin_range(bin.x0, bin.x1, 2, fmt)}</b>")
    lines.append(f"Count: {bin.count:,}")
    lines.append(f"Frequency: {bin.relative_frequency:.1f}%")
    if state.chart_type is ChartType.CUMULATIVE:
        lines.append(f"Cumulative: {bin.cumulative_count:,}")
    elif state.chart_type is ChartType.CUMULATIVE_PERCENT:
        lines.append(f"Cumulative: {bin.cumulative_frequency:.1f}%")
    lines.append(f"Midpoint: {format_number(bin.midpoint, 2, fmt)}")
    return "<br>".join(lines)


def _bar_label(value: float, state: HistogramState) -> str:
    if state.chart_type.is_percent:
        return f"{value:.1f}%"
    return format_number(value, 0, state.number_format)


def _title_text(stats: Optional[StatisticsSummary], state: HistogramState, column_name: str) -> str:
    title = state.chart_title or f"Distribution of {column_name}"
    if not state.show_stats or stats is None:
        return title
    panel = "   ".join(f"{label} {text}" for label, text in stats_panel_items(stats, state.number_format))
    return f"{title}<br><sup>{panel}</sup>"


def histogram_plot_plotly(
    bins: Sequence[Bin],
    stats: Optional[StatisticsSummary],
    state: Optional[HistogramState] = None,
    theme: Optional[Union[str, ThemeMode]] = None,
    column_name: str = "Value",
) -> dict:
    """Create a histogram figure from bins and statistics.

    Args:
        bins: Bins from nicehist.stats.generate_bins (empty -> empty plot).
        stats: Summary from nicehist.stats.compute_statistics, or None.
        state: Chart options. Defaults to HistogramState().
        theme: Theme mode (DARK or LIGHT). Defaults to LIGHT if None.
        column_name: Name of the plotted column, used for default titles.

    Returns:
        Plotly figure dict ready for ui.plotly / update_figure.
    """
    state = state or HistogramState()
    theme_mode = ThemeMode.LIGHT if theme is None else resolve_theme(theme)
    template = get_theme_template(theme_mode)
    bg_color, fg_color = get_theme_colors(theme_mode)
    grid_color = get_grid_color(theme_mode)

    fig = go.Figure()
    if not bins:
        fig.update_layout(
            template=template,
            paper_bgcolor=bg_color,
            plot_bgcolor=bg_color,
            font=dict(color=fg_color),
        )
        return fig.to_dict()

    colors = get_color_scheme(state.color_scheme, state.custom_color)
    x_start = bins[0].x0
    x_end = bins[-1].x1
    midpoints = [b.midpoint for b in bins]
    gap = BAR_GAP_OPTIONS.get(state.bar_gap, BAR_GAP_OPTIONS["Small"])
    heights = [bar_value(b, state.chart_type) for b in bins]

    fig.add_trace(
        go.Bar(
            x=midpoints,
            y=heights,
            width=[(b.x1 - b.x0) * (1 - gap) for b in bins],
            name=column_name,
            marker=dict(color=colors["primary"], line=dict(color=colors["gradient"][1], width=1)),
            hovertext=[_hover_text(b, state) for b in bins],
            hoverinfo="text",
            text=[_bar_label(h, state) for h in heights] if state.show_bar_labels else None,
            textposition="outside" if state.show_bar_labels else None,
            showlegend=False,
        )
    )

    show_legend = False
    if state.show_normal_curve and state.chart_type is ChartType.FREQUENCY:
        points = generate_normal_curve(stats, bins)
        if points:
            fig.add_trace(
                go.Scatter(
                    x=[p.x for p in points],
                    y=[p.y for p in points],
                    mode="lines",
                    name="Normal Dist.",
                    line=dict(color=NORMAL_CURVE_COLOR, width=2, shape="spline"),
                    hoverinfo="skip",
                )
            )
            show_legend = True

    if stats is not None:
        fmt = state.number_format
        if state.show_std_dev:
            band_start = max(stats.mean - stats.std_dev, x_start)
            band_end = min(stats.mean + stats.std_dev, x_end)
            fig.add_vrect(
                x0=band_start,
                x1=band_end,
                fillcolor=STD_DEV_FILL,
                line_width=0,
                layer="below",
            )
        if state.show_mean and x_start <= stats.mean <= x_end:
            fig.add_vline(
                x=stats.mean,
                line_dash="dash",
                line_color=MEAN_COLOR,
                line_width=2,
                annotation_text=f"μ = {format_number(stats.mean, 2, fmt)}",
                annotation_position="top right",
            )
        if state.show_median and x_start <= stats.median <= x_end:
            fig.add_vline(
                x=stats.median,
                line_dash="dot",
                line_color=MEDIAN_COLOR,
                line_width=2,
                annotation_text=f"Med = {format_number(stats.median, 2, fmt)}",
                annotation_position="bottom right" if state.show_mean else "top right",
            )

    fig.update_layout(
        template=template,
        paper_bgcolor=bg_color,
        plot_bgcolor=bg_color,
        font=dict(color=fg_color),
        title=dict(text=_title_text(stats, state, column_name)),
        xaxis=dict(
            title=state.x_axis_label or column_name,
            color=fg_color,
            tickmode="array",
            tickvals=midpoints,
            ticktext=[format_bin_label(b, state.x_axis_format, state.number_format) for b in bins],
            tickangle=-45 if state.rotate_labels else 0,
            range=[x_start, x_end],
            showgrid=False,
        ),
        yaxis=dict(
            title=state.y_axis_label or default_y_label(state.chart_type),
            color=fg_color,
            gridcolor=grid_color,
            showgrid=state.show_gridlines,
            ticksuffix="%" if state.chart_type.is_percent else "",
            rangemode="tozero",
        ),
        margin=dict(l=60, r=20, t=60, b=80 if state.rotate_labels else 50),
        showlegend=show_legend,
        uirevision="keep",
    )

    logger.debug(f"Histogram figure: {len(bins)} bins, {len(fig.data)} traces")
    return fig.to_dict()
