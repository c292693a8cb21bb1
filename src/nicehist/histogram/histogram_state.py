"""Histogram chart state.

Defines the ChartType / BinLabelFormat / NumberFormat enums and the
HistogramState dataclass holding every user-facing chart option. The
statistics engine never sees HistogramState directly: bin_config() hands it
an immutable BinConfig per computation.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Type, TypeVar

from nicehist.histogram.theme import DEFAULT_BAR_GAP, DEFAULT_COLOR_SCHEME
from nicehist.stats.binning import Bin, BinConfig, BinMethod
from nicehist.utils.logging import get_logger

logger = get_logger(__name__)

E = TypeVar("E", bound=Enum)


class ChartType(str, Enum):
    """What the bar heights show."""
    FREQUENCY = "Frequency"
    RELATIVE_FREQUENCY = "Relative Frequency (%)"
    CUMULATIVE = "Cumulative"
    CUMULATIVE_PERCENT = "Cumulative (%)"

    @property
    def is_percent(self) -> bool:
        return "%" in self.value

    @property
    def is_cumulative(self) -> bool:
        return self.value.startswith("Cumulative")


class BinLabelFormat(str, Enum):
    """X-axis tick label for each bin."""
    RANGE = "Range (10–20)"
    MIDPOINT = "Midpoint"
    LOWER_BOUND = "Lower Bound"
    UPPER_BOUND = "Upper Bound"


class NumberFormat(str, Enum):
    """Display format for numbers in labels, hover text and the stats panel."""
    AUTO = "Auto"
    INTEGER = "Integer"
    ONE_DECIMAL = "1 Decimal"
    TWO_DECIMALS = "2 Decimals"
    CURRENCY = "Currency ($)"
    THOUSANDS = "Thousands (K)"
    MILLIONS = "Millions (M)"


def _enum_or_default(enum_cls: Type[E], value: Any, default: E) -> E:
    """Enum member for value, or default (with a warning) if unknown."""
    if value is None:
        return default
    try:
        return enum_cls(value)
    except ValueError:
        logger.warning(f"Unknown {enum_cls.__name__} {value!r}, using {default.value!r}")
        return default


def bar_value(bin: Bin, chart_type: ChartType) -> float:
    """Bar height for a bin under chart_type."""
    if chart_type is ChartType.RELATIVE_FREQUENCY:
        return bin.relative_frequency
    if chart_type is ChartType.CUMULATIVE:
        return bin.cumulative_count
    if chart_type is ChartType.CUMULATIVE_PERCENT:
        return bin.cumulative_frequency
    return bin.count


def default_y_label(chart_type: ChartType) -> str:
    """Y-axis title used when the user does not supply one."""
    if chart_type is ChartType.RELATIVE_FREQUENCY:
        return "Relative Frequency (%)"
    if chart_type is ChartType.CUMULATIVE:
        return "Cumulative Count"
    if chart_type is ChartType.CUMULATIVE_PERCENT:
        return "Cumulative Frequency (%)"
    return "Frequency"


@dataclass
class HistogramState:
    """Configuration state for one histogram chart.

    bin_count and bin_width are kept as the raw text the user typed; the
    binning engine parses them (see nicehist.stats.binning).
    """
    bin_method: BinMethod = BinMethod.STURGES
    bin_count: str = "10"              # used by Fixed Count only
    bin_width: str = ""                # used by Fixed Width only
    chart_type: ChartType = ChartType.FREQUENCY
    color_scheme: str = DEFAULT_COLOR_SCHEME
    custom_color: Optional[str] = None  # used when color_scheme == "Custom"
    show_gridlines: bool = True
    bar_gap: str = DEFAULT_BAR_GAP
    show_mean: bool = False
    show_median: bool = False
    show_std_dev: bool = False
    show_normal_curve: bool = False    # drawn for Frequency charts only
    show_stats: bool = True
    chart_title: str = ""
    x_axis_label: str = ""
    y_axis_label: str = ""
    x_axis_format: BinLabelFormat = BinLabelFormat.RANGE
    number_format: NumberFormat = NumberFormat.AUTO
    rotate_labels: bool = False
    show_bin_range_in_tooltip: bool = True
    show_bar_labels: bool = False

    def bin_config(self) -> BinConfig:
        """Immutable binning options for the engine."""
        return BinConfig(
            method=self.bin_method.value,
            bin_count=self.bin_count,
            bin_width=self.bin_width,
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize HistogramState to a JSON-friendly dict (enums as values)."""
        return {
            "bin_method": self.bin_method.value,
            "bin_count": self.bin_count,
            "bin_width": self.bin_width,
            "chart_type": self.chart_type.value,
            "color_scheme": self.color_scheme,
            "custom_color": self.custom_color,
            "show_gridlines": self.show_gridlines,
            "bar_gap": self.bar_gap,
            "show_mean": self.show_mean,
            "show_median": self.show_median,
            "show_std_dev": self.show_std_dev,
            "show_normal_curve": self.show_normal_curve,
            "show_stats": self.show_stats,
            "chart_title": self.chart_title,
            "x_axis_label": self.x_axis_label,
            "y_axis_label": self.y_axis_label,
            "x_axis_format": self.x_axis_format.value,
            "number_format": self.number_format.value,
            "rotate_labels": self.rotate_labels,
            "show_bin_range_in_tooltip": self.show_bin_range_in_tooltip,
            "show_bar_labels": self.show_bar_labels,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "HistogramState":
        """Deserialize HistogramState from a dict.

        Tolerant: missing keys take defaults, unknown enum values fall back to
        defaults with a warning, and unknown keys are ignored.
        """
        known = set(cls().to_dict())
        for key in data:
            if key not in known:
                logger.warning(f"Unknown key '{key}' in histogram state, ignoring")

        bin_count = data.get("bin_count", "10")
        bin_width = data.get("bin_width", "")
        return cls(
            bin_method=_enum_or_default(BinMethod, data.get("bin_method"), BinMethod.STURGES),
            bin_count="" if bin_count is None else str(bin_count),
            bin_width="" if bin_width is None else str(bin_width),
            chart_type=_enum_or_default(ChartType, data.get("chart_type"), ChartType.FREQUENCY),
            color_scheme=str(data.get("color_scheme", DEFAULT_COLOR_SCHEME)),
            custom_color=data.get("custom_color"),  # Can be None
            show_gridlines=bool(data.get("show_gridlines", True)),
            bar_gap=str(data.get("bar_gap", DEFAULT_BAR_GAP)),
            show_mean=bool(data.get("show_mean", False)),
            show_median=bool(data.get("show_median", False)),
            show_std_dev=bool(data.get("show_std_dev", False)),
            show_normal_curve=bool(data.get("show_normal_curve", False)),
            show_stats=bool(data.get("show_stats", True)),
            chart_title=str(data.get("chart_title") or ""),
            x_axis_label=str(data.get("x_axis_label") or ""),
            y_axis_label=str(data.get("y_axis_label") or ""),
            x_axis_format=_enum_or_default(BinLabelFormat, data.get("x_axis_format"), BinLabelFormat.RANGE),
            number_format=_enum_or_default(NumberFormat, data.get("number_format"), NumberFormat.AUTO),
            rotate_labels=bool(data.get("rotate_labels", False)),
            show_bin_range_in_tooltip=bool(data.get("show_bin_range_in_tooltip", True)),
            show_bar_labels=bool(data.get("show_bar_labels", False)),
        )
