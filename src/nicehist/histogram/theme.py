"""Theme and color utilities for histogram figures."""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union


class ThemeMode(str, Enum):
    """UI theme mode."""

    DARK = "dark"
    LIGHT = "light"


# Bar color schemes: primary (bars, curve) and a light/dark pair (borders).
COLOR_SCHEMES: dict[str, dict[str, object]] = {
    "Ocean Blue": {"primary": "#3b82f6", "gradient": ("#60a5fa", "#2563eb")},
    "Forest Green": {"primary": "#10b981", "gradient": ("#34d399", "#059669")},
    "Sunset Orange": {"primary": "#f59e0b", "gradient": ("#fbbf24", "#d97706")},
    "Purple Haze": {"primary": "#8b5cf6", "gradient": ("#a78bfa", "#7c3aed")},
    "Grayscale": {"primary": "#64748b", "gradient": ("#94a3b8", "#475569")},
}
DEFAULT_COLOR_SCHEME = "Ocean Blue"

# Bar gap option -> Plotly bargap fraction.
BAR_GAP_OPTIONS: dict[str, float] = {
    "None": 0.0,
    "Small": 0.05,
    "Medium": 0.1,
    "Large": 0.2,
}
DEFAULT_BAR_GAP = "Small"

MEAN_COLOR = "#ef4444"
MEDIAN_COLOR = "#22c55e"
STD_DEV_FILL = "rgba(139, 92, 246, 0.12)"
NORMAL_CURVE_COLOR = "#f97316"


def resolve_theme(theme: Optional[Union[str, ThemeMode]]) -> ThemeMode:
    """Convert str to ThemeMode. Default to LIGHT."""
    if isinstance(theme, ThemeMode):
        return theme
    s = str(theme).lower()
    if s in ("dark", "plotly_dark"):
        return ThemeMode.DARK
    return ThemeMode.LIGHT


def get_theme_colors(theme: ThemeMode) -> tuple[str, str]:
    """Get background and foreground colors for a theme."""
    if theme is ThemeMode.DARK:
        return "#000000", "#ffffff"
    return "#ffffff", "#000000"


def get_theme_template(theme: ThemeMode) -> str:
    """Get Plotly template name for a theme."""
    if theme is ThemeMode.DARK:
        return "plotly_dark"
    return "plotly_white"


def get_grid_color(theme: ThemeMode) -> str:
    return "rgba(255,255,255,0.2)" if theme is ThemeMode.DARK else "#e2e8f0"


def get_color_scheme(name: Optional[str], custom_color: Optional[str] = None) -> dict[str, object]:
    """Color scheme by name; "Custom" uses custom_color; unknown -> Ocean Blue."""
    if name == "Custom" and custom_color:
        return {"primary": custom_color, "gradient": (custom_color, custom_color)}
    return COLOR_SCHEMES.get(name or "", COLOR_SCHEMES[DEFAULT_COLOR_SCHEME])
