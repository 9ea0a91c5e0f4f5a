"""Shared Plotly theme tokens for MonthEnd visualizations."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ThemeTokens:
    label_color: str = "#9CA3AF"
    label_font: str = "Inter"
    label_size: int = 12
    grid_color: str = "rgba(148, 163, 184, 0.15)"
    rising_color: str = "#22C55E"
    rising_fill: str = "rgba(34, 197, 94, 0.30)"
    falling_color: str = "#F97316"
    falling_fill: str = "rgba(249, 115, 22, 0.30)"
    simulation_color: str = "#8B5CF6"
    zero_line_color: str = "#EF4444"
    neutral_grey: str = "#94A3B8"
    neutral_white: str = "#FFFFFF"


_TOKENS = ThemeTokens()


def theme_tokens() -> ThemeTokens:
    """Return the shared visualization tokens."""

    return _TOKENS
