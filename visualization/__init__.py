"""Visualization utilities for MonthEnd dashboards."""

from .charts import build_balance_chart
from .theme import theme_tokens

__all__ = [
    "build_balance_chart",
    "theme_tokens",
]
