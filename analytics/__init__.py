"""Projection engine shared across MonthEnd services."""

from analytics.insights import (
    EMPTY_SUMMARY,
    MEDIUM_RISK_CEILING,
    RISK_LABELS,
    analyze,
    build_banners,
    classify_risk,
    suggest_daily_cap,
)
from analytics.projection import (
    ProjectionError,
    build_projection_frame,
    project,
    smoothing_wave,
)

__all__ = [
    "EMPTY_SUMMARY",
    "MEDIUM_RISK_CEILING",
    "RISK_LABELS",
    "ProjectionError",
    "analyze",
    "build_banners",
    "build_projection_frame",
    "classify_risk",
    "project",
    "smoothing_wave",
    "suggest_daily_cap",
]
