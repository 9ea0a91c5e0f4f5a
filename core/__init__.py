"""Core domain package for the MonthEnd application."""

from .models import (
    Banner,
    CalendarContext,
    DayPoint,
    InsightSummary,
    MoneyEvent,
    ProjectionData,
    ProjectionForm,
    ProjectionInput,
    SimulatedExpense,
)
from .events import add_event, aggregate_by_day, remove_event, upcoming_events
from .formatting import format_compact, format_currency
from .parsing import parse_day, parse_money_input, parse_optional_money
from .period import day_label, resolve_calendar

__all__ = [
    "Banner",
    "CalendarContext",
    "DayPoint",
    "InsightSummary",
    "MoneyEvent",
    "ProjectionData",
    "ProjectionForm",
    "ProjectionInput",
    "SimulatedExpense",
    "add_event",
    "aggregate_by_day",
    "day_label",
    "format_compact",
    "format_currency",
    "parse_day",
    "parse_money_input",
    "parse_optional_money",
    "remove_event",
    "resolve_calendar",
    "upcoming_events",
]
