"""Calendar source for the projected month."""

from __future__ import annotations

import calendar
from datetime import date

from core.models import CalendarContext

__all__ = ["day_label", "resolve_calendar"]


def resolve_calendar(target: date | None = None) -> CalendarContext:
    """Return today's position within its month.

    ``target`` defaults to the current local date; passing one pins the
    calendar, which is what tests and previews do.
    """

    target = target or date.today()
    _, days_in_month = calendar.monthrange(target.year, target.month)
    return CalendarContext(
        today=target.day,
        month=target.month,
        year=target.year,
        days_in_month=days_in_month,
    )


def day_label(day: int, month: int | None) -> str:
    if month is None:
        return str(day)
    return f"{day}/{month}"
