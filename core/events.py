"""Income and expense schedule helpers."""

from __future__ import annotations

import bisect
import logging
from typing import Iterable, MutableSequence

from core.models import MoneyEvent
from core.parsing import parse_day, parse_money_input

__all__ = [
    "add_event",
    "aggregate_by_day",
    "is_valid_day",
    "remove_event",
    "upcoming_events",
]

logger = logging.getLogger(__name__)


def is_valid_day(day: int | None, days_in_month: int) -> bool:
    return day is not None and 1 <= day <= days_in_month


def add_event(
    events: MutableSequence[MoneyEvent],
    amount_text: str,
    day_text: str | int | None,
    days_in_month: int,
) -> bool:
    """Insert a new event keeping the schedule sorted by day.

    Returns ``False`` without touching ``events`` when the amount is not
    positive or the day falls outside the month. Events landing on a day that
    is already scheduled are placed after the existing ones.
    """

    amount = parse_money_input(amount_text)
    day = parse_day(day_text)
    if amount <= 0 or not is_valid_day(day, days_in_month):
        logger.debug("Rejected event amount=%r day=%r", amount_text, day_text)
        return False

    event = MoneyEvent(amount=amount, day=day)
    index = bisect.bisect_right([existing.day for existing in events], day)
    events.insert(index, event)
    return True


def remove_event(events: MutableSequence[MoneyEvent], index: int) -> bool:
    if not 0 <= index < len(events):
        return False
    del events[index]
    return True


def upcoming_events(events: Iterable[MoneyEvent], today: int) -> list[MoneyEvent]:
    return [event for event in events if event.day >= today]


def aggregate_by_day(events: Iterable[MoneyEvent]) -> dict[int, float]:
    """Sum event amounts per calendar day."""

    totals: dict[int, float] = {}
    for event in events:
        totals[event.day] = totals.get(event.day, 0.0) + event.amount
    return totals
