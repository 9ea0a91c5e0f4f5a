"""Tests for the income/expense schedule helpers."""

from __future__ import annotations

import pytest

from core.events import add_event, aggregate_by_day, remove_event, upcoming_events
from core.models import MoneyEvent


@pytest.fixture()
def schedule() -> list[MoneyEvent]:
    return [MoneyEvent(100.0, 3), MoneyEvent(250.0, 15), MoneyEvent(40.0, 28)]


def test_add_event_keeps_day_order(schedule):
    assert add_event(schedule, "75,50", "10", 30) is True

    assert [event.day for event in schedule] == [3, 10, 15, 28]
    assert schedule[1] == MoneyEvent(75.5, 10)


def test_add_event_on_existing_day_goes_last(schedule):
    add_event(schedule, "999", "15", 30)

    assert schedule[1] == MoneyEvent(250.0, 15)
    assert schedule[2] == MoneyEvent(999.0, 15)
    assert len(schedule) == 4


@pytest.mark.parametrize("day", ["0", "31", "", "abc", None, "-2"])
def test_add_event_rejects_days_outside_month(schedule, day):
    before = list(schedule)

    assert add_event(schedule, "100", day, 30) is False
    assert schedule == before


@pytest.mark.parametrize("amount", ["", "0", "abc", "-50", "0,00"])
def test_add_event_rejects_non_positive_amounts(schedule, amount):
    before = list(schedule)

    assert add_event(schedule, amount, "12", 30) is False
    assert schedule == before


def test_add_event_accepts_month_boundaries():
    events: list[MoneyEvent] = []

    assert add_event(events, "10", "1", 28)
    assert add_event(events, "10", 28, 28)
    assert [event.day for event in events] == [1, 28]


def test_remove_event_by_position(schedule):
    assert remove_event(schedule, 1) is True

    assert schedule == [MoneyEvent(100.0, 3), MoneyEvent(40.0, 28)]


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_remove_event_out_of_range(schedule, index):
    before = list(schedule)

    assert remove_event(schedule, index) is False
    assert schedule == before


def test_upcoming_events_include_today(schedule):
    upcoming = upcoming_events(schedule, 15)

    assert upcoming == [MoneyEvent(250.0, 15), MoneyEvent(40.0, 28)]


def test_aggregate_by_day_sums_duplicates():
    events = [MoneyEvent(10.0, 5), MoneyEvent(15.5, 5), MoneyEvent(3.0, 9)]

    assert aggregate_by_day(events) == {5: 25.5, 9: 3.0}
