"""Shared data model definitions for the MonthEnd projection engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, TypedDict

import pandas as pd

Trend = Literal["rising", "falling"]
RiskTier = Literal["high", "medium", "low", "neutral"]
BannerTone = Literal["success", "warning", "danger"]


@dataclass(frozen=True, slots=True)
class MoneyEvent:
    """A recurring inflow or outflow scheduled on a calendar day of the month."""

    amount: float
    day: int


@dataclass(frozen=True, slots=True)
class SimulatedExpense:
    amount: float
    day: int


@dataclass(frozen=True, slots=True)
class ProjectionInput:
    """Frozen snapshot of everything the projector reads.

    ``current_balance`` and ``daily_spending`` are ``None`` when the user left
    the field blank. Being frozen and built from tuples, two snapshots with the
    same values hash alike, which lets callers memoize on them.
    """

    current_balance: float | None
    daily_spending: float | None = None
    incomes: tuple[MoneyEvent, ...] = ()
    expenses: tuple[MoneyEvent, ...] = ()
    simulation: SimulatedExpense | None = None

    @property
    def has_minimum_data(self) -> bool:
        return (
            self.current_balance is not None
            or bool(self.incomes or self.expenses)
            or self.daily_spending is not None
        )


@dataclass(frozen=True, slots=True)
class DayPoint:
    day: int
    date: str
    balance: float
    balance_with_simulation: float
    trend: Trend


@dataclass(frozen=True, slots=True)
class InsightSummary:
    final_balance: float
    risk_tier: RiskTier
    zero_crossing_date: str | None
    suggested_daily_cap: float
    next_income_date: str | None
    next_expense_date: str | None


@dataclass(frozen=True, slots=True)
class CalendarContext:
    today: int
    month: int
    year: int
    days_in_month: int

    @property
    def days_left(self) -> int:
        return self.days_in_month - self.today + 1


@dataclass(frozen=True, slots=True)
class Banner:
    tone: BannerTone
    message: str


class ProjectionData(TypedDict):
    inputs: ProjectionInput
    calendar: CalendarContext
    series: list[DayPoint]
    summary: InsightSummary
    projection_df: pd.DataFrame
    banners: list[Banner]


@dataclass(frozen=True, slots=True)
class ProjectionForm:
    """Raw page state as typed by the user, before any parsing."""

    balance_text: str = ""
    daily_spending_text: str = ""
    incomes: tuple[MoneyEvent, ...] = field(default_factory=tuple)
    expenses: tuple[MoneyEvent, ...] = field(default_factory=tuple)
    simulation_amount_text: str = ""
    simulation_day_text: str = ""


__all__ = [
    "Banner",
    "BannerTone",
    "CalendarContext",
    "DayPoint",
    "InsightSummary",
    "MoneyEvent",
    "ProjectionData",
    "ProjectionForm",
    "ProjectionInput",
    "RiskTier",
    "SimulatedExpense",
    "Trend",
]
