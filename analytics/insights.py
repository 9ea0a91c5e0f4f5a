"""Summary signals derived from a projected balance series."""

from __future__ import annotations

import math
from typing import Callable, Sequence

from core.events import upcoming_events
from core.models import Banner, DayPoint, InsightSummary, MoneyEvent, RiskTier
from core.period import day_label

__all__ = [
    "EMPTY_SUMMARY",
    "MEDIUM_RISK_CEILING",
    "RISK_LABELS",
    "analyze",
    "build_banners",
    "classify_risk",
    "suggest_daily_cap",
]

MEDIUM_RISK_CEILING = 300.0

RISK_LABELS: dict[RiskTier, str] = {
    "high": "High",
    "medium": "Medium",
    "low": "Low",
    "neutral": "Undefined",
}

EMPTY_SUMMARY = InsightSummary(
    final_balance=0.0,
    risk_tier="neutral",
    zero_crossing_date=None,
    suggested_daily_cap=0.0,
    next_income_date=None,
    next_expense_date=None,
)


def analyze(
    series: Sequence[DayPoint],
    incomes: Sequence[MoneyEvent],
    expenses: Sequence[MoneyEvent],
    current_balance: float,
    today: int,
    days_in_month: int,
    month: int | None = None,
) -> InsightSummary:
    """Derive month-end risk signals from a projection.

    Only events on or after ``today`` count towards the suggested cap and the
    next income/expense dates. The event sequences are expected sorted by day.
    """

    if not series:
        return EMPTY_SUMMARY

    final_balance = series[-1].balance
    days_left = max(1, days_in_month - today + 1)

    upcoming_incomes = upcoming_events(incomes, today)
    upcoming_expenses = upcoming_events(expenses, today)

    cap = suggest_daily_cap(
        current_balance,
        sum(event.amount for event in upcoming_incomes),
        sum(event.amount for event in upcoming_expenses),
        days_left,
    )

    zero_crossing = next((point.date for point in series if point.balance <= 0), None)

    return InsightSummary(
        final_balance=final_balance,
        risk_tier=classify_risk(final_balance),
        zero_crossing_date=zero_crossing,
        suggested_daily_cap=cap,
        next_income_date=(
            day_label(upcoming_incomes[0].day, month) if upcoming_incomes else None
        ),
        next_expense_date=(
            day_label(upcoming_expenses[0].day, month) if upcoming_expenses else None
        ),
    )


def suggest_daily_cap(
    current_balance: float,
    upcoming_income: float,
    upcoming_expense: float,
    days_left: int,
) -> float:
    """Flat daily spend that would leave the account at zero by month end."""

    per_day = (current_balance + upcoming_income - upcoming_expense) / max(1, days_left)
    # half cents round up
    return max(0.0, math.floor(per_day * 100 + 0.5) / 100)


def classify_risk(final_balance: float) -> RiskTier:
    if final_balance < 0:
        return "high"
    if final_balance < MEDIUM_RISK_CEILING:
        return "medium"
    return "low"


def build_banners(
    summary: InsightSummary,
    format_money: Callable[[float], str],
) -> list[Banner]:
    banners: list[Banner] = []
    cap = format_money(summary.suggested_daily_cap)

    if summary.risk_tier == "high":
        banners.append(
            Banner(
                "danger",
                f"High risk of ending the month overdrawn. Keep daily spending to {cap}.",
            )
        )
    elif summary.risk_tier == "medium":
        banners.append(Banner("warning", f"Heads up: aim to stay close to {cap} per day."))
    elif summary.risk_tier == "low":
        banners.append(
            Banner(
                "success",
                f"Healthy outlook. Projected {format_money(summary.final_balance)} at month end.",
            )
        )

    if summary.zero_crossing_date:
        banners.append(
            Banner("warning", f"Balance projected at or below zero on {summary.zero_crossing_date}.")
        )

    return banners
