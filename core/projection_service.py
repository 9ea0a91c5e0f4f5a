"""Core logic for assembling the MonthEnd projection page data."""

from __future__ import annotations

import logging
from functools import lru_cache, partial
from typing import Final

from analytics.insights import analyze, build_banners
from analytics.projection import build_projection_frame, project
from config.settings import Settings, get_settings
from core.formatting import format_currency
from core.models import (
    CalendarContext,
    DayPoint,
    InsightSummary,
    ProjectionData,
    ProjectionForm,
    ProjectionInput,
    SimulatedExpense,
)
from core.parsing import parse_day, parse_money_input, parse_optional_money

__all__ = [
    "build_projection_input",
    "clear_projection_cache",
    "compute_projection",
    "prepare_projection_data",
]

logger = logging.getLogger(__name__)

_CACHE_SIZE: Final[int] = 64


def build_projection_input(form: ProjectionForm) -> ProjectionInput:
    """Parse the raw form into the frozen snapshot the engine consumes."""

    simulation: SimulatedExpense | None = None
    sim_amount = parse_money_input(form.simulation_amount_text)
    sim_day = parse_day(form.simulation_day_text)
    if sim_amount > 0 and sim_day is not None:
        simulation = SimulatedExpense(amount=sim_amount, day=sim_day)

    return ProjectionInput(
        current_balance=parse_optional_money(form.balance_text),
        daily_spending=parse_optional_money(form.daily_spending_text),
        incomes=tuple(form.incomes),
        expenses=tuple(form.expenses),
        simulation=simulation,
    )


@lru_cache(maxsize=_CACHE_SIZE)
def compute_projection(
    inputs: ProjectionInput,
    today: int,
    month: int,
    days_in_month: int,
) -> tuple[tuple[DayPoint, ...], InsightSummary]:
    """Run the projector and analyzer once per distinct input snapshot.

    Results are cached on the value of the arguments; equal snapshots return
    the very same objects, so callers must not mutate them.
    """

    logger.debug("Computing projection for day %s/%s", today, days_in_month)
    series = project(inputs, today, days_in_month, month=month)
    summary = analyze(
        series,
        inputs.incomes,
        inputs.expenses,
        inputs.current_balance or 0.0,
        today,
        days_in_month,
        month=month,
    )
    return tuple(series), summary


def clear_projection_cache() -> None:
    compute_projection.cache_clear()


def prepare_projection_data(
    form: ProjectionForm,
    calendar: CalendarContext,
    settings: Settings | None = None,
) -> ProjectionData:
    settings = settings or get_settings()
    inputs = build_projection_input(form)

    series, summary = compute_projection(
        inputs,
        calendar.today,
        calendar.month,
        calendar.days_in_month,
    )
    format_money = partial(format_currency, **settings.currency_kwargs)

    return {
        "inputs": inputs,
        "calendar": calendar,
        "series": list(series),
        "summary": summary,
        "projection_df": build_projection_frame(series),
        "banners": build_banners(summary, format_money) if series else [],
    }
