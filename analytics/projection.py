"""Daily balance projection for the remainder of the month."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np
import pandas as pd

from core.events import aggregate_by_day
from core.models import DayPoint, ProjectionInput
from core.period import day_label

__all__ = [
    "ProjectionError",
    "build_projection_frame",
    "project",
    "smoothing_wave",
]

logger = logging.getLogger(__name__)

WAVE_AMPLITUDE_RATIO = 0.04
WAVE_AMPLITUDE_MIN = 8.0
WAVE_AMPLITUDE_MAX = 120.0
WAVE_SECONDARY_RATIO = 0.25

FRAME_COLUMNS = [
    "Day",
    "Date",
    "Balance",
    "BalanceWithSimulation",
    "Trend",
    "Rising",
    "Falling",
]


class ProjectionError(ValueError):
    """Raised when the calendar handed to the projector is inconsistent."""


def project(
    inputs: ProjectionInput,
    today: int,
    days_in_month: int,
    month: int | None = None,
) -> list[DayPoint]:
    """Project the running balance for every day from ``today`` to month end.

    Two running totals start at the current balance. Each day adds that day's
    incomes, subtracts its expenses and the flat daily spend; the simulated
    expense only hits the second total, on its own day. A presentation wave
    (see :func:`smoothing_wave`) is added to both totals before recording, so
    the gap between them stays the simulated amount.

    Returns an empty list when the inputs do not hold enough to project from.
    """

    if not 1 <= today <= days_in_month:
        raise ProjectionError(
            f"today must fall within 1..{days_in_month}, got {today}"
        )
    if not inputs.has_minimum_data:
        logger.debug("Projection skipped: nothing entered")
        return []

    start = float(inputs.current_balance or 0.0)
    daily = float(inputs.daily_spending or 0.0)
    days = pd.RangeIndex(today, days_in_month + 1, name="Day")

    incomes = _per_day(aggregate_by_day(inputs.incomes), days)
    expenses = _per_day(aggregate_by_day(inputs.expenses), days)
    simulation = inputs.simulation
    sim_day = simulation.day if simulation is not None and simulation.amount > 0 else None

    # accumulate day by day, income then expense then daily spend
    baseline_totals: list[float] = []
    simulation_totals: list[float] = []
    baseline = simulated = start
    for day, income, expense in zip(days, incomes, expenses):
        baseline += income
        simulated += income
        baseline -= expense
        simulated -= expense
        baseline -= daily
        simulated -= daily
        if day == sim_day:
            simulated -= simulation.amount
        baseline_totals.append(baseline)
        simulation_totals.append(simulated)

    running = pd.Series(baseline_totals, index=days, dtype=float)
    running_sim = pd.Series(simulation_totals, index=days, dtype=float)

    wave = smoothing_wave(running, today, days_in_month)
    balance = running + wave
    balance_sim = running_sim + wave

    previous = balance.shift(1, fill_value=start)
    trend = np.where(balance >= previous, "rising", "falling")

    return [
        DayPoint(
            day=int(day),
            date=day_label(int(day), month),
            balance=float(balance.loc[day]),
            balance_with_simulation=float(balance_sim.loc[day]),
            trend=str(day_trend),
        )
        for day, day_trend in zip(days, trend)
    ]


def smoothing_wave(running: pd.Series, today: int, days_in_month: int) -> pd.Series:
    """Return the cosmetic oscillation added to a running balance series.

    The amplitude follows each day's own pre-wave balance and is clipped to
    a fixed band, so the wave never accumulates across days.
    """

    span = max(1, days_in_month - today)
    progress = (running.index.to_numpy(dtype=float) - today) / span
    amplitude = np.clip(
        running.abs().to_numpy(dtype=float) * WAVE_AMPLITUDE_RATIO,
        WAVE_AMPLITUDE_MIN,
        WAVE_AMPLITUDE_MAX,
    )
    primary = np.sin(progress * np.pi * 2) * amplitude
    secondary = np.cos(progress * np.pi * 6) * (amplitude * WAVE_SECONDARY_RATIO)
    return pd.Series(primary + secondary, index=running.index)


def build_projection_frame(points: Sequence[DayPoint]) -> pd.DataFrame:
    """Return a chart-ready frame with the baseline split by trend."""

    if not points:
        return pd.DataFrame(columns=FRAME_COLUMNS)

    frame = pd.DataFrame(
        {
            "Day": [point.day for point in points],
            "Date": [point.date for point in points],
            "Balance": [point.balance for point in points],
            "BalanceWithSimulation": [point.balance_with_simulation for point in points],
            "Trend": [point.trend for point in points],
        }
    )
    frame["Rising"] = frame["Balance"].where(frame["Trend"] == "rising")
    frame["Falling"] = frame["Balance"].where(frame["Trend"] == "falling")
    return frame[FRAME_COLUMNS]


def _per_day(totals: dict[int, float], days: pd.RangeIndex) -> pd.Series:
    series = pd.Series(totals, dtype=float)
    return series.reindex(days, fill_value=0.0)
