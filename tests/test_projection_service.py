"""Tests for the page-level projection service."""

from __future__ import annotations

import pytest
import streamlit as st

from config.settings import Settings, get_settings
from core.models import CalendarContext, MoneyEvent, ProjectionForm
from core.projection_service import (
    build_projection_input,
    clear_projection_cache,
    compute_projection,
    prepare_projection_data,
)


@pytest.fixture(autouse=True)
def clear_streamlit_secrets(monkeypatch):
    """Provide an empty secrets mapping so tests don't rely on Streamlit runtime."""

    monkeypatch.setattr(st, "secrets", {}, raising=False)
    get_settings.cache_clear()
    clear_projection_cache()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def june() -> CalendarContext:
    return CalendarContext(today=1, month=6, year=2025, days_in_month=30)


@pytest.fixture()
def sample_form() -> ProjectionForm:
    return ProjectionForm(
        balance_text="R$ 100",
        daily_spending_text="0",
        incomes=(MoneyEvent(2000.0, 5),),
        expenses=(MoneyEvent(500.0, 10),),
        simulation_amount_text="250,00",
        simulation_day_text="12",
    )


def test_build_projection_input_parses_text(sample_form):
    inputs = build_projection_input(sample_form)

    assert inputs.current_balance == 100.0
    assert inputs.daily_spending == 0.0
    assert inputs.simulation is not None
    assert inputs.simulation.amount == 250.0
    assert inputs.simulation.day == 12


@pytest.mark.parametrize(
    ("amount", "day"),
    [("", "12"), ("0", "12"), ("-40", "12"), ("100", ""), ("100", "x")],
)
def test_build_projection_input_drops_incomplete_simulation(amount, day):
    form = ProjectionForm(balance_text="10", simulation_amount_text=amount, simulation_day_text=day)

    assert build_projection_input(form).simulation is None


def test_blank_fields_stay_unset():
    inputs = build_projection_input(ProjectionForm())

    assert inputs.current_balance is None
    assert inputs.daily_spending is None
    assert inputs.has_minimum_data is False


def test_prepare_projection_data_bundles_page_state(sample_form, june):
    data = prepare_projection_data(sample_form, june, Settings())

    assert len(data["series"]) == 30
    assert len(data["projection_df"]) == 30
    assert data["summary"].suggested_daily_cap == pytest.approx(53.33)
    assert data["summary"].risk_tier == "low"
    assert [banner.tone for banner in data["banners"]] == ["success"]
    assert data["calendar"] is june


def test_prepare_projection_data_without_minimum_input(june):
    data = prepare_projection_data(ProjectionForm(), june)

    assert data["series"] == []
    assert data["summary"].risk_tier == "neutral"
    assert data["banners"] == []
    assert data["projection_df"].empty


def test_prepare_projection_data_from_balance_alone(june):
    data = prepare_projection_data(ProjectionForm(balance_text="500"), june)

    assert data["inputs"].has_minimum_data
    assert len(data["series"]) == 30
    assert len(data["projection_df"]) == 30


def test_compute_projection_is_memoized_on_input_values(sample_form):
    first_inputs = build_projection_input(sample_form)
    second_inputs = build_projection_input(sample_form)
    assert first_inputs == second_inputs
    assert first_inputs is not second_inputs

    first = compute_projection(first_inputs, 1, 6, 30)
    second = compute_projection(second_inputs, 1, 6, 30)

    assert first is second
    assert compute_projection.cache_info().hits == 1


def test_settings_read_streamlit_secrets(monkeypatch):
    monkeypatch.setattr(
        st,
        "secrets",
        {"monthend": {"currency_symbol": "£", "decimal_separator": "."}},
        raising=False,
    )
    get_settings.cache_clear()

    settings = get_settings()

    assert settings.currency_symbol == "£"
    assert settings.decimal_separator == "."
    assert settings.thousands_separator == "."


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("MONTHEND_CURRENCY_SYMBOL", "€")

    assert Settings().currency_symbol == "€"
