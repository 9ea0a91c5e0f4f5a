"""Month-end projection page layout."""

from __future__ import annotations

import logging
from functools import partial

import streamlit as st

from analytics.insights import RISK_LABELS
from app.layout import card, render_banners, stat
from config.settings import Settings
from core.events import add_event, remove_event
from core.formatting import format_compact, format_currency
from core.models import CalendarContext, MoneyEvent, ProjectionData, ProjectionForm
from core.projection_service import prepare_projection_data
from visualization import build_balance_chart

logger = logging.getLogger(__name__)

EVENT_KINDS = {
    "incomes": "income",
    "expenses": "expense",
}


def _events(kind: str) -> list[MoneyEvent]:
    return st.session_state.setdefault(kind, [])


def _handle_add(kind: str, days_in_month: int) -> None:
    amount_key = f"{kind}_amount_text"
    day_key = f"{kind}_day_text"
    added = add_event(
        _events(kind),
        st.session_state.get(amount_key, ""),
        st.session_state.get(day_key, ""),
        days_in_month,
    )
    if added:
        st.session_state[amount_key] = ""
        st.session_state[day_key] = ""
        logger.info("Added %s, %d scheduled", EVENT_KINDS[kind], len(_events(kind)))


def _handle_remove(kind: str, index: int) -> None:
    remove_event(_events(kind), index)


def _render_event_card(
    kind: str,
    title: str,
    calendar: CalendarContext,
    settings: Settings,
) -> None:
    label = EVENT_KINDS[kind]
    with card(title):
        amount_col, day_col = st.columns((2, 1))
        amount_col.text_input(
            "Amount",
            key=f"{kind}_amount_text",
            placeholder="0,00",
        )
        day_col.text_input(
            "Day",
            key=f"{kind}_day_text",
            placeholder="5" if kind == "incomes" else "10",
            help=f"1 to {calendar.days_in_month}",
        )
        st.button(
            f"Add {label}",
            key=f"add_{kind}",
            on_click=_handle_add,
            args=(kind, calendar.days_in_month),
            use_container_width=True,
        )

        for index, event in enumerate(_events(kind)):
            text_col, button_col = st.columns((5, 1))
            text_col.markdown(
                f"Day {event.day} · {format_currency(event.amount, **settings.currency_kwargs)}"
            )
            button_col.button(
                "✕",
                key=f"remove_{kind}_{index}",
                on_click=_handle_remove,
                args=(kind, index),
                help=f"Remove {label}",
            )


def _collect_form() -> ProjectionForm:
    state = st.session_state
    return ProjectionForm(
        balance_text=state.get("balance_text", ""),
        daily_spending_text=state.get("daily_spending_text", ""),
        incomes=tuple(_events("incomes")),
        expenses=tuple(_events("expenses")),
        simulation_amount_text=state.get("simulation_amount_text", ""),
        simulation_day_text=state.get("simulation_day_text", ""),
    )


def _render_summary(data: ProjectionData, settings: Settings) -> None:
    summary = data["summary"]
    money = partial(format_currency, **settings.currency_kwargs)

    with card("Quick summary"):
        top = st.columns(3)
        top[0].markdown(stat("Final balance", money(summary.final_balance)), unsafe_allow_html=True)
        top[1].markdown(
            stat("Risk", RISK_LABELS[summary.risk_tier], f"me-risk--{summary.risk_tier}"),
            unsafe_allow_html=True,
        )
        top[2].markdown(
            stat(
                f"Daily cap ({settings.currency_symbol})",
                format_compact(summary.suggested_daily_cap, settings.decimal_separator),
            ),
            unsafe_allow_html=True,
        )
        bottom = st.columns(2)
        bottom[0].markdown(stat("Next income", summary.next_income_date or "-"), unsafe_allow_html=True)
        bottom[1].markdown(stat("Next expense", summary.next_expense_date or "-"), unsafe_allow_html=True)

    render_banners(data["banners"])


def render_page(calendar: CalendarContext, settings: Settings) -> None:
    """Render the projection page for the given month position."""

    st.title("Month-end outlook")
    st.caption("How much will be left by the end of the month?")

    with card("Current balance"):
        st.text_input(
            "How much is in your current account today",
            key="balance_text",
            placeholder="0,00",
        )
    with card("Average daily spend", suffix="Estimate"):
        st.text_input(
            "What you expect to spend on a typical day",
            key="daily_spending_text",
            placeholder="0,00",
        )

    _render_event_card("incomes", "Recurring income", calendar, settings)
    _render_event_card("expenses", "Recurring expenses", calendar, settings)

    data = prepare_projection_data(_collect_form(), calendar, settings)
    if not data["series"]:
        st.info("Enter a balance, a daily spend or a scheduled movement to see the projection.")
        return

    _render_summary(data, settings)

    with card("Balance projection"):
        st.caption("Green: rising · Orange: falling")
        chart = build_balance_chart(data["projection_df"], currency_symbol=settings.currency_symbol)
        st.plotly_chart(chart, use_container_width=True, key="balance-projection")

    with card("Simulate an expense"):
        amount_col, day_col = st.columns((2, 1))
        amount_col.text_input("Amount", key="simulation_amount_text", placeholder="0,00")
        day_col.text_input("Day", key="simulation_day_text", placeholder=str(calendar.today))
        if data["inputs"].simulation is not None:
            simulated_end = data["series"][-1].balance_with_simulation
            st.caption(f"Month end with this expense: {format_currency(simulated_end, **settings.currency_kwargs)}")


__all__ = ["render_page"]
