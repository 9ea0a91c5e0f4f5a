"""MonthEnd balance projection app."""

from __future__ import annotations

import logging

import streamlit as st

from app.layout import inject_css
from app.pages import render_projection_page
from config import configure_logging, get_settings
from core.period import resolve_calendar

logger = logging.getLogger(__name__)


def main() -> None:
    """Application entrypoint for the MonthEnd dashboard."""

    settings = get_settings()
    configure_logging(settings.log_level)

    st.set_page_config(
        page_title=settings.page_title,
        page_icon="💰",
        layout="centered",
        initial_sidebar_state="collapsed",
    )
    inject_css()

    calendar = resolve_calendar()
    logger.debug(
        "Rendering day %s of %s (%s/%s)",
        calendar.today,
        calendar.days_in_month,
        calendar.month,
        calendar.year,
    )
    render_projection_page(calendar, settings)


if __name__ == "__main__":
    main()
