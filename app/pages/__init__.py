"""Page modules for the MonthEnd Streamlit application."""

from .projection import render_page as render_projection_page

__all__ = [
    "render_projection_page",
]
