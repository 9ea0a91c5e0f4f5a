"""Streamlit presentation layer for MonthEnd."""

from .main import main

__all__ = ["main"]
