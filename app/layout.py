"""Shared layout primitives for the MonthEnd Streamlit app."""

from __future__ import annotations

from contextlib import contextmanager
from html import escape
from typing import Iterable

import streamlit as st

from core.models import Banner

_BANNER_ICONS = {
    "success": "&#10003;",
    "warning": "&#9888;",
    "danger": "&#9888;",
}


def inject_css() -> None:
    """Inject global CSS tokens and component styling into the Streamlit app."""

    st.markdown(
        """
        <style>
          :root {
            --gap: 12px;
            --radius: 10px;
            --card-bg: #000000;
            --border: rgba(55, 65, 81, 0.3);
          }

          body, [data-testid="stAppViewContainer"] > .main {
            background: #000000;
            color: #FFFFFF;
          }

          .block-container {
            max-width: 480px;
            padding-top: 1.5rem;
            padding-bottom: 3rem;
          }

          .me-card-anchor {
            display: none;
          }

          [data-testid="stVerticalBlock"]:has(> .me-card-anchor) {
            background: var(--card-bg);
            border: 1px solid var(--border);
            border-radius: var(--radius);
            padding: 12px;
            margin-bottom: var(--gap);
            display: flex;
            flex-direction: column;
            gap: 8px;
          }

          .me-card__head {
            display: flex;
            align-items: center;
            justify-content: space-between;
            gap: 8px;
            font-weight: 600;
            font-size: 0.9rem;
            color: #F3F4F6;
            flex-wrap: wrap;
          }

          .me-chip {
            font-size: 10px;
            padding: 1px 6px;
            border-radius: 999px;
            border: 1px solid rgba(249, 115, 22, 0.4);
            color: #FB923C;
            white-space: nowrap;
          }

          .me-stat {
            border: 1px solid rgba(55, 65, 81, 0.2);
            border-radius: 6px;
            padding: 8px;
            text-align: center;
          }

          .me-stat__label {
            font-size: 10px;
            color: #9CA3AF;
            margin: 0;
          }

          .me-stat__value {
            font-size: 0.9rem;
            font-weight: 600;
            margin: 0;
          }

          .me-risk--high { color: #F87171; }
          .me-risk--medium { color: #FACC15; }
          .me-risk--low { color: #4ADE80; }
          .me-risk--neutral { color: #D1D5DB; }

          .me-banner {
            display: flex;
            align-items: center;
            gap: 8px;
            border-radius: 8px;
            border: 1px solid;
            padding: 8px 12px;
            font-size: 0.85rem;
            color: #E5E7EB;
            margin-bottom: 6px;
          }

          .me-banner--success { border-color: #16A34A; }
          .me-banner--warning { border-color: #CA8A04; }
          .me-banner--danger { border-color: #DC2626; }
          .me-banner--success .me-banner__icon { color: #4ADE80; }
          .me-banner--warning .me-banner__icon { color: #FACC15; }
          .me-banner--danger .me-banner__icon { color: #F87171; }
        </style>
        """,
        unsafe_allow_html=True,
    )


@contextmanager
def card(title: str, suffix: str | None = None):
    """Render content inside a reusable MonthEnd card."""

    chip_html = f'<span class="me-chip">{suffix}</span>' if suffix else ""
    container = st.container()
    with container:
        st.markdown('<div class="me-card-anchor"></div>', unsafe_allow_html=True)
        st.markdown(
            f'<div class="me-card__head"><span>{title}</span>{chip_html}</div>',
            unsafe_allow_html=True,
        )
        yield


def stat(label: str, value: str, css_class: str = "") -> str:
    """Return the markup of a small labelled statistic tile."""

    return (
        f'<div class="me-stat"><p class="me-stat__label">{escape(label)}</p>'
        f'<p class="me-stat__value {css_class}">{escape(value)}</p></div>'
    )


def render_banners(banners: Iterable[Banner]) -> None:
    for banner in banners:
        st.markdown(
            f'<div class="me-banner me-banner--{banner.tone}" role="status">'
            f'<span class="me-banner__icon">{_BANNER_ICONS[banner.tone]}</span>'
            f"<span>{escape(banner.message)}</span></div>",
            unsafe_allow_html=True,
        )


__all__ = [
    "card",
    "inject_css",
    "render_banners",
    "stat",
]
