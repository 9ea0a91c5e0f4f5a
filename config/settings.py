"""Centralised configuration handling for MonthEnd."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Mapping

import streamlit as st
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CURRENCY_SYMBOL = "R$"
SECRETS_SECTION = "monthend"


def _streamlit_section(name: str) -> Mapping[str, Any] | None:
    """Return a mapping from Streamlit secrets for the given section."""

    try:
        if hasattr(st, "secrets") and name in st.secrets:
            section = st.secrets[name]
            if isinstance(section, Mapping):
                return section
            return dict(section)
    except Exception:  # pragma: no cover - accessing secrets may fail in tests
        return None
    return None


class Settings(BaseSettings):
    """Application settings sourced from env vars and Streamlit secrets."""

    page_title: str = "MonthEnd | Balance projection"
    currency_symbol: str = DEFAULT_CURRENCY_SYMBOL
    decimal_separator: str = ","
    thousands_separator: str = "."
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="MONTHEND_", extra="ignore")

    @property
    def currency_kwargs(self) -> dict[str, str]:
        return {
            "symbol": self.currency_symbol,
            "decimal_separator": self.decimal_separator,
            "thousands_separator": self.thousands_separator,
        }


@lru_cache
def get_settings() -> Settings:
    """Load and cache application settings."""

    overrides: dict[str, Any] = {}
    secrets_section = _streamlit_section(SECRETS_SECTION)
    if secrets_section:
        overrides = {
            "page_title": secrets_section.get("page_title"),
            "currency_symbol": secrets_section.get("currency_symbol"),
            "decimal_separator": secrets_section.get("decimal_separator"),
            "thousands_separator": secrets_section.get("thousands_separator"),
            "log_level": secrets_section.get("log_level"),
        }

    return Settings(**{k: v for k, v in overrides.items() if v is not None})
