"""Formatting helpers for MonthEnd summaries.

Display only: nothing returned here is ever parsed back into the engine.
"""

from __future__ import annotations

__all__ = ["format_compact", "format_currency"]

_COMPACT_STEPS: tuple[tuple[float, str], ...] = (
    (1e9, "B"),
    (1e6, "M"),
    (1e3, "K"),
)


def format_currency(
    value: float,
    symbol: str = "R$",
    decimal_separator: str = ",",
    thousands_separator: str = ".",
) -> str:
    sign = "-" if value < 0 else ""
    whole, cents = f"{abs(value):,.2f}".split(".")
    whole = whole.replace(",", thousands_separator)
    prefix = f"{symbol} " if symbol else ""
    return f"{sign}{prefix}{whole}{decimal_separator}{cents}"


def format_compact(value: float, decimal_separator: str = ",") -> str:
    """Short label such as ``1,2K`` with at most one fractional digit."""

    magnitude = abs(value)
    suffix = ""
    for threshold, label in _COMPACT_STEPS:
        if magnitude >= threshold:
            value = value / threshold
            suffix = label
            break

    text = f"{value:.1f}".rstrip("0").rstrip(".")
    if text == "-0":
        text = "0"
    return f"{text.replace('.', decimal_separator)}{suffix}"
