"""Tolerant parsing of free-text money and day fields."""

from __future__ import annotations

import math
import re
from typing import Final

__all__ = ["parse_day", "parse_money_input", "parse_optional_money"]


_NON_NUMERIC: Final[re.Pattern[str]] = re.compile(r"[^0-9,.\-]")
_INTEGER_PREFIX: Final[re.Pattern[str]] = re.compile(r"^[+-]?[0-9]+")
_FLOAT_PREFIX: Final[re.Pattern[str]] = re.compile(r"^-?([0-9]+\.?[0-9]*|\.[0-9]+)")


def parse_money_input(text: str | None) -> float:
    """Return the float typed into a money field, or ``0.0`` when unreadable.

    Everything except digits, commas, periods and minus signs is dropped, and
    the first comma is read as the decimal separator (``"R$ 12,50"`` -> 12.5).
    """

    if not text:
        return 0.0

    normalized = _NON_NUMERIC.sub("", text).replace(",", ".", 1)
    try:
        value = float(normalized)
    except ValueError:
        value = _leading_float(normalized)

    if not math.isfinite(value):
        return 0.0
    return value


def parse_optional_money(text: str | None) -> float | None:
    if text is None or not text.strip():
        return None
    return parse_money_input(text)


def parse_day(text: str | int | None) -> int | None:
    """Parse a base-10 day number, ignoring any trailing non-digit characters."""

    if text is None:
        return None
    if isinstance(text, int):
        return text

    match = _INTEGER_PREFIX.match(text.strip())
    if match is None:
        return None
    return int(match.group(0), 10)


def _leading_float(text: str) -> float:
    # "12.5.3" or "1-2" still yield their longest numeric prefix
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return 0.0
    return float(match.group(0))
