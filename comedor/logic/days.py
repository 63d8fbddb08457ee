"""Weekday names and week arithmetic.

Two spellings of the same week coexist in stored data: the display form used
by the admin screens ("Miércoles") and the canonical form used as keys by the
coordinator screens ("miercoles"). Every comparison happens on the canonical
form; conversion back to display is a position lookup in the aligned tuples
from `comedor.utilities.constants`.
"""
from __future__ import annotations
import re
from datetime import date, datetime, timedelta
from typing import Any, Optional

from comedor.utilities.constants import (
    DAYS_DISPLAY, DAYS_CANONICAL, DATE_FORMAT, DATE_DISPLAY_FORMAT
)
from comedor.utilities.text import normalize_text

__all__ = [
    "InvalidDate", "to_canonical", "to_display", "days_equal", "is_canonical_day",
    "day_of_week_name", "parse_date", "monday_of", "week_id", "format_date_display",
    "is_valid_date_string", "week_range",
]

ISO_DATE_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}$')


class InvalidDate(ValueError):
    """Raised when a value cannot be interpreted as a calendar date."""


def to_canonical(day: Any) -> str:
    # Unknown names come back normalized but otherwise untouched
    return normalize_text(day)


def to_display(day: Any) -> str:
    """Display spelling of `day`, or `day` itself when it is not a weekday name."""
    if day is None:
        return ""
    canonical = normalize_text(day)
    if canonical in DAYS_CANONICAL:
        return DAYS_DISPLAY[DAYS_CANONICAL.index(canonical)]
    return day


def days_equal(a: Any, b: Any) -> bool:
    """True when both names are present and spell the same day."""
    if a is None or b is None:
        return False
    return normalize_text(a) == normalize_text(b)


def is_canonical_day(value: Any) -> bool:
    return isinstance(value, str) and value in DAYS_CANONICAL


def parse_date(value: Any) -> date:
    """Accept a date, datetime, 'YYYY-MM-DD' or 'DD/MM/YYYY' string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        txt = value.strip()
        for fmt in (DATE_FORMAT, DATE_DISPLAY_FORMAT):
            try:
                return datetime.strptime(txt, fmt).date()
            except ValueError:
                pass
    raise InvalidDate(f"Fecha no válida: {value!r}")


def day_of_week_name(value: Any) -> str:
    """Display name of the weekday `value` falls on. Raises InvalidDate."""
    return DAYS_DISPLAY[parse_date(value).weekday()]


def monday_of(value: Optional[Any] = None) -> date:
    """Monday of the week containing `value` (today when omitted)."""
    d = date.today() if value is None else parse_date(value)
    return d - timedelta(days=d.weekday())


def week_id(value: Any) -> str:
    return monday_of(value).strftime(DATE_FORMAT)


def format_date_display(value: Any) -> str:
    return parse_date(value).strftime(DATE_DISPLAY_FORMAT)


def is_valid_date_string(value: Any) -> bool:
    """Strict YYYY-MM-DD check that also rejects impossible days like 2023-02-31."""
    if not isinstance(value, str) or not ISO_DATE_PATTERN.match(value):
        return False
    try:
        datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        return False
    return True


def week_range(monday: Any) -> dict:
    start = monday_of(monday)
    end = start + timedelta(days=6)
    start_display = start.strftime(DATE_DISPLAY_FORMAT)
    end_display = end.strftime(DATE_DISPLAY_FORMAT)
    return {
        "start_iso": start.strftime(DATE_FORMAT),
        "end_iso": end.strftime(DATE_FORMAT),
        "start_display": start_display,
        "end_display": end_display,
        "display_text": f"Semana del {start_display} al {end_display}",
    }
