"""
Formatting helpers for dashboard display.

Currency and date rendering use Babel's CLDR data so output follows each
locale's conventions.

Key behaviors:
- Currency amounts arrive in minor units (cents) and are divided by 100
- Dates render as "day month(abbrev) year" (e.g. "Mar 5, 2024" in en-US)
- Unparseable dates yield INVALID_DATE instead of raising
- Unknown locale tags raise ValueError
"""

from __future__ import annotations

import logging
import re
from datetime import date, datetime
from decimal import Decimal

from babel import Locale, UnknownLocaleError
from babel.dates import format_skeleton
from babel.numbers import format_currency as babel_format_currency

logger = logging.getLogger(__name__)

# --- Constants ---

DEFAULT_LOCALE = "en-US"
DEFAULT_CURRENCY = "USD"
MINOR_UNITS_PER_MAJOR = 100

INVALID_DATE = "Invalid Date"

# day: numeric, month: short, year: numeric
DATE_SKELETON = "yMMMd"

_DIGIT_GROUPS = re.compile(r"\B(?=(\d{3})+(?!\d))")

_ORDINAL_SUFFIXES = {1: "st", 2: "nd", 3: "rd"}


# --- Locale Resolution ---


def resolve_locale(tag: str) -> Locale:
    """
    Resolve a BCP-47 tag ("en-US") or POSIX-style tag ("en_US") to a Locale.

    Raises:
        ValueError: If the tag is malformed or has no locale data.
    """
    try:
        return Locale.parse(tag.replace("-", "_"))
    except (UnknownLocaleError, ValueError, TypeError, AttributeError) as e:
        raise ValueError(f"Unknown locale: {tag!r}") from e


# --- Currency ---


def format_currency(amount: int) -> str:
    """
    Format an amount in cents as US dollars.

    >>> format_currency(150)
    '$1.50'
    """
    return format_money(amount, currency=DEFAULT_CURRENCY, locale=DEFAULT_LOCALE)


def format_money(amount: int, *, currency: str, locale: str) -> str:
    """Format minor units in the given currency and locale."""
    major = Decimal(amount) / MINOR_UNITS_PER_MAJOR
    return babel_format_currency(major, currency, locale=resolve_locale(locale))


# --- Dates ---


def parse_date(value: str | date) -> date | None:
    """
    Parse an ISO-8601 date or datetime string into a calendar date.

    Aware datetimes keep the calendar date they were written with; no
    timezone conversion is applied. Returns None if the value cannot be parsed.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None

    try:
        return datetime.fromisoformat(value.strip()).date()
    except ValueError:
        logger.debug("Unparseable date string: %r", value)
        return None


def render_date(value: date, locale: Locale) -> str:
    """Render a calendar date with the short "day month year" skeleton."""
    return format_skeleton(DATE_SKELETON, value, locale=locale)


def format_date_to_local(date_str: str | date, locale: str = DEFAULT_LOCALE) -> str:
    """
    Format a date string as a short localized date.

    >>> format_date_to_local("2024-03-05")
    'Mar 5, 2024'

    Only ISO-8601 strings ("2024-03-05", "2024-03-05T10:00:00Z") and
    date/datetime objects are accepted. Other spellings such as "2024/03/05"
    or "March 5, 2024" return INVALID_DATE, as does any unparseable input.

    Raises:
        ValueError: If the locale is unknown.
    """
    babel_locale = resolve_locale(locale)
    parsed = parse_date(date_str)
    if parsed is None:
        return INVALID_DATE
    return render_date(parsed, babel_locale)


# --- Numbers ---


def format_number_with_commas(num: int | float) -> str:
    """
    Insert thousands separators into the decimal representation of num.

    Only digit runs are touched, so a leading "-" is preserved. Integral
    floats render without a fractional part (1234567.0 -> "1,234,567").
    """
    if isinstance(num, float) and num.is_integer():
        num = int(num)
    return _DIGIT_GROUPS.sub(",", str(num))


def ordinal_suffix(num: int) -> str:
    """Return the English ordinal suffix for num ("st", "nd", "rd", "th")."""
    value = abs(num) % 100
    if 11 <= value <= 13:
        return "th"
    return _ORDINAL_SUFFIXES.get(value % 10, "th")


def to_ordinal(num: int) -> str:
    """Return num with its ordinal suffix, e.g. 22 -> "22nd"."""
    return f"{num}{ordinal_suffix(num)}"


# --- Strings ---


def capitalize_first_letter(text: str) -> str:
    """Uppercase the first character; the remainder is unchanged."""
    return text[:1].upper() + text[1:]
