"""Locale-aware display formatting for the built-in data renderers.

Locales are BCP 47 tags ("en-US", "de", "fr-CA"). Only the language and,
for dates, the region are consulted; unknown locales format like en-US.
"""

import json
import math
import numbers
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any, Optional

# language -> (group separator, decimal separator)
NUMBER_SEPARATORS = {
    "en": (",", "."),
    "de": (".", ","),
    "es": (".", ","),
    "it": (".", ","),
    "nl": (".", ","),
    "pt": (".", ","),
    "fr": (" ", ","),
    "ru": (" ", ","),
    "pl": (" ", ","),
}

# Fraction digits kept before trailing zeros are dropped
MAX_FRACTION_DIGITS = 3

INVALID_DATE = "Invalid Date"


def _language(locale: Optional[str]) -> str:
    return (locale or "en-US").replace("_", "-").split("-")[0].lower()


def _region(locale: Optional[str]) -> str:
    parts = (locale or "en-US").replace("_", "-").split("-")
    return parts[1].upper() if len(parts) > 1 else ""


def to_number(value: Any) -> Optional[float]:
    """Numeric coercion for display. Returns None when value is not a number.

    None and empty strings count as zero; booleans count as 1 and 0.
    Decimal and other real numbers are converted with float(). Strings with
    digit-group underscores ("1_000") are not numbers.
    """
    if value is None:
        return 0.0
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if isinstance(value, (numbers.Real, Decimal)):
        try:
            number = float(value)
        except OverflowError:
            number = math.inf if value > 0 else -math.inf
        except ValueError:
            return None
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if "_" in text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None
    if math.isnan(number):
        return None
    return number


def format_number(value: Any, locale: Optional[str] = None) -> str:
    """Group and round a number for display; invalid input gives "0"."""
    if isinstance(value, int) and not isinstance(value, bool):
        text = f"{value:,}"
    else:
        number = to_number(value)
        if number is None:
            return "0"
        if math.isinf(number):
            return "∞" if number > 0 else "-∞"
        text = _group(number)

    group, decimal = NUMBER_SEPARATORS.get(_language(locale), NUMBER_SEPARATORS["en"])
    integer, _, fraction = text.partition(".")
    integer = integer.replace(",", group)
    return f"{integer}{decimal}{fraction}" if fraction else integer


def _group(number: float) -> str:
    if number.is_integer():
        return f"{int(number):,}"
    return f"{number:,.{MAX_FRACTION_DIGITS}f}".rstrip("0").rstrip(".")


def to_datetime(value: Any) -> Optional[datetime]:
    """Parse a date-like value. Returns None when it cannot be read as a date.

    Accepts datetime, date, ISO 8601 strings (a trailing "Z" means UTC) and
    epoch milliseconds.
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            return None
    return None


def format_date(moment: datetime, locale: Optional[str] = None) -> str:
    """Short numeric date in the locale's order."""
    language = _language(locale)
    day, month, year = moment.day, moment.month, moment.year
    if language == "en" and _region(locale) in ("", "US"):
        return f"{month}/{day}/{year}"
    if language == "en":
        return f"{day:02d}/{month:02d}/{year}"
    if language == "de":
        return f"{day}.{month}.{year}"
    if language in ("fr", "es", "it", "pt"):
        return f"{day:02d}/{month:02d}/{year}"
    if language == "nl":
        return f"{day}-{month}-{year}"
    return f"{month}/{day}/{year}"


def iso_timestamp(moment: datetime) -> str:
    """ISO 8601 with milliseconds; aware values are shown in UTC with a "Z"."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc).replace(tzinfo=None)
        return moment.isoformat(timespec="milliseconds") + "Z"
    return moment.isoformat(timespec="milliseconds")


def is_truthy(value: Any) -> bool:
    """Truthiness where empty containers count as true and NaN counts as false."""
    if value is None or value is False:
        return False
    if isinstance(value, (int, float)):
        return value == value and value != 0
    if isinstance(value, str):
        return value != ""
    return True


def to_json(value: Any) -> str:
    """Compact JSON text for display."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
