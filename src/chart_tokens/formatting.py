"""Number and text formatting for axes, tooltips and labels.

Locale-specific rendering (grouping, currency symbols, month names) is
delegated to Babel. Every numeric formatter returns ``"N/A"`` for infinite
or NaN input instead of raising.
"""

from __future__ import annotations

import math
import numbers
import os
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from typing import Literal, Union

from babel import Locale
from babel.dates import format_date as _babel_date
from babel.dates import format_skeleton, format_time
from babel.numbers import format_compact_decimal
from babel.numbers import format_currency as _babel_currency
from babel.numbers import format_decimal

from ._numeric import clamp, round_half_up
from .errors import UnknownVariant

DEFAULT_LOCALE = os.environ.get("CHART_TOKENS_LOCALE", "en_US")

NOT_AVAILABLE = "N/A"
ELLIPSIS = "..."

DateKind = Literal["short", "medium", "long", "time"]
DateLike = Union[date, datetime, str, int, float]

# CLDR skeletons; Babel picks the locale's field order and separators.
# "long" uses the locale's own long date pattern instead.
DATE_SKELETONS = {
    "short": "MMMd",
    "medium": "yMMMd",
}

# Largest unit first
ABBREVIATIONS = (
    (1e12, "T"),
    (1e9, "B"),
    (1e6, "M"),
    (1e3, "K"),
)


@dataclass(frozen=True)
class SmartNumberOptions:
    """Options for :func:`format_smart_number`.

    abbreviate: use K/M/B/T (and fixed point for tiny values) outside 0.01-1000
    decimals: maximum fraction digits
    locale: Babel locale identifier, ``en_US`` or ``en-US``
    """

    abbreviate: bool = True
    decimals: int = 1
    locale: str = DEFAULT_LOCALE


@dataclass(frozen=True)
class MonospaceNumber:
    value: str
    monospace: bool = True


def _locale(identifier: str) -> Locale:
    return Locale.parse(identifier.replace("-", "_"))


def _finite(value: float) -> bool:
    return isinstance(value, numbers.Real) and math.isfinite(value)


def format_number_abbreviated(value: float, precision: int = 1) -> str:
    """``1234567`` -> ``"1.2M"``, ``-1500`` -> ``"-1.5K"``, ``999`` -> ``"999.0"``."""
    if not _finite(value):
        return NOT_AVAILABLE
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    magnitude = abs(value)
    for threshold, suffix in ABBREVIATIONS:
        if magnitude >= threshold:
            return f"{sign}{magnitude / threshold:.{precision}f}{suffix}"
    return f"{sign}{magnitude:.{precision}f}"


def format_number(
    value: float,
    locale: str = DEFAULT_LOCALE,
    *,
    min_fraction_digits: int = 0,
    max_fraction_digits: int = 3,
) -> str:
    """Locale-grouped number, e.g. ``1,234.56`` (en_US) or ``1.234,56`` (de_DE)."""
    if not _finite(value):
        return NOT_AVAILABLE
    max_fraction_digits = max(max_fraction_digits, min_fraction_digits)
    pattern = "#,##0"
    if max_fraction_digits > 0:
        optional = max_fraction_digits - min_fraction_digits
        pattern += "." + "0" * min_fraction_digits + "#" * optional
    return format_decimal(value, format=pattern, locale=_locale(locale))


def format_percentage(value: float, precision: int = 0, as_decimal: bool = True) -> str:
    """``0.75`` -> ``"75%"``; pass ``as_decimal=False`` when value is already 0-100."""
    if not _finite(value):
        return NOT_AVAILABLE
    percent = value * 100 if as_decimal else value
    return f"{percent:.{precision}f}%"


def format_currency(value: float, currency: str = "USD", locale: str = DEFAULT_LOCALE) -> str:
    """``1234.56`` -> ``"$1,234.56"`` in en_US, ``"1.234,56 €"`` for EUR in de_DE."""
    if not _finite(value):
        return NOT_AVAILABLE
    return _babel_currency(value, currency, locale=_locale(locale))


def _to_datetime(value: DateLike) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time())
    if isinstance(value, str):
        return datetime.fromisoformat(value)
    return datetime.fromtimestamp(value, tz=timezone.utc)


def format_date(value: DateLike, kind: DateKind = "short", locale: str = DEFAULT_LOCALE) -> str:
    """Format a date for an axis label.

    ``short`` is month and day (``Jan 5``), ``medium`` adds the year
    (``Jan 5, 2024``), ``long`` spells out the month (``January 5, 2024``) and
    ``time`` is hour and minute. Numbers are POSIX timestamps in seconds, UTC.
    """
    moment = _to_datetime(value)
    if kind == "time":
        return format_time(moment, format="short", locale=_locale(locale))
    if kind == "long":
        return _babel_date(moment, format="long", locale=_locale(locale))
    try:
        skeleton = DATE_SKELETONS[kind]
    except KeyError:
        raise UnknownVariant("date format", kind, (*DATE_SKELETONS, "long", "time")) from None
    return format_skeleton(skeleton, moment, locale=_locale(locale))


def truncate_text(text: str, max_length: int) -> str:
    """Cut ``text`` to ``max_length`` characters, ending in an ellipsis."""
    if max_length <= len(ELLIPSIS):
        return ELLIPSIS
    if len(text) <= max_length:
        return text
    return text[: max_length - len(ELLIPSIS)] + ELLIPSIS


def get_responsive_font_size(
    container_width: float,
    base_size: float,
    reference_width: float = 800,
) -> int:
    """Scale ``base_size`` with the container, between 70% and 130%."""
    scale = clamp(container_width / reference_width, 0.7, 1.3)
    return round_half_up(base_size * scale)


def format_monospace_number(value: float, decimals: int = 2) -> MonospaceNumber:
    """Fixed-point value for tabular tooltip columns."""
    if not _finite(value):
        return MonospaceNumber(NOT_AVAILABLE)
    return MonospaceNumber(f"{value:.{decimals}f}")


def format_compact_number(value: float, locale: str = DEFAULT_LOCALE) -> str:
    """Locale compact notation: ``1.2M`` in en_US, ``1,2 Mio.`` in de_DE."""
    if not _finite(value):
        return NOT_AVAILABLE
    return format_compact_decimal(value, format_type="short", fraction_digits=1, locale=_locale(locale))


def format_smart_number(value: float, options: SmartNumberOptions | None = None) -> str:
    """Pick the most readable representation for ``value``.

    Large (>= 1000) and tiny (< 0.01) magnitudes are abbreviated unless
    ``options.abbreviate`` is off; everything else is locale-formatted with up
    to ``options.decimals`` fraction digits.
    """
    opts = options or SmartNumberOptions()
    if not _finite(value):
        return NOT_AVAILABLE
    if value == 0:
        return "0"
    if opts.abbreviate and (abs(value) >= 1000 or abs(value) < 0.01):
        return format_number_abbreviated(value, opts.decimals)
    return format_number(value, opts.locale, min_fraction_digits=0, max_fraction_digits=opts.decimals)
