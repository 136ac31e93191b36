"""
Jalali format codes and parse layouts.

    Format  Description                                             Example
    ------  ------------------------------------------------------  -----------
      r     Jalali day of the month without leading zeros           1 to 31
      R     Jalali day of the month, 2 digits with leading zeros    01 to 31
      q     Jalali month number without leading zeros               1 to 12
      Q     Jalali month number, 2 digits with leading zeros        01 to 12
      e     Full Jalali month name                                  Farvardin to Esfand
      b     Jalali year, 2 digits                                   89 or 60
      B     Jalali year, 4 digits                                   1389 or 1360
      l     Full weekday name                                       Sunday

Any other character is copied as-is; a backslash escapes the next one.

    >>> format_jalali(date(2010, 9, 5), "B/Q/R")
    '1389/06/14'
    >>> format_jalali(date(2010, 9, 5), "l, r e B")
    'Sunday, 14 Shahrivar 1389'

Parsing accepts only the enumerated layouts in `PARSE_LAYOUTS`; fields the
layout leaves out are taken from today's Jalali date. A 2-digit year (`b`) is
always read as 13xx.
"""
import logging
from dataclasses import dataclass, field
from datetime import date, datetime
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Optional

from jalali_calendar.engine import convert_to_jalali, parse_jalali
from jalali_calendar.localization import JalaliLocale, get_locale
from jalali_calendar.types.date_types import FormatRule
from jalali_calendar.utils.date_utils import normalize_digits, to_persian_digits

logger = logging.getLogger(__name__)

JALALI_FORMAT = "Jalali"
CANONICAL_LAYOUT = "B/Q/R"
TWO_DIGIT_YEAR_PREFIX = "13"

DEFAULT_FORMAT_CODES: Mapping[str, FormatRule] = MappingProxyType({
    "r": lambda j, value, loc: str(j.day),
    "R": lambda j, value, loc: f"{j.day:02d}",
    "q": lambda j, value, loc: str(j.month),
    "Q": lambda j, value, loc: f"{j.month:02d}",
    "e": lambda j, value, loc: loc.month_name(j.month),
    "b": lambda j, value, loc: str(j.year)[2:4],
    "B": lambda j, value, loc: str(j.year),
    "l": lambda j, value, loc: loc.day_name(value),
})

PARSE_LAYOUTS = frozenset({
    JALALI_FORMAT,
    "B/Q/R", "B/q/r", "b/q/r", "b/Q/R",
    "B", "b", "q", "Q", "r", "R",
    "b/q", "B/q", "B/Q", "b/Q",
    "q/r", "Q/r", "Q/R", "q/R",
})

_FIELD_OF_CODE = {"B": "year", "b": "year", "q": "month", "Q": "month", "r": "day", "R": "day"}


@dataclass(frozen=True)
class JalaliFormatter:
    """
    Formats and parses Jalali dates with a given code table and locale.

    Instances are immutable; `with_codes` / `with_locale` return new ones, so a
    formatter can be shared freely.
    """
    locale: JalaliLocale = field(default_factory=get_locale)
    codes: Mapping[str, FormatRule] = field(default_factory=lambda: DEFAULT_FORMAT_CODES, hash=False)

    def with_codes(self, **rules: FormatRule) -> "JalaliFormatter":
        merged: Dict[str, FormatRule] = dict(self.codes)
        merged.update(rules)
        return JalaliFormatter(locale=self.locale, codes=MappingProxyType(merged))

    def with_locale(self, locale: JalaliLocale) -> "JalaliFormatter":
        return JalaliFormatter(locale=locale, codes=self.codes)

    # ---- formatting -----------------------------------------------------
    def format(self, value: date, fmt: str = JALALI_FORMAT) -> str:
        if fmt == JALALI_FORMAT:
            fmt = CANONICAL_LAYOUT
        j = convert_to_jalali(value)
        out = []
        escaped = False
        for ch in fmt:
            if escaped:
                out.append(ch)
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch in self.codes:
                rendered = self.codes[ch](j, value, self.locale)
                out.append(to_persian_digits(rendered) if self.locale.native_digits else rendered)
            else:
                out.append(ch)
        return "".join(out)

    # ---- parsing --------------------------------------------------------
    def parse(
        self,
        value: str,
        layout: str = CANONICAL_LAYOUT,
        strict: bool = False,
        today: Optional[date] = None,
    ) -> Optional[datetime]:
        """
        Parse `value` laid out as `layout`. Returns None when it does not fit.
        Unknown layouts raise ValueError.
        """
        if layout not in PARSE_LAYOUTS:
            raise ValueError(f"Unsupported Jalali parse layout {layout!r}")
        if layout == JALALI_FORMAT:
            layout = CANONICAL_LAYOUT
        if not isinstance(value, str):
            return None

        parts = normalize_digits(value.strip()).split("/")
        codes = layout.split("/")
        if len(parts) != len(codes):
            logger.debug("🧩 parse: %r does not fit layout %s", value, layout)
            return None

        now = convert_to_jalali(today or date.today())
        fields = {"year": str(now.year), "month": str(now.month), "day": str(now.day)}
        for code, part in zip(codes, parts):
            part = part.strip()
            fields[_FIELD_OF_CODE[code]] = TWO_DIGIT_YEAR_PREFIX + part if code == "b" else part

        return parse_jalali(f"{fields['year']}/{fields['month']}/{fields['day']}", strict)

    def parse_any(
        self,
        value: str,
        strict: bool = False,
        today: Optional[date] = None,
        layouts: Optional[Iterable[str]] = None,
    ) -> Optional[datetime]:
        """Try the locale's alternative layouts in order; first match wins."""
        for layout in layouts or self.locale.alt_formats:
            result = self.parse(value, layout, strict=strict, today=today)
            if result is not None:
                return result
        logger.debug("🧩 parse_any: no layout matched %r", value)
        return None


def format_jalali(value: date, fmt: str = JALALI_FORMAT, formatter: Optional[JalaliFormatter] = None) -> str:
    return (formatter or JalaliFormatter()).format(value, fmt)


def parse_jalali_format(
    value: str,
    layout: str = CANONICAL_LAYOUT,
    strict: bool = False,
    formatter: Optional[JalaliFormatter] = None,
    today: Optional[date] = None,
) -> Optional[datetime]:
    return (formatter or JalaliFormatter()).parse(value, layout, strict=strict, today=today)
