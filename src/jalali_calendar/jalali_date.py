from dataclasses import dataclass
from datetime import date, datetime
from functools import cached_property
from typing import Optional

import jdatetime as jd

from jalali_calendar.converter import jalali_to_gregorian
from jalali_calendar.engine import (
    add_jalali,
    convert_to_jalali,
    get_jalali_days_in_month,
    get_jalali_first_date_of_month,
    is_jalali_leap_year,
    is_jalali_valid,
    parse_jalali,
)
from jalali_calendar.formatting import JALALI_FORMAT, JalaliFormatter
from jalali_calendar.types.date_types import Interval, JalaliTriple


def _as_date(value: date) -> date:
    return value.date() if isinstance(value, datetime) else value


@dataclass(frozen=True, order=True)
class JalaliDate:
    """
    A calendar day viewed in the Jalali calendar.

    Holds only the Gregorian `date`; the Jalali triple is computed on first
    access and kept. The value never changes, so the kept triple cannot go stale.
    """
    gregorian: date

    def __post_init__(self):
        object.__setattr__(self, "gregorian", _as_date(self.gregorian))

    # ---- constructors ---------------------------------------------------
    @classmethod
    def of(cls, year: int, month: int, day: int) -> "JalaliDate":
        """From a Jalali triple (1-based month). Raises ValueError if it does not exist."""
        if not is_jalali_valid(year, month, day):
            raise ValueError(f"Invalid Jalali date {year}/{month}/{day}")
        return cls(date(*jalali_to_gregorian(year, month, day)))

    @classmethod
    def from_gregorian(cls, value: date) -> "JalaliDate":
        return cls(value)

    @classmethod
    def today(cls) -> "JalaliDate":
        return cls(date.today())

    @classmethod
    def parse(cls, text: str, strict: bool = True) -> Optional["JalaliDate"]:
        parsed = parse_jalali(text, strict)
        return cls(parsed) if parsed is not None else None

    @classmethod
    def from_jdatetime(cls, value: jd.date) -> "JalaliDate":
        return cls(value.togregorian())

    # ---- Jalali fields --------------------------------------------------
    @cached_property
    def triple(self) -> JalaliTriple:
        return convert_to_jalali(self.gregorian)

    @property
    def year(self) -> int:
        return self.triple.year

    @property
    def month(self) -> int:
        """1-based."""
        return self.triple.month

    @property
    def day(self) -> int:
        return self.triple.day

    @property
    def is_leap_year(self) -> bool:
        return is_jalali_leap_year(self.year)

    @property
    def days_in_month(self) -> int:
        return get_jalali_days_in_month(self.gregorian)

    def weekday_name(self, formatter: Optional[JalaliFormatter] = None) -> str:
        return (formatter or JalaliFormatter()).locale.day_name(self.gregorian)

    # ---- operations -----------------------------------------------------
    def add(self, interval: Interval, amount: int) -> "JalaliDate":
        return JalaliDate(add_jalali(self.gregorian, interval, amount))

    def first_of_month(self) -> "JalaliDate":
        return JalaliDate(get_jalali_first_date_of_month(self.gregorian))

    def format(self, fmt: str = JALALI_FORMAT, formatter: Optional[JalaliFormatter] = None) -> str:
        return (formatter or JalaliFormatter()).format(self.gregorian, fmt)

    def to_jdatetime(self) -> jd.date:
        return jd.date(self.year, self.month, self.day)

    def __str__(self) -> str:
        j = self.triple
        return f"{j.year}/{j.month:02d}/{j.day:02d}"
