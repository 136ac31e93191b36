import logging
from datetime import date, datetime
from typing import Optional, Union

from jalali_calendar.converter import gregorian_to_jalali, jalali_to_gregorian
from jalali_calendar.types.date_types import JalaliTriple

logger = logging.getLogger(__name__)

DAY = "day"
MONTH = "month"
YEAR = "year"

MIN_JALALI_YEAR = 1
MAX_JALALI_YEAR = 1500

# hour used for dates built from Jalali fields, away from any DST switch
NEUTRAL_HOUR = 12


# ───────────────────────────  Validation  ─────────────────────────────── #

def _in_bounds(y: int, m: int, d: int) -> bool:
    return (
        MIN_JALALI_YEAR <= y <= MAX_JALALI_YEAR
        and 1 <= m <= 12
        and 1 <= d <= 31
    )


def is_jalali_valid(y: int, m: int, d: int) -> bool:
    """
    True if (y, m, d) names a real Jalali day. `m` is 1-based.

    Impossible days such as 30 Esfand of a common year do not survive the
    Jalali → Gregorian → Jalali round trip, so no leap table is needed.
    """
    if not _in_bounds(y, m, d):
        return False
    return gregorian_to_jalali(*jalali_to_gregorian(y, m, d)) == (y, m, d)


def is_jalali_leap_year(value: Union[int, date]) -> bool:
    """Accepts a Jalali year or a civil date (whose Jalali year is used)."""
    year = convert_to_jalali(value).year if isinstance(value, date) else value
    return is_jalali_valid(year, 12, 30)


def correct_jalali_date_of_month(year: int, month: int, day: int) -> int:
    """
    Clamp `day` so it exists in the given Jalali month. `month` is 0-based.
    """
    d = max(1, min(31, day))
    if month == 11 and d > 29:
        d = 30 if is_jalali_leap_year(year) else 29
    elif month > 5 and d > 30:
        d = 30
    return d


# ───────────────────────────  Accessors  ─────────────────────────────── #

def convert_to_jalali(value: date) -> JalaliTriple:
    """Jalali triple (1-based month) of a date; a datetime's time is ignored."""
    return gregorian_to_jalali(value.year, value.month, value.day)


def get_jalali_full_year(value: date) -> int:
    return convert_to_jalali(value).year


def get_jalali_month(value: date) -> int:
    """0-based, to match `create_jalali`."""
    return convert_to_jalali(value).month - 1


def get_jalali_date(value: date) -> int:
    return convert_to_jalali(value).day


# ───────────────────────────  Construction  ─────────────────────────────── #

def create_jalali(year: int, month: int, day: int) -> datetime:
    """
    Datetime for a Jalali year, 0-based month and day, at noon.

    Out-of-range fields roll over (day 0 is the last day of the previous month).
    """
    g = jalali_to_gregorian(year, month + 1, day)
    return datetime(g.year, g.month, g.day, NEUTRAL_HOUR)


def _parse_field(token: str) -> Optional[int]:
    t = token.strip()
    if not t or not t.isdecimal():
        return None
    return int(t)  # int() understands Persian and Arabic-Indic digits too


def parse_jalali(text: Optional[str], strict: bool = False) -> Optional[datetime]:
    """
    Parse "Y/M/D" (like "1389/06/09") into the matching Gregorian datetime.

    Returns None for malformed or out-of-range input. With `strict`, dates that
    do not exist (e.g. "1394/12/30") are rejected instead of rolling over.
    """
    if not isinstance(text, str):
        return None

    parts = text.split("/")
    if len(parts) != 3:
        logger.debug("📅 parse_jalali: %r has %s field(s), expected 3", text, len(parts))
        return None

    jy, jm, jd = (_parse_field(p) for p in parts)
    if jy is None or jm is None or jd is None or not _in_bounds(jy, jm, jd):
        logger.debug("📅 parse_jalali: %r is malformed or out of range", text)
        return None

    result = create_jalali(jy, jm - 1, jd)
    if strict and convert_to_jalali(result) != (jy, jm, jd):
        logger.debug("📅 parse_jalali: %r does not exist (strict)", text)
        return None
    return result


# ───────────────────────────  Arithmetic  ─────────────────────────────── #

def add_jalali(value: date, interval: Optional[str], amount: int):
    """
    Add days, months or years in the Jalali calendar and return a new value.

    Month and year steps clamp the day of month, so 31 Shahrivar + 1 month is
    30 Mehr and 30 Esfand of a leap year + 1 year is 29 Esfand. A datetime keeps
    its time of day.
    """
    if not interval or amount == 0:
        return value.replace()

    kind = interval.lower()
    j = convert_to_jalali(value)
    year, month, day = j.year, j.month - 1, j.day

    if kind == DAY:
        day += amount
    elif kind == MONTH:
        month += amount
        year += month // 12
        month %= 12
        day = correct_jalali_date_of_month(year, month, day)
    elif kind == YEAR:
        year += amount
        day = correct_jalali_date_of_month(year, month, day)
    else:
        raise ValueError(f"Unsupported interval {interval!r}; expected one of day, month, year")

    g = jalali_to_gregorian(year, month + 1, day)
    logger.debug("➕ add_jalali: %s %+d %s → %s/%s/%s", tuple(j), amount, kind, year, month + 1, day)
    return value.replace(year=g.year, month=g.month, day=g.day)


def get_jalali_days_in_month(value: date) -> int:
    j = convert_to_jalali(value)
    if j.month <= 6:
        return 31
    if j.month <= 11:
        return 30
    return 30 if is_jalali_leap_year(j.year) else 29


def get_jalali_first_date_of_month(value: date) -> datetime:
    j = convert_to_jalali(value)
    return create_jalali(j.year, j.month - 1, 1)
