from datetime import date, timedelta
from typing import Tuple

from jalali_calendar.converter import jalali_to_gregorian
from jalali_calendar.engine import MAX_JALALI_YEAR, MIN_JALALI_YEAR

# Language & digit normalization

PERSIAN_DIGITS = dict(zip("۰۱۲۳۴۵۶۷۸۹", "0123456789"))
ARABIC_INDIC_DIGITS = dict(zip("٠١٢٣٤٥٦٧٨٩", "0123456789"))

_TO_ASCII = str.maketrans({**PERSIAN_DIGITS, **ARABIC_INDIC_DIGITS})
_TO_PERSIAN = str.maketrans({v: k for k, v in PERSIAN_DIGITS.items()})


def normalize_digits(s: str) -> str:
    """Persian / Arabic-Indic digits → ASCII; everything else untouched."""
    if not s:
        return s
    return s.translate(_TO_ASCII)


def to_persian_digits(s: str) -> str:
    if not s:
        return s
    return s.translate(_TO_PERSIAN)


# -----------------------------
# Calendar ranges
# -----------------------------

def _check_jalali_year_month(y: int, m: int) -> None:
    if not MIN_JALALI_YEAR <= y <= MAX_JALALI_YEAR:
        raise ValueError(f"Jalali year {y} outside {MIN_JALALI_YEAR}..{MAX_JALALI_YEAR}")
    if not 1 <= m <= 12:
        raise ValueError(f"Jalali month {m} outside 1..12")


def _jalali_first_day(y: int, m: int) -> date:
    return date(*jalali_to_gregorian(y, m, 1))


def gregorian_month_range(y: int, m: int) -> Tuple[date, date]:
    start = date(y, m, 1)
    end = date(y + (m == 12), (m % 12) + 1, 1) - timedelta(days=1)
    return start, end


def jalali_month_range(y: int, m: int) -> Tuple[date, date]:
    """First and last Gregorian day of Jalali month `m` (1-based) of year `y`."""
    _check_jalali_year_month(y, m)
    g_start = _jalali_first_day(y, m)
    g_end = _jalali_first_day(y + (m == 12), (m % 12) + 1) - timedelta(days=1)
    return g_start, g_end


def jalali_year_range(y: int) -> Tuple[date, date]:
    _check_jalali_year_month(y, 1)
    g_start = _jalali_first_day(y, 1)
    g_end = _jalali_first_day(y + 1, 1) - timedelta(days=1)
    return g_start, g_end
