"""
Gregorian <-> Jalali conversion through absolute day numbers.

Both directions count days from 1600-01-01 (Gregorian). The Jalali side is
anchored at 979/01/01, which falls 79 days later, and is decomposed with the
33-year cycle (12053 days, 8 leap years) and its 4-year sub-cycle (1461 days).

Nothing here validates input: any integer triple converts to *some* triple.
Use `jalali_calendar.engine` for checked access.
"""
from typing import List

from jalali_calendar.types.date_types import GregorianTriple, JalaliTriple

GREGORIAN_DAYS_IN_MONTH: List[int] = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]
JALALI_DAYS_IN_MONTH: List[int] = [31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29]

GREGORIAN_EPOCH_YEAR = 1600
JALALI_EPOCH_YEAR = 979
JALALI_EPOCH_OFFSET = 79        # days from 1600-01-01 to 979/01/01

DAYS_IN_33_YEARS = 12053        # 365*33 + 8
DAYS_IN_4_YEARS = 1461          # 365*4 + 1
DAYS_IN_400_YEARS = 146097      # 365*400 + 400/4 - 400/100 + 400/400
DAYS_IN_LEAP_CENTURY = 36525    # 365*100 + 100/4
DAYS_IN_CENTURY = 36524         # 365*100 + 100/4 - 100/100


def div(a: int, b: int) -> int:
    """Floor division, also for negative `a`."""
    return a // b


def remainder(a: int, b: int) -> int:
    """Floor modulo; always in [0, b) for positive `b`."""
    return a - div(a, b) * b


def is_gregorian_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def gregorian_day_number(year: int, month: int, day: int) -> int:
    """Days since 1600-01-01 (proleptic Gregorian)."""
    gy = year - GREGORIAN_EPOCH_YEAR
    day_no = 365 * gy + div(gy + 3, 4) - div(gy + 99, 100) + div(gy + 399, 400)
    day_no += sum(GREGORIAN_DAYS_IN_MONTH[: max(month - 1, 0)])
    if month > 2 and is_gregorian_leap_year(year):
        day_no += 1
    return day_no + day - 1


def jalali_day_number(year: int, month: int, day: int) -> int:
    """Days since 1600-01-01 (proleptic Gregorian) for a Jalali triple."""
    jy = year - JALALI_EPOCH_YEAR
    day_no = 365 * jy + div(jy, 33) * 8 + div(remainder(jy, 33) + 3, 4)
    day_no += sum(JALALI_DAYS_IN_MONTH[: max(month - 1, 0)])
    return day_no + day - 1 + JALALI_EPOCH_OFFSET


def gregorian_to_jalali(year: int, month: int, day: int) -> JalaliTriple:
    j_day_no = gregorian_day_number(year, month, day) - JALALI_EPOCH_OFFSET

    cycles = div(j_day_no, DAYS_IN_33_YEARS)
    j_day_no = remainder(j_day_no, DAYS_IN_33_YEARS)

    jy = JALALI_EPOCH_YEAR + 33 * cycles + 4 * div(j_day_no, DAYS_IN_4_YEARS)
    j_day_no = remainder(j_day_no, DAYS_IN_4_YEARS)

    # the first year of each 4-year sub-cycle is the leap one
    if j_day_no >= 366:
        jy += div(j_day_no - 1, 365)
        j_day_no = remainder(j_day_no - 1, 365)

    i = 0
    while i < 11 and j_day_no >= JALALI_DAYS_IN_MONTH[i]:
        j_day_no -= JALALI_DAYS_IN_MONTH[i]
        i += 1

    return JalaliTriple(jy, i + 1, j_day_no + 1)


def jalali_to_gregorian(year: int, month: int, day: int) -> GregorianTriple:
    g_day_no = jalali_day_number(year, month, day)

    gy = GREGORIAN_EPOCH_YEAR + 400 * div(g_day_no, DAYS_IN_400_YEARS)
    g_day_no = remainder(g_day_no, DAYS_IN_400_YEARS)

    leap = True
    if g_day_no >= DAYS_IN_LEAP_CENTURY:
        # only the first century of a 400-year cycle keeps its leap day
        g_day_no -= 1
        gy += 100 * div(g_day_no, DAYS_IN_CENTURY)
        g_day_no = remainder(g_day_no, DAYS_IN_CENTURY)

        if g_day_no >= 365:
            g_day_no += 1
        else:
            leap = False

    gy += 4 * div(g_day_no, DAYS_IN_4_YEARS)
    g_day_no = remainder(g_day_no, DAYS_IN_4_YEARS)

    if g_day_no >= 366:
        leap = False
        g_day_no -= 1
        gy += div(g_day_no, 365)
        g_day_no = remainder(g_day_no, 365)

    i = 0
    while g_day_no >= _gregorian_month_length(i, leap):
        g_day_no -= _gregorian_month_length(i, leap)
        i += 1

    return GregorianTriple(gy, i + 1, g_day_no + 1)


def _gregorian_month_length(index: int, leap: bool) -> int:
    return GREGORIAN_DAYS_IN_MONTH[index] + (1 if index == 1 and leap else 0)
