from datetime import date, datetime

import pytest

from jalali_calendar.engine import (
    DAY,
    MONTH,
    YEAR,
    add_jalali,
    convert_to_jalali,
    correct_jalali_date_of_month,
    create_jalali,
    get_jalali_date,
    get_jalali_days_in_month,
    get_jalali_first_date_of_month,
    get_jalali_full_year,
    get_jalali_month,
    is_jalali_leap_year,
    is_jalali_valid,
    parse_jalali,
)

LEAP_YEARS = [1375, 1379, 1383, 1387, 1391, 1395, 1399, 1403, 1408]
COMMON_YEARS = [1376, 1377, 1378, 1394, 1396, 1400, 1401, 1402, 1404]


# --------------------------- validation ---------------------------

@pytest.mark.parametrize("triple", [(0, 1, 1), (1, 13, 1), (1, 1, 32), (1501, 1, 1), (1, 0, 1), (1, 1, 0)])
def test_out_of_bounds_triples_are_invalid(triple):
    assert not is_jalali_valid(*triple)


@pytest.mark.parametrize("triple", [(1, 1, 1), (1389, 6, 14), (1395, 12, 30), (1500, 12, 29), (1396, 7, 30)])
def test_existing_days_are_valid(triple):
    assert is_jalali_valid(*triple)


@pytest.mark.parametrize("triple", [(1394, 12, 30), (1396, 7, 31), (1400, 11, 31)])
def test_non_existent_days_are_invalid(triple):
    assert not is_jalali_valid(*triple)


@pytest.mark.parametrize("year", LEAP_YEARS)
def test_known_leap_years(year):
    assert is_jalali_leap_year(year)


@pytest.mark.parametrize("year", COMMON_YEARS)
def test_known_common_years(year):
    assert not is_jalali_leap_year(year)


def test_leap_year_accepts_a_civil_date():
    assert is_jalali_leap_year(date(2017, 1, 1))       # 1395
    assert not is_jalali_leap_year(date(2010, 9, 5))   # 1389


def test_eight_leap_years_in_every_33_year_cycle():
    assert sum(is_jalali_leap_year(y) for y in range(1375, 1408)) == 8


# --------------------------- correction / month length ---------------------------

@pytest.mark.parametrize(
    "year,month,day,expected",
    [
        (1395, 11, 31, 30),     # Esfand, leap
        (1396, 11, 31, 29),     # Esfand, common
        (1396, 11, 30, 29),
        (1396, 6, 31, 30),      # Mehr
        (1396, 10, 31, 30),     # Bahman
        (1396, 5, 31, 31),      # Shahrivar
        (1396, 0, 0, 1),
        (1396, 0, -4, 1),
        (1396, 0, 45, 31),
        (1396, 3, 17, 17),
    ],
)
def test_correct_jalali_date_of_month(year, month, day, expected):
    assert correct_jalali_date_of_month(year, month, day) == expected


@pytest.mark.parametrize("year", [1, 2, 1375, 1389, 1394, 1395, 1403, 1404, 1499, 1500])
def test_days_in_month_matches_clamped_31st(year):
    for month in range(12):
        first = create_jalali(year, month, 1)
        assert get_jalali_days_in_month(first) == correct_jalali_date_of_month(year, month, 31)


def test_days_in_month_values():
    assert get_jalali_days_in_month(date(2010, 9, 5)) == 31                # Shahrivar
    assert get_jalali_days_in_month(create_jalali(1389, 6, 1)) == 30      # Mehr
    assert get_jalali_days_in_month(create_jalali(1395, 11, 1)) == 30     # Esfand, leap
    assert get_jalali_days_in_month(create_jalali(1396, 11, 1)) == 29


# --------------------------- accessors / construction ---------------------------

def test_accessors(reference_day):
    assert convert_to_jalali(reference_day) == (1389, 6, 14)
    assert get_jalali_full_year(reference_day) == 1389
    assert get_jalali_month(reference_day) == 5      # 0-based
    assert get_jalali_date(reference_day) == 14


def test_accessors_ignore_time_of_day():
    assert convert_to_jalali(datetime(2010, 9, 5, 23, 59)) == (1389, 6, 14)


def test_create_jalali_uses_noon():
    assert create_jalali(1389, 5, 14) == datetime(2010, 9, 5, 12)


def test_create_jalali_rolls_over_like_the_converter():
    # Mehr has 30 days
    assert convert_to_jalali(create_jalali(1389, 6, 31)) == (1389, 8, 1)


def test_first_date_of_month(reference_day):
    first = get_jalali_first_date_of_month(reference_day)
    assert first == datetime(2010, 8, 23, 12)
    assert convert_to_jalali(first) == (1389, 6, 1)


# --------------------------- parsing ---------------------------

def test_parse_round_trips_reference_date():
    parsed = parse_jalali("1389/06/14")
    assert parsed == datetime(2010, 9, 5, 12)
    assert parsed.date() == date(2010, 9, 5)


def test_parse_accepts_unpadded_and_persian_digits():
    assert parse_jalali("1389/6/14") == datetime(2010, 9, 5, 12)
    assert parse_jalali("۱۳۸۹/۰۶/۱۴") == datetime(2010, 9, 5, 12)
    assert parse_jalali(" 1389 / 06 / 14 ") == datetime(2010, 9, 5, 12)


@pytest.mark.parametrize(
    "text",
    ["", "1389/06", "1389/06/14/1", "1389-06-14", "abcd/06/14", "1389/x/14", "0/1/1", "1389/13/1", "1389/1/32", "-1/1/1"],
)
def test_parse_rejects_malformed_or_out_of_range(text):
    assert parse_jalali(text) is None


def test_parse_rejects_non_strings():
    assert parse_jalali(None) is None


def test_strict_parse_rejects_non_existent_day():
    assert parse_jalali("1394/12/30", strict=True) is None
    assert parse_jalali("1394/12/29", strict=True) == create_jalali(1394, 11, 29)
    assert parse_jalali("1395/12/30", strict=True) == datetime(2017, 3, 20, 12)


def test_lenient_parse_rolls_over_non_existent_day():
    rolled = parse_jalali("1394/12/30")
    assert convert_to_jalali(rolled) == (1395, 1, 1)


# --------------------------- arithmetic ---------------------------

def _add(y, m0, d, interval, amount):
    return convert_to_jalali(add_jalali(create_jalali(y, m0, d), interval, amount))


def test_add_month_rolls_into_next_year():
    assert _add(1395, 11, 29, MONTH, 1) == (1396, 1, 29)


def test_add_year_clamps_esfand_30():
    assert _add(1395, 11, 30, YEAR, 1) == (1396, 12, 29)
    assert _add(1395, 11, 30, YEAR, 4) == (1399, 12, 30)


@pytest.mark.parametrize(
    "start,amount,expected",
    [
        ((1394, 5, 31), 1, (1394, 7, 30)),     # 31 Shahrivar -> 30 Mehr
        ((1396, 0, 31), -1, (1395, 12, 30)),   # leap Esfand
        ((1397, 0, 31), -1, (1396, 12, 29)),
        ((1396, 0, 15), -13, (1394, 12, 15)),
        ((1396, 0, 15), 24, (1398, 1, 15)),
        ((1396, 6, 30), -6, (1396, 1, 30)),
    ],
)
def test_add_months(start, amount, expected):
    assert _add(*start, MONTH, amount) == expected


@pytest.mark.parametrize(
    "start,amount,expected",
    [
        ((1395, 11, 30), 1, (1396, 1, 1)),
        ((1396, 0, 1), -1, (1395, 12, 30)),
        ((1400, 0, 1), 365, (1401, 1, 1)),
        ((1389, 5, 14), 30, (1389, 7, 13)),
        ((1389, 5, 14), -14, (1389, 5, 31)),
    ],
)
def test_add_days(start, amount, expected):
    assert _add(*start, DAY, amount) == expected


def test_interval_names_are_case_insensitive():
    assert _add(1389, 5, 14, "Month", 1) == (1389, 7, 14)


def test_add_is_non_mutating_and_keeps_type(reference_day):
    result = add_jalali(reference_day, DAY, 1)
    assert reference_day == date(2010, 9, 5)
    assert type(result) is date
    assert result == date(2010, 9, 6)


def test_add_keeps_time_of_day():
    start = datetime(2010, 9, 5, 8, 30)
    assert add_jalali(start, MONTH, 1) == datetime(2010, 10, 6, 8, 30)  # 14 Mehr


@pytest.mark.parametrize("interval,amount", [(DAY, 0), (None, 5), ("", 3)])
def test_add_noop_returns_equal_copy(reference_day, interval, amount):
    assert add_jalali(reference_day, interval, amount) == reference_day


def test_add_unknown_interval_raises(reference_day):
    with pytest.raises(ValueError):
        add_jalali(reference_day, "week", 1)
