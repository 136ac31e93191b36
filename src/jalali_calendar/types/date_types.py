from typing import Callable, Literal, NamedTuple
from datetime import date

class JalaliTriple(NamedTuple):
    year: int
    month: int          # 1-based
    day: int

class GregorianTriple(NamedTuple):
    year: int
    month: int          # 1-based
    day: int

Interval = Literal["day", "month", "year"]

# (jalali triple, gregorian value, locale) -> rendered text
FormatRule = Callable[[JalaliTriple, date, "JalaliLocale"], str]  # noqa: F821
