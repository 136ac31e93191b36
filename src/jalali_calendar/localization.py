"""
Replaceable name and label tables for Jalali dates.

A `JalaliLocale` is handed to `JalaliFormatter` (and to UI code) explicitly.
To translate, build a new locale, e.g. `dataclasses.replace(ENGLISH, ...)`,
and optionally `register_locale()` it; nothing here is mutated in place.
"""
import os
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

logger = logging.getLogger(__name__)

LOCALE_ENV_VAR = "JALALI_LOCALE"
DEFAULT_LOCALE_NAME = "en"

DEFAULT_ALT_FORMATS: Tuple[str, ...] = (
    "B/Q/R", "B/q/r", "b/q/r", "b/Q/R", "q/r", "Q/R", "Q/r", "q/R", "r", "R",
)


@dataclass(frozen=True)
class JalaliLocale:
    name: str
    month_names: Tuple[str, ...]
    day_names: Tuple[str, ...]                    # Sunday first
    labels: Mapping[str, str] = field(default_factory=dict, hash=False)
    start_day: int = 0                            # index into day_names
    default_format: str = "B/Q/R"
    alt_formats: Tuple[str, ...] = DEFAULT_ALT_FORMATS
    native_digits: bool = False

    def __post_init__(self):
        if len(self.month_names) != 12:
            raise ValueError(f"locale {self.name!r}: expected 12 month names, got {len(self.month_names)}")
        if len(self.day_names) != 7:
            raise ValueError(f"locale {self.name!r}: expected 7 day names, got {len(self.day_names)}")
        if not 0 <= self.start_day < 7:
            raise ValueError(f"locale {self.name!r}: start_day must be in 0..6")
        # freeze caller-supplied containers
        object.__setattr__(self, "month_names", tuple(self.month_names))
        object.__setattr__(self, "day_names", tuple(self.day_names))
        object.__setattr__(self, "alt_formats", tuple(self.alt_formats))
        object.__setattr__(self, "labels", MappingProxyType(dict(self.labels)))

    def month_name(self, month: int) -> str:
        """`month` is 1-based."""
        return self.month_names[month - 1]

    def day_name(self, value) -> str:
        """Weekday name of a date (Python's Monday=0 mapped to Sunday-first)."""
        return self.day_names[(value.weekday() + 1) % 7]

    def ordered_day_names(self) -> Tuple[str, ...]:
        """Day names rotated so the week starts at `start_day`."""
        return self.day_names[self.start_day:] + self.day_names[: self.start_day]

    def label(self, key: str, *args) -> str:
        """Label text with `{0}`-style placeholders filled; the key itself if missing."""
        text = self.labels.get(key, key)
        return text.format(*args) if args else text


ENGLISH = JalaliLocale(
    name="en",
    month_names=(
        "Farvardin", "Ordibehesht", "Khordad", "Tir", "Amordad", "Shahrivar",
        "Mehr", "Aban", "Azar", "Dey", "Bahman", "Esfand",
    ),
    day_names=("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday"),
    labels={
        "today_text": "Today",
        "ok_text": "OK",
        "cancel_text": "Cancel",
        "today_tip": "{0} (Spacebar)",
        "min_text": "This date is before the minimum date",
        "max_text": "This date is after the maximum date",
        "min_field_text": "The date in this field must be equal to or after {0}",
        "max_field_text": "The date in this field must be equal to or before {0}",
        "invalid_text": "{0} is not a valid date - it must be in the format {1}",
        "disabled_days_text": "Disabled",
        "disabled_dates_text": "Disabled",
        "next_text": "Next Month (Control+Right)",
        "prev_text": "Previous Month (Control+Left)",
        "month_year_text": "Choose a month (Control+Up/Down to move years)",
    },
)

PERSIAN = JalaliLocale(
    name="fa",
    month_names=(
        "فروردین", "اردیبهشت", "خرداد", "تیر", "امرداد", "شهریور",
        "مهر", "آبان", "آذر", "دی", "بهمن", "اسفند",
    ),
    day_names=("یکشنبه", "دوشنبه", "سه‌شنبه", "چهارشنبه", "پنج‌شنبه", "آدینه", "شنبه"),
    labels={
        "today_text": "امروز",
        "ok_text": "ادامه",
        "cancel_text": "برگشت",
        "today_tip": "{0} (جای خالی)",
        "min_text": "این تاریخ پیش از نخستین تاریخ است",
        "max_text": "این تاریخ پس از آخرین تاریخ است",
        "min_field_text": "باید تاریخ‌های پس از {0} را برگزینید",
        "max_field_text": "باید تاریخ‌های پیش از {0} را برگزینید",
        "invalid_text": "{0} تاریخ درستی نیست، باید در قالب «سال/ماه/روز» باشد",
        "disabled_days_text": "غیرفعال",
        "disabled_dates_text": "غیرفعال",
        "next_text": "ماه پسین (مهار+راست)",
        "prev_text": "ماه پیشین (مهار+چپ)",
        "month_year_text": "ماه را انتخاب کنید (جابجایی سال با مهار+بالا/پایین)",
    },
    start_day=6,
)

_REGISTRY: Dict[str, JalaliLocale] = {ENGLISH.name: ENGLISH, PERSIAN.name: PERSIAN}


def register_locale(locale: JalaliLocale) -> JalaliLocale:
    logger.debug("🌐 register_locale: %s", locale.name)
    _REGISTRY[locale.name] = locale
    return locale


def get_locale(name: Optional[str] = None) -> JalaliLocale:
    """
    Look up a registered locale. Without a name, `JALALI_LOCALE` from the
    environment decides (default "en").

    An unknown `name` raises KeyError. An unknown environment value only logs a
    warning and falls back to the default locale.
    """
    if name:
        try:
            return _REGISTRY[name]
        except KeyError:
            raise KeyError(f"Unknown Jalali locale {name!r}; registered: {sorted(_REGISTRY)}") from None

    env_name = os.getenv(LOCALE_ENV_VAR)
    if env_name and env_name not in _REGISTRY:
        logger.warning(
            "⚠️ %s=%r is not a registered locale (%s); using %r",
            LOCALE_ENV_VAR, env_name, sorted(_REGISTRY), DEFAULT_LOCALE_NAME,
        )
        env_name = None
    return _REGISTRY[env_name or DEFAULT_LOCALE_NAME]
