import logging
from datetime import date
from typing import Optional

from jalali_calendar.engine import convert_to_jalali, is_jalali_leap_year
from jalali_calendar.formatting import JalaliFormatter
from jalali_calendar.logging_setup import setup_logging
from jalali_calendar.utils.date_utils import normalize_digits

logger = logging.getLogger(__name__)


def describe(text: str, formatter: JalaliFormatter) -> Optional[str]:
    """
    "2010-09-05" → Jalali, anything in the locale's Jalali layouts → Gregorian.
    Returns None if the input is neither.
    """
    raw = normalize_digits(text.strip())
    if "-" in raw:
        try:
            g = date.fromisoformat(raw)
        except ValueError:
            return None
    else:
        parsed = formatter.parse_any(raw, strict=True)
        if parsed is None:
            return None
        g = parsed.date()

    j = convert_to_jalali(g)
    leap = " (leap year)" if is_jalali_leap_year(j.year) else ""
    return (
        f"Gregorian: {g.isoformat()}\n"
        f"Jalali   : {formatter.format(g, 'B/Q/R')}  ({formatter.format(g, 'l, r e B')}){leap}"
    )


def main() -> None:
    setup_logging(console_truncate_len=1000)

    formatter = JalaliFormatter()
    logger.info("📆 locale=%s; enter a Jalali date (1389/06/14) or an ISO Gregorian one (2010-09-05)",
                formatter.locale.name)

    while True:
        try:
            text = input("\nDate> ")
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if not text.strip():
            continue

        result = describe(text, formatter)
        if result is None:
            print(f"⚠️ {formatter.locale.label('invalid_text', text, formatter.locale.default_format)}")
        else:
            print(result)


if __name__ == "__main__":
    main()
