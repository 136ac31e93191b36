import logging
from datetime import date

import pytest

from jalali_calendar.formatting import JalaliFormatter
from jalali_calendar.localization import ENGLISH, LOCALE_ENV_VAR, PERSIAN
from jalali_calendar.logging_setup import LOG_LEVEL_ENV_VAR


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Tests never depend on the caller's locale / log level settings."""
    monkeypatch.delenv(LOCALE_ENV_VAR, raising=False)
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.fixture
def reference_day():
    """2010-09-05 is Sunday, 14 Shahrivar 1389."""
    return date(2010, 9, 5)


@pytest.fixture
def en_formatter():
    return JalaliFormatter(locale=ENGLISH)


@pytest.fixture
def fa_formatter():
    return JalaliFormatter(locale=PERSIAN)


@pytest.fixture
def restore_root_logging():
    """Drop handlers added by setup_logging and restore the root level."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(level)
