import os
import logging
from logging.handlers import RotatingFileHandler
from typing import Iterable, Optional


LOG_FORMAT = "%(asctime)s  [%(levelname)s]  %(name)s › %(message)s"
LOG_DATEFMT = "%H:%M:%S"
LOG_LEVEL_ENV_VAR = "JALALI_LOG_LEVEL"

# Third-party loggers kept at WARNING
NOISY_LOGGERS: tuple[str, ...] = ("jdatetime", "asyncio")


class TruncateLongMsgs(logging.Filter):
    """Cuts console messages down to `max_len` characters."""

    def __init__(self, max_len: int = 300):
        super().__init__()
        self.max_len = max_len

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            msg = record.getMessage()
        except Exception:
            # bad args: leave the record for Handler.handleError
            return True
        if self.max_len and len(msg) > self.max_len:
            record.msg = msg[: self.max_len] + " …(truncated)"
            record.args = ()
        return True


def level_from_env(default: int = logging.INFO) -> int:
    """Level named by JALALI_LOG_LEVEL (e.g. "DEBUG"), or `default`."""
    name = (os.getenv(LOG_LEVEL_ENV_VAR) or "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ValueError(f"{LOG_LEVEL_ENV_VAR}={name!r} is not a logging level")
    return level


_configured = False


def setup_logging(
    *,
    level: Optional[int] = None,
    console: bool = True,
    console_truncate_len: int = 300,
    log_file: Optional[str] = None,
    quiet: Iterable[str] = NOISY_LOGGERS,
    force: bool = False,
) -> None:
    """
    Configure root logging for the demo runner (`src/main.py`).

    Library modules only call `logging.getLogger(__name__)`. `level` defaults to
    JALALI_LOG_LEVEL, then INFO. A second call is ignored unless `force=True`.
    `log_file` gets a small rotating file with untruncated messages.
    """
    global _configured
    if _configured and not force:
        return

    if level is None:
        level = level_from_env()

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)
    root.setLevel(level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    if console:
        ch = logging.StreamHandler()
        ch.setFormatter(formatter)
        if console_truncate_len > 0:
            ch.addFilter(TruncateLongMsgs(console_truncate_len))
        root.addHandler(ch)

    if log_file:
        fh = RotatingFileHandler(log_file, maxBytes=1_000_000, backupCount=3, encoding="utf-8")
        fh.setFormatter(formatter)
        root.addHandler(fh)

    for name in quiet:
        logging.getLogger(name).setLevel(logging.WARNING)

    _configured = True
    logging.getLogger(__name__).debug("📅 Logging ready (level=%s)", logging.getLevelName(level))
