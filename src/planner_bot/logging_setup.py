# src/planner_bot/logging_setup.py

from __future__ import annotations

import logging
import sys
from pathlib import Path


# Loggers of the Telegram transport stack. httpx logs every long-poll request at INFO.
_NOISY_PREFIXES = ("httpx", "httpcore", "telegram")


def _under(name: str, prefix: str) -> bool:
    return name == prefix or name.startswith(prefix + ".")


class _ConsoleNoiseFilter(logging.Filter):
    """
    Keep the console REPL readable while Telegram polls in a background thread:
    - planner_bot logs pass, except the Telegram connector below WARNING
    - httpx / httpcore / python-telegram-bot pass only at ERROR+
    - captured Python warnings ('py.warnings') pass only at ERROR+
    - any other third-party logger passes at WARNING+
    """

    def filter(self, record: logging.LogRecord) -> bool:
        name = record.name

        if _under(name, "planner_bot"):
            if name.startswith("planner_bot.connectors.telegram_"):
                return record.levelno >= logging.WARNING
            return True

        if name == "py.warnings" or any(_under(name, p) for p in _NOISY_PREFIXES):
            return record.levelno >= logging.ERROR

        return record.levelno >= logging.WARNING


def setup_logging(
    *,
    log_dir: str | Path = ".local/planner",
    console_level: int = logging.INFO,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure logging with:
    - Console handler: readable + filtered for interactive use
    - File handler: full logs for debugging

    Call this ONCE, very early (before first logger.info).
    """
    log_dir = Path(log_dir)
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "planner.log"

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(console_level)
    ch.setFormatter(fmt)
    ch.addFilter(_ConsoleNoiseFilter())
    root.addHandler(ch)

    fh = logging.FileHandler(str(log_file), encoding="utf-8")
    fh.setLevel(file_level)
    fh.setFormatter(fmt)
    root.addHandler(fh)

    # One INFO line per getUpdates call would bury the file log.
    logging.getLogger("httpx").setLevel(logging.WARNING)

    logging.captureWarnings(True)
