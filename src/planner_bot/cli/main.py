# src/planner_bot/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState and the router, then starts connectors:
- console REPL in the main thread (optional),
- Telegram connector in a background thread (optional).
"""

from __future__ import annotations

import logging
import signal
import threading
from typing import TYPE_CHECKING

from ..cli.bootstrap import create_initial_state, create_router
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from ..connectors.telegram_connector import TelegramBackgroundRunner


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)

    log_dir = getattr(settings, "data_dir", ".local/planner")
    setup_logging(log_dir=log_dir, console_level=console_level)

    # keep noisy libs readable
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("telegram").setLevel(max(console_level, logging.INFO))

    logger.info("Starting %s...", getattr(settings, "app_name", "planner"))

    state = create_initial_state(settings=settings)
    router = create_router(state)

    telegram_runner: TelegramBackgroundRunner | None = None
    if settings.telegram_enabled:
        from ..connectors.telegram_connector import start_telegram_in_background

        telegram_runner = start_telegram_in_background(router)

    # Use an Event so main can wait without a busy while-loop.
    stop_main = threading.Event()

    def _handle_signal(signum, _frame) -> None:
        logger.info("Signal %s received, shutting down...", signum)
        stop_main.set()

    try:
        # With the console on, Ctrl+C must still reach input() as KeyboardInterrupt.
        if not settings.console_enabled:
            signal.signal(signal.SIGINT, _handle_signal)
        signal.signal(signal.SIGTERM, _handle_signal)
    except (ValueError, OSError):
        # Not in the main thread, or the platform lacks SIGTERM.
        logger.debug("Signal handlers not installed.", exc_info=True)

    try:
        if settings.console_enabled:
            run_console_loop(router)
            stop_main.set()
        elif telegram_runner is None:
            logger.error("No connector is running (console disabled, Telegram not started).")
        else:
            logger.info(
                "Console disabled. Running background connectors only. Press Ctrl+C to stop."
            )
            stop_main.wait()

    finally:
        if telegram_runner is not None:
            telegram_runner.stop()
            telegram_runner.join(timeout=10.0)

        logger.info("Bye. %d task(s) were in memory.", state.task_store.count_tasks())


if __name__ == "__main__":
    main()
