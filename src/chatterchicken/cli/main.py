# src/chatterchicken/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState (loading saved tasks), runs the console
REPL, and saves the task list on the way out.
"""

from __future__ import annotations

import logging
import signal

from ..cli.bootstrap import create_initial_state, save_task_list
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..core.state import AppState
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def _shutdown(state: AppState) -> None:
    """Final save; failures are logged by save_task_list, never raised."""
    save_task_list(state)
    if state.task_repo is not None:
        state.task_repo.close()


def _handle_sigterm(signum, _frame) -> None:
    logger.info("Signal %s received, shutting down...", signum)
    # Unwind through the console loop like Ctrl+C so the finally block saves.
    raise KeyboardInterrupt


def main() -> None:
    settings = get_settings()

    console_level = getattr(logging, settings.log_level, logging.INFO)
    log_file = setup_logging(
        log_dir=settings.log_dir,
        console_level=console_level,
        backup_days=settings.log_backup_days,
    )

    logger.info("Starting %s (log file: %s)...", settings.app_name, log_file)

    # IMPORTANT: reuse same settings object
    state = create_initial_state(settings=settings)

    # SIGTERM is not available on every platform.
    if hasattr(signal, "SIGTERM"):
        signal.signal(signal.SIGTERM, _handle_sigterm)

    try:
        if settings.console_enabled:
            run_console_loop(state)
        else:
            logger.warning("Console disabled (CHICKEN_CONSOLE_ENABLED=0); nothing to do.")
    except KeyboardInterrupt:
        logger.info("Interrupted.")
    finally:
        _shutdown(state)
        logger.info("Bye.")


if __name__ == "__main__":
    main()
