# src/chatterchicken/connectors/console_connector.py

from __future__ import annotations

import logging
import sys
from collections.abc import Callable
from datetime import datetime

from ..cli.bootstrap import save_task_list
from ..cli.commands import EXIT_COMMANDS, parse_command
from ..cli.commands import registry as command_registry
from ..core.state import AppState

logger = logging.getLogger(__name__)


def _ts_local() -> str:
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S")


def _rewrite_prev_line(line: str) -> None:
    """
    Replace the last terminal line with `line`.
    If stdout is not a TTY, leave the echo alone.
    """
    if sys.stdout.isatty():
        sys.stdout.write("\033[1A\033[2K\r")
        sys.stdout.write(line + "\n")
        sys.stdout.flush()


def _print_ts(text: str) -> None:
    print(f"[{_ts_local()}] {text}")


def run_console_loop(
    state: AppState,
    *,
    read_line: Callable[[str], str] = input,
    write: Callable[[str], None] = _print_ts,
) -> None:
    """
    Read commands until bye/EOF/Ctrl+C, answering each with the registry reply.

    The list is saved after every command that changed it, so a crash loses
    at most the command in flight.
    """
    app_name = str(getattr(getattr(state, "settings", None), "app_name", "ChatterChicken"))
    logger.info("Console connector started (tasks=%d).", len(state.task_list))
    write(f"Hello! I'm {app_name}. What can I do for you? Type help for commands.")

    while True:
        try:
            user_input = read_line(">>> ").strip()
        except EOFError:
            logger.info("Console EOF received, exiting.")
            break
        except KeyboardInterrupt:
            logger.info("Console KeyboardInterrupt, exiting.")
            print()
            break

        if not user_input:
            continue

        if read_line is input:
            _rewrite_prev_line(f"[{_ts_local()}] >>> {user_input}")

        try:
            reply = command_registry.handle(state, user_input)
        except Exception:
            logger.exception("Command handler crashed: %r", user_input)
            reply = "Internal error while handling a command."

        if reply is not None:
            write(reply)

        save_task_list(state)

        cmd = parse_command(user_input)
        if cmd is not None and cmd.action in EXIT_COMMANDS:
            logger.info("Console exit command received.")
            break

    logger.info("Console connector finished.")
