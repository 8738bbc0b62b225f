# src/todo_list/cli/main.py

"""
CLI entrypoint.

Initializes logging, builds AppState, loads the task file and runs the
console loop in the main thread.
"""

from __future__ import annotations

import logging

from ..cli.bootstrap import create_initial_state, load_initial_tasks
from ..config import get_settings
from ..connectors.console_connector import run_console_loop
from ..logging_setup import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()

    level_name = str(getattr(settings, "log_level", "INFO")).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    if not isinstance(console_level, int):
        console_level = logging.INFO

    setup_logging(log_dir=settings.log_dir, console_level=console_level)

    logger.info("Starting %s (file=%s)...", settings.app_name, settings.tasks_file)

    state = create_initial_state(settings=settings)

    if settings.load_on_start:
        notice = load_initial_tasks(state)
        if notice:
            print(notice)

    try:
        run_console_loop(state)
    finally:
        logger.info("Bye.")


if __name__ == "__main__":
    main()
