"""
Logging helpers for cv_builder.

The terminal belongs to the TUI, so console output goes to textual's devtools
console (``textual console``) and, optionally, to a log file.
"""

from __future__ import annotations

import logging
from pathlib import Path

from textual.logging import TextualHandler

LOG = logging.getLogger("cv_builder")


def setup_logging(level: str | int = logging.WARNING, log_file: Path | None = None) -> None:
    """Route ``cv_builder`` logs to the textual console and an optional file."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    console = TextualHandler()
    console.setLevel(level)
    handlers: list[logging.Handler] = [console]

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)  # always full detail in file
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        handlers.append(file_handler)

    logging.basicConfig(level=level, handlers=handlers, force=True)
    LOG.setLevel(min(level, logging.DEBUG) if log_file else level)
