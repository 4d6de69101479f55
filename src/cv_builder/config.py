"""Runtime settings.

Values come from environment variables (a ``.env`` file in the working
directory is loaded first) and can be overridden from the command line.

- ``CV_BUILDER_EXPORT_DIR``: where "Print CV" writes files. When unset the
  user is asked for a location with a save dialog.
- ``CV_BUILDER_EXPORT_FORMAT``: ``pdf`` (default), ``tex``, ``txt``, ``md`` or ``json``.
- ``CV_BUILDER_TEMPLATE``: LaTeX template name, ``classic`` by default.
- ``CV_BUILDER_LOG_FILE``: optional path of a log file.
- ``CV_BUILDER_LOG_LEVEL``: logging level name, ``WARNING`` by default.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

__all__ = ["DEFAULT_EXPORT_FORMAT", "DEFAULT_TEMPLATE", "Settings", "get_settings"]

DEFAULT_EXPORT_FORMAT = "pdf"
DEFAULT_TEMPLATE = "classic"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(slots=True)
class Settings:
    export_dir: Path | None = None
    export_format: str = DEFAULT_EXPORT_FORMAT
    template: str = DEFAULT_TEMPLATE
    log_file: Path | None = None
    log_level: str = DEFAULT_LOG_LEVEL


def _optional_path(value: str | None) -> Path | None:
    return Path(value).expanduser() if value else None


def get_settings(*, load_env_file: bool = True) -> Settings:
    """Read settings from the environment."""
    if load_env_file:
        load_dotenv(find_dotenv(usecwd=True))

    return Settings(
        export_dir=_optional_path(os.getenv("CV_BUILDER_EXPORT_DIR")),
        export_format=(os.getenv("CV_BUILDER_EXPORT_FORMAT") or DEFAULT_EXPORT_FORMAT).lower(),
        template=os.getenv("CV_BUILDER_TEMPLATE") or DEFAULT_TEMPLATE,
        log_file=_optional_path(os.getenv("CV_BUILDER_LOG_FILE")),
        log_level=(os.getenv("CV_BUILDER_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper(),
    )
