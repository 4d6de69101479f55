from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from cv_builder.config import Settings, get_settings
from cv_builder.logging_utils import setup_logging
from cv_builder.templates import list_templates
from cv_builder.utils.export import EXPORT_FORMATS

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cv-builder",
        description="Build a resume interactively in the terminal.",
    )
    parser.add_argument(
        "--export-dir",
        type=Path,
        help="Directory that 'Print CV' writes into (default: ask with a save dialog).",
    )
    parser.add_argument(
        "--format",
        dest="export_format",
        choices=EXPORT_FORMATS,
        help="File format used by 'Print CV'.",
    )
    parser.add_argument("--template", help="LaTeX template used for tex exports.")
    parser.add_argument("--log-file", type=Path, help="Write a detailed log to this file.")
    parser.add_argument("--debug", action="store_true", help="Log at DEBUG level.")
    parser.add_argument(
        "--list-templates",
        action="store_true",
        help="Print the available templates and exit.",
    )
    return parser


def resolve_settings(args: argparse.Namespace, base: Settings | None = None) -> Settings:
    """Apply command-line overrides on top of environment settings.

    Raises:
        ValueError: If the chosen template is not registered.
    """
    settings = base or get_settings()
    if args.export_dir is not None:
        settings.export_dir = args.export_dir
    if args.export_format:
        settings.export_format = args.export_format
    if args.template:
        settings.template = args.template
    if args.log_file is not None:
        settings.log_file = args.log_file
    if args.debug:
        settings.log_level = "DEBUG"

    if settings.template not in list_templates():
        available = ", ".join(list_templates())
        msg = f"Unknown template {settings.template!r}. Available: {available}"
        raise ValueError(msg)
    if settings.export_format not in EXPORT_FORMATS:
        msg = f"Unknown export format {settings.export_format!r}"
        raise ValueError(msg)
    return settings


def run_cli(argv: Sequence[str] | None = None) -> int:
    """Parse arguments and launch the TUI.

    Returns:
        Exit code (0 for success, 2 for invalid configuration).
    """
    args = build_parser().parse_args(argv)

    if args.list_templates:
        for name in list_templates():
            print(name)
        return 0

    try:
        settings = resolve_settings(args)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    setup_logging(settings.log_level, settings.log_file)
    logger.info("Starting CV Builder (export format: %s)", settings.export_format)

    from cv_builder.tui import main as tui_main

    tui_main(settings)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the CLI application."""
    try:
        return run_cli(argv)
    except KeyboardInterrupt:
        print("\n\nInterrupted by user. Exiting.")
        return 130
    except Exception as exc:
        logger.exception("Unexpected error")
        print(f"\nUnexpected error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
