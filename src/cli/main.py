"""CLI entry point (Typer).

The command takes no options: it reads one line from stdin and creates a
directory with exactly that name. Extra arguments are ignored. Only a stdin
read failure changes the exit status.
"""

from __future__ import annotations

import logging
import sys
from typing import BinaryIO

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from cli.ui_components import build_stderr_console, print_read_failure, print_settings_warning
from core.config import AppSettings
from core.errors import ReadFailure
from core.services.mkdir_pipeline import run_mkdir

app = typer.Typer(
    add_completion=False,
    help="Read a directory name from stdin and create it (single level).",
)


def configure_logging(settings: AppSettings, console: Console) -> None:
    """Send log records to stderr through Rich."""

    logging.basicConfig(
        level=settings.log_level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def load_settings(console: Console) -> AppSettings:
    """Load settings, falling back to defaults when the environment is invalid."""

    try:
        return AppSettings()
    except ValidationError as exc:
        print_settings_warning(console, exc)
        # Defaults only: no env/.env lookup.
        return AppSettings.model_construct()


def _stdin_buffer() -> BinaryIO | None:
    stdin = sys.stdin
    if stdin is None:
        return None
    return getattr(stdin, "buffer", None)


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def mkdir() -> None:
    """Read one line from stdin and create a directory with that name."""

    console = build_stderr_console()
    settings = load_settings(console)
    configure_logging(settings, console)

    try:
        run_mkdir(_stdin_buffer(), settings=settings)
    except ReadFailure as exc:
        print_read_failure(console, exc)
        raise typer.Exit(code=settings.read_failure_exit_code) from exc


def run() -> None:
    app()
