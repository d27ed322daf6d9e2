"""pwfeedback CLI - explain password-strength results."""

import logging
from typing import Optional

import typer

from pwfeedback.cli_commands.shared import app, console
from pwfeedback.config import (
    ENV_KEYS,
    OUTPUT_FORMATS,
    create_global_config,
    get_config,
    get_debug_enabled,
    get_global_config_path,
    get_log_level,
    get_output_format,
    load_global_config,
)
from pwfeedback.modules.feedback import (
    get_feedback,
    load_analysis,
    load_analysis_file,
    select_longest_match,
)

# Importing the command modules registers them on ``app``.
from pwfeedback.cli_commands import config_command as _config_command  # noqa: F401
from pwfeedback.cli_commands import explain_command as _explain_command  # noqa: F401

__all__ = [
    "ENV_KEYS",
    "OUTPUT_FORMATS",
    "app",
    "console",
    "create_global_config",
    "get_config",
    "get_debug_enabled",
    "get_feedback",
    "get_global_config_path",
    "get_log_level",
    "get_output_format",
    "load_analysis",
    "load_analysis_file",
    "load_global_config",
    "main",
    "select_longest_match",
]


@app.callback()
def _configure(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level (default from PWFEEDBACK_LOG_LEVEL)"
    ),
) -> None:
    """Explain password-strength results as warnings and suggestions."""
    level_name = (log_level or get_log_level()).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


@app.command()
def version() -> None:
    """Show the installed pwfeedback version."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        current_version = pkg_version("pwfeedback")
    except PackageNotFoundError:
        current_version = "0.0.0+unknown"

    console.print(f"pwfeedback {current_version}")


def main():
    """Entry point for the CLI."""
    app()
