"""Configuration getter functions."""

import logging
import os
from pathlib import Path
from typing import Any

from .env_loader import load_global_config, load_project_config

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "json")
_TRUTHY = {"1", "true", "yes", "on"}


def get_config(key: str, project_dir: Path | None = None, default: Any = None) -> Any:
    """
    Get configuration value with priority:
    1. Environment variable
    2. Project .env file
    3. Global config file
    4. Default value

    Args:
        key: Configuration key
        project_dir: Optional project directory (current directory if omitted)
        default: Default value if not found

    Returns:
        Configuration value or default
    """
    # 1. Check environment variable
    env_value = os.environ.get(key)
    if env_value:
        return env_value

    # 2. Check project .env file
    project_config = load_project_config(project_dir)
    if key in project_config:
        return project_config[key]

    # 3. Check global config
    global_config = load_global_config()
    if key in global_config:
        return global_config[key]

    # 4. Return default
    return default


def get_output_format(project_dir: Path | None = None) -> str:
    """Get the CLI output format (default: text)."""
    value = str(get_config("PWFEEDBACK_OUTPUT", project_dir, default="text")).strip().lower()
    if value not in OUTPUT_FORMATS:
        logger.warning("Unknown PWFEEDBACK_OUTPUT %r; using 'text'", value)
        return "text"
    return value


def get_debug_enabled(project_dir: Path | None = None) -> bool:
    """Return True when PWFEEDBACK_DEBUG is set to a truthy value."""
    value = get_config("PWFEEDBACK_DEBUG", project_dir, default="")
    return str(value).strip().lower() in _TRUTHY


def get_log_level(project_dir: Path | None = None) -> str:
    """Get the logging level name (default: WARNING)."""
    return str(get_config("PWFEEDBACK_LOG_LEVEL", project_dir, default="WARNING")).upper()
