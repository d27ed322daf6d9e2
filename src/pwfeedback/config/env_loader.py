"""Environment variable and configuration file loading."""

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


def get_global_config_path() -> Path:
    """Return the path of the global ~/.pwfeedback/config.yml file."""
    return Path.home() / ".pwfeedback" / "config.yml"


def get_project_env_path(project_dir: Path | None = None) -> Path:
    """Return the project .env path (defaults to the current directory)."""
    base = project_dir if project_dir is not None else Path.cwd()
    return base / ".pwfeedback" / ".env"


def load_env_file(env_path: Path) -> dict[str, str]:
    """Load environment variables from .env file."""
    env_vars = {}
    if env_path.exists():
        with open(env_path) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, value = line.split("=", 1)
                    # Remove quotes if present
                    value = value.strip().strip("\"'")
                    env_vars[key.strip()] = value
    return env_vars


def load_global_config() -> dict[str, Any]:
    """Load global configuration from ~/.pwfeedback/config.yml."""
    config_path = get_global_config_path()
    if not config_path.exists():
        return {}

    with open(config_path) as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.warning("Ignoring unreadable global config %s: %s", config_path, e)
            return {}

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring global config %s: expected a mapping", config_path)
        return {}
    return data


def load_project_config(project_dir: Path | None = None) -> dict[str, str]:
    """Load project-specific configuration from .pwfeedback/.env."""
    return load_env_file(get_project_env_path(project_dir))
