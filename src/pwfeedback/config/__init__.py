"""
Configuration management for pwfeedback.

Supports multiple configuration sources in order of priority:
1. Environment variables (highest priority)
2. Project .env file (.pwfeedback/.env in the current directory)
3. Global config file (~/.pwfeedback/config.yml)
4. Default values (lowest priority)
"""

from .env_loader import (
    get_global_config_path,
    get_project_env_path,
    load_env_file,
    load_global_config,
    load_project_config,
)
from .getters import (
    OUTPUT_FORMATS,
    get_config,
    get_debug_enabled,
    get_log_level,
    get_output_format,
)
from .project_setup import GLOBAL_CONFIG_TEMPLATE, create_global_config

ENV_KEYS = (
    "PWFEEDBACK_OUTPUT",
    "PWFEEDBACK_DEBUG",
    "PWFEEDBACK_LOG_LEVEL",
)

__all__ = [
    "ENV_KEYS",
    # env_loader
    "get_global_config_path",
    "get_project_env_path",
    "load_env_file",
    "load_global_config",
    "load_project_config",
    # getters
    "OUTPUT_FORMATS",
    "get_config",
    "get_debug_enabled",
    "get_log_level",
    "get_output_format",
    # project_setup
    "GLOBAL_CONFIG_TEMPLATE",
    "create_global_config",
]
