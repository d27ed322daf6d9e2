"""Configuration template creation."""

import logging
from pathlib import Path

from .env_loader import get_global_config_path

logger = logging.getLogger(__name__)

GLOBAL_CONFIG_TEMPLATE = """\
# pwfeedback global configuration
# Environment variables and .pwfeedback/.env in the current directory
# take precedence over the values below.

# Output format for `pwfeedback explain`: text or json
# PWFEEDBACK_OUTPUT: text

# Show selector debug output (true/false)
# PWFEEDBACK_DEBUG: false

# Logging level: DEBUG, INFO, WARNING, ERROR
# PWFEEDBACK_LOG_LEVEL: WARNING
"""


def create_global_config() -> Path:
    """Create the global config template if it does not exist yet."""
    config_path = get_global_config_path()
    if config_path.exists():
        return config_path

    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(GLOBAL_CONFIG_TEMPLATE)
    logger.info("Created global config at %s", config_path)
    return config_path
