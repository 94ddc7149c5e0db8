"""
Core configuration for the SVG builder.
Holds the package-wide defaults and the helpers that update them.
"""

import os
import logging
from typing import Dict, Any

logger = logging.getLogger(__name__)

# Global configuration settings with defaults
CONFIG: Dict[str, Any] = {
    # Free-form attribute parsing ("strict" or "skip")
    "attribute_policy": os.environ.get("SVG_BUILDER_ATTRIBUTE_POLICY", "strict"),

    # Suffix written after the canvas width and height
    "length_unit": "cm",

    # Validation settings
    "max_svg_size": 10 * 1024 * 1024,  # 10MB

    # Logging
    "log_level": os.environ.get("LOG_LEVEL", "INFO"),
}

_DEFAULTS: Dict[str, Any] = dict(CONFIG)


def configure(settings: Dict[str, Any]) -> None:
    """
    Update the core configuration with custom settings.

    Args:
        settings: Dictionary of configuration settings to update

    Raises:
        KeyError: If a setting is not a known configuration key
    """
    unknown = [key for key in settings if key not in CONFIG]
    if unknown:
        raise KeyError(f"Unknown configuration keys: {', '.join(unknown)}")

    CONFIG.update(settings)
    logger.debug(f"Core configuration updated: {', '.join(settings.keys())}")


def reset_config() -> None:
    """Restore every configuration setting to its default."""
    CONFIG.clear()
    CONFIG.update(_DEFAULTS)


__all__ = [
    "CONFIG",
    "configure",
    "reset_config",
]
