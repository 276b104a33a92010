"""
Configuration module.

Handles environment variables, the idea board API location, and web settings.
"""

from src.config.config import (
    APP_ENV,
    DEBUG,
    IDEA_BOARD_API_URL,
    IDEA_BOARD_USE_MOCK,
    REQUEST_TIMEOUT,
    FLASK_SECRET_KEY,
    WEB_PORT,
    is_production,
    validate_config,
    print_config_summary,
)

__all__ = [
    "APP_ENV",
    "DEBUG",
    "IDEA_BOARD_API_URL",
    "IDEA_BOARD_USE_MOCK",
    "REQUEST_TIMEOUT",
    "FLASK_SECRET_KEY",
    "WEB_PORT",
    "is_production",
    "validate_config",
    "print_config_summary",
]
