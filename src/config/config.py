"""
Configuration module for Vibe Hunt.

Loads environment variables from .env file and exposes them as typed configuration values.
Uses python-dotenv for loading and provides safe defaults where appropriate.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file from project root
# The .env file should be in the root directory (parent of src/)
_project_root = Path(__file__).parent.parent.parent
_env_path = _project_root / ".env"
load_dotenv(_env_path)


# =============================================================================
# Application Environment
# =============================================================================

# Application environment: "development", "staging", or "production"
# Default: "development" for safe local testing
APP_ENV: str = os.getenv("APP_ENV", "development")

# Enable debug mode for verbose request logging (only in development)
DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"


# =============================================================================
# Idea Board API Configuration
# =============================================================================

# Base URL of the idea board HTTP API (e.g. "https://ideas.example.com")
# Empty string means requests go to the dashboard's own origin
IDEA_BOARD_API_URL: str = os.getenv("IDEA_BOARD_API_URL", "").rstrip("/")

# Serve the board from an in-memory API instead of a remote server
# Development only; rejected by validate_config() in production
IDEA_BOARD_USE_MOCK: bool = os.getenv("IDEA_BOARD_USE_MOCK", "false").lower() == "true"

# HTTP request timeout in seconds
REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "30"))


# =============================================================================
# Web Dashboard Configuration
# =============================================================================

# Secret used to sign the session cookie that identifies a board page
FLASK_SECRET_KEY: str = os.getenv("FLASK_SECRET_KEY", "")

# Port for the development server
WEB_PORT: int = int(os.getenv("WEB_PORT", "5001"))


# =============================================================================
# Helper Functions
# =============================================================================

def is_production() -> bool:
    """Check if running in production environment."""
    return APP_ENV == "production"


def validate_config() -> list[str]:
    """
    Validate that required configuration is present for production.

    Returns:
        List of missing or invalid configuration keys (empty if all valid).
    """
    errors = []

    if is_production():
        if not IDEA_BOARD_API_URL:
            errors.append("IDEA_BOARD_API_URL is required in production")
        if not FLASK_SECRET_KEY:
            errors.append("FLASK_SECRET_KEY is required in production")
        if IDEA_BOARD_USE_MOCK:
            errors.append("IDEA_BOARD_USE_MOCK cannot be enabled in production")

    if IDEA_BOARD_API_URL and not (
        IDEA_BOARD_API_URL.startswith("http://") or IDEA_BOARD_API_URL.startswith("https://")
    ):
        errors.append(f"IDEA_BOARD_API_URL must start with http:// or https://, got {IDEA_BOARD_API_URL}")

    if REQUEST_TIMEOUT < 1:
        errors.append("REQUEST_TIMEOUT must be at least 1 second")

    if not (1 <= WEB_PORT <= 65535):
        errors.append("WEB_PORT must be between 1 and 65535")

    return errors


def print_config_summary() -> None:
    """Print a summary of current configuration (safe for logs, no secrets)."""
    print(f"  APP_ENV: {APP_ENV}")
    print(f"  DEBUG: {DEBUG}")
    print(f"  IDEA_BOARD_API_URL: {IDEA_BOARD_API_URL or '(same origin)'}")
    print(f"  IDEA_BOARD_USE_MOCK: {IDEA_BOARD_USE_MOCK}")
    print(f"  REQUEST_TIMEOUT: {REQUEST_TIMEOUT}s")
    print(f"  FLASK_SECRET_KEY: {'***' if FLASK_SECRET_KEY else '(not set)'}")
    print(f"  WEB_PORT: {WEB_PORT}")
