"""
Centralized configuration for the course schedule service.

Settings come from environment variables (loaded from .env.local / .env
by main.py) with sensible defaults for local development.
"""

import logging
import os

from .constants import DISPLAY_ZONES, TIME_PLACEHOLDER

logger = logging.getLogger(__name__)


def is_dev_mode() -> bool:
    """Check if running in development mode (--dev flag or DEV_MODE env)."""
    return os.getenv("DEV_MODE", "").lower() in ("true", "1", "yes")


def is_production() -> bool:
    """Check if running on Railway (production environment)."""
    return bool(os.environ.get("RAILWAY_ENVIRONMENT"))


def get_api_port() -> int:
    """Get API server port from env or default."""
    return int(os.getenv("API_PORT", "8000"))


def get_frontend_url() -> str:
    """Get frontend URL based on mode."""
    if is_dev_mode():
        return os.environ.get("FRONTEND_URL", "http://localhost:5173").rstrip("/")
    return os.environ.get("FRONTEND_URL", f"http://localhost:{get_api_port()}")


def get_allowed_origins() -> list[str]:
    """
    Get list of allowed CORS origins.

    Includes localhost variants for the Vite dev server and the configured
    frontend URL.
    """
    hosts = ["localhost", "127.0.0.1"]
    origins = [f"http://{host}:{port}" for host in hosts for port in (5173, 8080)]

    frontend_url = get_frontend_url()
    if frontend_url not in origins:
        origins.append(frontend_url)

    return origins


def get_display_zones() -> list[tuple[str, str]]:
    """
    Get the zones every meeting time is displayed in.

    SCHEDULE_DISPLAY_ZONES overrides the default list, e.g.
    "Asia/Jerusalem=Israel,Europe/London=London". Entries without a
    label use the zone id itself as the label.

    Returns:
        List of (timezone, label) tuples
    """
    raw = os.getenv("SCHEDULE_DISPLAY_ZONES", "").strip()
    if not raw:
        return list(DISPLAY_ZONES)

    zones = []
    for entry in raw.split(","):
        entry = entry.strip()
        if not entry:
            continue
        tz_name, _, label = entry.partition("=")
        tz_name, label = tz_name.strip(), label.strip()
        if not tz_name:
            logger.warning(f"Skipping malformed SCHEDULE_DISPLAY_ZONES entry: {entry!r}")
            continue
        zones.append((tz_name, label or tz_name))

    if not zones:
        logger.warning("SCHEDULE_DISPLAY_ZONES has no usable entries, using defaults")
        return list(DISPLAY_ZONES)
    return zones


def get_placeholder() -> str:
    """Get the text shown for a time that failed to format."""
    return os.getenv("SCHEDULE_PLACEHOLDER", TIME_PLACEHOLDER)


# Optional integrations
# Format: (name, description)
OPTIONAL_ENV_VARS = [
    ("SENTRY_DSN", "Sentry DSN for error reporting"),
]


def check_required_env_vars() -> tuple[bool, list[str]]:
    """
    Check that environment variables are set.

    Nothing is strictly required; missing integrations are reported as
    warnings.

    Returns:
        (all_ok, warnings): Tuple of success flag and list of warning messages
    """
    warnings = []
    for name, description in OPTIONAL_ENV_VARS:
        if not os.environ.get(name):
            warnings.append(f"  ⚠ {name}: Not set ({description})")
    return True, warnings
