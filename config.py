"""Application configuration: environment variables and derived constants.

Loads ``BOT_TOKEN``, ``API_TIMEOUT`` and ``LOG_LEVEL`` from the environment
via ``python-dotenv``.  All values are resolved at import time so other
modules can ``from config import …`` without repeated lookups.

The ``hydrate`` package never imports this module; only the SDK's default
client, the polling loop and ``main.py`` do.
"""

# ── stdlib ───────────────────────────────────────────────────────────────────
import logging
import os

# ── third-party ──────────────────────────────────────────────────────────────
from dotenv import load_dotenv

# ── core ─────────────────────────────────────────────────────────────────────
from core.logger import HydrateLogger

# ── Environment bootstrap ────────────────────────────────────────────────────
load_dotenv()

# ── Logger (used for startup diagnostics at the bottom of this module) ───────
logger = HydrateLogger.get_logger()

_DEFAULT_API_TIMEOUT = 10


# ── Helper functions (private) ───────────────────────────────────────────────


def _parse_timeout(raw: str | None) -> int:
    """Parse the HTTP timeout in seconds, falling back to the default.

    Non-numeric or non-positive values are ignored.
    """
    if not raw:
        return _DEFAULT_API_TIMEOUT
    try:
        value = int(raw.strip())
    except ValueError:
        return _DEFAULT_API_TIMEOUT
    return value if value > 0 else _DEFAULT_API_TIMEOUT


def _parse_log_level(raw: str | None) -> str:
    """Return a valid :mod:`logging` level name (``INFO`` when unknown)."""
    name = (raw or "INFO").strip().upper()
    if name not in logging.getLevelNamesMapping():
        return "INFO"
    return name


# ── Public constants ─────────────────────────────────────────────────────────

BOT_TOKEN: str | None = os.environ.get("BOT_TOKEN")
BASE_URL: str = f"https://api.telegram.org/bot{BOT_TOKEN or ''}"
API_TIMEOUT: int = _parse_timeout(os.environ.get("API_TIMEOUT"))
LOG_LEVEL: str = _parse_log_level(os.environ.get("LOG_LEVEL"))

HydrateLogger.set_level(LOG_LEVEL)


# ── Startup diagnostics ─────────────────────────────────────────────────────

if BOT_TOKEN:
    logger.info("Config loaded: BOT_TOKEN is set, BASE_URL ready")
else:
    logger.warning("Config loaded: BOT_TOKEN is NOT set")

logger.info("API settings resolved", extra={"api_timeout": API_TIMEOUT, "log_level": LOG_LEVEL})
