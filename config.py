"""
CONFIGURATION MODULE
====================

PURPOSE:
  Central place for all chat client settings: endpoints, model name, retry
  budget, input limits and display defaults. Designed for single-user use:
  each person runs their own copy of the CLI with their own .env.

WHAT THIS FILE DOES:
  - Loads environment variables from .env (so settings stay out of code).
  - Exposes CHAT_API_URL and CHAT_MODEL for the chat completion call.
  - Exposes TIME_API_URL and the trigger phrase for the time lookup.
  - Defines the retry budget, the delay between attempts and the HTTP timeout.
  - Defines the maximum message length and the default display names.

USAGE:
  Import what you need: `from config import CHAT_API_URL, MAX_RETRIES`
  All services import from here so behaviour is consistent.

NOTE:
  The API key is normally typed at the prompt when the CLI starts. OPENAI_API_KEY
  is only used when the prompt is left blank.
"""

import os
import logging
from dotenv import load_dotenv


# -----------------------------------------------------------------------------
# LOGGING
# -----------------------------------------------------------------------------
# Used when we need to log warnings (e.g. an env value that is not a number).
logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# ENVIRONMENT
# -----------------------------------------------------------------------------
# Load environment variables from .env file (if it exists).
load_dotenv()


def _env_int(name: str, default: int) -> int:
    """Read an integer setting; fall back to default if unset or not a number."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not an integer), using %s", name, raw, default)
        return default


def _env_float(name: str, default: float) -> float:
    """Read a float setting; fall back to default if unset or not a number."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (not a number), using %s", name, raw, default)
        return default


# ============================================================================
# CHAT COMPLETION API
# ============================================================================
# OpenAI-compatible endpoint. Any server speaking /v1/chat/completions works.

OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "").strip()
CHAT_API_URL = os.getenv("CHAT_API_URL", "https://api.openai.com/v1/chat/completions")
CHAT_MODEL = os.getenv("CHAT_MODEL", "gpt-3.5-turbo")

# ============================================================================
# TIME LOOKUP API
# ============================================================================
# WorldTimeAPI returns JSON with a "datetime" field for the given timezone.
# TIME_QUERY_TRIGGER is matched anywhere in the user's input.

TIME_API_URL = os.getenv("TIME_API_URL", "https://worldtimeapi.org/api/timezone/Europe/Rome")
TIME_QUERY_TRIGGER = os.getenv("TIME_QUERY_TRIGGER", "time in Italy")
TIME_LOCATION_LABEL = os.getenv("TIME_LOCATION_LABEL", "Italy")

# ============================================================================
# RETRY AND TRANSPORT
# ============================================================================
# MAX_RETRIES: extra attempts after the first failed one (0 = single attempt).
# RETRY_DELAY_SECONDS: fixed pause between attempts (no backoff growth).
# CA_BUNDLE: optional path to a certificate bundle (e.g. cacert.pem).

MAX_RETRIES = max(0, _env_int("MAX_RETRIES", 3))
RETRY_DELAY_SECONDS = max(0.0, _env_float("RETRY_DELAY_SECONDS", 0.5))
REQUEST_TIMEOUT_SECONDS = _env_float("REQUEST_TIMEOUT_SECONDS", 30.0)
CA_BUNDLE = os.getenv("CA_BUNDLE", "").strip()

# ============================================================================
# SESSION
# ============================================================================
# Maximum length (characters) for a single user message. Longer input is
# rejected at the prompt and never reaches the network.

MAX_MESSAGE_LENGTH = 1000
EXIT_COMMAND = "exit"
RENAME_USER_PREFIX = "my name is "
RENAME_BOT_PREFIX = "Your name is now "

DEFAULT_USER_NAME = (os.getenv("DEFAULT_USER_NAME", "").strip() or "User")
DEFAULT_BOT_NAME = (os.getenv("DEFAULT_BOT_NAME", "").strip() or "Assistant")

# The CLI keeps the console for the conversation; only warnings and errors
# go to stderr unless LOG_LEVEL says otherwise.
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").strip().upper() or "WARNING"
