"""
RESPONSE PARSER UTILITY
=======================

Pulls the useful string out of a raw JSON body. Pure functions: no I/O, no
logging, and they never raise. When the body can't be used, the result carries
a fixed, human-readable fallback message together with the reason
(ParseOutcome), so callers can log and tests can tell an empty body apart from
a malformed one.

  parse_reply(raw) - assistant reply at choices[0].message.content
  parse_time(raw)  - "datetime" field of a WorldTimeAPI response
"""

import json
from typing import Any

from app.models import ParseOutcome, ParseResult

REPLY_FALLBACK = "Sorry, I couldn't parse the response."
TIME_EMPTY_FALLBACK = "Error: Could not fetch the time. Please try again later."
TIME_MALFORMED_FALLBACK = "Error: Failed to parse response from WorldTimeAPI."
TIME_FORMAT_FALLBACK = "Error: Unexpected response format."

_INVALID = object()


def _load_json(raw: str) -> Any:
    """json.loads, or _INVALID if raw isn't valid JSON."""
    try:
        return json.loads(raw)
    except (TypeError, ValueError):
        return _INVALID


def parse_reply(raw: str) -> ParseResult:
    """Extract choices[0].message.content; fall back on any structural mismatch."""
    if not raw:
        return ParseResult(outcome=ParseOutcome.EMPTY_BODY, text=REPLY_FALLBACK)

    data = _load_json(raw)
    try:
        content = data["choices"][0]["message"]["content"]
    except (KeyError, IndexError, TypeError):
        content = None

    if not isinstance(content, str) or not content:
        return ParseResult(outcome=ParseOutcome.MALFORMED_BODY, text=REPLY_FALLBACK)

    return ParseResult(outcome=ParseOutcome.OK, text=content)


def parse_time(raw: str) -> ParseResult:
    """
    Extract the "datetime" string.

    Only an object without a "datetime" key counts as an unexpected format;
    invalid JSON, a non-object body or a non-string value are parse failures.
    """
    if not raw:
        return ParseResult(outcome=ParseOutcome.EMPTY_BODY, text=TIME_EMPTY_FALLBACK)

    data = _load_json(raw)
    if not isinstance(data, dict):
        return ParseResult(outcome=ParseOutcome.MALFORMED_BODY, text=TIME_MALFORMED_FALLBACK)
    if "datetime" not in data:
        return ParseResult(outcome=ParseOutcome.MALFORMED_BODY, text=TIME_FORMAT_FALLBACK)

    value = data["datetime"]
    if not isinstance(value, str):
        return ParseResult(outcome=ParseOutcome.MALFORMED_BODY, text=TIME_MALFORMED_FALLBACK)

    return ParseResult(outcome=ParseOutcome.OK, text=value)
