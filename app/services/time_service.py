"""
TIME SERVICE MODULE
===================

Asks WorldTimeAPI for the current time in a fixed timezone (Europe/Rome by
default). Single attempt, no retry: a failed request is logged and treated as
an empty body, which the response parser turns into the "could not fetch"
message. Used by the session loop when the user's input contains the time
trigger phrase.
"""

import logging
from typing import Optional

from app.models import ParseResult
from app.services.transport import TRANSPORT_ERRORS, HttpTransport
from app.utils.response_parser import parse_time
from config import TIME_API_URL

logger = logging.getLogger("chatbot")


class TimeService:
    """Fetches and parses the current time from the time lookup endpoint."""

    def __init__(self, transport: Optional[HttpTransport] = None, url: str = TIME_API_URL):
        self.transport = transport or HttpTransport()
        self.url = url

    def lookup(self) -> ParseResult:
        """Return the parsed time, or a fallback message with the reason it failed."""
        try:
            raw = self.transport.get(self.url)
        except TRANSPORT_ERRORS as e:
            logger.error("Time lookup request failed: %s", e)
            raw = ""
        result = parse_time(raw)
        if not result.ok:
            logger.warning("Showing time fallback (%s)", result.outcome.value)
        return result

    def get_current_time(self) -> str:
        """The datetime string, or a fixed error message. Never raises on network problems."""
        return self.lookup().text
