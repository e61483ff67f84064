"""
COMPLETION SERVICE MODULE
=========================

Sends one user message to the chat completion API and returns the raw JSON
body plus how long the reported attempt took. Transport failures (connection
refused, timeout, DNS, TLS) are retried with a fixed delay; HTTP status codes
are not inspected here, so a 401 or 429 body comes back like any other and is
interpreted downstream by the response parser.

FLOW:
  1. Validate the call as a CompletionRequest (message length, budget >= 0).
  2. Each attempt rebuilds headers and payload, then POSTs through the transport.
     Its wall-clock time is measured on its own.
  3. Success: return the body and that attempt's elapsed time.
  4. Failure with budget left: sleep retry_delay, try again (see with_retry).
  5. Budget used up: log the error and return an empty body with the elapsed
     time of the last failed attempt. Nothing is raised to the caller.

The API key only ever goes into the Authorization header; it is never logged.
"""

import logging
import time
from typing import Any, Callable, Dict, List, Optional

from app.models import CompletionRequest, CompletionResult
from app.services.transport import TRANSPORT_ERRORS, HttpTransport
from app.utils.retry import with_retry
from config import CHAT_API_URL, CHAT_MODEL, MAX_RETRIES, RETRY_DELAY_SECONDS

logger = logging.getLogger("chatbot")


def build_headers(api_key: str) -> Dict[str, str]:
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }


def build_payload(message: str, model: str = CHAT_MODEL) -> Dict[str, Any]:
    return {
        "model": model,
        "messages": [{"role": "user", "content": message}],
    }


class CompletionClient:
    """
    Chat completion call with bounded, constant-delay retry and latency measurement.
    The transport and the sleep function are injectable so tests can run offline.
    """

    def __init__(
        self,
        transport: Optional[HttpTransport] = None,
        url: str = CHAT_API_URL,
        model: str = CHAT_MODEL,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.transport = transport or HttpTransport()
        self.url = url
        self.model = model
        self.sleep = sleep

    def send_message(
        self,
        message: str,
        api_key: str,
        max_retries: int = MAX_RETRIES,
        retry_delay: float = RETRY_DELAY_SECONDS,
    ) -> CompletionResult:
        """
        Send message and return (raw body, elapsed ms of the reported attempt).
        An empty raw_body means every attempt failed at the transport level.
        """
        request = CompletionRequest(
            message=message,
            api_key=api_key,
            max_retries=max_retries,
            retry_delay=retry_delay,
        )
        # Elapsed time of each attempt, in order; only the last one is reported.
        timings: List[float] = []

        def attempt() -> str:
            headers = build_headers(request.api_key)
            payload = build_payload(request.message, self.model)
            start = time.perf_counter()
            try:
                return self.transport.post_json(self.url, payload, headers=headers)
            finally:
                timings.append((time.perf_counter() - start) * 1000.0)

        try:
            body = with_retry(
                attempt,
                max_retries=request.max_retries,
                delay=request.retry_delay,
                retry_on=TRANSPORT_ERRORS,
                sleep=self.sleep,
            )
        except TRANSPORT_ERRORS as e:
            logger.error("Failed after retries: %s", e)
            return CompletionResult(raw_body="", elapsed_ms=timings[-1])

        logger.info("Chat completion returned after %s attempt(s) in %.1f ms", len(timings), timings[-1])
        return CompletionResult(raw_body=body, elapsed_ms=timings[-1])
