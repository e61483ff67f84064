"""
HTTP TRANSPORT MODULE
=====================

One outbound HTTP exchange per call, over requests. Returns the response body
as text whatever the status code; the callers decide what the body means.
Connection errors, timeouts, DNS and TLS failures surface as
requests.exceptions.RequestException; a CA bundle path that does not exist
surfaces as a plain OSError from requests. TRANSPORT_ERRORS covers both.

Every call opens its own requests.Session inside a `with` block, so the
connection and the headers it carried are released before the call returns,
including when it raises. A retry therefore always starts from a fresh session.
"""

import logging
from typing import Any, Dict, Optional, Union

import requests

from config import CA_BUNDLE, REQUEST_TIMEOUT_SECONDS

logger = logging.getLogger("chatbot")

# Everything a single HTTP exchange can fail with before a response arrives.
TRANSPORT_ERRORS = (requests.exceptions.RequestException, OSError)


class HttpTransport:
    """Thin wrapper around requests with a fixed timeout and TLS verification setting."""

    def __init__(
        self,
        timeout: float = REQUEST_TIMEOUT_SECONDS,
        verify: Union[bool, str, None] = None,
    ):
        self.timeout = timeout
        # CA_BUNDLE points at a certificate bundle file; otherwise use requests' default store.
        self.verify = verify if verify is not None else (CA_BUNDLE or True)

    def post_json(
        self,
        url: str,
        payload: Dict[str, Any],
        headers: Optional[Dict[str, str]] = None,
    ) -> str:
        """POST payload as JSON and return the raw response body."""
        with requests.Session() as session:
            response = session.post(
                url,
                json=payload,
                headers=headers,
                timeout=self.timeout,
                verify=self.verify,
            )
            logger.debug("POST %s -> %s (%s bytes)", url, response.status_code, len(response.content))
            return response.text

    def get(self, url: str, headers: Optional[Dict[str, str]] = None) -> str:
        """GET url and return the raw response body."""
        with requests.Session() as session:
            response = session.get(
                url,
                headers=headers,
                timeout=self.timeout,
                verify=self.verify,
            )
            logger.debug("GET %s -> %s (%s bytes)", url, response.status_code, len(response.content))
            return response.text
