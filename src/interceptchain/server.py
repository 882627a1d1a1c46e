"""
=============================================================================
MOCK WEB API SERVER
=============================================================================

A dummy server that stands in for the remote end of a call. There is no
socket: process_request() is a plain function call that may sleep to
simulate network latency.

=============================================================================
PROTOCOL
=============================================================================

The server only speaks Base64, in both directions:

    ┌─────────────────────────────────────────────────────────────────────┐
    │                                                                      │
    │   "R0VUX1VTRVI="  ──decode──►  "GET_USER"                           │
    │                                    │                                │
    │                          lookup in RequestBody                      │
    │                                    │                                │
    │                                    ▼                                │
    │   "Sm9obg=="      ◄──encode──  "John"                               │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

    GET_USER   ->  "John"
    POST_USER  ->  "Success"
    anything   ->  "Unknown"

Matching is exact and case-sensitive on the decoded body. A body that is
not valid Base64 at all raises DecodeError.

=============================================================================
"""

from enum import Enum
from typing import Optional
import logging
import time

from . import codec
from .call.request import Body


logger = logging.getLogger(__name__)


RESPONSE_GET_USER = "John"
RESPONSE_POST_USER = "Success"
RESPONSE_UNKNOWN = "Unknown"


class RequestBody(Enum):
    """Request bodies the server understands."""

    GET_USER = "GET_USER"
    POST_USER = "POST_USER"

    @classmethod
    def lookup(cls, body: str) -> Optional["RequestBody"]:
        """Exact match on the member name, None when unknown."""
        try:
            return cls[body]
        except KeyError:
            return None


_RESPONSES = {
    RequestBody.GET_USER: RESPONSE_GET_USER,
    RequestBody.POST_USER: RESPONSE_POST_USER,
}


class WebApiServer:
    """
    Dummy web server that processes requests and returns responses.

    Args:
        latency: Seconds to block per request, simulating a round-trip.
                 0 disables the delay.
    """

    def __init__(self, latency: float = 0.0):
        if latency < 0:
            raise ValueError(f"latency must be >= 0, got {latency}")
        self.latency = latency

    def process_request(self, encoded_body: Body) -> Body:
        """
        Process an encoded request body and return the encoded response body.

        The response has the same type (str or bytes) as the request.

        Raises:
            DecodeError: encoded_body is not valid Base64
        """
        decoded = codec.decode(encoded_body)
        if isinstance(decoded, bytes):
            decoded = decoded.decode("utf-8", errors="replace")

        if self.latency:
            time.sleep(self.latency)

        request_body = RequestBody.lookup(decoded)
        result = _RESPONSES.get(request_body, RESPONSE_UNKNOWN)
        logger.debug(f"Server resolved {decoded!r} -> {result!r}")

        if isinstance(encoded_body, bytes):
            return codec.encode(result.encode("utf-8"))
        return codec.encode(result)


# Shared instance used by ServerCallInterceptor unless another is injected
default_server = WebApiServer()
