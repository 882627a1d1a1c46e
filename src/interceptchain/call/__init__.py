"""
=============================================================================
CALL ENTITIES
=============================================================================

A "call" is one request/response round-trip:

    call-site ──► Request ──► [interceptors] ──► server
    call-site ◄── Response ◄── [interceptors] ◄── server

    request.py   - Request (body + headers)
    response.py  - Response (body)

=============================================================================
"""

from .request import Body, Request
from .response import Response

__all__ = [
    "Body",
    "Request",
    "Response",
]
