"""
=============================================================================
REQUEST ENTITY
=============================================================================

A Request is what flows INTO the chain, from the call-site towards the
server. It carries an opaque body and a mapping of headers.

=============================================================================
WHAT IS MUTABLE, WHAT IS NOT
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                         Request                                     │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   body     ──► FROZEN. To change it, build a new Request and        │
    │                rebind chain.request to it.                          │
    │                                                                      │
    │   headers  ──► Mutable dict. Interceptors may add or overwrite      │
    │                entries in place.                                    │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

Header names are case-sensitive: "authorization" and "Authorization" are
two different keys.

=============================================================================
"""

from dataclasses import dataclass, field
from typing import Dict, Union


# A body is opaque to the chain: text or raw bytes, both are legal
Body = Union[str, bytes]


@dataclass(frozen=True)
class Request:
    """
    Represents a request-entity travelling through an interceptor chain.

    No validation is performed on construction. Any string or byte
    sequence, including an empty one, is a legal body.

    Usage:
        request = Request("GET_USER")
        request = Request(b"raw", headers={"content-type": "text/plain"})
    """

    body: Body
    headers: Dict[str, str] = field(default_factory=dict)

    def with_body(self, body: Body) -> "Request":
        """
        Return a new Request carrying `body` and the same headers.

        The headers mapping is shared, not copied, so header writes made
        later through either request are visible through both.
        """
        return Request(body, self.headers)

    def get_header(self, name: str, default: str = "") -> str:
        """Get a header value (case-sensitive lookup)."""
        return self.headers.get(name, default)
