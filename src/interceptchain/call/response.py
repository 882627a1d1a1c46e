"""
Response entity returned by the terminal interceptor and flowing back
out through the chain.
"""

from dataclasses import dataclass

from .request import Body


@dataclass(frozen=True)
class Response:
    """
    Represents a response-entity in the system.

    Immutable once constructed. Interceptors that rewrite a response
    (e.g. decoding its body) wrap the result in a new Response.
    """

    body: Body
