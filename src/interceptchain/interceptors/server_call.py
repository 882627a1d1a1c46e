"""
=============================================================================
SERVER CALL INTERCEPTOR (TERMINAL)
=============================================================================

The last interceptor of every chain. It is responsible for the actual
round-trip: it hands the current request body to the web API server and
wraps the answer in a Response.

It NEVER calls chain.proceed(). Anything queued behind it is left
unconsumed:

    [Encode, Auth, ServerCall, Decode]
                       │          └── never runs: the caller gets the
                       │              still-encoded server body back
                       └── returns here

=============================================================================
"""

from typing import Optional

from .base import Chain, Interceptor
from ..call.response import Response
from ..server import WebApiServer, default_server


class ServerCallInterceptor(Interceptor):
    """
    Actual interceptor that makes the call to the server and returns
    the response.

    Args:
        server: Server to call. Defaults to the process-wide mock server.
    """

    def __init__(self, server: Optional[WebApiServer] = None):
        self._server = server or default_server

    @property
    def server(self) -> WebApiServer:
        return self._server

    def intercept(self, chain: Chain) -> Response:
        return Response(self._server.process_request(chain.request.body))


server_call = ServerCallInterceptor()
