"""
=============================================================================
INTERCEPTOR FRAMEWORK
=============================================================================

Interceptors monitor and rewrite calls. Each one handles a single concern,
and the chain runs them in the order they were added:

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    INTERCEPTOR CHAIN                                │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   Call-site Request                                                  │
    │        │                                                             │
    │        ▼                                                             │
    │   ┌──────────────────────┐                                          │
    │   │ LoggingInterceptor   │ ──► Logs request and response bodies     │
    │   └──────────┬───────────┘                                          │
    │              ▼                                                       │
    │   ┌──────────────────────┐                                          │
    │   │ EncodeRequestBody    │ ──► Base64-encodes the request body      │
    │   └──────────┬───────────┘                                          │
    │              ▼                                                       │
    │   ┌──────────────────────┐                                          │
    │   │ AuthorizationHeader  │ ──► Adds the authorization header        │
    │   └──────────┬───────────┘                                          │
    │              ▼                                                       │
    │   ┌──────────────────────┐                                          │
    │   │ DecodeResponseBody   │ ──► Decodes the response on the way back │
    │   └──────────┬───────────┘                                          │
    │              ▼                                                       │
    │   ┌──────────────────────┐                                          │
    │   │ ServerCall (terminal)│ ──► Calls the server, builds Response    │
    │   └──────────────────────┘                                          │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

Each built-in is stateless and exported as a shared instance
(logging_interceptor, encode_request_body, ...). Use them directly; there
is no need to construct new ones per chain.

=============================================================================
"""

from .base import (
    END_OF_CHAIN_MESSAGE,
    Chain,
    EndOfChainError,
    FunctionInterceptor,
    Interceptor,
    InterceptorChain,
    function_interceptor,
)
from .logging import LoggingInterceptor, logging_interceptor
from .encoding import (
    DecodeResponseBodyInterceptor,
    EncodeRequestBodyInterceptor,
    decode_response_body,
    encode_request_body,
)
from .auth import (
    AUTHORIZATION_HEADER,
    AUTHORIZATION_TOKEN,
    AuthorizationHeaderInterceptor,
    authorization_header,
)
from .server_call import ServerCallInterceptor, server_call

__all__ = [
    # Base classes
    "Interceptor",
    "Chain",
    "InterceptorChain",
    "EndOfChainError",
    "END_OF_CHAIN_MESSAGE",
    "FunctionInterceptor",
    "function_interceptor",

    # Built-in interceptors
    "LoggingInterceptor",
    "EncodeRequestBodyInterceptor",
    "DecodeResponseBodyInterceptor",
    "AuthorizationHeaderInterceptor",
    "ServerCallInterceptor",
    "AUTHORIZATION_HEADER",
    "AUTHORIZATION_TOKEN",

    # Shared instances
    "logging_interceptor",
    "encode_request_body",
    "decode_response_body",
    "authorization_header",
    "server_call",
]
