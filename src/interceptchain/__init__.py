"""
=============================================================================
INTERCEPTCHAIN - Request/Response Interceptor Chain
=============================================================================

Calls to a server involve a Request and return a Response. Often the raw
request has to be modified before the server accepts it (encoding,
headers), and the response has to be modified before the call-site can
use it (decoding).

Putting all of that at every call-site duplicates it. Putting it in one
class breaks single responsibility. Instead, each concern INTERCEPTS the
call at its own level, and the interceptors are managed in a chain:

    ┌─────────────────────────────────────────────────────────────────────┐
    │                                                                      │
    │   call-site                                                          │
    │      │  Request("GET_USER")                                          │
    │      ▼                                                               │
    │   Logging ─► Encode ─► Authorization ─► Decode ─► ServerCall        │
    │                                                       │              │
    │      ▲                                                │              │
    │      │  Response("John")                              ▼              │
    │   call-site ◄──────── response flows back ◄──── mock server         │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

The last interceptor makes the call to the server and produces the
Response. Every other interceptor passes control on with chain.proceed().

=============================================================================
PACKAGE STRUCTURE
=============================================================================

    interceptchain/
    ├── __init__.py          # This file - package exports
    ├── __main__.py          # CLI entry point (python -m interceptchain)
    ├── config.py            # ChainConfig dataclass
    ├── errors.py            # InterceptorError base class
    ├── codec.py             # Base64 encode/decode, DecodeError
    ├── server.py            # Mock WebApiServer
    ├── call/                # Call entities
    │   ├── request.py       # Request
    │   └── response.py      # Response
    └── interceptors/        # Chain and built-in interceptors
        ├── base.py          # Interceptor, Chain, InterceptorChain
        ├── logging.py       # Request/response body logging
        ├── encoding.py      # Encode request / decode response
        ├── auth.py          # Authorization header
        └── server_call.py   # Terminal server call

=============================================================================
QUICK START
=============================================================================

    from interceptchain import InterceptorChain, Request
    from interceptchain.interceptors import (
        encode_request_body,
        authorization_header,
        decode_response_body,
        server_call,
    )

    response = (InterceptorChain(Request("GET_USER"))
        .add_interceptor(encode_request_body)
        .add_interceptor(authorization_header)
        .add_interceptor(decode_response_body)
        .add_interceptor(server_call)
        .proceed())

    print(response.body)   # John

=============================================================================
"""

__version__ = "1.0.0"
__author__ = "interceptchain contributors"

from .call import Request, Response
from .codec import DecodeError, decode, encode
from .config import ChainConfig
from .errors import InterceptorError
from .interceptors import (
    Chain,
    EndOfChainError,
    Interceptor,
    InterceptorChain,
    function_interceptor,
)
from .server import WebApiServer

__all__ = [
    # Version info
    "__version__",
    "__author__",

    # Call entities
    "Request",
    "Response",

    # Chain
    "Interceptor",
    "Chain",
    "InterceptorChain",
    "function_interceptor",

    # Errors
    "InterceptorError",
    "EndOfChainError",
    "DecodeError",

    # Codec
    "encode",
    "decode",

    # Server / config
    "WebApiServer",
    "ChainConfig",
]
