"""
Body encoding interceptors.

EncodeRequestBodyInterceptor works requestward: it replaces the request
with one whose body is Base64-encoded so only the target server can read
it. DecodeResponseBodyInterceptor works responseward: it delegates first
and decodes whatever body the server sent back.

Both must sit BEFORE the terminal server-call interceptor. A decode
interceptor placed after it never runs.
"""

from .base import Chain, Interceptor
from .. import codec
from ..call.response import Response


class EncodeRequestBodyInterceptor(Interceptor):
    """Encodes the request-body, so that it can only be read by the server."""

    def intercept(self, chain: Chain) -> Response:
        # body is frozen: rebind the chain to a new Request, same headers
        chain.request = chain.request.with_body(codec.encode(chain.request.body))
        return chain.proceed()


class DecodeResponseBodyInterceptor(Interceptor):
    """
    Decodes the encoded response from the server.

    Raises:
        DecodeError: the response body is not valid Base64
    """

    def intercept(self, chain: Chain) -> Response:
        response = chain.proceed()
        return Response(codec.decode(response.body))


encode_request_body = EncodeRequestBodyInterceptor()
decode_response_body = DecodeResponseBodyInterceptor()
