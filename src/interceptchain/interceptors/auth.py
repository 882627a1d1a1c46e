"""
Authorization header interceptor.
"""

from .base import Chain, Interceptor
from ..call.response import Response


AUTHORIZATION_HEADER = "authorization"
AUTHORIZATION_TOKEN = "access_token"


class AuthorizationHeaderInterceptor(Interceptor):
    """
    Adds the authorization header to the current request.

    The header is written in place on chain.request.headers. Existing
    headers are left untouched; an existing "authorization" value is
    overwritten.
    """

    def intercept(self, chain: Chain) -> Response:
        chain.request.headers[AUTHORIZATION_HEADER] = AUTHORIZATION_TOKEN
        return chain.proceed()


authorization_header = AuthorizationHeaderInterceptor()
