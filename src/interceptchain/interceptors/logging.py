"""
=============================================================================
LOGGING INTERCEPTOR
=============================================================================

Logs the request body on the way in and the response body on the way
out. Place it FIRST in the chain so it sees the request exactly as the
call-site built it:

    chain.add_interceptor(logging_interceptor)   # FIRST - sees raw body
    chain.add_interceptor(encode_request_body)
    ...

Output (logger "interceptchain.access"):

    Request-Body : GET_USER
    Response-Body : John

=============================================================================
WHAT NOT TO LOG
=============================================================================

Bodies are logged verbatim. Do not put this interceptor in a chain that
carries secrets in the body, and note it never logs headers (the
authorization token lives there).

=============================================================================
"""

import logging
import time

from .base import Chain, Interceptor
from ..call.response import Response


# Namespaced logger, configurable on its own:
#   logging.getLogger("interceptchain.access").setLevel(logging.WARNING)
logger = logging.getLogger("interceptchain.access")


class LoggingInterceptor(Interceptor):
    """
    Logs the request-body and response-body.

    A call that fails further down the chain is logged at ERROR level and
    the exception is re-raised unchanged.
    """

    def intercept(self, chain: Chain) -> Response:
        logger.info(f"Request-Body : {chain.request.body}")

        start_time = time.time()
        try:
            response = chain.proceed()
        except Exception as e:
            duration_ms = (time.time() - start_time) * 1000
            logger.error(
                f"Call failed: {type(e).__name__}: {e} ({duration_ms:.2f}ms)"
            )
            raise

        logger.info(f"Response-Body : {response.body}")
        return response


logging_interceptor = LoggingInterceptor()
