"""
=============================================================================
BODY ENCODER / DECODER
=============================================================================

Bodies are encoded with standard Base64 (RFC 4648 alphabet, with "="
padding) before they leave for the server, and the server answers with
a Base64 body that is decoded on the way back.

=============================================================================
TYPE PRESERVATION
=============================================================================

    encode("GET_USER")   -> "R0VUX1VTRVI="      str in, str out
    encode(b"GET_USER")  -> b"R0VUX1VTRVI="     bytes in, bytes out

Text is converted with UTF-8. The round-trip law holds for both types,
including the empty body:

    decode(encode(x)) == x

=============================================================================
STRICT DECODING
=============================================================================

Decoding is strict (validate=True): characters outside the alphabet or
wrong padding raise DecodeError instead of being silently dropped. A
text body whose decoded bytes are not valid UTF-8 raises DecodeError
too.

=============================================================================
"""

import base64
import binascii
import logging

from .call.request import Body
from .errors import InterceptorError


logger = logging.getLogger(__name__)


class DecodeError(InterceptorError, ValueError):
    """
    Raised when a body cannot be decoded.

    Carries the offending input for diagnostics. The underlying
    binascii/unicode error is attached as __cause__.
    """

    def __init__(self, message: str, data: Body = ""):
        super().__init__(message)
        self.data = data


def encode(data: Body) -> Body:
    """
    Base64-encode a body.

    Returns:
        str for str input, bytes for bytes input
    """
    if isinstance(data, str):
        return base64.b64encode(data.encode("utf-8")).decode("ascii")
    return base64.b64encode(data)


def decode(data: Body) -> Body:
    """
    Base64-decode a body.

    Returns:
        str for str input, bytes for bytes input

    Raises:
        DecodeError: input is not valid padded Base64, or (for str input)
                     the decoded bytes are not UTF-8
    """
    try:
        raw = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        # ValueError covers non-ASCII characters in a str argument
        logger.debug(f"Rejected malformed base64 body: {data!r}")
        raise DecodeError(f"Malformed base64 body: {e}", data) from e

    if isinstance(data, bytes):
        return raw

    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"Decoded body is not valid UTF-8: {e}", data) from e
