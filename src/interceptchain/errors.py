"""
Exception hierarchy for the interceptor chain.

    InterceptorError
    ├── EndOfChainError   (interceptors/base.py) - no terminal interceptor
    └── DecodeError       (codec.py)             - malformed encoded body

Neither is retried or recovered inside the chain. Both propagate straight
to the code that called chain.proceed().
"""


class InterceptorError(Exception):
    """Base class for every error raised by this package."""
