"""
=============================================================================
BASE INTERCEPTOR INTERFACE
=============================================================================

Defines the interceptor protocol and the chain that drives it.
Implements the Chain of Responsibility design pattern.

=============================================================================
CHAIN OF RESPONSIBILITY PATTERN
=============================================================================

This is one of the Gang of Four design patterns. In this pattern:

1. A chain of handlers (interceptors) is created
2. Each handler can either:
   - Produce the response itself (short-circuit / terminal)
   - Pass control to the rest of the chain via chain.proceed()
3. The response flows back through the chain in reverse order

    ┌─────────────────────────────────────────────────────────────────────┐
    │              CHAIN OF RESPONSIBILITY - CALL FLOW                    │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   Request ────────────────────────────────────────────────►         │
    │                                                                      │
    │   ┌──────────┐    ┌──────────┐    ┌──────────┐    ┌──────────┐     │
    │   │  Encode  │───►│   Auth   │───►│  Decode  │───►│  Server  │     │
    │   │ Request  │    │  Header  │    │ Response │    │   Call   │     │
    │   └────┬─────┘    └────┬─────┘    └────┬─────┘    └────┬─────┘     │
    │        │               │               │               │            │
    │        ▼               ▼               ▼               ▼            │
    │   [before]        [before]        [before]        [terminal]       │
    │   rebind          set header      (nothing)       build            │
    │   encoded body    authorization                   Response         │
    │                                                        │            │
    │        ▲               ▲               ▲               │            │
    │        │               │               │               ▼            │
    │   [after]         [after]         [after]                          │
    │   (nothing)       (nothing)       decode body                      │
    │                                                                      │
    │   ◄──────────────────────────────────────────────── Response        │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
QUEUE, NOT CLOSURES
=============================================================================

Unlike a wrapped-handler pipeline, the chain here passes ITSELF to each
interceptor. The interceptors live in a FIFO queue owned by the chain;
every proceed() pops exactly one:

    chain.proceed()                       queue: [A, B, C]
      └── A.intercept(chain)              queue: [B, C]
            └── chain.proceed()
                  └── B.intercept(chain)  queue: [C]
                        └── chain.proceed()
                              └── C.intercept(chain)   queue: []

Because the queue is shared across the recursion, an interceptor that
calls proceed() twice skips whichever interceptor is next. That is a
known foot-gun of the design, not an error the chain detects.

The chain does NOT validate ordering either. Registering the terminal
interceptor before a responseward one simply means the responseward one
never runs.

=============================================================================
"""

from abc import ABC, abstractmethod
from collections import deque
from typing import Callable, Deque, Optional
import logging

from ..call.request import Request
from ..call.response import Response
from ..errors import InterceptorError


logger = logging.getLogger(__name__)


END_OF_CHAIN_MESSAGE = (
    "Reached end-of-chain! Response responsibility interceptor not found."
)


class EndOfChainError(InterceptorError):
    """
    Raised by proceed() when no interceptor is left in the queue.

    This is a programmer error: the chain was built without a terminal
    interceptor (or one interceptor delegated more times than it should).
    """

    def __init__(self, message: str = END_OF_CHAIN_MESSAGE):
        super().__init__(message)


class Interceptor(ABC):
    """
    Abstract base class for interceptors.

    =========================================================================
    THE INTERCEPTOR CONTRACT
    =========================================================================

    Every interceptor must implement intercept with this signature:

        def intercept(self, chain: Chain) -> Response

    To continue the pipeline it MUST call chain.proceed() and use the
    result as (or to build) its own return value. Not calling proceed()
    ends the chain: the interceptor becomes the response source.

    =========================================================================
    INTERCEPTOR ANATOMY
    =========================================================================

        class MyInterceptor(Interceptor):
            def intercept(self, chain: Chain) -> Response:
                # requestward: read or rewrite chain.request
                chain.request.headers["x-trace"] = "on"

                response = chain.proceed()

                # responseward: inspect or rewrap the response
                return Response(response.body.upper())

    Interceptors hold no mutable state of their own. One instance can be
    shared by every chain in the process.

    =========================================================================
    """

    @abstractmethod
    def intercept(self, chain: "Chain") -> Response:
        """
        Intercept the call wrapped inside the chain.

        Args:
            chain: The chain carrying the current request

        Returns:
            The response, either from chain.proceed() or produced here
        """
        pass

    @property
    def name(self) -> str:
        """Get the interceptor name for logging."""
        return self.__class__.__name__

    def __repr__(self) -> str:
        return f"<{self.name}>"


class Chain(ABC):
    """
    Abstraction for a chain of calls through which a request flows up to
    the server, and the corresponding response flows back to the call-site.

    `request` is a mutable slot: interceptors that rewrite the body
    assign a new Request to it.
    """

    def __init__(self, request: Request):
        self.request = request

    @abstractmethod
    def proceed(self) -> Response:
        """
        Hand control to the next interceptor in the chain.

        Raises:
            EndOfChainError: no interceptor is left to produce a response
        """
        pass


class InterceptorChain(Chain):
    """
    Queue based implementation of a Chain.

    =========================================================================
    USAGE
    =========================================================================

        response = (InterceptorChain(Request("GET_USER"))
            .add_interceptor(encode_request_body)
            .add_interceptor(authorization_header)
            .add_interceptor(decode_response_body)
            .add_interceptor(server_call)
            .proceed())

    =========================================================================
    LIFECYCLE
    =========================================================================

    One chain per logical call: build it, call proceed() once, drop it.
    A chain is not reusable (its queue only shrinks) and is not meant to
    be shared between callers.

    =========================================================================
    """

    def __init__(self, request: Request):
        super().__init__(request)
        self._queue: Deque[Interceptor] = deque()

    def add_interceptor(self, interceptor: Interceptor) -> "InterceptorChain":
        """
        Append an interceptor to the tail of the queue.

        Interceptors run in insertion order. No reordering, no dedup:
        adding the same interceptor twice runs it twice.

        Returns:
            Self for method chaining
        """
        self._queue.append(interceptor)
        logger.debug(f"Added interceptor: {interceptor.name}")
        return self  # Enable chaining: chain.add_interceptor(A).add_interceptor(B)

    def add_interceptors(self, *interceptors: Interceptor) -> "InterceptorChain":
        """
        Append several interceptors at once, in the order given.

        Example:
            chain.add_interceptors(logging_interceptor, server_call)
        """
        for interceptor in interceptors:
            self.add_interceptor(interceptor)
        return self

    def proceed(self) -> Response:
        """
        Pop the next interceptor and let it intercept this chain.

        Raises:
            EndOfChainError: the queue is empty
        """
        if not self._queue:
            raise EndOfChainError()

        interceptor = self._queue.popleft()
        logger.debug(
            f"Proceeding to {interceptor.name} ({len(self._queue)} remaining)"
        )
        return interceptor.intercept(self)

    def __len__(self) -> int:
        """Get the number of interceptors still waiting to run."""
        return len(self._queue)


# =============================================================================
# FUNCTION INTERCEPTORS
# =============================================================================
#
# Sometimes you want a quick one-off interceptor without creating a class.
# FunctionInterceptor wraps a plain function as an interceptor.
#
# =============================================================================

class FunctionInterceptor(Interceptor):
    """
    Wraps a simple function as an interceptor.

    Usage:
        @function_interceptor
        def shout(chain):
            return Response(chain.proceed().body.upper())

        chain.add_interceptor(shout)

    Or without decorator:
        chain.add_interceptor(FunctionInterceptor(my_func, name="my_func"))
    """

    def __init__(
        self,
        func: Callable[[Chain], Response],
        name: Optional[str] = None
    ):
        self._func = func
        self._name = name or func.__name__

    def intercept(self, chain: Chain) -> Response:
        """Delegate to the wrapped function."""
        return self._func(chain)

    @property
    def name(self) -> str:
        """Return the interceptor name."""
        return self._name


def function_interceptor(
    func: Callable[[Chain], Response]
) -> FunctionInterceptor:
    """
    Decorator to create an interceptor from a function.

    Usage:
        @function_interceptor
        def canned(chain):
            return Response("ok")   # terminal: never calls proceed()
    """
    return FunctionInterceptor(func)
