"""
pytest configuration and fixtures.
"""

from typing import List, Optional
import pytest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from interceptchain.call import Request, Response
from interceptchain.interceptors import Chain, Interceptor


class StubChain(Chain):
    """
    Chain double whose proceed() returns a fixed response.

    Lets a single interceptor be tested without the rest of the chain.
    """

    def __init__(self, request: Request, response: Optional[Response] = None):
        super().__init__(request)
        self.response = response
        self.proceed_calls = 0

    def proceed(self) -> Response:
        self.proceed_calls += 1
        if self.response is None:
            raise AssertionError("proceed() was not expected to be called")
        return self.response


class RecordingInterceptor(Interceptor):
    """Records its label into a shared list, then delegates."""

    def __init__(self, label: str, calls: List[str]):
        self.label = label
        self.calls = calls

    def intercept(self, chain: Chain) -> Response:
        self.calls.append(self.label)
        return chain.proceed()

    @property
    def name(self) -> str:
        return f"Recording[{self.label}]"


class EchoInterceptor(Interceptor):
    """Terminal double: answers with the current request body."""

    def intercept(self, chain: Chain) -> Response:
        return Response(chain.request.body)


@pytest.fixture
def calls() -> List[str]:
    """Shared invocation log for RecordingInterceptor instances."""
    return []


@pytest.fixture
def recorder(calls: List[str]):
    """Factory for RecordingInterceptor instances sharing `calls`."""
    def make(label: str) -> RecordingInterceptor:
        return RecordingInterceptor(label, calls)
    return make


@pytest.fixture
def echo() -> EchoInterceptor:
    """Terminal interceptor that echoes the request body."""
    return EchoInterceptor()


@pytest.fixture
def get_user_request() -> Request:
    """Request for the known GET_USER body."""
    return Request("GET_USER")


@pytest.fixture
def stub_chain():
    """StubChain class, for building single-interceptor tests."""
    return StubChain
