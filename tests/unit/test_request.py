"""
Unit tests for the Request and Response entities.
"""

import dataclasses

import pytest

from interceptchain.call import Request, Response


class TestRequest:
    """Tests for Request dataclass."""

    def test_default_headers(self):
        """Test that headers default to an empty, per-instance dict."""
        first = Request("a")
        second = Request("b")

        assert first.headers == {}
        assert first.headers is not second.headers

    def test_any_body_is_legal(self):
        """Test empty and bytes bodies."""
        assert Request("").body == ""
        assert Request(b"\x00").body == b"\x00"

    def test_body_is_frozen(self):
        """Test that the body cannot be reassigned."""
        request = Request("GET_USER")

        with pytest.raises(dataclasses.FrozenInstanceError):
            request.body = "POST_USER"

    def test_headers_mutable_in_place(self):
        """Test that headers may be written through a frozen request."""
        request = Request("GET_USER")
        request.headers["authorization"] = "token"

        assert request.headers == {"authorization": "token"}

    def test_with_body(self):
        """Test building a new request with a different body."""
        request = Request("GET_USER", headers={"x-id": "1"})
        rewritten = request.with_body("R0VUX1VTRVI=")

        assert rewritten is not request
        assert rewritten.body == "R0VUX1VTRVI="
        assert rewritten.headers == {"x-id": "1"}
        assert request.body == "GET_USER"

    def test_get_header_default(self):
        """Test get_header with default value."""
        request = Request("x", headers={"Accept": "text/plain"})

        assert request.get_header("Accept") == "text/plain"
        assert request.get_header("accept") == ""
        assert request.get_header("accept", "default") == "default"


class TestResponse:
    """Tests for Response dataclass."""

    def test_body(self):
        """Test storing a body."""
        assert Response("John").body == "John"

    def test_frozen(self):
        """Test that a response is immutable."""
        response = Response("John")

        with pytest.raises(dataclasses.FrozenInstanceError):
            response.body = "Jane"

    def test_equality(self):
        """Test value equality."""
        assert Response("a") == Response("a")
        assert Response("a") != Response("b")
