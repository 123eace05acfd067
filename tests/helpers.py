r"""Shared test helpers for transports and HTTP method functions.

This module contains common test infrastructure used across multiple
test files to reduce duplication and improve maintainability.
"""

from __future__ import annotations

__all__ = [
    "HTTP_METHODS",
    "HTTP_METHODS_ASYNC",
    "TEST_URL",
    "AsyncHttpMethodTestCase",
    "AutoTransport",
    "FakeTransport",
    "HttpMethodTestCase",
    "MockServer",
    "RaisingTransport",
]

import asyncio
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import httpx
import pytest

from xhrio import (
    delete,
    delete_async,
    get,
    get_async,
    patch,
    patch_async,
    post,
    post_async,
    put,
    put_async,
)
from xhrio.transport import BaseTransport, ReadyState

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from xhrio import Response

TEST_URL = "https://api.example.com/data"


@dataclass
class MockServer:
    """In-memory server used as the handler of an
    ``httpx.MockTransport``.

    Attributes:
        status_code: The status code of every response.
        text: The body of every response.
        error: If set, the exception raised instead of answering.
        requests: The requests received, in order.
        clients: The clients created through the ``mock_server`` fixture.
        client_kwargs: The keyword arguments of those clients.
    """

    status_code: int = 200
    text: str = ""
    error: Exception | None = None
    requests: list[httpx.Request] = field(default_factory=list)
    clients: list[httpx.AsyncClient] = field(default_factory=list)
    client_kwargs: list[dict[str, Any]] = field(default_factory=list)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(self.status_code, text=self.text)


class FakeTransport(BaseTransport):
    """Transport driven by hand from the test.

    ``open`` and ``send`` only record the call; the test then moves the
    transport through its ready states with ``progress``, ``complete``,
    and ``fail``.
    """

    def __init__(self) -> None:
        super().__init__()
        self.calls: list[tuple[Any, ...]] = []

    def open(self, method: str, url: str) -> None:
        self.calls.append(("open", method, url))
        self._set_ready_state(ReadyState.OPENED)

    def send(self, body: str | None = None) -> None:
        self.calls.append(("send", body))

    def progress(self, state: ReadyState) -> None:
        self._set_ready_state(state)

    def complete(self, status_code: int = 200, status_text: str = "OK", text: str = "") -> None:
        self.status = status_code
        self.status_text = status_text
        self._set_ready_state(ReadyState.HEADERS_RECEIVED)
        self.response_text = text
        self._set_ready_state(ReadyState.LOADING)
        self._set_ready_state(ReadyState.DONE)

    def fail(self, exc: Exception | None = None) -> None:
        self._fire("error", exc)


class AutoTransport(FakeTransport):
    """Transport that completes, or fails, on the next event loop
    iteration after ``send``."""

    def __init__(
        self,
        status_code: int = 200,
        status_text: str = "OK",
        text: str = "",
        error: Exception | None = None,
    ) -> None:
        super().__init__()
        self._outcome = (status_code, status_text, text)
        self._error = error

    def send(self, body: str | None = None) -> None:
        super().send(body)
        loop = asyncio.get_running_loop()
        if self._error is not None:
            loop.call_soon(self.fail, self._error)
        else:
            loop.call_soon(self.complete, *self._outcome)


class RaisingTransport(FakeTransport):
    """Transport whose ``open`` or ``send`` raises synchronously."""

    def __init__(self, fail_on: str, error: Exception) -> None:
        super().__init__()
        self._fail_on = fail_on
        self._error = error

    def open(self, method: str, url: str) -> None:
        super().open(method, url)
        if self._fail_on == "open":
            raise self._error

    def send(self, body: str | None = None) -> None:
        super().send(body)
        if self._fail_on == "send":
            raise self._error


@dataclass
class HttpMethodTestCase:
    """Test case definition for blocking HTTP method testing.

    Attributes:
        method_name: The HTTP method name (e.g., "GET", "POST").
        method_func: The function to test (e.g., get).
        supports_body: Whether the function takes a request body.
    """

    method_name: str
    method_func: Callable[..., Response]
    supports_body: bool = False


@dataclass
class AsyncHttpMethodTestCase:
    """Test case definition for async HTTP method testing.

    Attributes:
        method_name: The HTTP method name (e.g., "GET", "POST").
        method_func: The async function to test (e.g., get_async).
        supports_body: Whether the function takes a request body.
    """

    method_name: str
    method_func: Callable[..., Awaitable[Response]]
    supports_body: bool = False


HTTP_METHODS = [
    pytest.param(HttpMethodTestCase("GET", get), id="GET"),
    pytest.param(HttpMethodTestCase("POST", post, supports_body=True), id="POST"),
    pytest.param(HttpMethodTestCase("PUT", put, supports_body=True), id="PUT"),
    pytest.param(HttpMethodTestCase("PATCH", patch, supports_body=True), id="PATCH"),
    pytest.param(HttpMethodTestCase("DELETE", delete), id="DELETE"),
]

HTTP_METHODS_ASYNC = [
    pytest.param(AsyncHttpMethodTestCase("GET", get_async), id="GET"),
    pytest.param(AsyncHttpMethodTestCase("POST", post_async, supports_body=True), id="POST"),
    pytest.param(AsyncHttpMethodTestCase("PUT", put_async, supports_body=True), id="PUT"),
    pytest.param(AsyncHttpMethodTestCase("PATCH", patch_async, supports_body=True), id="PATCH"),
    pytest.param(AsyncHttpMethodTestCase("DELETE", delete_async), id="DELETE"),
]
