r"""Contains the request value and its builder."""

from __future__ import annotations

__all__ = ["Request", "RequestBuilder"]

from dataclasses import dataclass
from typing import TYPE_CHECKING

from xhrio.core.validation import validate_request_params
from xhrio.executor import Executor

if TYPE_CHECKING:
    import asyncio

    import httpx

    from xhrio.core.config import ClientConfig
    from xhrio.response import Response
    from xhrio.transport import BaseTransport


@dataclass(frozen=True)
class Request:
    """Immutable description of an HTTP request.

    Args:
        method: The HTTP method (e.g. "GET").
        url: The URL to request.
        body: The optional request body.
    """

    method: str
    url: str
    body: str | None = None


class RequestBuilder:
    """Accumulate the method, URL, and body of a request, then execute
    it.

    The builder is mutable and owned by a single caller. Execution works
    on a frozen snapshot (see ``build``), so the request never changes
    once it has been sent. Nothing touches the network until one of the
    ``execute*`` methods is called.

    Args:
        method: The HTTP method (e.g. "GET"). Must be a non-empty string.
        url: The URL to request. Must be a non-empty string.

    Raises:
        TypeError: If method or url is not a string.
        ValueError: If method or url is empty.

    Example:
        ```pycon
        >>> from xhrio import RequestBuilder
        >>> builder = RequestBuilder.for_("POST", "https://api.example.com/items").with_body("{}")
        >>> builder.build()
        Request(method='POST', url='https://api.example.com/items', body='{}')
        >>> response = builder.execute_blocking()  # doctest: +SKIP

        ```
    """

    def __init__(self, method: str, url: str) -> None:
        validate_request_params(method, url)
        self.method = method
        self.url = url
        self.body: str | None = None

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(method={self.method!r}, url={self.url!r}, "
            f"body={self.body!r})"
        )

    @classmethod
    def for_(cls, method: str, url: str) -> RequestBuilder:
        """Create a builder for a request without body.

        Args:
            method: The HTTP method (e.g. "GET").
            url: The URL to request.

        Returns:
            The new builder.
        """
        return cls(method, url)

    def with_body(self, body: str) -> RequestBuilder:
        """Attach a body to the request.

        Calling this method again replaces the previous body.

        Args:
            body: The request body.

        Returns:
            This builder, for chaining.
        """
        self.body = body
        return self

    def build(self) -> Request:
        """Return an immutable snapshot of the request."""
        return Request(method=self.method, url=self.url, body=self.body)

    def executor(
        self,
        *,
        transport: BaseTransport | None = None,
        client: httpx.AsyncClient | None = None,
        config: ClientConfig | None = None,
    ) -> Executor:
        """Create a single-shot executor for the current request.

        Args:
            transport: An optional transport.
            client: An optional ``httpx.AsyncClient`` for the default
                transport.
            config: An optional ClientConfig for the default transport.

        Returns:
            The executor.
        """
        return Executor(self.build(), transport=transport, client=client, config=config)

    def execute_and_return(
        self,
        *,
        transport: BaseTransport | None = None,
        client: httpx.AsyncClient | None = None,
        config: ClientConfig | None = None,
    ) -> asyncio.Future[Response]:
        r"""Send the request and return a future of its response.

        See ``Executor.execute_and_return``.
        """
        return self.executor(
            transport=transport, client=client, config=config
        ).execute_and_return()

    async def execute(
        self,
        *,
        transport: BaseTransport | None = None,
        client: httpx.AsyncClient | None = None,
        config: ClientConfig | None = None,
    ) -> Response:
        r"""Send the request and suspend until its response is
        available.

        See ``Executor.execute``.
        """
        return await self.executor(transport=transport, client=client, config=config).execute()

    def execute_blocking(
        self,
        *,
        transport: BaseTransport | None = None,
        config: ClientConfig | None = None,
    ) -> Response:
        r"""Send the request and block until its response is available.

        See ``Executor.execute_blocking``.
        """
        return self.executor(transport=transport, config=config).execute_blocking()
