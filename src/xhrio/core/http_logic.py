r"""Shared HTTP method logic for blocking and async operations.

This module contains the pipeline used by every convenience function:
build the request, attach the body if any, and execute it.
"""

from __future__ import annotations

__all__ = ["execute_http_method", "execute_http_method_async"]

import logging
from typing import TYPE_CHECKING

from xhrio.request import RequestBuilder

if TYPE_CHECKING:
    import httpx

    from xhrio.core.config import ClientConfig
    from xhrio.response import Response

logger: logging.Logger = logging.getLogger(__name__)


async def execute_http_method_async(
    url: str,
    method: str,
    *,
    body: str | None = None,
    client: httpx.AsyncClient | None = None,
    config: ClientConfig | None = None,
) -> Response:
    """Execute an HTTP method (asynchronous).

    This is the core shared logic for all asynchronous convenience
    functions. The response is returned whatever its status code.

    Args:
        url: The URL to send the request to.
        method: The HTTP method (GET, POST, PUT, PATCH, DELETE).
        body: The optional request body.
        client: An optional ``httpx.AsyncClient`` object to use for making
            the request. If None, a new client is created and closed after
            use.
        config: An optional ClientConfig used to create the client.
            Ignored if ``client`` is provided.

    Returns:
        The ``Response`` of the server.

    Raises:
        RequestError: If the transport failed to complete the exchange.
        TypeError: If url is not a string.
        ValueError: If url is empty.
    """
    builder = RequestBuilder.for_(method, url)
    if body is not None:
        builder.with_body(body)
    logger.debug(f"Executing {method} request to {url}")
    return await builder.execute(client=client, config=config)


def execute_http_method(
    url: str,
    method: str,
    *,
    body: str | None = None,
    config: ClientConfig | None = None,
) -> Response:
    """Execute an HTTP method (blocking).

    This is the core shared logic for all blocking convenience
    functions. The request runs on a new event loop, so it must not be
    called while an event loop is running.

    Args:
        url: The URL to send the request to.
        method: The HTTP method (GET, POST, PUT, PATCH, DELETE).
        body: The optional request body.
        config: An optional ClientConfig used to create the client.

    Returns:
        The ``Response`` of the server.

    Raises:
        RequestError: If the transport failed to complete the exchange.
        RuntimeError: If called while an event loop is running.
        TypeError: If url is not a string.
        ValueError: If url is empty.
    """
    builder = RequestBuilder.for_(method, url)
    if body is not None:
        builder.with_body(body)
    logger.debug(f"Executing {method} request to {url} (blocking)")
    return builder.execute_blocking(config=config)
