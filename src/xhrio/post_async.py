r"""Contains the asynchronous HTTP POST request."""

from __future__ import annotations

__all__ = ["post_async"]

from typing import TYPE_CHECKING

from xhrio.core.http_logic import execute_http_method_async

if TYPE_CHECKING:
    import httpx

    from xhrio.core.config import ClientConfig
    from xhrio.response import Response


async def post_async(
    url: str,
    body: str,
    *,
    client: httpx.AsyncClient | None = None,
    config: ClientConfig | None = None,
) -> Response:
    r"""Send an HTTP POST request with a body asynchronously.

    The response is returned whatever its status code.

    Args:
        url: The URL to send the POST request to.
        body: The request body.
        client: An optional ``httpx.AsyncClient`` object to use for
            making the request. If None, a new client is created and
            closed after use.
        config: An optional ClientConfig used to create the client.
            Ignored if ``client`` is provided.

    Returns:
        The ``Response`` of the server.

    Raises:
        RequestError: If the transport failed to complete the exchange.

    Example:
        ```pycon
        >>> import asyncio
        >>> from xhrio import post_async
        >>> async def example():
        ...     response = await post_async("https://api.example.com/resource", "payload")
        ...     return response.status_code
        ...
        >>> asyncio.run(example())  # doctest: +SKIP

        ```
    """
    return await execute_http_method_async(
        url=url, method="POST", body=body, client=client, config=config
    )
