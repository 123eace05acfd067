r"""Contains the asynchronous HTTP GET request."""

from __future__ import annotations

__all__ = ["get_async"]

from typing import TYPE_CHECKING

from xhrio.core.http_logic import execute_http_method_async

if TYPE_CHECKING:
    import httpx

    from xhrio.core.config import ClientConfig
    from xhrio.response import Response


async def get_async(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    config: ClientConfig | None = None,
) -> Response:
    r"""Send an HTTP GET request asynchronously.

    The response is returned whatever its status code.

    Args:
        url: The URL to send the GET request to.
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
        >>> from xhrio import get_async
        >>> async def example():
        ...     response = await get_async("https://api.example.com/resource/123")
        ...     return response.status_code
        ...
        >>> asyncio.run(example())  # doctest: +SKIP

        ```
    """
    return await execute_http_method_async(url=url, method="GET", client=client, config=config)
