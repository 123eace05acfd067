r"""Contains helpers that download the body of a URL and enforce a 2XX
status."""

from __future__ import annotations

__all__ = ["get_url_contents", "get_url_contents_async"]

from typing import TYPE_CHECKING

from xhrio.get import get
from xhrio.get_async import get_async

if TYPE_CHECKING:
    import httpx

    from xhrio.core.config import ClientConfig


def get_url_contents(url: str, *, config: ClientConfig | None = None) -> str:
    r"""Send an HTTP GET request and return the body of a 2XX response.

    Args:
        url: The URL to download.
        config: An optional ClientConfig used to create the client.

    Returns:
        The decoded response body.

    Raises:
        HttpError: If the status code is outside 200-299.
        RequestError: If the transport failed to complete the exchange.
        RuntimeError: If called while an event loop is running.

    Example:
        ```pycon
        >>> from xhrio import get_url_contents
        >>> text = get_url_contents("https://api.example.com/readme.txt")  # doctest: +SKIP

        ```
    """
    return get(url, config=config).reject_on_failure().text


async def get_url_contents_async(
    url: str,
    *,
    client: httpx.AsyncClient | None = None,
    config: ClientConfig | None = None,
) -> str:
    r"""Send an HTTP GET request asynchronously and return the body of a
    2XX response.

    Args:
        url: The URL to download.
        client: An optional ``httpx.AsyncClient`` object to use for making
            the request.
        config: An optional ClientConfig used to create the client.
            Ignored if ``client`` is provided.

    Returns:
        The decoded response body.

    Raises:
        HttpError: If the status code is outside 200-299.
        RequestError: If the transport failed to complete the exchange.
    """
    response = await get_async(url, client=client, config=config)
    return response.reject_on_failure().text
