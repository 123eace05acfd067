r"""Contains the blocking HTTP PATCH request."""

from __future__ import annotations

__all__ = ["patch"]

from typing import TYPE_CHECKING

from xhrio.core.http_logic import execute_http_method

if TYPE_CHECKING:
    from xhrio.core.config import ClientConfig
    from xhrio.response import Response


def patch(url: str, body: str, *, config: ClientConfig | None = None) -> Response:
    r"""Send an HTTP PATCH request with a body and block until the
    response is available.

    The response is returned whatever its status code.

    Args:
        url: The URL to send the PATCH request to.
        body: The request body.
        config: An optional ClientConfig used to create the client.

    Returns:
        The ``Response`` of the server.

    Raises:
        RequestError: If the transport failed to complete the exchange.
        RuntimeError: If called while an event loop is running.

    Example:
        ```pycon
        >>> from xhrio import patch
        >>> response = patch("https://api.example.com/resource", '{"name": "value"}')  # doctest: +SKIP

        ```
    """
    return execute_http_method(url=url, method="PATCH", body=body, config=config)
