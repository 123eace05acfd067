r"""Contains the blocking HTTP GET request."""

from __future__ import annotations

__all__ = ["get"]

from typing import TYPE_CHECKING

from xhrio.core.http_logic import execute_http_method

if TYPE_CHECKING:
    from xhrio.core.config import ClientConfig
    from xhrio.response import Response


def get(url: str, *, config: ClientConfig | None = None) -> Response:
    r"""Send an HTTP GET request and block until the response is
    available.

    The response is returned whatever its status code. Call
    ``reject_on_failure()`` on it to turn non-2XX statuses into an
    ``HttpError``.

    Args:
        url: The URL to send the GET request to.
        config: An optional ClientConfig used to create the client.

    Returns:
        The ``Response`` of the server.

    Raises:
        RequestError: If the transport failed to complete the exchange.
        RuntimeError: If called while an event loop is running.

    Example:
        ```pycon
        >>> from xhrio import get
        >>> response = get("https://api.example.com/resource/123")  # doctest: +SKIP
        >>> response.status_code  # doctest: +SKIP
        200

        ```
    """
    return execute_http_method(url=url, method="GET", config=config)
