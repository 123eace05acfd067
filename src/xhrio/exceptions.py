r"""Exceptions raised by xhrio.

Two disjoint failure kinds are defined:

- ``RequestError``: the transport could not complete the exchange
  (network failure, DNS failure, invalid URL, ...).
- ``HttpError``: the exchange completed but the server answered with a
  non-2XX status.
"""

from __future__ import annotations

__all__ = ["HttpError", "RequestError"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from xhrio.response import Response


class HttpError(Exception):
    """Raised when a completed exchange returned a non-2XX status.

    The full response is kept so the caller can inspect the status code,
    the status text, and the body.

    Args:
        response: The response that triggered the error.

    Example:
        ```pycon
        >>> from xhrio import HttpError, Response
        >>> error = HttpError(Response(status_code=404, status_text="Not Found", text=""))
        >>> str(error)
        'Got non-OK response: 404: Not Found'
        >>> error.response.status_code
        404

        ```
    """

    def __init__(self, response: Response) -> None:
        self.response = response
        self.message = f"Got non-OK response: {response.status_code}: {response.status_text}"
        super().__init__(self.message)


class RequestError(Exception):
    """Raised when the transport failed to construct or send the
    request.

    The message is fixed. When the transport reported an underlying
    exception, it is available as ``__cause__``.

    Example:
        ```pycon
        >>> from xhrio import RequestError
        >>> str(RequestError())
        'An error occurred when constructing the request'

        ```
    """

    def __init__(self) -> None:
        self.message = "An error occurred when constructing the request"
        super().__init__(self.message)
