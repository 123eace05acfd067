r"""Contains the immutable HTTP response value."""

from __future__ import annotations

__all__ = ["Response"]

from dataclasses import dataclass

from xhrio.exceptions import HttpError


@dataclass(frozen=True)
class Response:
    """HTTP response produced by a completed exchange.

    Args:
        status_code: The HTTP status code (e.g. 200, 404).
        status_text: The status text sent by the server (e.g. "OK").
        text: The decoded response body.

    Example:
        ```pycon
        >>> from xhrio import Response
        >>> response = Response(status_code=200, status_text="OK", text="hello")
        >>> response.reject_on_failure().text
        'hello'

        ```
    """

    status_code: int
    status_text: str
    text: str

    @property
    def ok(self) -> bool:
        """Indicate if the status code is in the 2XX range."""
        return self.status_code // 100 == 2

    def reject_on_failure(self) -> Response:
        """Return this response if its status code is 2XX, otherwise
        raise.

        Returns:
            The same response instance, for chaining.

        Raises:
            HttpError: If the status code is outside 200-299. The error
                wraps this response.

        Example:
            ```pycon
            >>> from xhrio import Response
            >>> Response(status_code=204, status_text="No Content", text="").reject_on_failure()
            Response(status_code=204, status_text='No Content', text='')
            >>> Response(status_code=500, status_text="Server Error", text="").reject_on_failure()  # doctest: +SKIP
            Traceback (most recent call last):
            ...
            xhrio.exceptions.HttpError: Got non-OK response: 500: Server Error

            ```
        """
        if not self.ok:
            raise HttpError(self)
        return self
