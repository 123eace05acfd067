r"""Parameter validation utilities.

This module provides validation functions for request and client
parameters. They run before any transport is touched, so invalid
arguments are reported synchronously to the caller.
"""

from __future__ import annotations

__all__ = ["validate_client_params", "validate_request_params"]

from typing import Any


def validate_request_params(method: Any, url: Any) -> None:
    """Validate the method and URL of a request.

    Only the type and emptiness are checked. Malformed URLs are left to
    the transport, which reports them as a ``RequestError``.

    Args:
        method: The HTTP method (e.g. "GET"). Must be a non-empty string.
        url: The URL to request. Must be a non-empty string.

    Raises:
        TypeError: If method or url is not a string.
        ValueError: If method or url is an empty string.

    Example:
        ```pycon
        >>> from xhrio.core.validation import validate_request_params
        >>> validate_request_params("GET", "https://api.example.com/data")
        >>> validate_request_params("GET", "")  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: url must be a non-empty string

        ```
    """
    for name, value in (("method", method), ("url", url)):
        if not isinstance(value, str):
            msg = f"{name} must be a string, got {type(value).__name__}"
            raise TypeError(msg)
        if not value:
            msg = f"{name} must be a non-empty string"
            raise ValueError(msg)


def validate_client_params(max_redirects: int) -> None:
    """Validate client parameters.

    Args:
        max_redirects: Maximum number of redirects to follow. Must be >= 0.

    Raises:
        ValueError: If max_redirects is negative.

    Example:
        ```pycon
        >>> from xhrio.core.validation import validate_client_params
        >>> validate_client_params(max_redirects=20)
        >>> validate_client_params(max_redirects=-1)  # doctest: +SKIP

        ```
    """
    if max_redirects < 0:
        msg = f"max_redirects must be >= 0, got {max_redirects}"
        raise ValueError(msg)
