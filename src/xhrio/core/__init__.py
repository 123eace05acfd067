r"""Core shared logic for blocking and async HTTP operations.

This module contains shared functionality used by both blocking and
asynchronous convenience functions, including configuration and
validation. The shared HTTP method pipeline lives in
``xhrio.core.http_logic``.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_FOLLOW_REDIRECTS",
    "DEFAULT_MAX_REDIRECTS",
    "DEFAULT_TRUST_ENV",
    "DEFAULT_VERIFY",
    "ClientConfig",
    "validate_client_params",
    "validate_request_params",
]

from xhrio.core.config import (
    DEFAULT_FOLLOW_REDIRECTS,
    DEFAULT_MAX_REDIRECTS,
    DEFAULT_TRUST_ENV,
    DEFAULT_VERIFY,
    ClientConfig,
)
from xhrio.core.validation import validate_client_params, validate_request_params
