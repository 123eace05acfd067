r"""Configuration dataclass and defaults for the httpx transport.

This module provides configuration constants and a dataclass-based
configuration object used when the library creates its own
``httpx.AsyncClient``.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_FOLLOW_REDIRECTS",
    "DEFAULT_MAX_REDIRECTS",
    "DEFAULT_TRUST_ENV",
    "DEFAULT_VERIFY",
    "ClientConfig",
]

from dataclasses import dataclass, replace
from typing import Any

from xhrio.core.validation import validate_client_params

# Redirects are followed transparently, so the caller only ever sees
# the final response of a redirect chain
DEFAULT_FOLLOW_REDIRECTS = True

# Same default as httpx
DEFAULT_MAX_REDIRECTS = 20

# Verify TLS certificates against the default CA bundle
DEFAULT_VERIFY = True

# Read proxy and certificate settings from environment variables
DEFAULT_TRUST_ENV = True


@dataclass
class ClientConfig:
    """Configuration for the ``httpx.AsyncClient`` created by the
    default transport.

    Note:
        The config is ignored when the caller supplies its own client.
        No timeout is configurable: requests run to completion or to a
        transport-level error.

    Args:
        follow_redirects: Whether redirects are followed.
        max_redirects: Maximum number of redirects to follow. Must be >= 0.
        verify: Whether TLS certificates are verified.
        trust_env: Whether environment variables (proxies, CA bundle) are used.

    Example:
        ```pycon
        >>> from xhrio.core.config import ClientConfig
        >>> config = ClientConfig()
        >>> config.follow_redirects
        True
        >>> merged = config.merge(follow_redirects=False)
        >>> merged.follow_redirects
        False
        >>> config.follow_redirects  # Original unchanged
        True

        ```
    """

    follow_redirects: bool = DEFAULT_FOLLOW_REDIRECTS
    max_redirects: int = DEFAULT_MAX_REDIRECTS
    verify: bool = DEFAULT_VERIFY
    trust_env: bool = DEFAULT_TRUST_ENV

    def __post_init__(self) -> None:
        validate_client_params(max_redirects=self.max_redirects)

    def merge(self, **overrides: Any) -> ClientConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new ClientConfig instance with overrides applied.
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to ``httpx.AsyncClient`` keyword
        arguments.

        Returns:
            Dictionary with the client keyword arguments. The timeout is
                always disabled.

        Example:
            ```pycon
            >>> from xhrio.core.config import ClientConfig
            >>> params = ClientConfig(max_redirects=5).to_dict()
            >>> params["max_redirects"]
            5
            >>> params["timeout"] is None
            True

            ```
        """
        return {
            "follow_redirects": self.follow_redirects,
            "max_redirects": self.max_redirects,
            "verify": self.verify,
            "trust_env": self.trust_env,
            "timeout": None,
        }
