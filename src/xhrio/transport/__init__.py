r"""Transports perform the network I/O of a request and report progress
through ``"load"`` and ``"error"`` events."""

from __future__ import annotations

__all__ = ["EVENTS", "BaseTransport", "HttpxTransport", "ReadyState"]

from xhrio.transport.base import EVENTS, BaseTransport, ReadyState
from xhrio.transport.httpx_transport import HttpxTransport
