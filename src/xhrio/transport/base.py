r"""Abstract base class and ready states for transports.

A transport performs the network I/O of a single request and reports
progress through events, in the style of a browser ``XMLHttpRequest``:

- ``"load"`` handlers are called with the transport on every ready
  state change. Only ``ReadyState.DONE`` means the response is complete.
- ``"error"`` handlers are called with the exception when the exchange
  fails at the transport level.
"""

from __future__ import annotations

__all__ = ["EVENTS", "BaseTransport", "ReadyState"]

import enum
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable

EVENTS = ("load", "error")


class ReadyState(enum.IntEnum):
    r"""Implement the states a transport goes through."""

    UNSENT = 0
    OPENED = 1
    HEADERS_RECEIVED = 2
    LOADING = 3
    DONE = 4


class BaseTransport(ABC):
    """Abstract base class for transports.

    Subclasses implement ``open`` and ``send`` and update the readable
    fields (``ready_state``, ``status``, ``status_text``,
    ``response_text``) before calling ``_fire``. Handler registration
    and dispatch are shared.
    """

    def __init__(self) -> None:
        self.ready_state = ReadyState.UNSENT
        self.status = 0
        self.status_text = ""
        self.response_text = ""
        self._handlers: dict[str, list[Callable[[Any], None]]] = {event: [] for event in EVENTS}

    def on(self, event: str, handler: Callable[[Any], None]) -> None:
        """Register a handler for an event.

        Args:
            event: The event name, ``"load"`` or ``"error"``.
            handler: The function to call. ``"load"`` handlers receive the
                transport, ``"error"`` handlers receive the exception.

        Raises:
            ValueError: If the event name is unknown.
        """
        if event not in self._handlers:
            msg = f"Incorrect event: {event!r}. The valid events are: {EVENTS}"
            raise ValueError(msg)
        self._handlers[event].append(handler)

    @abstractmethod
    def open(self, method: str, url: str) -> None:
        """Begin a request.

        Args:
            method: The HTTP method (e.g. "GET").
            url: The URL to request.
        """

    @abstractmethod
    def send(self, body: str | None = None) -> None:
        """Transmit the request opened with ``open``.

        Args:
            body: The optional request body.
        """

    def _set_ready_state(self, state: ReadyState) -> None:
        self.ready_state = state
        self._fire("load", self)

    def _fire(self, event: str, payload: Any) -> None:
        for handler in list(self._handlers[event]):
            handler(payload)
