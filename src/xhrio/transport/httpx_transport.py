r"""Contains the default transport, built on ``httpx.AsyncClient``."""

from __future__ import annotations

__all__ = ["HttpxTransport"]

import asyncio
import logging

import httpx

from xhrio.core.config import ClientConfig
from xhrio.transport.base import BaseTransport, ReadyState

logger: logging.Logger = logging.getLogger(__name__)

# Strong references to in-flight exchanges, the event loop only keeps
# weak ones
_PENDING_EXCHANGES: set[asyncio.Task[None]] = set()


class HttpxTransport(BaseTransport):
    """Transport that performs the exchange with an
    ``httpx.AsyncClient``.

    ``send`` schedules the exchange as an ``asyncio.Task`` on the running
    event loop and returns immediately. The response is streamed so the
    transport goes through ``HEADERS_RECEIVED``, ``LOADING`` (once per
    decoded body chunk) and ``DONE``, firing ``"load"`` at each change.
    Any exception raised while creating the client or performing the
    exchange is reported through ``"error"`` instead.

    Args:
        client: An optional ``httpx.AsyncClient``. If None, a new client is
            created for the exchange and closed after it.
        config: An optional ClientConfig used to create the client. Ignored
            if ``client`` is provided.

    Example:
        ```pycon
        >>> import asyncio
        >>> from xhrio.transport import HttpxTransport, ReadyState
        >>> async def example():
        ...     loop = asyncio.get_running_loop()
        ...     done = loop.create_future()
        ...     transport = HttpxTransport()
        ...     transport.open("GET", "https://api.example.com/data")
        ...     transport.on(
        ...         "load",
        ...         lambda t: t.ready_state == ReadyState.DONE and done.set_result(t.status),
        ...     )
        ...     transport.send()
        ...     return await done
        ...
        >>> asyncio.run(example())  # doctest: +SKIP

        ```
    """

    def __init__(
        self, client: httpx.AsyncClient | None = None, config: ClientConfig | None = None
    ) -> None:
        super().__init__()
        self._client = client
        self._config = config if config is not None else ClientConfig()
        self._method = ""
        self._url = ""
        self._task: asyncio.Task[None] | None = None

    def open(self, method: str, url: str) -> None:
        if self.ready_state != ReadyState.UNSENT:
            msg = "The transport has already been opened"
            raise RuntimeError(msg)
        self._method = method
        self._url = url
        self._set_ready_state(ReadyState.OPENED)

    def send(self, body: str | None = None) -> None:
        if self.ready_state != ReadyState.OPENED:
            msg = f"The transport must be opened before sending (ready state: {self.ready_state})"
            raise RuntimeError(msg)
        if self._task is not None:
            msg = "The request has already been sent"
            raise RuntimeError(msg)
        logger.debug(f"Sending {self._method} request to {self._url}")
        self._task = asyncio.get_running_loop().create_task(self._exchange(body))
        _PENDING_EXCHANGES.add(self._task)
        self._task.add_done_callback(_PENDING_EXCHANGES.discard)

    async def _exchange(self, body: str | None) -> None:
        owns_client = self._client is None
        client = self._client
        try:
            if client is None:
                client = httpx.AsyncClient(**self._config.to_dict())
            await self._stream(client, body)
        except Exception as exc:
            # httpx.InvalidURL, httpx.StreamError and client misuse (e.g. a
            # closed client) do not derive from httpx.HTTPError
            logger.debug(
                f"{self._method} request to {self._url} encountered {type(exc).__name__}: {exc}"
            )
            self._fire("error", exc)
        finally:
            if owns_client and client is not None:
                await client.aclose()

    async def _stream(self, client: httpx.AsyncClient, body: str | None) -> None:
        async with client.stream(self._method, self._url, content=body) as response:
            self.status = response.status_code
            self.status_text = response.reason_phrase
            self._set_ready_state(ReadyState.HEADERS_RECEIVED)
            chunks = []
            async for chunk in response.aiter_text():
                chunks.append(chunk)
                self.response_text = "".join(chunks)
                self._set_ready_state(ReadyState.LOADING)
            self.response_text = "".join(chunks)
        logger.debug(
            f"{self._method} request to {self._url} completed with status "
            f"{self.status} {self.status_text}"
        )
        self._set_ready_state(ReadyState.DONE)
