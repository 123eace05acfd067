r"""Contains the executor that turns one request into one settled
future.

The transport reports progress through events that can fire many
times. The executor bridges them into a single ``asyncio.Future``
settlement:

- ``"load"`` handlers ignore every ready state but ``DONE``.
- Both handlers no-op once the future is done, so whichever signal
  arrives first is the final outcome.
"""

from __future__ import annotations

__all__ = ["Executor"]

import asyncio
import logging
from typing import TYPE_CHECKING

from xhrio.exceptions import RequestError
from xhrio.response import Response
from xhrio.transport import HttpxTransport, ReadyState

if TYPE_CHECKING:
    import httpx

    from xhrio.core.config import ClientConfig
    from xhrio.request import Request
    from xhrio.transport import BaseTransport

logger: logging.Logger = logging.getLogger(__name__)


class Executor:
    """Perform exactly one request and produce exactly one outcome.

    An executor is single-shot: it can be executed once. Create a new
    executor (or call the builder again) to send the same request twice.

    Args:
        request: The request to execute.
        transport: An optional transport. If None, an ``HttpxTransport``
            is created when the request is executed.
        client: An optional ``httpx.AsyncClient`` passed to the default
            transport. Ignored if ``transport`` is provided.
        config: An optional ClientConfig passed to the default transport.
            Ignored if ``transport`` or ``client`` is provided.

    Example:
        ```pycon
        >>> import asyncio
        >>> from xhrio import Executor, Request
        >>> async def example():
        ...     executor = Executor(Request(method="GET", url="https://api.example.com/data"))
        ...     response = await executor.execute()
        ...     return response.status_code
        ...
        >>> asyncio.run(example())  # doctest: +SKIP

        ```
    """

    def __init__(
        self,
        request: Request,
        *,
        transport: BaseTransport | None = None,
        client: httpx.AsyncClient | None = None,
        config: ClientConfig | None = None,
    ) -> None:
        self.request = request
        self._transport = transport
        self._client = client
        self._config = config
        self._executed = False

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(request={self.request!r})"

    def execute_and_return(self) -> asyncio.Future[Response]:
        """Send the request and return a future of its response.

        This method never suspends the caller. The future is settled
        later, exactly once, when the transport reports completion or
        failure.

        Returns:
            A future resolved with the ``Response``, or rejected with a
                ``RequestError`` if the transport failed, including when
                creating, opening, or sending through the transport raised.

        Raises:
            RuntimeError: If there is no running event loop, or if the
                executor has already been executed.
        """
        loop = asyncio.get_running_loop()
        if self._executed:
            msg = f"{self.request.method} request to {self.request.url} has already been executed"
            raise RuntimeError(msg)
        self._executed = True

        future: asyncio.Future[Response] = loop.create_future()

        def on_load(source: BaseTransport) -> None:
            if source.ready_state != ReadyState.DONE or future.done():
                return
            future.set_result(
                Response(
                    status_code=source.status,
                    status_text=source.status_text,
                    text=source.response_text,
                )
            )

        def on_error(exc: BaseException | None) -> None:
            if future.done():
                return
            logger.debug(f"{self.request.method} request to {self.request.url} failed")
            error = RequestError()
            error.__cause__ = exc
            future.set_exception(error)

        try:
            transport = self._transport
            if transport is None:
                transport = HttpxTransport(client=self._client, config=self._config)
            transport.open(self.request.method, self.request.url)
            transport.on("load", on_load)
            transport.on("error", on_error)
            transport.send(self.request.body)
        except Exception as exc:
            on_error(exc)
        return future

    async def execute(self) -> Response:
        """Send the request and suspend until its response is available.

        Returns:
            The ``Response``, whatever its status code.

        Raises:
            RequestError: If the transport failed to complete the exchange.
            RuntimeError: If the executor has already been executed.
        """
        return await self.execute_and_return()

    def execute_blocking(self) -> Response:
        """Send the request and block the calling thread until its
        response is available.

        The request runs on a new event loop, so this method must not be
        called from a thread that already runs one.

        Returns:
            The ``Response``, whatever its status code.

        Raises:
            RequestError: If the transport failed to complete the exchange.
            RuntimeError: If called while an event loop is running, or if
                the executor has already been executed.
        """
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            return asyncio.run(self.execute())
        msg = (
            "execute_blocking() cannot be called from a running event loop, "
            "await execute() instead"
        )
        raise RuntimeError(msg)
