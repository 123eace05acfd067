r"""xhrio - Minimal asynchronous HTTP request client.

This package builds a request (method, URL, optional body), executes it
through a transport, and resolves to a structured ``Response`` or a
typed failure. Built on top of the httpx library, it bridges the
event-based progress of a transport into a single ``asyncio.Future``
settlement.

Key Features:
    - ``RequestBuilder`` to describe a request and execute it once
    - Future-returning, awaitable, and blocking forms of execution
    - Immutable ``Response`` values with 2XX validation
    - Two disjoint failure kinds: ``RequestError`` (transport) and
      ``HttpError`` (non-2XX status)
    - Blocking and async convenience functions for GET, POST, PUT,
      PATCH, and DELETE
    - Pluggable transports through ``BaseTransport``

Example:
    ```pycon
    >>> from xhrio import RequestBuilder, get, get_url_contents
    >>> response = get("https://api.example.com/data")  # doctest: +SKIP
    >>> text = get_url_contents("https://api.example.com/data")  # doctest: +SKIP
    >>> # Build a request with a body
    >>> response = (
    ...     RequestBuilder.for_("POST", "https://api.example.com/items")
    ...     .with_body('{"name": "value"}')
    ...     .execute_blocking()
    ... )  # doctest: +SKIP

    ```
"""

from __future__ import annotations

__all__ = [
    "ClientConfig",
    "Executor",
    "HttpError",
    "Request",
    "RequestBuilder",
    "RequestError",
    "Response",
    "__version__",
    "delete",
    "delete_async",
    "get",
    "get_async",
    "get_url_contents",
    "get_url_contents_async",
    "patch",
    "patch_async",
    "post",
    "post_async",
    "put",
    "put_async",
]

from importlib.metadata import PackageNotFoundError, version

from xhrio.contents import get_url_contents, get_url_contents_async
from xhrio.core.config import ClientConfig
from xhrio.delete import delete
from xhrio.delete_async import delete_async
from xhrio.exceptions import HttpError, RequestError
from xhrio.executor import Executor
from xhrio.get import get
from xhrio.get_async import get_async
from xhrio.patch import patch
from xhrio.patch_async import patch_async
from xhrio.post import post
from xhrio.post_async import post_async
from xhrio.put import put
from xhrio.put_async import put_async
from xhrio.request import Request, RequestBuilder
from xhrio.response import Response

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
