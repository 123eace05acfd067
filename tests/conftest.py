from __future__ import annotations

from typing import TYPE_CHECKING, Any
from unittest.mock import patch

import httpx
import pytest

from tests.helpers import MockServer

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_server() -> Generator[MockServer, None, None]:
    """Route every ``httpx.AsyncClient`` created by the library to an
    in-memory server.

    The clients are real ``httpx.AsyncClient`` objects built with the
    keyword arguments the library passes, plus an
    ``httpx.MockTransport``, so no network is used.
    """
    server = MockServer()
    async_client = httpx.AsyncClient

    def create_client(**kwargs: Any) -> httpx.AsyncClient:
        server.client_kwargs.append(kwargs)
        client = async_client(transport=httpx.MockTransport(server.handle), **kwargs)
        server.clients.append(client)
        return client

    with patch("httpx.AsyncClient", side_effect=create_client):
        yield server
