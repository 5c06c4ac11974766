from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from balance_api.config import Settings
from balance_api.main import create_app


@pytest.fixture
def settings() -> Settings:
    """Defaults only: ignore any .env file lying around the working directory."""
    return Settings(_env_file=None)  # type: ignore[call-arg]


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """A fresh app per test, so tests can register extra routes freely."""
    return create_app(settings)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    """HTTP client bound to the app in-process.

    raise_app_exceptions=False: Starlette re-raises unhandled exceptions after
    sending the 500 response, and we want to assert on that response.
    """
    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as client:
        yield client
