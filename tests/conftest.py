from pathlib import Path
from typing import AsyncIterator

import httpx
import pytest
import pytest_asyncio
from starlette.applications import Starlette

from app.app import create_app
from app.config import Config, Env
from orders.repository import OrderRepository
from tests.browser import Browser


@pytest.fixture
def config(tmp_path: Path) -> Config:
    return Config(
        env=Env.test,
        db_url=f"sqlite+aiosqlite:///{tmp_path / 'orders.db'}",
        log_level="DEBUG",
    )


@pytest_asyncio.fixture
async def app(config: Config) -> AsyncIterator[Starlette]:
    app = create_app(config)
    async with app.router.lifespan_context(app):
        yield app


@pytest.fixture
def repo(app: Starlette) -> OrderRepository:
    return app.state.repo


@pytest_asyncio.fixture
async def client(app: Starlette) -> AsyncIterator[httpx.AsyncClient]:
    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app),
        base_url="http://testserver",
    ) as client:
        yield client


@pytest.fixture
def browser(client: httpx.AsyncClient) -> Browser:
    return Browser(client)
