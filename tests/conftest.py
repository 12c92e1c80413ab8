"""
Core pytest configuration.

Every API test gets a fresh app wired to its own SQLite file, so rows never
leak between tests. HTTP calls go through httpx's ASGI transport; the app's
lifespan is not run, so the schema is created here instead.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import AsyncGenerator

# Keep third-party loggers quiet before importing the app.
for _name in ("sqlalchemy", "sqlalchemy.engine", "aiosqlite", "httpx", "asyncio"):
    logging.getLogger(_name).setLevel(logging.WARNING)

import httpx
import pytest
import pytest_asyncio
from fastapi import FastAPI

from expense_api.core.settings import Settings
from expense_api.main import create_app
from expense_api.storage.database.db_connector import apply_schema_mode, dispose_engine


@pytest.fixture()
def test_settings(tmp_path: Path) -> Settings:
    return Settings(
        _env_file=None,
        DATABASE_URL=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        DB_SCHEMA_MODE="create",
        APP_ENV="local",
        LOG_LEVEL="WARNING",
    )


@pytest_asyncio.fixture()
async def app(test_settings: Settings) -> AsyncGenerator[FastAPI, None]:
    application = create_app(test_settings)
    engine = application.state.container.engine()
    await apply_schema_mode(engine, test_settings.DB_SCHEMA_MODE)
    yield application
    await dispose_engine(engine)


@pytest_asyncio.fixture()
async def client(app: FastAPI) -> AsyncGenerator[httpx.AsyncClient, None]:
    # raise_app_exceptions=False: the 500 handler response is what we assert on
    transport = httpx.ASGITransport(app=app, raise_app_exceptions=False)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture()
async def category(client: httpx.AsyncClient) -> dict:
    res = await client.post("/api/categories", json={"name": "Groceries"})
    assert res.status_code == 201
    return res.json()
