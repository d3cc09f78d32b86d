import os
import tempfile

# Settings are read once at import time, so the test environment has to be in
# place before anything from todo_api is imported.
_TEST_DIR = tempfile.mkdtemp(prefix="todo_api_tests_")
os.environ.setdefault("DATABASE_URL", f"sqlite+aiosqlite:///{_TEST_DIR}/app.db")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import httpx
import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from todo_api.database import build_engine, get_db, init_db
from todo_api.main import app
from todo_api.repository import Repository


@pytest.fixture(scope="function")
async def engine(tmp_path):
    """A fresh SQLite database per test."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await init_db(engine)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture(scope="function")
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture(scope="function")
def repo(db):
    return Repository(db)


@pytest.fixture(scope="function")
async def client(session_factory):
    """In-process HTTP client with request sessions bound to the test database."""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    transport = httpx.ASGITransport(app=app)
    try:
        async with httpx.AsyncClient(transport=transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()
