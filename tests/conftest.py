import os

# Use a separate test database
os.environ["ASYNC_DATABASE_URL"] = "sqlite+aiosqlite:///./test_preptive.db"
os.environ["CREATE_TABLES"] = "false"

import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from src.apps.blog.seed import seed_sample_content  # noqa: E402
from src.core.database import create_tables, drop_tables, engine  # noqa: E402
from src.main import app  # noqa: E402


# Fresh tables and sample content for every test
@pytest_asyncio.fixture(autouse=True)
async def setup_test_db():
    await drop_tables()
    await create_tables()
    await seed_sample_content()
    yield
    app.dependency_overrides.clear()
    await engine.dispose()


# Fixture for the async HTTP client
@pytest_asyncio.fixture
async def client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
