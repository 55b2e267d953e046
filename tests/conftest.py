import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from filma.core.config import DataBaseConfig, Settings
from filma.core.database import DatabaseHelper
from filma.main import create_app


def _sqlite_url(tmp_path) -> str:
    return f"sqlite+aiosqlite:///{tmp_path / 'filma.db'}"


@pytest.fixture
def settings(tmp_path):
    return Settings(
        debug=True,
        db=DataBaseConfig(DB_URL=_sqlite_url(tmp_path), DB_CREATE_TABLES=True),
    )


@pytest.fixture
def client(settings):
    with TestClient(create_app(settings)) as c:
        yield c


@pytest.fixture
def client_without_table(tmp_path):
    # La base répond au ping mais la table movies n'existe pas
    settings = Settings(db=DataBaseConfig(DB_URL=_sqlite_url(tmp_path), DB_CREATE_TABLES=False))
    with TestClient(create_app(settings)) as c:
        yield c


@pytest_asyncio.fixture
async def db_helper(tmp_path):
    helper = DatabaseHelper(url=_sqlite_url(tmp_path))
    await helper.create_tables()
    yield helper
    await helper.dispose()


@pytest_asyncio.fixture
async def session(db_helper):
    async with db_helper.session_factory() as s:
        yield s
