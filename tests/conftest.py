import pytest
from httpx import ASGITransport, AsyncClient

from app.core.config import Settings
from app.core.db import Database
from app.core.security import create_access_token
from app.main import create_app
from app.modules import models_registry  # noqa: F401
from factories import USER_PASSWORD, user_factory



@pytest.fixture
def settings(tmp_path):
    return Settings(
        ENV="test",
        DATABASE_DSN=f"sqlite+aiosqlite:///{tmp_path / 'clinic.db'}",
        DB_MANAGE="none",
        JWT_SECRET="test-secret",
        DEFAULT_PAGE_SIZE=10,
        MAX_PAGE_SIZE=100,
    )


@pytest.fixture
async def db(settings):
    database = Database(settings.DATABASE_DSN)
    await database.create_all()
    yield database
    await database.dispose()


@pytest.fixture
async def session(db):
    async with db.session() as s:
        yield s


@pytest.fixture
def app(settings, db):
    return create_app(settings, database=db)


@pytest.fixture
async def client(app):
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c


@pytest.fixture
async def user(session):
    return await user_factory(session, password=USER_PASSWORD)


@pytest.fixture
def auth_headers(user, settings):
    token = create_access_token(user.id, settings)
    return {"Authorization": f"Bearer {token}"}
