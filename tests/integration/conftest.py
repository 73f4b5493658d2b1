import re
from typing import List, Optional

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import src.domain.entities  # noqa: F401  (registers the tables)
from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.mailer import Mailer
from src.depends import get_mailer, get_unit_of_work
from tests.fixtures.json_loader import FormPayloads

TOKEN_IN_LINK = re.compile(r"token=([A-Za-z0-9_-]{43})")


class FakeMailer(Mailer):
    """Records outgoing mail; set `fail` to simulate a broken transport"""

    def __init__(self):
        self.sent: List[dict] = []
        self.fail = False

    async def send(self, to: str, subject: str, text: str, reply_to: Optional[str] = None) -> bool:
        if self.fail:
            return False
        self.sent.append({"to": to, "subject": subject, "text": text, "reply_to": reply_to})
        return True

    def last_token(self) -> str:
        """Token from the link in the most recent message"""
        return TOKEN_IN_LINK.search(self.sent[-1]["text"]).group(1)


@pytest_asyncio.fixture
def test_data():
    return FormPayloads


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
def mailer():
    return FakeMailer()


@pytest_asyncio.fixture
def app(db_session, mailer):
    from src.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_mailer] = lambda: mailer
    return app


@pytest_asyncio.fixture
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
def set_setting(client):
    """Change a site setting through the admin API"""

    async def _set(key: str, value: bool):
        response = await client.put(
            f"/admin/settings/{key}",
            json={"value": value},
            headers={"X-Admin-API-Key": ApplicationConfig.ADMIN_API_KEY},
        )
        assert response.status_code == 200
        return response.json()

    return _set


@pytest_asyncio.fixture
def signup(client, set_setting, test_data):
    """Sign a user up; with activation the emailed token is returned"""

    async def _signup(activate: bool = True, **overrides):
        await set_setting("registration_needs_activation", activate)
        response = await client.post("/signup", json=test_data.get("signup", **overrides))
        assert response.status_code == 303
        return response

    return _signup


@pytest_asyncio.fixture
def active_user(client, signup, mailer, test_data):
    """Sign up and follow the activation link; returns the signup payload"""

    async def _active_user(**overrides):
        await signup(activate=True, **overrides)
        response = await client.get("/activate-account", params={"token": mailer.last_token()})
        assert response.status_code == 303
        return test_data.get("signup", **overrides)

    return _active_user
