import secrets
from unittest.mock import AsyncMock, MagicMock

import bcrypt
import pytest

from src.app.services.token_service import hash_token
from src.domain.base import utcnow
from src.domain.entities import Setting, Token, User, UserStatus

PASSWORD = "secret123"


def _returns_argument():
    return AsyncMock(side_effect=lambda obj: obj)


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with every repository; lookups find nothing by default"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_username = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.create = _returns_argument()
    uow.users.update = _returns_argument()

    uow.tokens = MagicMock()
    uow.tokens.create = _returns_argument()
    uow.tokens.get_by_token_hash = AsyncMock(return_value=None)
    uow.tokens.delete_by_user_and_purpose = AsyncMock(return_value=0)
    uow.tokens.delete_by_id = AsyncMock(return_value=True)

    uow.sessions = MagicMock()
    uow.sessions.create = _returns_argument()
    uow.sessions.get_by_id = AsyncMock(return_value=None)
    uow.sessions.revoke_by_id = AsyncMock(return_value=True)
    uow.sessions.revoke_all_by_user_id = AsyncMock(return_value=0)

    uow.settings = MagicMock()
    uow.settings.get = AsyncMock(return_value=None)
    uow.settings.list_all = AsyncMock(return_value=[])
    uow.settings.upsert = AsyncMock(side_effect=lambda key, value: Setting(key=key, value=value))

    uow.audit_events = MagicMock()
    uow.audit_events.create = _returns_argument()

    return uow


@pytest.fixture
def mock_mailer():
    """SiteMailer double whose sends succeed"""
    mailer = MagicMock()
    mailer.send_account_activation = AsyncMock(return_value=True)
    mailer.send_password_reset = AsyncMock(return_value=True)
    mailer.send_contact = AsyncMock(return_value=True)
    return mailer


@pytest.fixture
def make_user():
    """Build a User whose password is PASSWORD"""
    password_hash = bcrypt.hashpw(PASSWORD.encode(), bcrypt.gensalt(4)).decode()

    def _make(username="alice", email="alice@example.com", status=UserStatus.active):
        return User(username=username, email=email, password_hash=password_hash, status=status)

    return _make


@pytest.fixture
def stored_token(mock_uow):
    """Store a token record for a user in the mock repositories; returns the plain token"""

    def _store(user, purpose, issued_at=None, ttl_seconds=3600):
        plain_token = secrets.token_urlsafe(32)
        record = Token(
            user_id=user.id,
            purpose=purpose,
            token_hash=hash_token(plain_token),
            issued_at=issued_at or utcnow(),
            ttl_seconds=ttl_seconds,
        )
        mock_uow.tokens.get_by_token_hash.side_effect = (
            lambda token_hash: record if token_hash == record.token_hash else None
        )
        mock_uow.users.get_by_id.side_effect = lambda user_id: user if user_id == user.id else None
        return plain_token

    return _store
