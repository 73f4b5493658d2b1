from datetime import timedelta
from uuid import uuid4

import pytest

from config import ApplicationConfig
from src.app.use_cases.auth.load_context_use_case import LoadContextUseCase
from src.domain.base import utcnow
from src.domain.entities import Session, Setting, UserStatus


def _session(user, **overrides):
    now = utcnow()
    data = {"user_id": user.id, "created_at": now, "expires_at": now + timedelta(hours=1)}
    data.update(overrides)
    return Session(**data)


@pytest.fixture
def logged_in(mock_uow, make_user):
    user = make_user()
    session = _session(user)
    mock_uow.users.get_by_id.return_value = user
    mock_uow.sessions.get_by_id.return_value = session
    return user, session


@pytest.mark.asyncio
async def test_guest_without_claims(mock_uow):
    result = await LoadContextUseCase(mock_uow).execute()

    assert result.is_ok()
    assert result.value.is_guest
    mock_uow.sessions.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_settings_fall_back_to_config(mock_uow):
    result = await LoadContextUseCase(mock_uow).execute()

    settings = result.value.settings
    assert settings.login_with_email is ApplicationConfig.LOGIN_WITH_EMAIL
    assert settings.registration_needs_activation is ApplicationConfig.REGISTRATION_NEEDS_ACTIVATION


@pytest.mark.asyncio
async def test_stored_setting_wins(mock_uow):
    stored = {"login_with_email": Setting(key="login_with_email", value=True)}
    mock_uow.settings.get.side_effect = lambda key: stored.get(key)

    result = await LoadContextUseCase(mock_uow).execute()

    assert result.value.settings.login_with_email is True


@pytest.mark.asyncio
async def test_identity_for_live_session(mock_uow, logged_in):
    user, session = logged_in

    result = await LoadContextUseCase(mock_uow).execute(user.id, session.id)

    identity = result.value.identity
    assert not result.value.is_guest
    assert identity.user_id == user.id
    assert identity.username == "alice"
    assert identity.session_id == session.id


@pytest.mark.asyncio
async def test_revoked_session_is_guest(mock_uow, logged_in):
    user, session = logged_in
    session.revoked = True

    result = await LoadContextUseCase(mock_uow).execute(user.id, session.id)

    assert result.value.is_guest


@pytest.mark.asyncio
async def test_expired_session_is_guest(mock_uow, logged_in):
    user, session = logged_in
    session.expires_at = utcnow() - timedelta(seconds=1)

    result = await LoadContextUseCase(mock_uow).execute(user.id, session.id)

    assert result.value.is_guest


@pytest.mark.asyncio
async def test_session_of_another_user_is_guest(mock_uow, logged_in):
    _, session = logged_in

    result = await LoadContextUseCase(mock_uow).execute(uuid4(), session.id)

    assert result.value.is_guest


@pytest.mark.asyncio
async def test_pending_user_is_guest(mock_uow, logged_in):
    user, session = logged_in
    user.status = UserStatus.pending

    result = await LoadContextUseCase(mock_uow).execute(user.id, session.id)

    assert result.value.is_guest
