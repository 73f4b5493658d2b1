from datetime import timedelta

import bcrypt
import pytest

from src.app.use_cases.auth.forms import ResetPasswordForm
from src.app.use_cases.auth.reset_password_use_case import ResetPasswordUseCase
from src.domain.base import utcnow
from src.domain.entities import TokenPurpose


@pytest.mark.asyncio
async def test_check_valid_reset_token(mock_uow, make_user, stored_token):
    token = stored_token(make_user(), TokenPurpose.password_reset)

    result = await ResetPasswordUseCase(mock_uow).check(token)

    assert result.is_ok()
    mock_uow.tokens.delete_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_check_expired_reset_token(mock_uow, make_user, stored_token):
    token = stored_token(
        make_user(),
        TokenPurpose.password_reset,
        issued_at=utcnow() - timedelta(hours=2),
        ttl_seconds=3600,
    )

    result = await ResetPasswordUseCase(mock_uow).check(token)

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_reset_password_success(mock_uow, make_user, stored_token):
    """New hash stored, token consumed, all sessions revoked"""
    # Arrange
    user = make_user()
    token = stored_token(user, TokenPurpose.password_reset)
    mock_uow.sessions.revoke_all_by_user_id.return_value = 2

    # Act
    result = await ResetPasswordUseCase(mock_uow).execute(
        token, ResetPasswordForm(password="new-secret")
    )

    # Assert
    assert result.is_ok()
    assert result.value.status == "success"
    assert result.value.sessions_revoked == 2

    assert bcrypt.checkpw(b"new-secret", user.password_hash.encode())
    assert not bcrypt.checkpw(b"secret123", user.password_hash.encode())
    mock_uow.tokens.delete_by_id.assert_called_once()
    mock_uow.sessions.revoke_all_by_user_id.assert_called_once_with(user.id)
    audit_event = mock_uow.audit_events.create.call_args[0][0]
    assert audit_event.action == "password_reset_confirmed"
    assert audit_event.event_metadata == {"sessions_revoked": 2}
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_reset_password_token_consumed_meanwhile(mock_uow, make_user, stored_token):
    user = make_user()
    old_hash = user.password_hash
    token = stored_token(user, TokenPurpose.password_reset)
    mock_uow.tokens.delete_by_id.return_value = False

    result = await ResetPasswordUseCase(mock_uow).execute(
        token, ResetPasswordForm(password="new-secret")
    )

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"
    assert user.password_hash == old_hash
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_reset_password_activation_token_rejected(mock_uow, make_user, stored_token):
    token = stored_token(make_user(), TokenPurpose.account_activation)

    result = await ResetPasswordUseCase(mock_uow).execute(
        token, ResetPasswordForm(password="new-secret")
    )

    assert result.is_err()
    mock_uow.users.update.assert_not_called()


def test_reset_password_form_min_length():
    with pytest.raises(ValueError):
        ResetPasswordForm(password="12345")
