from datetime import timedelta

import pytest

from config import ApplicationConfig
from src.app.use_cases.auth.forms import PasswordResetRequestForm
from src.app.use_cases.auth.request_password_reset_use_case import (
    UNABLE_TO_RESET,
    RequestPasswordResetUseCase,
)
from src.domain.entities import TokenPurpose, UserStatus

RESET_URL = "http://localhost:8000/reset-password"


@pytest.mark.asyncio
async def test_request_password_reset_success(mock_uow, mock_mailer, make_user):
    """Active user gets a reset link"""
    # Arrange
    user = make_user()
    mock_uow.users.get_by_email.return_value = user

    use_case = RequestPasswordResetUseCase(mock_uow, mock_mailer, RESET_URL)

    # Act
    result = await use_case.execute(PasswordResetRequestForm(email="alice@example.com"))

    # Assert
    assert result.is_ok()
    assert result.value.status == "sent"

    token_record = mock_uow.tokens.create.call_args[0][0]
    assert token_record.purpose == TokenPurpose.password_reset
    assert token_record.expires_at - token_record.issued_at == timedelta(
        seconds=ApplicationConfig.PASSWORD_RESET_TOKEN_TTL
    )

    to, username, link = mock_mailer.send_password_reset.call_args[0]
    assert to == "alice@example.com"
    assert username == "alice"
    assert link.startswith(RESET_URL + "?token=")

    audit_event = mock_uow.audit_events.create.call_args[0][0]
    assert audit_event.action == "password_reset_requested"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_request_password_reset_unknown_email(mock_uow, mock_mailer):
    result = await RequestPasswordResetUseCase(mock_uow, mock_mailer, RESET_URL).execute(
        PasswordResetRequestForm(email="nobody@example.com")
    )

    assert result.is_err()
    assert result.error.code == "RESET_UNAVAILABLE"
    assert result.error.message == UNABLE_TO_RESET
    mock_uow.tokens.create.assert_not_called()
    mock_mailer.send_password_reset.assert_not_called()


@pytest.mark.asyncio
async def test_request_password_reset_pending_account(mock_uow, mock_mailer, make_user):
    mock_uow.users.get_by_email.return_value = make_user(status=UserStatus.pending)

    result = await RequestPasswordResetUseCase(mock_uow, mock_mailer, RESET_URL).execute(
        PasswordResetRequestForm(email="alice@example.com")
    )

    assert result.is_err()
    assert result.error.code == "RESET_UNAVAILABLE"
    mock_mailer.send_password_reset.assert_not_called()


@pytest.mark.asyncio
async def test_request_password_reset_email_failure(mock_uow, mock_mailer, make_user):
    """Failed send looks exactly like an unknown email"""
    mock_uow.users.get_by_email.return_value = make_user()
    mock_mailer.send_password_reset.return_value = False

    result = await RequestPasswordResetUseCase(mock_uow, mock_mailer, RESET_URL).execute(
        PasswordResetRequestForm(email="alice@example.com")
    )

    assert result.is_err()
    assert result.error.code == "RESET_UNAVAILABLE"
    assert result.error.message == UNABLE_TO_RESET
