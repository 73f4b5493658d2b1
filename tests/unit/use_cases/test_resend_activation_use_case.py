import pytest

from src.app.use_cases.auth.forms import ResendActivationForm
from src.app.use_cases.auth.resend_activation_use_case import ResendActivationUseCase
from src.domain.entities import TokenPurpose, UserStatus

ACTIVATION_URL = "http://localhost:8000/activate-account"


@pytest.mark.asyncio
async def test_resend_to_pending_user(mock_uow, mock_mailer, make_user):
    user = make_user(status=UserStatus.pending)
    mock_uow.users.get_by_email.return_value = user

    result = await ResendActivationUseCase(mock_uow, mock_mailer, ACTIVATION_URL).execute(
        ResendActivationForm(email="alice@example.com")
    )

    assert result.is_ok()
    assert result.value.status == "sent"
    mock_uow.tokens.delete_by_user_and_purpose.assert_called_once_with(
        user.id, TokenPurpose.account_activation
    )
    mock_uow.tokens.create.assert_called_once()
    mock_uow.commit.assert_called_once()
    mock_mailer.send_account_activation.assert_called_once()


@pytest.mark.asyncio
@pytest.mark.parametrize("status", [None, UserStatus.active])
async def test_resend_same_answer_for_unknown_and_active(mock_uow, mock_mailer, make_user, status):
    """Nothing is sent, but the caller cannot tell"""
    if status is not None:
        mock_uow.users.get_by_email.return_value = make_user(status=status)

    result = await ResendActivationUseCase(mock_uow, mock_mailer, ACTIVATION_URL).execute(
        ResendActivationForm(email="alice@example.com")
    )

    assert result.is_ok()
    assert result.value.status == "sent"
    mock_uow.tokens.create.assert_not_called()
    mock_mailer.send_account_activation.assert_not_called()


@pytest.mark.asyncio
async def test_resend_email_failure_is_logged(mock_uow, mock_mailer, make_user, caplog):
    mock_uow.users.get_by_email.return_value = make_user(status=UserStatus.pending)
    mock_mailer.send_account_activation.return_value = False

    result = await ResendActivationUseCase(mock_uow, mock_mailer, ACTIVATION_URL).execute(
        ResendActivationForm(email="alice@example.com")
    )

    assert result.is_ok()
    assert "could not be sent" in caplog.text
