import pytest

from config import ApplicationConfig
from src.app.use_cases.admin import ListSettingsUseCase, UpdateSettingUseCase
from src.domain.entities import Setting


@pytest.mark.asyncio
async def test_list_settings_defaults(mock_uow):
    result = await ListSettingsUseCase(mock_uow).execute()

    assert result.is_ok()
    settings = {s.key: s for s in result.value.settings}
    assert set(settings) == {"login_with_email", "registration_needs_activation"}
    assert settings["login_with_email"].value is ApplicationConfig.LOGIN_WITH_EMAIL
    assert all(s.is_default for s in settings.values())


@pytest.mark.asyncio
async def test_list_settings_stored_value(mock_uow):
    stored = Setting(key="registration_needs_activation", value=False)
    mock_uow.settings.list_all.return_value = [stored]
    mock_uow.settings.get.side_effect = lambda key: stored if key == stored.key else None

    result = await ListSettingsUseCase(mock_uow).execute()

    settings = {s.key: s for s in result.value.settings}
    assert settings["registration_needs_activation"].value is False
    assert settings["registration_needs_activation"].is_default is False
    assert settings["login_with_email"].is_default is True


@pytest.mark.asyncio
async def test_update_setting(mock_uow):
    result = await UpdateSettingUseCase(mock_uow).execute("login_with_email", True)

    assert result.is_ok()
    assert result.value.key == "login_with_email"
    assert result.value.value is True
    mock_uow.settings.upsert.assert_called_once_with("login_with_email", True)
    audit_event = mock_uow.audit_events.create.call_args[0][0]
    assert audit_event.action == "setting_updated"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_update_unknown_setting(mock_uow):
    result = await UpdateSettingUseCase(mock_uow).execute("dark_mode", True)

    assert result.is_err()
    assert result.error.code == "SETTING_NOT_FOUND"
    mock_uow.settings.upsert.assert_not_called()
