"""Admin use cases for site administration operations."""

from .list_settings_use_case import (
    ListSettingsUseCase,
    ListSettingsResponse,
    SettingResponse,
)
from .update_setting_use_case import UpdateSettingUseCase

__all__ = [
    "ListSettingsUseCase",
    "ListSettingsResponse",
    "SettingResponse",
    "UpdateSettingUseCase",
]
