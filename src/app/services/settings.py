"""
Setting Store

Resolves the site switches from the settings table, falling back to the
configured defaults.
"""

from dataclasses import dataclass
from typing import Optional

from config import ApplicationConfig
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import SettingKey

DEFAULTS = {
    SettingKey.login_with_email: ApplicationConfig.LOGIN_WITH_EMAIL,
    SettingKey.registration_needs_activation: ApplicationConfig.REGISTRATION_NEEDS_ACTIVATION,
}


@dataclass(frozen=True)
class SiteSettings:
    """Snapshot of the site switches for one request"""

    login_with_email: bool
    registration_needs_activation: bool


class SettingStore:
    """Read access to settings. Call inside an entered unit of work."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def get(self, key: SettingKey, default: Optional[bool] = None) -> bool:
        setting = await self.uow.settings.get(key.value)
        if setting is not None:
            return setting.value
        if default is None:
            return DEFAULTS[key]
        return default

    async def snapshot(self) -> SiteSettings:
        return SiteSettings(
            login_with_email=await self.get(SettingKey.login_with_email),
            registration_needs_activation=await self.get(
                SettingKey.registration_needs_activation
            ),
        )
