"""
Use Case: Update Setting

Admin switch for login-with-email and registration-needs-activation.
"""

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, SettingKey
from .list_settings_use_case import SettingResponse


class UpdateSettingUseCase:
    """
    Store a new value for a site setting.

    Business Logic:
    1. Reject unknown keys with SETTING_NOT_FOUND
    2. Upsert the row
    3. Create audit event
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, key: str, value: bool) -> Result[SettingResponse]:
        try:
            setting_key = SettingKey(key)
        except ValueError:
            return Return.err(Error("SETTING_NOT_FOUND", f"Unknown setting: {key}"))

        async with self.uow:
            setting = await self.uow.settings.upsert(setting_key.value, value)

            await self.uow.audit_events.create(
                AuditEvent(
                    action="setting_updated",
                    event_metadata={"key": setting_key.value, "value": value},
                )
            )

            await self.uow.commit()

            return Return.ok(
                SettingResponse(key=setting.key, value=setting.value, is_default=False)
            )
