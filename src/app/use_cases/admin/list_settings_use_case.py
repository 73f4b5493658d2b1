"""
Use Case: List Settings

Shows the effective value of every site setting.
"""

from typing import List
from pydantic import BaseModel

from libs.result import Result, Return
from src.app.services.settings import SettingStore
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import SettingKey


class SettingResponse(BaseModel):
    """One setting and whether it comes from the database or the defaults"""

    key: str
    value: bool
    is_default: bool


class ListSettingsResponse(BaseModel):
    """Response DTO for ListSettingsUseCase"""

    settings: List[SettingResponse]


class ListSettingsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[ListSettingsResponse]:
        async with self.uow:
            store = SettingStore(self.uow)
            stored = {s.key: s.value for s in await self.uow.settings.list_all()}

            items = []
            for key in SettingKey:
                items.append(
                    SettingResponse(
                        key=key.value,
                        value=await store.get(key),
                        is_default=key.value not in stored,
                    )
                )

            return Return.ok(ListSettingsResponse(settings=items))
