from typing import List, Optional

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.setting_repository import ISettingRepository
from src.domain.base import utcnow
from src.domain.entities import Setting


class SettingRepository(ISettingRepository):
    """Setting repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get(self, key: str) -> Optional[Setting]:
        """Get setting by key"""
        stmt = select(Setting).where(Setting.key == key)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def list_all(self) -> List[Setting]:
        """Get every stored setting"""
        result = await self.session.exec(select(Setting).order_by(Setting.key))
        return list(result.all())

    async def upsert(self, key: str, value: bool) -> Setting:
        """Create or overwrite a setting"""
        setting = await self.get(key)
        if setting is None:
            setting = Setting(key=key, value=value)
        else:
            setting.value = value
            setting.updated_at = utcnow()
        self.session.add(setting)
        await self.session.flush()
        await self.session.refresh(setting)
        return setting
