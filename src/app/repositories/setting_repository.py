from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import Setting


class ISettingRepository(ABC):
    """Setting repository interface - application layer"""

    @abstractmethod
    async def get(self, key: str) -> Optional[Setting]:
        """Get setting by key"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Setting]:
        """Get every stored setting"""
        pass

    @abstractmethod
    async def upsert(self, key: str, value: bool) -> Setting:
        """Create or overwrite a setting"""
        pass
