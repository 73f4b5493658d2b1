from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import AuditEvent


class IAuditEventRepository(ABC):
    """Append-only log of account events"""

    @abstractmethod
    async def create(self, audit_event: AuditEvent) -> AuditEvent:
        pass

    @abstractmethod
    async def list_for_user(
        self, user_id: UUID, action: Optional[str] = None
    ) -> List[AuditEvent]:
        """Events of one user, oldest first, optionally only one action"""
        pass
