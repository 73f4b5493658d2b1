"""
Request Context

Everything a page handler needs to know about the caller, resolved once per
request and passed in explicitly.
"""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

from .settings import SiteSettings


@dataclass(frozen=True)
class Identity:
    """The logged-in user behind a request"""

    user_id: UUID
    username: str
    session_id: UUID


@dataclass(frozen=True)
class RequestContext:
    identity: Optional[Identity]
    settings: SiteSettings

    @property
    def is_guest(self) -> bool:
        return self.identity is None
