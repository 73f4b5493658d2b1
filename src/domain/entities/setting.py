"""
Setting Entity

Named boolean switches that change how the site behaves.
"""

from datetime import datetime

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class Setting(SQLModel, table=True):
    """
    Setting entity - a named boolean flag.

    A missing row means "use the configured default".
    """

    __tablename__ = "settings"

    key: str = Field(primary_key=True, max_length=100)
    value: bool = Field(default=False)

    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
