"""Database table definitions for stored comparison items"""

from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import Column, DateTime, JSON, LargeBinary, String, Text
from sqlalchemy.types import TypeDecorator
from sqlmodel import Field, SQLModel


class RawText(TypeDecorator):
    """str column stored as UTF-8 bytes; undecodable input bytes (surrogateescape) survive the round trip"""
    impl = LargeBinary
    cache_ok = True

    def process_bind_param(self, value, dialect):
        return None if value is None else value.encode("utf-8", "surrogateescape")

    def process_result_value(self, value, dialect):
        return None if value is None else bytes(value).decode("utf-8", "surrogateescape")


class CompareItem(SQLModel, table=True):
    """A text payload held in one of the two comparison panels (1 = Original, 2 = Modified)"""
    __tablename__ = "compare_items"
    id: Optional[int] = Field(default=None, primary_key=True)
    panel: int = Field(..., index=True, nullable=False, ge=1, le=2)
    type: str = Field(..., sa_column=Column(String(16), nullable=False))
    data: str = Field(..., sa_column=Column(RawText, nullable=False))
    length: int = Field(..., nullable=False, description="Character length of data")
    preview: str = Field(default="", sa_column=Column(RawText, nullable=False))
    source: Optional[str] = Field(default=None, sa_column=Column(Text, nullable=True))
    meta: Dict[str, Any] = Field(default_factory=dict, sa_column=Column("metadata", JSON, nullable=False))
    timestamp: datetime = Field(default_factory=datetime.now, sa_column=Column(DateTime(timezone=False), nullable=False))
