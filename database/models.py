"""
Document models for the ``users`` and ``skills`` collections.

Stored field names follow the JSON wire names (``passwordHash``,
``createdAt``, ``lastUpdated``); the Python attributes are snake_case.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    name: str
    email: str
    password_hash: str = Field(alias="passwordHash")
    created_at: datetime = Field(default_factory=utcnow, alias="createdAt")

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude={"id"})

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "User":
        data = dict(doc)
        data["id"] = str(data.pop("_id"))
        return cls.model_validate(data)

    def public(self) -> Dict[str, Any]:
        """Fields safe to return to clients (never the hash)."""
        return {"id": self.id, "name": self.name, "email": self.email}


class Skill(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = None
    name: str
    category: str
    level: Union[int, float]
    description: Optional[str] = None
    last_updated: datetime = Field(default_factory=utcnow, alias="lastUpdated")

    def to_document(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude={"id"})

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "Skill":
        data = dict(doc)
        data["id"] = str(data.pop("_id"))
        return cls.model_validate(data)

    def public(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
