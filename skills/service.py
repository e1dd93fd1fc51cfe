"""
Skill service — CRUD over the ``skills`` collection.

Skills are a single shared catalog (no per-user ownership).  Concurrent
updates to the same skill are last-write-wins.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, List, Optional, Union

from database.models import Skill, utcnow
from database.store import DocumentCollection
from utils.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)

Level = Union[int, float]

_SKILL_NOT_FOUND = "Skill not found"


def _validate(name: Optional[str], category: Optional[str], level: Optional[Level]) -> None:
    # level 0 is a real level; only an absent one is rejected
    if not name or not category or level is None:
        raise ValidationError("All fields are required")


class SkillService:
    def __init__(
        self,
        skills: DocumentCollection,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self._skills = skills
        self._clock = clock

    async def list_skills(self) -> List[Skill]:
        docs = await self._skills.find_many()
        return [Skill.from_document(doc) for doc in docs]

    async def get_skill(self, skill_id: str) -> Skill:
        doc = await self._skills.find_by_id(skill_id)
        if doc is None:
            raise NotFoundError(_SKILL_NOT_FOUND)
        return Skill.from_document(doc)

    async def create_skill(
        self,
        name: Optional[str],
        category: Optional[str],
        level: Optional[Level],
        description: Optional[str] = None,
    ) -> Skill:
        _validate(name, category, level)
        skill = Skill(
            name=name,
            category=category,
            level=level,
            description=description,
            last_updated=self._clock(),
        )
        doc = await self._skills.insert_one(skill.to_document())
        skill = Skill.from_document(doc)
        logger.info("Added skill %s (%s)", skill.name, skill.id)
        return skill

    async def update_skill(
        self,
        skill_id: str,
        name: Optional[str],
        category: Optional[str],
        level: Optional[Level],
        description: Optional[str] = None,
    ) -> Skill:
        """Replace the required fields and bump ``lastUpdated``."""
        _validate(name, category, level)
        fields = {
            "name": name,
            "category": category,
            "level": level,
            "lastUpdated": self._clock(),
        }
        if description is not None:
            fields["description"] = description

        doc = await self._skills.update_by_id(skill_id, fields)
        if doc is None:
            raise NotFoundError(_SKILL_NOT_FOUND)
        logger.info("Updated skill %s", skill_id)
        return Skill.from_document(doc)

    async def delete_skill(self, skill_id: str) -> None:
        doc = await self._skills.delete_by_id(skill_id)
        if doc is None:
            raise NotFoundError(_SKILL_NOT_FOUND)
        logger.info("Deleted skill %s", skill_id)
