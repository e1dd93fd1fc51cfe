"""
Request / response schemas for the skill routes.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel


class SkillRequest(BaseModel):
    # all optional so SkillService decides what "missing" means
    name: Optional[str] = None
    category: Optional[str] = None
    level: Optional[Union[int, float]] = None
    description: Optional[str] = None


class SkillResponse(BaseModel):
    message: str
    skill: Dict[str, Any]
