"""
Skill API routes.
"""

from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Depends, status

from api.dependencies import get_skill_service
from skills.models import SkillRequest, SkillResponse
from skills.service import SkillService

router = APIRouter(tags=["skills"])


@router.get("/skills")
async def list_skills(
    service: SkillService = Depends(get_skill_service),
) -> List[Dict[str, Any]]:
    """Fetch all skills."""
    return [skill.public() for skill in await service.list_skills()]


@router.get("/skills/{skill_id}")
async def get_skill(
    skill_id: str,
    service: SkillService = Depends(get_skill_service),
) -> Dict[str, Any]:
    return (await service.get_skill(skill_id)).public()


@router.post("/add-skill", response_model=SkillResponse, status_code=status.HTTP_201_CREATED)
async def add_skill(
    req: SkillRequest,
    service: SkillService = Depends(get_skill_service),
) -> Dict[str, Any]:
    skill = await service.create_skill(req.name, req.category, req.level, req.description)
    return {"message": "Skill added successfully", "skill": skill.public()}


@router.put("/update-skill/{skill_id}", response_model=SkillResponse)
async def update_skill(
    skill_id: str,
    req: SkillRequest,
    service: SkillService = Depends(get_skill_service),
) -> Dict[str, Any]:
    skill = await service.update_skill(
        skill_id, req.name, req.category, req.level, req.description,
    )
    return {"message": "Skill updated successfully", "skill": skill.public()}


@router.delete("/delete-skill/{skill_id}")
async def delete_skill(
    skill_id: str,
    service: SkillService = Depends(get_skill_service),
) -> Dict[str, Any]:
    await service.delete_skill(skill_id)
    return {"message": "Skill deleted successfully"}
