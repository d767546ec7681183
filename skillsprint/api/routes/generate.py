"""Roadmap generation routes."""

from typing import Annotated, Any

from fastapi import APIRouter, Body

from skillsprint.api.deps import AppSettings, CurrentClaim, TextGeneratorDep
from skillsprint.core.logging import get_logger
from skillsprint.core.timestamps import isoformat_utc
from skillsprint.schemas.roadmap import RoadmapRequest
from skillsprint.services import roadmap_service, skill_catalog

logger = get_logger(__name__)
router = APIRouter(prefix="/generate", tags=["generate"])


@router.post("/roadmap")
async def create_roadmap(
    claim: CurrentClaim,
    generator: TextGeneratorDep,
    payload: Annotated[Any, Body()] = None,
) -> dict:
    """Generate a learning roadmap for a skill and number of days.

    Both the raw model text and its parsed JSON (or null) are returned.
    """
    request = RoadmapRequest.from_payload(payload)
    result = await roadmap_service.generate_roadmap(generator, request, claim)
    return {
        "success": True,
        "message": f"Learning roadmap generated for {request.skill_name}",
        "data": {
            "skillName": request.skill_name,
            "numberOfDays": request.number_of_days,
            "roadmap": result.raw_text,
            "roadmapStructured": result.structured,
            "generatedAt": isoformat_utc(result.generated_at),
            "userId": result.requester_id,
            "userEmail": result.requester_email,
        },
    }


@router.get("/skills")
async def list_skills(claim: CurrentClaim) -> dict:
    """List popular skills users can pick from."""
    skills = skill_catalog.list_popular_skills()
    return {
        "success": True,
        "message": "Popular skills retrieved successfully",
        "data": {
            "skills": skills,
            "count": len(skills),
            "note": "These are suggestions - you can generate roadmaps for any skill!",
        },
    }


@router.get("/health")
async def generator_health(settings: AppSettings) -> dict:
    """Report whether the generation credential is configured (no liveness probe)."""
    return {
        "status": "OK",
        "service": "SkillSprint Roadmap Generator",
        "geminiConfigured": settings.gemini_configured,
        "timestamp": isoformat_utc(),
    }


@router.get("/test-auth")
async def test_auth(claim: CurrentClaim) -> dict:
    return {
        "status": "OK",
        "message": "Authentication successful!",
        "user": claim.summary(),
        "timestamp": isoformat_utc(),
    }
