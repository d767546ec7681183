"""Pydantic schemas."""

from skillsprint.schemas.auth import Claim, Credentials
from skillsprint.schemas.roadmap import (
    RoadmapDocument,
    RoadmapRequest,
    RoadmapResult,
)

__all__ = [
    "Claim",
    "Credentials",
    "RoadmapDocument",
    "RoadmapRequest",
    "RoadmapResult",
]
