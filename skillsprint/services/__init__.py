"""Service layer modules."""

from skillsprint.services import roadmap_service, skill_catalog

__all__ = [
    "roadmap_service",
    "skill_catalog",
]
