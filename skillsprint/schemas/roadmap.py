"""Roadmap schemas for API requests and responses."""

from datetime import datetime
from typing import Any, TypedDict

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from skillsprint.core.errors import InvalidRequestError

MIN_DAYS = 1
MAX_DAYS = 365


# ============================================================================
# Generated document shape
# ============================================================================
#
# The generator is not bound to this schema, so every key is optional and
# nothing below is validated at runtime.


class ResourceLink(TypedDict, total=False):
    name: str
    url: str


class RoadmapTopic(TypedDict, total=False):
    name: str
    resources: list[ResourceLink]


class RoadmapPhase(TypedDict, total=False):
    name: str
    durationDays: int
    goals: list[str]
    topics: list[RoadmapTopic]
    milestones: list[str]


class ResourceCatalog(TypedDict, total=False):
    websites: list[ResourceLink]
    courses: list[ResourceLink]
    videos: list[ResourceLink]
    books: list[ResourceLink]
    githubProjects: list[ResourceLink]


class RoadmapDocument(TypedDict, total=False):
    title: str
    overview: str
    totalDays: int
    phases: list[RoadmapPhase]
    resources: ResourceCatalog
    projects: list[str]
    successMetrics: list[str]


# ============================================================================
# Request / Result
# ============================================================================


class RoadmapRequest(BaseModel):
    """Parameters for one roadmap generation."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    skill_name: str = Field(alias="skillName", min_length=1)
    # Strict: booleans and numeric strings are not day counts.
    number_of_days: int = Field(alias="numberOfDays", strict=True, ge=MIN_DAYS, le=MAX_DAYS)

    @classmethod
    def from_payload(cls, payload: Any) -> "RoadmapRequest":
        """Validate an inbound JSON body.

        Raises:
            InvalidRequestError: If a field is missing or out of range
        """
        if not isinstance(payload, dict) or not payload.get("skillName") or not payload.get("numberOfDays"):
            raise InvalidRequestError(
                "Missing required fields",
                "Skill name and number of days are required",
            )
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            bad_fields = {err["loc"][0] for err in exc.errors() if err["loc"]}
            if "numberOfDays" in bad_fields:
                raise invalid_days_error() from exc
            raise InvalidRequestError(
                "Invalid skill name",
                "Skill name must be a non-empty string",
            ) from exc


def invalid_days_error() -> InvalidRequestError:
    return InvalidRequestError(
        "Invalid number of days",
        f"Please provide a number of days between {MIN_DAYS} and {MAX_DAYS}",
    )


class RoadmapResult(BaseModel):
    """Outcome of a roadmap generation.

    ``structured`` is None whenever the generated text was not valid JSON;
    ``raw_text`` is the only field callers can rely on.
    """

    model_config = ConfigDict(frozen=True)

    raw_text: str
    # Loosely typed RoadmapDocument; never validated.
    structured: Any = None
    generated_at: datetime
    requester_id: str
    requester_email: str | None = None
