"""Roadmap service: prompt, generation call, normalization."""

from datetime import datetime, timezone

from skillsprint.core.errors import (
    GenerationError,
    GenerationErrorKind,
    InvalidRequestError,
)
from skillsprint.core.logging import get_logger
from skillsprint.generation.llm import TextGenerator
from skillsprint.generation.llm_utils import normalize_roadmap_response
from skillsprint.generation.prompts import build_roadmap_prompt
from skillsprint.schemas.auth import Claim
from skillsprint.schemas.roadmap import (
    MAX_DAYS,
    MIN_DAYS,
    RoadmapRequest,
    RoadmapResult,
    invalid_days_error,
)

logger = get_logger(__name__)


# ============================================================================
# Error Classification
# ============================================================================

# The generation service has no structured error taxonomy, so failures are
# classified by substrings of their message. First match wins.
GENERATION_ERROR_PATTERNS: tuple[tuple[str, GenerationErrorKind], ...] = (
    ("API_KEY_INVALID", GenerationErrorKind.AUTH_CONFIG_INVALID),
    ("QUOTA_EXCEEDED", GenerationErrorKind.QUOTA_EXCEEDED),
    ("RESOURCE_EXHAUSTED", GenerationErrorKind.QUOTA_EXCEEDED),
)


def classify_generation_error(message: str) -> GenerationErrorKind:
    """Map an upstream error message onto a GenerationErrorKind."""
    for pattern, kind in GENERATION_ERROR_PATTERNS:
        if pattern in message:
            return kind
    return GenerationErrorKind.UNKNOWN


# ============================================================================
# Generation
# ============================================================================


def _check_request(request: RoadmapRequest) -> None:
    if not request.skill_name:
        raise InvalidRequestError(
            "Missing required fields",
            "Skill name and number of days are required",
        )
    if not MIN_DAYS <= request.number_of_days <= MAX_DAYS:
        raise invalid_days_error()


async def generate_roadmap(
    generator: TextGenerator,
    request: RoadmapRequest,
    claim: Claim,
) -> RoadmapResult:
    """Generate a learning roadmap for an authenticated requester.

    Args:
        generator: Text generation capability
        request: Validated skill and time frame
        claim: Identity of the requester

    Returns:
        Raw generated text plus its parsed JSON (None if unparsable)

    Raises:
        InvalidRequestError: If the request violates its invariants
        GenerationError: If the generation service fails
    """
    _check_request(request)
    prompt = build_roadmap_prompt(request.skill_name, request.number_of_days)

    logger.info(
        "Generating roadmap",
        user_email=claim.email,
        skill=request.skill_name,
        days=request.number_of_days,
    )
    try:
        raw_text = await generator.generate_text(prompt)
    except GenerationError as exc:
        logger.error("Roadmap generation error", kind=exc.kind.value, error=exc.cause)
        raise
    except Exception as exc:
        kind = classify_generation_error(str(exc))
        logger.error("Roadmap generation error", kind=kind.value, error=str(exc))
        raise GenerationError(kind, str(exc)) from exc

    normalized = normalize_roadmap_response(raw_text)
    logger.info(
        "Roadmap generated",
        skill=request.skill_name,
        days=request.number_of_days,
        structured=normalized.structured is not None,
    )
    return RoadmapResult(
        raw_text=normalized.raw_text,
        structured=normalized.structured,
        generated_at=datetime.now(timezone.utc),
        requester_id=claim.subject_id,
        requester_email=claim.email,
    )
