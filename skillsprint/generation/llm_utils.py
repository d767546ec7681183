"""LLM response normalization."""

import json
import re
from typing import NamedTuple

from skillsprint.core.logging import get_logger
from skillsprint.schemas.roadmap import RoadmapDocument

logger = get_logger(__name__)

# Opening fence with an optional language hint (```json, ```JSON, ```js...)
# or a bare closing fence, wherever it appears in the text.
_FENCE_PATTERN = re.compile(r"```[A-Za-z+-]*", re.IGNORECASE)


class NormalizedResponse(NamedTuple):
    raw_text: str
    structured: "RoadmapDocument | None"


def strip_code_fences(text: str) -> str:
    """Remove markdown code fence markers and surrounding whitespace.

    Args:
        text: Raw model output

    Returns:
        Text with every fence marker removed, trimmed
    """
    return _FENCE_PATTERN.sub("", text).strip()


def normalize_roadmap_response(raw_text: str) -> NormalizedResponse:
    """Split model output into the raw text and its parsed JSON, if any.

    Parsing is strict: no repair is attempted beyond dropping fences. A parse
    failure is logged as a warning and yields ``structured=None``; it never
    raises, so an unreliable generator degrades the response instead of
    failing it.
    """
    cleaned = strip_code_fences(raw_text)
    try:
        structured = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        logger.warning(
            "Roadmap JSON parse failed, returning plain text fallback",
            error=str(exc),
            content_preview=cleaned[:200],
        )
        structured = None
    return NormalizedResponse(raw_text=raw_text, structured=structured)
