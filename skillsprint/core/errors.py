"""Error taxonomy and the HTTP handlers that render it."""

from enum import Enum
from typing import Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from skillsprint.core.logging import get_logger

logger = get_logger(__name__)

HIDDEN_DETAILS = "Internal server error"


class AuthFailureReason(str, Enum):
    """Why a bearer credential was rejected."""

    MISSING_TOKEN = "missing_token"
    MALFORMED = "malformed"
    INVALID_OR_EXPIRED = "invalid_or_expired"


class GenerationErrorKind(str, Enum):
    """Best-effort classification of generation-service failures."""

    AUTH_CONFIG_INVALID = "auth_config_invalid"
    QUOTA_EXCEEDED = "quota_exceeded"
    UNKNOWN = "unknown"


class SkillSprintError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, error: str, message: str, details: str | None = None) -> None:
        super().__init__(message)
        self.error = error
        self.message = message
        self.details = details

    def to_payload(self, expose_details: bool) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.error, "message": self.message}
        if self.details is not None:
            payload["details"] = self.details if expose_details else HIDDEN_DETAILS
        return payload


class InvalidRequestError(SkillSprintError):
    """Malformed or missing request fields."""

    status_code = status.HTTP_400_BAD_REQUEST


class AuthError(SkillSprintError):
    """Missing, malformed, invalid or expired bearer credential."""

    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, reason: AuthFailureReason) -> None:
        if reason is AuthFailureReason.MISSING_TOKEN:
            super().__init__(
                "No token provided or invalid format",
                "Please provide a valid Firebase ID token in Authorization header",
            )
        else:
            super().__init__(
                "Invalid or expired token",
                "Please login again to get a fresh token",
            )
        self.reason = reason


_GENERATION_MESSAGES: dict[GenerationErrorKind, tuple[str, str]] = {
    GenerationErrorKind.AUTH_CONFIG_INVALID: (
        "Gemini API authentication failed",
        "Please check your Gemini API key configuration",
    ),
    GenerationErrorKind.QUOTA_EXCEEDED: (
        "Gemini API quota exceeded",
        "Please wait a moment before trying again or check your API usage limits",
    ),
    GenerationErrorKind.UNKNOWN: (
        "Roadmap generation failed",
        "Something went wrong while generating your learning roadmap. Please try again.",
    ),
}


class GenerationError(SkillSprintError):
    """The generation service failed to produce a roadmap."""

    def __init__(self, kind: GenerationErrorKind, cause: str | None = None) -> None:
        error, message = _GENERATION_MESSAGES[kind]
        # Only unknown failures carry the upstream detail.
        details = (cause or "") if kind is GenerationErrorKind.UNKNOWN else None
        super().__init__(error, message, details)
        self.kind = kind
        self.cause = cause


def _expose_details(request: Request) -> bool:
    settings = getattr(request.app.state, "settings", None)
    return bool(settings and settings.is_development)


async def skillsprint_error_handler(request: Request, exc: SkillSprintError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_payload(_expose_details(request)),
    )


async def request_validation_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.info("Rejected unparsable request", path=request.url.path)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"error": "Invalid request body", "message": "Request body must be valid JSON"},
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Server error", path=request.url.path, error=str(exc))
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "Something went wrong on the server!",
            "message": str(exc) if _expose_details(request) else HIDDEN_DETAILS,
        },
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(SkillSprintError, skillsprint_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)
