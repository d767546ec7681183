"""Authentication routes.

Sign-in and sign-up happen client-side against Firebase; the login and
signup endpoints only acknowledge the request and explain how to present
the resulting ID token.
"""

from typing import Annotated, Any

from fastapi import APIRouter, Body

from skillsprint.api.deps import CurrentClaim
from skillsprint.core.logging import get_logger
from skillsprint.schemas.auth import Credentials

logger = get_logger(__name__)
router = APIRouter(prefix="/auth", tags=["auth"])

TOKEN_EXAMPLE = "Authorization: Bearer <firebase_id_token>"


@router.post("/login")
async def login(payload: Annotated[Any, Body()] = None) -> dict:
    """Acknowledge a login attempt; no credential check happens here."""
    credentials = Credentials.from_payload(payload)
    logger.debug("Login endpoint reached", email=credentials.email)
    return {
        "message": "Login endpoint reached",
        "note": "Use Firebase Auth on frontend to get ID token, then send it in Authorization header",
        "example": TOKEN_EXAMPLE,
    }


@router.post("/signup")
async def signup(payload: Annotated[Any, Body()] = None) -> dict:
    """Acknowledge a signup attempt; accounts are created in Firebase."""
    credentials = Credentials.from_payload(payload)
    logger.debug("Signup endpoint reached", email=credentials.email)
    return {
        "message": "Signup endpoint reached",
        "note": "Use Firebase Auth on frontend to create account, then send ID token in Authorization header",
        "example": TOKEN_EXAMPLE,
    }


@router.get("/verify")
async def verify(claim: CurrentClaim) -> dict:
    """Check whether the presented token is still valid."""
    return {"message": "Token is valid", "user": claim.summary()}
