"""API dependencies.

Collaborators are built once at startup and stored on ``app.state``; these
providers hand them to route handlers.
"""

from typing import Annotated

from fastapi import Depends, Header, Request

from skillsprint.core.auth import IdentityVerifier
from skillsprint.core.config import Settings
from skillsprint.generation.llm import TextGenerator
from skillsprint.schemas.auth import Claim


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_identity_verifier(request: Request) -> IdentityVerifier:
    return request.app.state.identity_verifier


def get_text_generator(request: Request) -> TextGenerator:
    return request.app.state.text_generator


async def get_current_claim(
    verifier: Annotated[IdentityVerifier, Depends(get_identity_verifier)],
    authorization: Annotated[str | None, Header()] = None,
) -> Claim:
    """Resolve the bearer credential into a Claim, or fail with 401."""
    return await verifier.verify(authorization)


AppSettings = Annotated[Settings, Depends(get_app_settings)]
TextGeneratorDep = Annotated[TextGenerator, Depends(get_text_generator)]

# Authenticated requester - raises AuthError (401) when absent or invalid
CurrentClaim = Annotated[Claim, Depends(get_current_claim)]
