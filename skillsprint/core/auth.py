"""Bearer-token authentication.

Identity is owned by Firebase: clients sign in there and present the
resulting ID token as ``Authorization: Bearer <token>``. This module turns
that header into a :class:`Claim` or an :class:`AuthError`.

The Firebase SDK sits behind the narrow :class:`TokenBackend` protocol so
that :class:`IdentityVerifier` can be exercised with deterministic stubs.
"""

from collections.abc import Mapping
from typing import Any, Protocol

import firebase_admin
from firebase_admin import auth as firebase_auth
from firebase_admin import credentials
from starlette.concurrency import run_in_threadpool

from skillsprint.core.config import Settings
from skillsprint.core.errors import AuthError, AuthFailureReason
from skillsprint.core.logging import get_logger
from skillsprint.schemas.auth import Claim

logger = get_logger(__name__)

BEARER_PREFIX = "Bearer "
FIREBASE_APP_NAME = "skillsprint"
GOOGLE_TOKEN_URI = "https://oauth2.googleapis.com/token"


class TokenBackend(Protocol):
    """Capability that validates an opaque ID token."""

    def verify_id_token(self, token: str) -> Mapping[str, Any]:
        """Return the decoded claims or raise AuthError."""
        ...


def extract_bearer_token(authorization: str | None) -> str:
    """Pull the token out of an ``Authorization`` header value.

    The prefix is case-sensitive and must be followed by exactly one space.

    Raises:
        AuthError: With reason MISSING_TOKEN if no usable token is present
    """
    if not authorization or not authorization.startswith(BEARER_PREFIX):
        raise AuthError(AuthFailureReason.MISSING_TOKEN)
    token = authorization[len(BEARER_PREFIX) :]
    if not token:
        raise AuthError(AuthFailureReason.MISSING_TOKEN)
    return token


class IdentityVerifier:
    """Validates bearer credentials against a token backend.

    One attempt per request; failures are terminal and never retried.
    """

    def __init__(self, backend: TokenBackend) -> None:
        self._backend = backend

    async def verify(self, authorization: str | None) -> Claim:
        token = extract_bearer_token(authorization)
        try:
            decoded = await run_in_threadpool(self._backend.verify_id_token, token)
        except AuthError as exc:
            logger.warning("Token verification failed", reason=exc.reason.value)
            raise
        except Exception as exc:
            logger.warning("Token verification failed", reason="unexpected", error=str(exc))
            raise AuthError(AuthFailureReason.INVALID_OR_EXPIRED) from exc

        subject_id = decoded.get("uid") or decoded.get("sub")
        if not subject_id:
            logger.warning("Token verification failed", reason="no subject")
            raise AuthError(AuthFailureReason.MALFORMED)
        return Claim(
            subject_id=str(subject_id),
            email=decoded.get("email"),
            email_verified=bool(decoded.get("email_verified", False)),
        )


# ============================================================================
# Firebase
# ============================================================================


def init_firebase_app(settings: Settings) -> firebase_admin.App | None:
    """Initialise the process-wide Firebase app from the service account settings.

    Returns None (after logging) when the identity provider is unconfigured
    or rejects the credentials; the server still starts, but every token is
    then refused.
    """
    if not settings.firebase_configured:
        logger.error("Firebase Admin SDK not configured", project_id=settings.FIREBASE_PROJECT_ID)
        return None
    try:
        cert = credentials.Certificate(
            {
                "type": "service_account",
                "project_id": settings.FIREBASE_PROJECT_ID,
                "private_key": settings.firebase_private_key,
                "client_email": settings.FIREBASE_CLIENT_EMAIL,
                "token_uri": GOOGLE_TOKEN_URI,
            }
        )
        app = firebase_admin.initialize_app(cert, name=FIREBASE_APP_NAME)
    except (ValueError, OSError) as exc:
        logger.error("Firebase Admin SDK initialization failed", error=str(exc))
        return None
    logger.info("Firebase Admin SDK initialized", project_id=settings.FIREBASE_PROJECT_ID)
    return app


def close_firebase_app(app: firebase_admin.App | None) -> None:
    if app is not None:
        firebase_admin.delete_app(app)


class FirebaseTokenBackend:
    """Token backend backed by ``firebase_admin.auth.verify_id_token``."""

    def __init__(self, app: firebase_admin.App | None) -> None:
        self._app = app

    def verify_id_token(self, token: str) -> Mapping[str, Any]:
        if self._app is None:
            raise AuthError(AuthFailureReason.INVALID_OR_EXPIRED)
        try:
            return firebase_auth.verify_id_token(token, app=self._app)
        except (
            firebase_auth.ExpiredIdTokenError,
            firebase_auth.RevokedIdTokenError,
            firebase_auth.CertificateFetchError,
        ) as exc:
            raise AuthError(AuthFailureReason.INVALID_OR_EXPIRED) from exc
        except (firebase_auth.InvalidIdTokenError, ValueError) as exc:
            raise AuthError(AuthFailureReason.MALFORMED) from exc
