"""Identity schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict

from skillsprint.core.errors import InvalidRequestError


class Claim(BaseModel):
    """Validated identity derived from a bearer credential."""

    model_config = ConfigDict(frozen=True)

    subject_id: str
    email: str | None = None
    email_verified: bool = False

    def summary(self) -> dict[str, Any]:
        """Client-facing view of the claim."""
        return {
            "uid": self.subject_id,
            "email": self.email,
            "emailVerified": self.email_verified,
        }


class Credentials(BaseModel):
    """Email/password pair posted to the acknowledgment endpoints."""

    email: str
    password: str

    @classmethod
    def from_payload(cls, payload: Any) -> "Credentials":
        if not isinstance(payload, dict) or not payload.get("email") or not payload.get("password"):
            raise InvalidRequestError("Missing credentials", "Email and password are required")
        return cls(email=str(payload["email"]), password=str(payload["password"]))
