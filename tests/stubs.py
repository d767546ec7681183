"""Deterministic stand-ins for the external capabilities."""

from collections.abc import Mapping
from typing import Any

from skillsprint.core.errors import AuthError, AuthFailureReason
from skillsprint.schemas.roadmap import RoadmapDocument

VALID_TOKEN = "valid-token"
AUTH_HEADERS = {"Authorization": f"Bearer {VALID_TOKEN}"}

SAMPLE_ROADMAP: RoadmapDocument = {
    "title": "Rust in 30 Days",
    "overview": "From ownership basics to a small CLI project.",
    "totalDays": 30,
    "phases": [
        {
            "name": "Foundations",
            "durationDays": 10,
            "goals": ["Understand ownership"],
            "topics": [
                {
                    "name": "Ownership and borrowing",
                    "resources": [{"name": "The Rust Book", "url": "https://doc.rust-lang.org/book/"}],
                }
            ],
            "milestones": ["Write a borrow-checker friendly linked list"],
        }
    ],
    "resources": {
        "websites": [{"name": "Rust by Example", "url": "https://doc.rust-lang.org/rust-by-example/"}],
        "courses": [],
        "videos": [],
        "books": [],
        "githubProjects": [],
    },
    "projects": ["grep clone"],
    "successMetrics": ["Ship a CLI to crates.io"],
}


class StubTokenBackend:
    """Accepts VALID_TOKEN, rejects everything else; counts calls."""

    def __init__(self, claims: Mapping[str, Any] | None = None) -> None:
        self.claims = claims or {
            "uid": "user-123",
            "email": "learner@example.com",
            "email_verified": True,
        }
        self.calls: list[str] = []

    def verify_id_token(self, token: str) -> Mapping[str, Any]:
        self.calls.append(token)
        if token != VALID_TOKEN:
            raise AuthError(AuthFailureReason.INVALID_OR_EXPIRED)
        return self.claims


class StubTextGenerator:
    """Returns canned text (or raises) and records every prompt."""

    def __init__(self, text: str = "", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.prompts: list[str] = []

    @property
    def call_count(self) -> int:
        return len(self.prompts)

    async def generate_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


