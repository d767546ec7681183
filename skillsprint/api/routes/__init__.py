"""API routes."""

from skillsprint.api.routes import auth, generate

__all__ = ["auth", "generate"]
