"""Application configuration."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    APP_NAME: str = "SkillSprint"
    APP_VERSION: str = "0.1.0"
    DEBUG: bool = False
    ENV: str = "production"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    STATIC_DIR: Path = Path("./public")
    CORS_ORIGINS: list[str] = ["*"]

    # Identity provider (Firebase service account)
    FIREBASE_PROJECT_ID: str | None = None
    FIREBASE_PRIVATE_KEY: str | None = None
    FIREBASE_CLIENT_EMAIL: str | None = None

    # AI
    GEMINI_API_KEY: str | None = None
    GEMINI_MODEL: str = "gemini-1.5-flash"
    GEMINI_TEMPERATURE: float = 0.7

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.ENV == "development"

    @property
    def gemini_configured(self) -> bool:
        return bool(self.GEMINI_API_KEY)

    @property
    def firebase_configured(self) -> bool:
        return bool(
            self.FIREBASE_PROJECT_ID and self.FIREBASE_PRIVATE_KEY and self.FIREBASE_CLIENT_EMAIL
        )

    @property
    def firebase_private_key(self) -> str | None:
        """Private key with the escaped newlines from the environment restored."""
        if self.FIREBASE_PRIVATE_KEY is None:
            return None
        return self.FIREBASE_PRIVATE_KEY.replace("\\n", "\n")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
