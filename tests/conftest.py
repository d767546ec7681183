"""Shared fixtures: settings, stub capabilities and an app wired to them."""

import json
from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from skillsprint.core.auth import IdentityVerifier
from skillsprint.core.config import Settings
from skillsprint.main import create_app
from skillsprint.schemas.auth import Claim
from tests.stubs import SAMPLE_ROADMAP, StubTextGenerator, StubTokenBackend


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, ENV="production", GEMINI_API_KEY="test-gemini-key")


@pytest.fixture
def claim() -> Claim:
    return Claim(subject_id="user-123", email="learner@example.com", email_verified=True)


@pytest.fixture
def token_backend() -> StubTokenBackend:
    return StubTokenBackend()


@pytest.fixture
def generator() -> StubTextGenerator:
    return StubTextGenerator(text=json.dumps(SAMPLE_ROADMAP))


@pytest.fixture
def app(settings: Settings, token_backend: StubTokenBackend, generator: StubTextGenerator) -> FastAPI:
    return create_app(
        settings=settings,
        identity_verifier=IdentityVerifier(token_backend),
        text_generator=generator,
    )


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app) as test_client:
        yield test_client
