"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse

from skillsprint.api.deps import AppSettings
from skillsprint.api.routes import auth, generate
from skillsprint.core.auth import (
    FirebaseTokenBackend,
    IdentityVerifier,
    close_firebase_app,
    init_firebase_app,
)
from skillsprint.core.config import Settings, get_settings
from skillsprint.core.errors import register_exception_handlers
from skillsprint.core.logging import bind_request_context, configure_logging, get_logger
from skillsprint.core.timestamps import isoformat_utc
from skillsprint.generation.llm import LangChainTextGenerator, TextGenerator

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager.

    Builds the process-wide collaborators that were not injected.
    """
    settings: Settings = app.state.settings
    configure_logging(debug=settings.DEBUG)
    logger.info(
        "Starting SkillSprint",
        version=settings.APP_VERSION,
        env=settings.ENV,
        port=settings.PORT,
    )

    firebase_app = None
    if app.state.identity_verifier is None:
        firebase_app = init_firebase_app(settings)
        app.state.identity_verifier = IdentityVerifier(FirebaseTokenBackend(firebase_app))
    if app.state.text_generator is None:
        app.state.text_generator = LangChainTextGenerator.from_settings(settings)

    yield

    logger.info("Shutting down SkillSprint")
    close_firebase_app(firebase_app)


def create_app(
    settings: Settings | None = None,
    identity_verifier: IdentityVerifier | None = None,
    text_generator: TextGenerator | None = None,
) -> FastAPI:
    """Create the application.

    Collaborators passed in are used as-is; missing ones are built from
    settings during startup.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Personalized learning roadmaps generated with Gemini",
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.identity_verifier = identity_verifier
    app.state.text_generator = text_generator

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def bind_log_context(request: Request, call_next):
        bind_request_context(request.method, request.url.path)
        return await call_next(request)

    register_exception_handlers(app)

    # Include routers
    app.include_router(auth.router, prefix="/api")
    app.include_router(generate.router, prefix="/api")

    @app.get("/api/health")
    async def health_check() -> dict:
        """Health check endpoint."""
        return {
            "status": "OK",
            "message": "SkillSprint server is running!",
            "timestamp": isoformat_utc(),
        }

    # Must stay last: it matches every GET path.
    @app.get("/{full_path:path}", include_in_schema=False)
    async def serve_frontend(full_path: str, app_settings: AppSettings) -> FileResponse:
        """Serve static assets, falling back to the single-page app shell."""
        root = app_settings.STATIC_DIR.resolve()
        candidate = (root / full_path).resolve()
        if full_path and candidate.is_relative_to(root) and candidate.is_file():
            return FileResponse(candidate)
        index = root / "index.html"
        if not index.is_file():
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not found")
        return FileResponse(index)

    return app


app = create_app()


def run() -> None:
    """Start the server with uvicorn."""
    settings = get_settings()
    uvicorn.run("skillsprint.main:app", host=settings.HOST, port=settings.PORT)
