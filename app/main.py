from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.http.errors import register_error_handlers
from app.api.http.health import router as health_router
from app.api.http.auth import router as auth_router
from app.api.http.interviews import router as interviews_router
from app.api.http.documents import router as documents_router
from app.api.http.takes import router as takes_router
from app.core.config import settings
from app.core.logging import RequestIDMiddleware, init_logging


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    init_logging(settings.log_level)

    app = FastAPI(
        title="AI Interviewer",
        description="Interviews with documents, takes and transcripts, scoped to their owner",
        version="1.0.0"
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware)

    register_error_handlers(app)

    app.include_router(health_router)
    app.include_router(auth_router)
    app.include_router(interviews_router)
    app.include_router(documents_router)
    app.include_router(takes_router)
    return app


app = create_app()
