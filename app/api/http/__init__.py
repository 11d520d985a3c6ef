from app.api.http.health import router as health_router
from app.api.http.auth import router as auth_router
from app.api.http.interviews import router as interviews_router
from app.api.http.documents import router as documents_router
from app.api.http.takes import router as takes_router

__all__ = [
    "health_router",
    "auth_router",
    "interviews_router",
    "documents_router",
    "takes_router"
]
