from fastapi import FastAPI

from .applications import router as applications_router
from .interviews import router as interviews_router
from .notifications import router as notifications_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(applications_router)
    app.include_router(interviews_router)
    app.include_router(notifications_router)
