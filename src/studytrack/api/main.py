from __future__ import annotations

# src/studytrack/api/main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from studytrack import __version__
from studytrack.api.errors import register_exception_handlers
from studytrack.api.routes.assistant import router as assistant_router
from studytrack.api.routes.contact import router as contact_router
from studytrack.api.routes.pages import router as pages_router
from studytrack.config import Settings, load_settings
from studytrack.contact import ContactStore, InMemoryContactStore


def create_app(settings: Settings | None = None, store: ContactStore | None = None) -> FastAPI:
    """Build the study tracker application.

    Each app owns its own submission store unless one is passed in.
    """

    if settings is None:
        settings = load_settings()

    app = FastAPI(title="Study Tracker", version=__version__)
    app.state.settings = settings
    app.state.contact_store = store if store is not None else InMemoryContactStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    @app.get("/api/health")
    def health():
        return {"status": "ok", "message": "Server is running"}

    app.include_router(contact_router, prefix="/api")
    app.include_router(assistant_router, prefix="/api")
    app.include_router(pages_router)

    # Remaining assets (css, js, images) come straight from the public directory.
    if settings.public_dir.is_dir():
        app.mount("/", StaticFiles(directory=settings.public_dir), name="public")

    return app


app = create_app()
