"""Routes serving the study-tracker HTML pages from the public directory."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import FileResponse

from studytrack.api.deps import get_settings
from studytrack.config import Settings


PAGES = (
    "index",
    "login",
    "register",
    "dashboard",
    "tasks",
    "notes",
    "students",
    "reports",
    "attendance",
    "profile",
    "assistant",
    "calculator",
    "contact",
)

router = APIRouter(tags=["Pages"], include_in_schema=False)


def _page_response(settings: Settings, filename: str) -> FileResponse:
    path = settings.public_dir / filename
    if not path.is_file():
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{filename} not found")
    return FileResponse(path, media_type="text/html")


def _page_endpoint(filename: str):
    def endpoint(settings: Settings = Depends(get_settings)) -> FileResponse:
        return _page_response(settings, filename)

    endpoint.__name__ = f"page_{filename.replace('.', '_')}"
    return endpoint


for _page in PAGES:
    router.add_api_route(f"/{_page}.html", _page_endpoint(f"{_page}.html"), methods=["GET"])

router.add_api_route("/register", _page_endpoint("register.html"), methods=["GET"])
router.add_api_route("/", _page_endpoint("index.html"), methods=["GET"])
