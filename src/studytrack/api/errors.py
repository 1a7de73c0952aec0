"""Translate exceptions into the JSON error bodies clients expect."""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from studytrack.errors import InvalidRequest, StudyTrackError
from studytrack.logging import get_logger


logger = get_logger(__name__)


def _describe_validation_errors(errors) -> str:
    parts: list[str] = []
    for item in errors:
        loc = ".".join(str(part) for part in item.get("loc", ()) if part != "body")
        msg = str(item.get("msg") or "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or InvalidRequest.details


async def handle_studytrack_error(request: Request, exc: StudyTrackError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_payload())


async def handle_request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = _describe_validation_errors(exc.errors())
    logger.info("Rejected malformed request to %s: %s", request.url.path, details)
    return await handle_studytrack_error(request, InvalidRequest(details))


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Error: %s", exc)
    return JSONResponse(
        status_code=500,
        content={"error": "Internal server error", "message": str(exc)},
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StudyTrackError, handle_studytrack_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)
