"""FastAPI dependencies resolving per-application state and request bodies."""

from __future__ import annotations

import json
from typing import Any

from fastapi import Request

from studytrack.config import Settings
from studytrack.contact import ContactStore
from studytrack.errors import InvalidRequest


FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def get_contact_store(request: Request) -> ContactStore:
    return request.app.state.contact_store


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


async def read_request_body(request: Request) -> dict[str, Any]:
    """Return the POSTed fields from a JSON or URL-encoded form body.

    HTML forms post ``application/x-www-form-urlencoded``; everything else is
    read as JSON. An empty body, or a JSON value that is not an object,
    yields no fields so the handler reports which ones are missing.

    Raises
    ------
    InvalidRequest
        If a non-empty body is not valid JSON.
    """

    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if content_type == FORM_CONTENT_TYPE:
        form = await request.form()
        fields: dict[str, Any] = {}
        for key in form.keys():
            values = form.getlist(key)
            fields[key] = values[0] if len(values) == 1 else values
        return fields

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        data = json.loads(raw)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise InvalidRequest(f"JSON decode error: {exc}") from exc
    return data if isinstance(data, dict) else {}
