from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from studytrack.api.deps import read_request_body
from studytrack.assistant import PROVIDER, AssistantRequest, generate_reply
from studytrack.errors import ClientError, InternalError
from studytrack.logging import get_logger


logger = get_logger(__name__)

router = APIRouter(prefix="/assistant", tags=["Assistant"])

FALLBACK_REPLY = "Sorry, I encountered an error. Please try again."


class AssistantChatRequest(BaseModel):
    # Untyped: only message, action and topic steer the reply, and the UI
    # posts the rest in whatever shape it has.
    message: Any = None
    action: Any = None
    topic: Any = None
    userRole: Any = "student"
    text: Any = None
    history: Any = None
    relevantNotes: Any = None


class LinkItem(BaseModel):
    title: str
    url: str


class AssistantChatResponse(BaseModel):
    success: bool = True
    reply: str
    links: list[LinkItem] = Field(default_factory=list)
    provider: str = PROVIDER


@router.post("", response_model=AssistantChatResponse)
def chat(body: dict[str, Any] = Depends(read_request_body)) -> AssistantChatResponse:
    payload = AssistantChatRequest.model_validate(body)
    try:
        reply = generate_reply(
            AssistantRequest(
                message=payload.message,
                action=payload.action,
                topic=payload.topic,
                user_role=payload.userRole if isinstance(payload.userRole, str) else "student",
            )
        )
    except ClientError:
        raise
    except Exception as exc:
        logger.exception("Assistant API error: %s", exc)
        raise InternalError(
            "The AI assistant encountered an error",
            error="Failed to process request",
            extra={"reply": FALLBACK_REPLY},
        ) from exc

    return AssistantChatResponse(
        reply=reply.text,
        links=[LinkItem(**link) for link in reply.links_payload()],
    )
