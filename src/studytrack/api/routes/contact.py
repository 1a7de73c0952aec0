from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from studytrack.api.deps import get_contact_store, read_request_body
from studytrack.contact import ContactStore, submit_contact
from studytrack.errors import ClientError, InternalError
from studytrack.logging import get_logger


logger = get_logger(__name__)

router = APIRouter(prefix="/contact", tags=["Contact"])

THANK_YOU_MESSAGE = "Thank you for your message. We will get back to you soon!"


class ContactRequest(BaseModel):
    # Left untyped so non-string values surface as MissingFields, not a schema error.
    name: Any = None
    email: Any = None
    message: Any = None


class ContactData(BaseModel):
    messageId: int
    wordCount: int


class ContactResponse(BaseModel):
    success: bool = True
    message: str
    data: ContactData


@router.post("", response_model=ContactResponse)
def create_contact(
    body: dict[str, Any] = Depends(read_request_body),
    store: ContactStore = Depends(get_contact_store),
) -> ContactResponse:
    payload = ContactRequest.model_validate(body)
    try:
        entry = submit_contact(store, payload.name, payload.email, payload.message)
    except ClientError:
        raise
    except Exception as exc:
        logger.exception("Contact form error: %s", exc)
        raise InternalError("Something went wrong while processing your message") from exc

    return ContactResponse(
        message=THANK_YOU_MESSAGE,
        data=ContactData(messageId=entry.id, wordCount=entry.word_count),
    )
