"""Error types raised by the contact and assistant handlers.

Every error carries a stable ``code``, a short ``error`` title and a
human-readable ``details`` string. The API layer renders them with
:meth:`StudyTrackError.to_payload` and the matching ``status_code``.
"""

from __future__ import annotations

from typing import Any


class StudyTrackError(Exception):
    """Base class for errors reported to API callers."""

    code = "InternalError"
    status_code = 500
    error = "Internal server error"
    details = "Something went wrong"

    def __init__(self, details: str | None = None) -> None:
        if details is not None:
            self.details = details
        super().__init__(self.details)

    def to_payload(self) -> dict[str, Any]:
        return {"error": self.error, "details": self.details, "code": self.code}


class ClientError(StudyTrackError):
    """A problem with the caller's input; never retried."""

    status_code = 400


class MissingFields(ClientError):
    code = "MissingFields"
    error = "All fields are required"
    details = "Please provide name, email, and message"


class InvalidEmail(ClientError):
    code = "InvalidEmail"
    error = "Invalid email format"
    details = "Please provide a valid email address"


class MessageTooShort(ClientError):
    code = "MessageTooShort"
    error = "Message too short"

    def __init__(self, word_count: int, minimum: int = 20) -> None:
        self.word_count = word_count
        self.minimum = minimum
        super().__init__(
            f"Message must contain at least {minimum} words. Current: {word_count} words"
        )


class MissingMessage(ClientError):
    code = "MissingMessage"
    error = "Message is required"
    details = "Please provide a message to the assistant"


class InvalidRequest(ClientError):
    """The request body could not be read as JSON or form data."""

    code = "InvalidRequest"
    error = "Invalid request"
    details = "Request body could not be parsed"


class InternalError(StudyTrackError):
    """Unexpected fault while handling a request.

    ``error`` overrides the default title and ``extra`` adds keys to the
    rendered payload (the assistant uses it to always return a ``reply``).
    """

    def __init__(
        self,
        details: str | None = None,
        *,
        error: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        if error is not None:
            self.error = error
        self.extra = dict(extra or {})
        super().__init__(details)

    def to_payload(self) -> dict[str, Any]:
        payload = super().to_payload()
        payload.update(self.extra)
        return payload


__all__ = [
    "ClientError",
    "InternalError",
    "InvalidEmail",
    "InvalidRequest",
    "MessageTooShort",
    "MissingFields",
    "MissingMessage",
    "StudyTrackError",
]
