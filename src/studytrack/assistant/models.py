from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Link:
    title: str
    url: str

    def to_dict(self) -> dict[str, str]:
        return {"title": self.title, "url": self.url}


@dataclass(frozen=True)
class AssistantRequest:
    """A single message for the assistant.

    ``message``, ``action`` and ``topic`` arrive straight from request
    bodies and are not guaranteed to be strings.

    ``user_role`` is accepted for compatibility with existing clients but
    does not influence the reply.
    """

    message: Any
    action: Any = None
    topic: Any = None
    user_role: str = "student"


@dataclass(frozen=True)
class AssistantReply:
    text: str
    links: tuple[Link, ...] = ()

    def links_payload(self) -> list[dict[str, str]]:
        return [link.to_dict() for link in self.links]

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text, "links": self.links_payload()}


@dataclass(frozen=True)
class ResponseCategory:
    name: str
    keywords: frozenset[str]
    text: str
    links: tuple[Link, ...] = field(default_factory=tuple)

    def matches(self, lowered: str) -> bool:
        return any(keyword in lowered for keyword in self.keywords)
