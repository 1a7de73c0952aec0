"""Keyword-routed assistant replies.

No model is consulted: a reply is either a set of YouTube search links for
an explicit topic, the canned text of the first matching category, or the
default help text.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from studytrack.assistant.categories import CATEGORIES, DEFAULT_CATEGORY
from studytrack.assistant.models import AssistantReply, AssistantRequest, Link, ResponseCategory
from studytrack.errors import MissingMessage


PROVIDER = "fallback"

YOUTUBE_SEARCH_URL = "https://www.youtube.com/results?search_query="

# (title suffix, query suffix)
_YOUTUBE_VARIANTS = (
    ("Complete Tutorial", "tutorial"),
    ("Explained Simply", "explained"),
    ("For Beginners", "for+beginners"),
    ("Step by Step", "step+by+step"),
)

# Characters left unescaped by JavaScript's encodeURIComponent.
_URI_COMPONENT_SAFE = "-_.!~*'()"


def _topic_text(topic: Any) -> str:
    """Render a posted topic the way a browser would print it."""

    if isinstance(topic, bool):
        return "true" if topic else "false"
    if isinstance(topic, float) and topic.is_integer():
        return str(int(topic))
    return str(topic)


def _youtube_text(topic: str) -> str:
    return (
        f'Here are some YouTube video suggestions for "{topic}":\n\n'
        "1. Complete tutorial and overview\n"
        "2. Step-by-step beginner guide\n"
        "3. Advanced concepts explained\n"
        "4. Practical examples and projects\n\n"
        "Click the links below to search for these videos!"
    )


def youtube_links(topic: Any = None) -> tuple[Link, ...]:
    query = _topic_text(topic) if topic else "study tips"
    escaped = quote(query, safe=_URI_COMPONENT_SAFE)
    return tuple(
        Link(title=f"{query} - {title}", url=f"{YOUTUBE_SEARCH_URL}{escaped}+{suffix}")
        for title, suffix in _YOUTUBE_VARIANTS
    )


def match_category(message: str) -> ResponseCategory | None:
    lowered = message.lower()
    for category in CATEGORIES:
        if category.matches(lowered):
            return category
    return None


def generate_reply(request: AssistantRequest) -> AssistantReply:
    """Return the canned reply for ``request``.

    Raises
    ------
    MissingMessage
        If the message is empty or only whitespace.
    """

    message = request.message
    if not isinstance(message, str) or not message.strip():
        raise MissingMessage()

    if request.action == "youtube" and request.topic:
        topic = _topic_text(request.topic)
        return AssistantReply(text=_youtube_text(topic), links=youtube_links(topic))

    category = match_category(message) or DEFAULT_CATEGORY
    return AssistantReply(text=category.text, links=category.links)
