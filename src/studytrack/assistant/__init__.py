"""Canned-response study assistant.

Replies come from a fixed keyword table; there is no language model behind
this package.
"""

from .models import AssistantReply, AssistantRequest, Link, ResponseCategory
from .responder import PROVIDER, generate_reply, match_category, youtube_links

__all__ = [
    "AssistantReply",
    "AssistantRequest",
    "Link",
    "PROVIDER",
    "ResponseCategory",
    "generate_reply",
    "match_category",
    "youtube_links",
]
