"""Canned assistant replies keyed by message keywords.

``CATEGORIES`` is evaluated in declaration order and the first match wins,
so earlier entries take priority when a message hits several keyword sets.
"""

from __future__ import annotations

from studytrack.assistant.models import Link, ResponseCategory


STUDY_TEXT = (
    "I can help you with your studies! \U0001F4DA\n\n"
    "Here are some effective strategies:\n\n"
    "• Break down complex topics into smaller chunks\n"
    "• Use the Pomodoro technique: 25 minutes focused study + 5 minute breaks\n"
    "• Practice active recall instead of passive reading\n"
    "• Create mind maps to connect concepts\n"
    "• Teach the material to someone else\n\n"
    "Would you like specific study strategies for any subject?"
)

IDEAS_TEXT = (
    "Great! Here are some project ideas: \U0001F4A1\n\n"
    "**Web Development:**\n"
    "• Personal portfolio website\n"
    "• Task management app\n"
    "• Blog with CMS\n\n"
    "**Data Science:**\n"
    "• Analyze a dataset you're interested in\n"
    "• Build a prediction model\n"
    "• Create data visualizations\n\n"
    "Which area interests you most?"
)

DEFAULT_TEXT = (
    "I'm here to help with your studies! \U0001F393\n\n"
    "**I can assist with:**\n"
    "• Study notes and summaries\n"
    "• Project ideas and brainstorming\n"
    "• Task organization and planning\n"
    "• YouTube video recommendations\n"
    "• Study tips and motivation\n\n"
    "What would you like help with today?"
)


CATEGORIES: tuple[ResponseCategory, ...] = (
    ResponseCategory(
        name="study",
        keywords=frozenset({"study", "learn", "topic", "subject", "chapter", "notes", "revision"}),
        text=STUDY_TEXT,
        links=(
            Link(
                title="Effective Study Techniques",
                url="https://www.youtube.com/results?search_query=effective+study+techniques",
            ),
        ),
    ),
    ResponseCategory(
        name="ideas",
        keywords=frozenset({"idea", "project", "brainstorm", "creative", "innovative"}),
        text=IDEAS_TEXT,
        links=(
            Link(
                title="Project Ideas for Students",
                url="https://www.youtube.com/results?search_query=student+project+ideas",
            ),
        ),
    ),
)

DEFAULT_CATEGORY = ResponseCategory(name="default", keywords=frozenset(), text=DEFAULT_TEXT)
