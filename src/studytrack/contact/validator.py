from __future__ import annotations

import re
from typing import Any

from studytrack.contact.store import ContactStore, ContactSubmission
from studytrack.errors import InvalidEmail, MessageTooShort, MissingFields
from studytrack.logging import get_logger


logger = get_logger(__name__)

MIN_WORDS = 20

# Whitespace as browsers define it for regular expressions. Narrower than
# str.isspace(), which also counts \x1c-\x1f and \x85.
_WHITESPACE = r"\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"

_WHITESPACE_RE = re.compile(f"[{_WHITESPACE}]+")
_EMAIL_RE = re.compile(f"[^{_WHITESPACE}@]+@[^{_WHITESPACE}@]+\\.[^{_WHITESPACE}@]+")


def count_words(message: str) -> int:
    """Number of whitespace-delimited, non-empty tokens in ``message``."""

    return sum(1 for token in _WHITESPACE_RE.split(message) if token)


def is_valid_email(email: str) -> bool:
    # Shape only; the domain is never resolved.
    return _EMAIL_RE.fullmatch(email) is not None


def _present(value: Any) -> bool:
    return isinstance(value, str) and value != ""


def validate_contact(name: Any, email: Any, message: Any) -> int:
    """Check a contact form and return the message word count.

    Rules run in order and the first failure is raised: presence of all
    three fields, then email shape, then a minimum of ``MIN_WORDS`` words.
    """

    if not (_present(name) and _present(email) and _present(message)):
        raise MissingFields()
    if not is_valid_email(email):
        raise InvalidEmail()
    word_count = count_words(message)
    if word_count < MIN_WORDS:
        raise MessageTooShort(word_count, minimum=MIN_WORDS)
    return word_count


def submit_contact(store: ContactStore, name: Any, email: Any, message: Any) -> ContactSubmission:
    """Validate a submission and append it to ``store``."""

    word_count = validate_contact(name, email, message)
    entry = store.add(name=name, email=email, message=message, word_count=word_count)
    logger.info("New contact message received: %s", entry.to_dict())
    return entry
