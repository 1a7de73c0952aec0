"""Contact form validation and the submission log."""

from .store import ContactStore, ContactSubmission, InMemoryContactStore
from .validator import MIN_WORDS, count_words, is_valid_email, submit_contact, validate_contact

__all__ = [
    "ContactStore",
    "ContactSubmission",
    "InMemoryContactStore",
    "MIN_WORDS",
    "count_words",
    "is_valid_email",
    "submit_contact",
    "validate_contact",
]
