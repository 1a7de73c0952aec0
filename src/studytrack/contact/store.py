"""In-memory log of accepted contact submissions."""

from __future__ import annotations

import time
from dataclasses import asdict, dataclass
from datetime import UTC, datetime
from threading import Lock
from typing import Any, Callable, Protocol


def utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(frozen=True)
class ContactSubmission:
    """An accepted contact message."""

    id: int
    name: str
    email: str
    message: str
    created_at: datetime
    word_count: int

    def to_dict(self) -> dict[str, Any]:
        payload = asdict(self)
        payload["createdAt"] = payload.pop("created_at").isoformat()
        payload["wordCount"] = payload.pop("word_count")
        return payload


class ContactStore(Protocol):
    def add(self, *, name: str, email: str, message: str, word_count: int) -> ContactSubmission: ...

    def all(self) -> list[ContactSubmission]: ...

    def __len__(self) -> int: ...


class InMemoryContactStore:
    """Append-only submission log guarded by a lock.

    Ids are wall-clock milliseconds, bumped past the previous id when the
    clock has not advanced, so they stay unique and increasing per store.
    Entries live for the lifetime of the process only.
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._items: list[ContactSubmission] = []
        self._lock = Lock()
        self._last_id = 0

    def _next_id(self) -> int:
        candidate = int(self._clock() * 1000)
        if candidate <= self._last_id:
            candidate = self._last_id + 1
        self._last_id = candidate
        return candidate

    def add(self, *, name: str, email: str, message: str, word_count: int) -> ContactSubmission:
        with self._lock:
            entry = ContactSubmission(
                id=self._next_id(),
                name=name,
                email=email,
                message=message,
                created_at=utcnow(),
                word_count=word_count,
            )
            self._items.append(entry)
        return entry

    def all(self) -> list[ContactSubmission]:
        with self._lock:
            return list(self._items)

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)
