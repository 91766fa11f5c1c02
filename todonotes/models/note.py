"""
Note Model.

In-memory record for a todo note. Notes are created and mutated only
by the note store; callers should treat returned notes as read-only.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import IntEnum
from typing import Any


class NoteStatus(IntEnum):
    """Lifecycle status. Values are spaced to leave room for intermediate states."""

    IN_PROGRESS = 10
    COMPLETED = 20


@dataclass
class Note:
    """
    A titled, content-bearing todo note.

    id, created_at and requires_confirmation are fixed at creation.
    title, content, status and updated_at change through the store's
    update operation.
    """

    id: str
    title: str
    content: str
    created_at: datetime
    updated_at: datetime
    status: NoteStatus = NoteStatus.IN_PROGRESS
    requires_confirmation: bool = False

    def to_dict(self) -> dict[str, Any]:
        """Return a plain-dict snapshot with status as its integer value."""
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
            "status": int(self.status),
            "requires_confirmation": self.requires_confirmation,
        }

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title={self.title!r}, status={self.status.name})>"
