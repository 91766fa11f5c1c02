"""
todonotes.

In-memory todo note manager with confirmation-gated updates.

- core/: Configuration, logging, exceptions, default collaborators
- models/: Note record and status
- schemas/: Pydantic input schemas
- repositories/: Ordered in-memory note collection
- services/: NoteStore and its searchable and sortable variants
"""

from todonotes.core.exceptions import ApplicationError, NotFoundError, ValidationError
from todonotes.models.note import Note, NoteStatus
from todonotes.services.note import NoteStore
from todonotes.services.search import SearchableNoteStore
from todonotes.services.sort import SortableNoteStore

__all__ = [
    "ApplicationError",
    "Note",
    "NoteStatus",
    "NoteStore",
    "NotFoundError",
    "SearchableNoteStore",
    "SortableNoteStore",
    "ValidationError",
]
