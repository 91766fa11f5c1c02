"""
Note Store.

Business logic layer for notes. Owns the ordered note collection,
validates input and applies confirmation-gated updates.
"""

from collections.abc import Callable, Mapping
from datetime import datetime
from typing import Any

from todonotes.core.prompts import console_confirm
from todonotes.core.utils import generate_id, utc_now
from todonotes.models.note import Note, NoteStatus
from todonotes.repositories.note import NoteRepository
from todonotes.schemas.note import NoteCreate, NoteUpdate
from todonotes.services.base import BaseService

DEFAULT_CONFIRMATION_MESSAGE = "Are you sure about these changes?"

REQUIRED_FIELD_MESSAGES = {
    "title": "Title is required and cannot be empty.",
    "content": "Content is required and cannot be empty.",
}


class NoteStore(BaseService):
    """
    In-memory todo note manager.

    The host supplies the collaborators; each defaults to the package's
    own implementation:

        store = NoteStore(
            id_generator=CounterIdGenerator(),
            clock=utc_now,
            confirm=always_confirm,
        )
        note = store.create_note({"title": "Buy milk", "content": "2 liters"})
    """

    def __init__(
        self,
        id_generator: Callable[[], str] | None = None,
        clock: Callable[[], datetime] | None = None,
        confirm: Callable[[str], bool] | None = None,
        confirmation_message: str | None = None,
    ) -> None:
        super().__init__()
        self.repo = NoteRepository()
        self._generate_id = id_generator or generate_id
        self._clock = clock or utc_now
        self._confirm = confirm or console_confirm
        self.confirmation_message = confirmation_message or DEFAULT_CONFIRMATION_MESSAGE

    @property
    def all_notes(self) -> list[Note]:
        """The live, ordered list of notes."""
        return self.repo.get_all()

    @property
    def all_notes_count(self) -> int:
        """Number of notes in the store."""
        return self.repo.count()

    @property
    def in_progress_notes_count(self) -> int:
        """Number of notes still in progress."""
        return self.repo.count_by_status(NoteStatus.IN_PROGRESS)

    def create_note(self, note: NoteCreate | Mapping[str, Any]) -> Note:
        """
        Create a note and append it to the collection.

        Args:
            note: Title and content (both required), and optionally
                requires_confirmation. Other fields are ignored.

        Returns:
            Created note

        Raises:
            ValidationError: If title or content is missing or blank
        """
        data = self._parse_input(NoteCreate, note)
        self._validate_required(
            {"title": data.title, "content": data.content},
            REQUIRED_FIELD_MESSAGES,
        )

        now = self._clock()
        created = self.repo.add(
            Note(
                id=self._generate_id(),
                title=data.title,
                content=data.content,
                created_at=now,
                updated_at=now,
                status=NoteStatus.IN_PROGRESS,
                requires_confirmation=bool(data.requires_confirmation),
            )
        )

        self._log_operation(
            "Note created",
            note_id=created.id,
            requires_confirmation=created.requires_confirmation,
        )
        return created

    def read_note(self, note_id: str) -> Note:
        """
        Get a note by ID.

        Raises:
            NotFoundError: If note not found
        """
        return self.repo.get_by_id(note_id)

    def update_note(self, note_id: str, note: NoteUpdate | Mapping[str, Any] | None = None) -> Note:
        """
        Update title, content or status of a note.

        Blank title or content and omitted fields leave the current value
        in place. Notes that require confirmation are only changed when
        the confirmation prompt answers yes; otherwise the note is
        returned untouched.

        Args:
            note_id: Note ID to update
            note: Fields to change

        Returns:
            The same note object, updated in place if confirmed

        Raises:
            NotFoundError: If note not found
            ValidationError: If the update data is malformed
        """
        existing = self.repo.get_by_id(note_id)
        data = self._parse_input(NoteUpdate, note)

        if existing.requires_confirmation and not self._confirm(self.confirmation_message):
            self._log_operation("Note update cancelled", note_id=note_id)
            return existing

        changes: dict[str, Any] = {}
        if data.title is not None and data.title.strip():
            changes["title"] = data.title
        if data.content is not None and data.content.strip():
            changes["content"] = data.content
        if data.status is not None:
            changes["status"] = data.status
        changes["updated_at"] = self._clock()

        self._log_operation(
            "Updating note",
            note_id=note_id,
            fields=sorted(changes),
        )
        return self.repo.update(existing, **changes)

    def delete_note(self, note_id: str) -> bool:
        """
        Delete a note.

        Returns:
            True if a note was removed, False if no note has this ID
        """
        deleted = self.repo.delete(note_id)
        if deleted:
            self._log_operation("Note deleted", note_id=note_id)
        else:
            self._log_debug("Nothing to delete", note_id=note_id)
        return deleted
