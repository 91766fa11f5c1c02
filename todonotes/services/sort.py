"""
Sortable Note Store.

Note store that can reorder its collection by status or creation time.
"""

from collections.abc import Callable
from typing import Any

from todonotes.core.exceptions import ValidationError
from todonotes.models.note import Note
from todonotes.services.note import NoteStore

SORT_KEYS: dict[str, Callable[[Note], Any]] = {
    "status": lambda note: int(note.status),
    "createdAt": lambda note: note.created_at,
    "created_at": lambda note: note.created_at,
}


class SortableNoteStore(NoteStore):
    """NoteStore whose collection can be reordered in place."""

    def order_notes_by(self, field_name: str) -> list[Note]:
        """
        Sort the store's notes in ascending order of a field.

        The sort is stable and changes the store's own order, so later
        calls to all_notes see the new order.

        Args:
            field_name: "status" or "createdAt"

        Returns:
            The store's notes, now sorted

        Raises:
            ValidationError: If field_name is not a sortable field
        """
        key = SORT_KEYS.get(field_name)
        if key is None:
            raise ValidationError(
                "Unknown field name to sort.",
                details={"field": field_name, "allowed": ["status", "createdAt"]},
            )

        self._log_debug("Ordering notes", field=field_name, count=self.repo.count())
        return self.repo.sort(key)
