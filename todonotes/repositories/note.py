"""
Note Repository.

Data access layer for notes. Holds the ordered note collection.
"""

from todonotes.models.note import Note, NoteStatus
from todonotes.repositories.base import BaseRepository


class NoteRepository(BaseRepository[Note]):
    """
    Repository for Note records.

    Inherits standard operations from BaseRepository
    and adds note-specific queries.
    """

    model = Note

    def count_by_status(self, status: NoteStatus) -> int:
        """Get count of notes with the given status."""
        return sum(1 for note in self._items if note.status == status)

    def search(self, title: str | None = None, content: str | None = None) -> list[Note]:
        """
        Case-insensitive substring search over title and content.

        A note is returned when it matches the title needle OR the content
        needle. Missing or empty needles take no part in the match; with
        no needles at all every note is returned.

        Args:
            title: Substring to look for in titles
            content: Substring to look for in content

        Returns:
            Matching notes in collection order
        """
        needles: list[tuple[str, str]] = [
            (field, needle.lower())
            for field, needle in (("title", title), ("content", content))
            if needle
        ]
        if not needles:
            return list(self._items)

        def matches(note: Note) -> bool:
            return any(needle in getattr(note, field).lower() for field, needle in needles)

        return self.filter(matches)
