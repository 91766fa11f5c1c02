"""
Searchable Note Store.

Note store with substring search over title and content.
"""

from collections.abc import Mapping
from typing import Any

from todonotes.models.note import Note
from todonotes.schemas.note import NoteSearch
from todonotes.services.note import NoteStore


class SearchableNoteStore(NoteStore):
    """NoteStore that can search notes by title and/or content."""

    def search_notes(
        self,
        params: NoteSearch | Mapping[str, Any] | None = None,
        *,
        title: str | None = None,
        content: str | None = None,
    ) -> list[Note]:
        """
        Search notes by title and content (case-insensitive).

        A note matches when its title contains the title needle OR its
        content contains the content needle. Only the criteria given take
        part; searching with no criteria returns all notes.

        Args:
            params: Criteria as a NoteSearch or mapping
            title: Title needle, overrides params
            content: Content needle, overrides params

        Returns:
            Matching notes in store order
        """
        criteria = self._parse_input(NoteSearch, params)
        overrides = {
            key: value
            for key, value in (("title", title), ("content", content))
            if value is not None
        }
        if overrides:
            criteria = criteria.model_copy(update=overrides)

        self._log_debug("Searching notes", title=criteria.title, content=criteria.content)
        return self.repo.search(title=criteria.title, content=criteria.content)
