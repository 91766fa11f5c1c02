# Pydantic schemas package
from todonotes.schemas.note import NoteCreate, NoteSearch, NoteUpdate

__all__ = [
    "NoteCreate",
    "NoteSearch",
    "NoteUpdate",
]
