"""
Note Schemas.

Pydantic schemas for note store input. Emptiness of title and content is
checked by the store, not here, so that create can reject blank values
while update can ignore them.
"""

from pydantic import BaseModel, ConfigDict, Field

from todonotes.models.note import NoteStatus


class _InputBase(BaseModel):
    """Unknown keys are ignored; camelCase aliases are accepted."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class NoteCreate(_InputBase):
    """Schema for creating a new note."""

    title: str | None = Field(
        default=None,
        description="Note title",
        examples=["Buy milk"],
    )
    content: str | None = Field(
        default=None,
        description="Note content",
        examples=["2 liters"],
    )
    requires_confirmation: bool | None = Field(
        default=False,
        alias="requiresConfirmation",
        description="Ask before applying changes to this note",
    )


class NoteUpdate(_InputBase):
    """Schema for updating an existing note. Omitted fields are left unchanged."""

    title: str | None = Field(default=None, description="Note title")
    content: str | None = Field(default=None, description="Note content")
    status: NoteStatus | None = Field(default=None, description="Lifecycle status")


class NoteSearch(_InputBase):
    """Search criteria. Absent or empty criteria match every note."""

    title: str | None = Field(default=None, description="Substring to look for in titles")
    content: str | None = Field(default=None, description="Substring to look for in content")
