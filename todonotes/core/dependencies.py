"""
Store Factory.

Builds note stores wired with the collaborators named in
config/settings/notes.yaml.

Usage:
    from todonotes.core.dependencies import get_note_store

    store = get_note_store("searchable")
"""

from collections.abc import Callable

from todonotes.core.config import get_app_config
from todonotes.core.config_schema import NotesSchema
from todonotes.core.exceptions import ValidationError
from todonotes.core.logging import get_logger
from todonotes.core.prompts import PROMPTS
from todonotes.core.utils import CounterIdGenerator, generate_id
from todonotes.services.note import NoteStore
from todonotes.services.search import SearchableNoteStore
from todonotes.services.sort import SortableNoteStore

logger = get_logger(__name__)

STORE_KINDS: dict[str, type[NoteStore]] = {
    "basic": NoteStore,
    "searchable": SearchableNoteStore,
    "sortable": SortableNoteStore,
}


def build_id_generator(settings: NotesSchema) -> Callable[[], str]:
    """Return the id generator selected by notes.yaml."""
    if settings.id_strategy == "counter":
        return CounterIdGenerator(prefix=settings.id_prefix)
    if settings.id_prefix:
        prefix = settings.id_prefix
        return lambda: f"{prefix}{generate_id()}"
    return generate_id


def get_note_store(kind: str = "basic", confirm: Callable[[str], bool] | None = None) -> NoteStore:
    """
    Build a note store from application configuration.

    Args:
        kind: "basic", "searchable" or "sortable"
        confirm: Prompt to use instead of the configured one

    Returns:
        A new, empty store

    Raises:
        ValidationError: If kind is unknown
    """
    store_cls = STORE_KINDS.get(kind)
    if store_cls is None:
        raise ValidationError(
            f"Unknown store kind: {kind}",
            details={"kind": kind, "allowed": sorted(STORE_KINDS)},
        )

    settings = get_app_config().notes
    logger.debug(
        "Building note store",
        kind=kind,
        id_strategy=settings.id_strategy,
        prompt=settings.prompt if confirm is None else "custom",
    )
    return store_cls(
        id_generator=build_id_generator(settings),
        confirm=confirm or PROMPTS[settings.prompt],
        confirmation_message=settings.confirmation_message,
    )
