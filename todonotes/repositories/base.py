"""
Base Repository.

Base class for in-memory repositories holding records in insertion order.
Lookups are linear.
"""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from todonotes.core.exceptions import NotFoundError

ModelType = TypeVar("ModelType")


class BaseRepository(Generic[ModelType]):
    """
    Ordered in-memory collection with common CRUD operations.

    Records must expose an ``id`` attribute. Subclasses set the model class:

        class NoteRepository(BaseRepository[Note]):
            model = Note
    """

    model: type[ModelType]

    def __init__(self) -> None:
        self._items: list[ModelType] = []

    @property
    def items(self) -> list[ModelType]:
        """The live, ordered list of records."""
        return self._items

    def get_by_id(self, id: str) -> ModelType:
        """
        Get a single record by ID.

        Raises:
            NotFoundError: If record not found
        """
        instance = self.get_by_id_or_none(id)

        if instance is None:
            raise NotFoundError(f"{self.model.__name__} not found.")

        return instance

    def get_by_id_or_none(self, id: str) -> ModelType | None:
        """Get a single record by ID, returning None if not found."""
        for instance in self._items:
            if instance.id == id:  # type: ignore[attr-defined]
                return instance
        return None

    def get_all(self) -> list[ModelType]:
        """Get all records in collection order."""
        return self._items

    def add(self, instance: ModelType) -> ModelType:
        """Append a record at the tail of the collection."""
        self._items.append(instance)
        return instance

    def update(self, instance: ModelType, **kwargs: Any) -> ModelType:
        """Set attributes on a record in place."""
        for key, value in kwargs.items():
            if hasattr(instance, key):
                setattr(instance, key, value)
        return instance

    def delete(self, id: str) -> bool:
        """Remove the record with the given ID. Returns False if absent."""
        for index, instance in enumerate(self._items):
            if instance.id == id:  # type: ignore[attr-defined]
                del self._items[index]
                return True
        return False

    def exists(self, id: str) -> bool:
        """Check if a record exists by ID."""
        return self.get_by_id_or_none(id) is not None

    def count(self) -> int:
        """Get count of all records."""
        return len(self._items)

    def filter(self, predicate: Callable[[ModelType], bool]) -> list[ModelType]:
        """Return records matching predicate, in collection order."""
        return [instance for instance in self._items if predicate(instance)]

    def sort(self, key: Callable[[ModelType], Any]) -> list[ModelType]:
        """Stable in-place sort of the collection. Returns the live list."""
        self._items.sort(key=key)
        return self._items
