"""
Base Service.

Base class for all services providing common patterns for business logic.
Services orchestrate repositories, validate input and implement business
rules.

Usage:
    from todonotes.services.base import BaseService

    class NoteStore(BaseService):
        def __init__(self) -> None:
            super().__init__()
            self.repo = NoteRepository()
"""

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from todonotes.core.exceptions import ValidationError
from todonotes.core.logging import get_logger

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class BaseService:
    """
    Base class for all services.

    Provides:
    - Logging context
    - Conversion of raw input into schemas
    - Common validation patterns
    """

    def __init__(self) -> None:
        self._logger = get_logger(self.__class__.__module__)

    def _parse_input(
        self,
        schema_cls: type[SchemaT],
        data: SchemaT | Mapping[str, Any] | None,
    ) -> SchemaT:
        """
        Coerce caller input into a schema instance.

        Args:
            schema_cls: Pydantic schema to validate against
            data: Schema instance, mapping, or None for an empty input

        Raises:
            ValidationError: If the input does not fit the schema
        """
        if isinstance(data, schema_cls):
            return data
        try:
            return schema_cls.model_validate(dict(data or {}))
        except PydanticValidationError as e:
            self._logger.debug(
                "Input rejected",
                service=self.__class__.__name__,
                schema=schema_cls.__name__,
                errors=e.error_count(),
            )
            raise ValidationError(
                f"Invalid {schema_cls.__name__} data",
                details={"errors": e.errors(include_url=False)},
            ) from e

    def _validate_required(
        self,
        fields: Mapping[str, Any],
        messages: Mapping[str, str],
    ) -> None:
        """
        Validate that required fields are present and not blank.

        Fields are checked in the order of ``messages``; the first missing
        one raises with its own message.

        Args:
            fields: Dictionary of field names to values
            messages: Field name to error message, in checking order

        Raises:
            ValidationError: If a required field is missing or blank
        """
        for name, message in messages.items():
            value = fields.get(name)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise ValidationError(message, details={"field": name})

    def _log_operation(
        self,
        operation: str,
        **context: Any,
    ) -> None:
        """
        Log a service operation with context.

        Args:
            operation: Description of the operation
            **context: Additional context to include in log
        """
        self._logger.info(
            operation,
            service=self.__class__.__name__,
            **context,
        )

    def _log_debug(
        self,
        message: str,
        **context: Any,
    ) -> None:
        """
        Log debug information.

        Args:
            message: Debug message
            **context: Additional context to include in log
        """
        self._logger.debug(
            message,
            service=self.__class__.__name__,
            **context,
        )
