"""Exceptions raised around the conversion core.

Field conversion itself never raises for validated input; these cover the
file boundary on either side of it:

- McSchemaError: root of the hierarchy
- SchemaLoadError: an input file is not JSON/YAML or not a mapping
- ExportError: a generated schema cannot be written

``str()`` of every error is safe to show to users. Parser messages and OS
errors go in ``internal_details``, which is logged through structlog when
the error is created and is never part of the message.
"""

from __future__ import annotations

import structlog

logger = structlog.get_logger(__name__)


class McSchemaError(Exception):
    """Root of the mcschema exception hierarchy.

    Args:
        user_message: Message shown to the user.
        internal_details: Technical context, logged only.

    Example:
        >>> raise McSchemaError(
        ...     "Schema file is invalid",
        ...     internal_details="Expecting ',' delimiter: line 4 column 3",
        ... )
    """

    def __init__(self, user_message: str, *, internal_details: str | None = None) -> None:
        super().__init__(user_message)
        self.user_message = user_message
        self.internal_details = internal_details

        if internal_details:
            logger.error(
                "mcschema_error",
                error_type=type(self).__name__,
                user_message=user_message,
                internal_details=internal_details,
            )


def _with_location(message: str, file_path: str | None, line_number: int | None) -> str:
    if file_path and line_number:
        return f"{message} ({file_path}:{line_number})"
    if file_path:
        return f"{message} ({file_path})"
    if line_number:
        return f"{message} (line {line_number})"
    return message


class SchemaLoadError(McSchemaError):
    """An input schema file could not be read into a mapping.

    The location is appended to the message in ``path:line`` form.

    Attributes:
        file_path: File that failed to load, if known.
        line_number: 1-based line of the syntax error, if known.

    Example:
        >>> str(SchemaLoadError("Invalid JSON", file_path="schema.json", line_number=4))
        'Invalid JSON (schema.json:4)'
    """

    def __init__(
        self,
        user_message: str,
        *,
        file_path: str | None = None,
        line_number: int | None = None,
        internal_details: str | None = None,
    ) -> None:
        super().__init__(
            _with_location(user_message, file_path, line_number),
            internal_details=internal_details,
        )
        self.file_path = file_path
        self.line_number = line_number


class ExportError(McSchemaError):
    """A generated JSON Schema could not be written.

    Attributes:
        output_path: Destination that failed.
    """

    def __init__(
        self,
        user_message: str,
        *,
        output_path: str | None = None,
        internal_details: str | None = None,
    ) -> None:
        super().__init__(user_message, internal_details=internal_details)
        self.output_path = output_path
