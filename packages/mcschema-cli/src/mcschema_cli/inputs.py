"""Input loading shared by CLI commands.

Translates loader and validation failures into CLIError.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from pydantic import ValidationError as PydanticValidationError

from mcschema_cli.errors import (
    handle_file_not_found,
    handle_load_error,
    handle_validation_error,
)

if TYPE_CHECKING:
    from mcschema_core import MicroCMSApiSchema, MicroCMSSchemaBundle


def load_schema_file(file_path: str) -> MicroCMSApiSchema | MicroCMSSchemaBundle:
    """Load a schema or bundle file for a command.

    Args:
        file_path: Path given on the command line.

    Returns:
        The validated bundle or API schema.

    Raises:
        CLIError: If the file is missing, unparsable or has the wrong shape.
    """
    # Import here to avoid heavy imports at CLI startup
    from mcschema_core import SchemaLoadError, load_any

    if not Path(file_path).exists():
        handle_file_not_found(file_path)

    try:
        return load_any(file_path)
    except FileNotFoundError:
        handle_file_not_found(file_path)
    except SchemaLoadError as e:
        handle_load_error(e)
    except PydanticValidationError as e:
        handle_validation_error(e, file_path)
