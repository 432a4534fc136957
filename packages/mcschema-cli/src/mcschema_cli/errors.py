"""Error reporting for the mcschema CLI.

Every failure a command can hit is turned into a CLIError carrying the
message to print and the process exit code:

- 1: the input file is unusable (syntax error, wrong shape, not a bundle)
- 2: the environment failed (file missing, output not writable)
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import IO, TYPE_CHECKING, Any, NoReturn

import click
from pydantic import ValidationError as PydanticValidationError

from mcschema_cli.output import error, info

if TYPE_CHECKING:
    from mcschema_core.errors import ExportError, SchemaLoadError


EXIT_SUCCESS = 0
EXIT_USER_ERROR = 1
EXIT_SYSTEM_ERROR = 2

PULL_HINT = "Run 'microcms schema pull' to export your service schema first."


class CLIError(click.ClickException):
    """Failure reported to the user.

    Attributes:
        message: Text shown after the error marker.
        exit_code: Process exit code (EXIT_USER_ERROR unless given).
        hint: Optional follow-up suggestion, printed on its own line.
    """

    def __init__(
        self,
        message: str,
        exit_code: int = EXIT_USER_ERROR,
        *,
        hint: str | None = None,
    ) -> None:
        super().__init__(message)
        self.exit_code = exit_code
        self.hint = hint

    def show(self, file: IO[Any] | None = None) -> None:
        # Always rendered on the rich stderr console
        error(self.format_message())
        if self.hint:
            info(f"\n{self.hint}")


def format_pydantic_error(err: PydanticValidationError) -> str:
    """Render validation errors with dotted locations.

    Locations keep the camelCase keys of the schema file and the kind tag
    pydantic inserts for the field union.

    Example:
        >>> print(format_pydantic_error(err))
        Validation failed:
          - apiFields.0.custom.customFieldCreatedAt: Field required
    """
    details = [
        f"  - {_dotted(detail['loc'])}: {detail['msg']}"
        for detail in err.errors(include_url=False)
    ]
    return "\n".join(["Validation failed:", *details])


def _dotted(loc: Sequence[int | str]) -> str:
    return ".".join(str(part) for part in loc) or "(document)"


def handle_validation_error(err: PydanticValidationError, file_path: str) -> NoReturn:
    """Raise CLIError for a schema file with the wrong shape."""
    raise CLIError(f"Invalid microCMS schema in {file_path}:\n{format_pydantic_error(err)}")


def handle_load_error(err: SchemaLoadError) -> NoReturn:
    """Raise CLIError for a schema file that cannot be parsed."""
    raise CLIError(err.user_message)


def handle_export_error(err: ExportError) -> NoReturn:
    """Raise CLIError for an output file that cannot be written."""
    raise CLIError(err.user_message, exit_code=EXIT_SYSTEM_ERROR)


def handle_file_not_found(file_path: str) -> NoReturn:
    """Raise CLIError for a missing input file."""
    raise CLIError(f"File not found: {file_path}", exit_code=EXIT_SYSTEM_ERROR, hint=PULL_HINT)
