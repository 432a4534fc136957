"""Unit tests for the mcschema exception hierarchy."""

from __future__ import annotations

import pytest
from structlog.testing import capture_logs

from mcschema_core.errors import ExportError, McSchemaError, SchemaLoadError


class TestMcSchemaError:
    """Tests for McSchemaError."""

    def test_user_message_is_str(self) -> None:
        """str() returns the user-facing message only."""
        error = McSchemaError("Something failed", internal_details="secret trace")
        assert str(error) == "Something failed"
        assert error.user_message == "Something failed"
        assert error.internal_details == "secret trace"

    def test_internal_details_are_logged(self) -> None:
        """Technical details go to the log, not the message."""
        with capture_logs() as logs:
            McSchemaError("Something failed", internal_details="secret trace")
        assert logs == [
            {
                "event": "mcschema_error",
                "error_type": "McSchemaError",
                "user_message": "Something failed",
                "internal_details": "secret trace",
                "log_level": "error",
            }
        ]

    def test_no_log_without_details(self) -> None:
        """Nothing is logged when there are no internal details."""
        with capture_logs() as logs:
            McSchemaError("Something failed")
        assert logs == []

    def test_subclasses(self) -> None:
        """Load and export errors share the base class."""
        assert issubclass(SchemaLoadError, McSchemaError)
        assert issubclass(ExportError, McSchemaError)


class TestSchemaLoadError:
    """Tests for SchemaLoadError."""

    def test_message_with_file_and_line(self) -> None:
        """File and line are appended to the message."""
        error = SchemaLoadError("Invalid JSON", file_path="schema.json", line_number=4)
        assert str(error) == "Invalid JSON (schema.json:4)"
        assert error.file_path == "schema.json"
        assert error.line_number == 4

    def test_message_with_file_only(self) -> None:
        """The line is omitted when unknown."""
        error = SchemaLoadError("Not a mapping", file_path="schema.json")
        assert str(error) == "Not a mapping (schema.json)"
        assert error.line_number is None

    def test_message_with_line_only(self) -> None:
        """A line without a file is still reported."""
        assert str(SchemaLoadError("Invalid YAML", line_number=2)) == "Invalid YAML (line 2)"

    def test_plain_message(self) -> None:
        """Without context the message is unchanged."""
        assert str(SchemaLoadError("Broken")) == "Broken"

    def test_catchable_as_base(self) -> None:
        """SchemaLoadError can be handled as McSchemaError."""
        with pytest.raises(McSchemaError):
            raise SchemaLoadError("Broken")


class TestExportError:
    """Tests for ExportError."""

    def test_output_path(self) -> None:
        """The destination is kept as an attribute."""
        error = ExportError("Cannot write", output_path="out/posts.schema.json")
        assert str(error) == "Cannot write"
        assert error.output_path == "out/posts.schema.json"
