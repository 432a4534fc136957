"""Shared test fixtures for mcschema-cli tests.

Provides CliRunner fixtures and paths to schema file fixtures.
"""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from mcschema_core.observability import configure_logging


@pytest.fixture(autouse=True)
def configure_logging_for_tests() -> Generator[None, None, None]:
    """Configure logging as the CLI group does, and undo it afterwards.

    Commands invoked directly skip the group's --verbose callback, so debug
    events would otherwise be printed to stdout next to the JSON output.
    """
    root_level = logging.getLogger().level
    configure_logging(log_level="WARNING", add_timestamp=False)
    yield
    structlog.reset_defaults()
    logging.getLogger().setLevel(root_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click test runner.

    Returns:
        CliRunner instance for testing CLI commands.
    """
    return CliRunner()


@pytest.fixture
def isolated_runner(cli_runner: CliRunner) -> Generator[CliRunner, None, None]:
    """Create a Click test runner with an isolated filesystem.

    Commands writing to the default ``./schemas`` directory write into a
    temporary directory for the duration of the test.

    Yields:
        CliRunner instance with isolated filesystem.
    """
    with cli_runner.isolated_filesystem():
        yield cli_runner


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def posts_schema(fixtures_dir: Path) -> Path:
    """Return the path to a single API schema with custom and repeater fields."""
    return fixtures_dir / "posts.json"


@pytest.fixture
def bundle_file(fixtures_dir: Path) -> Path:
    """Return the path to a two-endpoint bundle (posts, authors)."""
    return fixtures_dir / "bundle.json"


@pytest.fixture
def invalid_json_file(fixtures_dir: Path) -> Path:
    """Return the path to a file with a JSON syntax error."""
    return fixtures_dir / "invalid.json"


@pytest.fixture
def wrong_shape_file(fixtures_dir: Path) -> Path:
    """Return the path to valid JSON with a custom field missing its reference."""
    return fixtures_dir / "wrong_shape.json"
