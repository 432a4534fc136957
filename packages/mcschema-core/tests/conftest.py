"""Shared pytest fixtures for mcschema-core tests.

This module provides common fixtures used across unit, integration,
and contract tests.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import pytest
import structlog


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Configure structlog to output to stdout for test capture.

    Tests asserting on specific events use structlog.testing.capture_logs.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stdout),
        cache_logger_on_first_use=False,  # Important for test isolation
    )


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


def text_field(field_id: str, *, required: bool = False, name: str | None = None) -> dict[str, Any]:
    """Build a raw text field definition."""
    return {
        "fieldId": field_id,
        "name": name or field_id.capitalize(),
        "kind": "text",
        "required": required,
        "isUnique": False,
    }


@pytest.fixture
def make_text_field() -> Any:
    """Factory fixture for raw text field definitions."""
    return text_field


@pytest.fixture
def seo_custom_field() -> dict[str, Any]:
    """Return a custom field definition with one required field.

    Returns:
        Raw ``customFields`` entry identified by ``cf-seo``.
    """
    return {
        "createdAt": "cf-seo",
        "fieldId": "seoMeta",
        "name": "SEO Meta",
        "fields": [
            text_field("ogTitle", required=True, name="OG Title"),
            {"fieldId": "ogDescription", "name": "OG Desc", "kind": "textArea"},
        ],
    }


@pytest.fixture
def block_custom_fields() -> list[dict[str, Any]]:
    """Return two repeater block definitions (``cf-text`` and ``cf-image``)."""
    return [
        {
            "createdAt": "cf-text",
            "fieldId": "textBlock",
            "name": "Text",
            "fields": [{"fieldId": "body", "name": "Body", "kind": "textArea"}],
        },
        {
            "createdAt": "cf-image",
            "fieldId": "imageBlock",
            "name": "Image",
            "fields": [{"fieldId": "image", "name": "Image", "kind": "media"}],
        },
    ]


@pytest.fixture
def sample_bundle() -> dict[str, Any]:
    """Return a minimal two-endpoint bundle as written by ``microcms schema pull``."""
    return {
        "version": "0.x",
        "pulledAt": "2025-01-01T00:00:00.000Z",
        "serviceDomain": "test",
        "apis": [
            {"endpoint": "posts", "api": {"apiFields": [text_field("title", required=True)]}},
            {"endpoint": "tags", "api": {"apiFields": [text_field("name", required=True)]}},
        ],
    }
