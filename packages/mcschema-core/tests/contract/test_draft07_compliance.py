"""Contract tests for JSON Schema draft-07 compliance.

Every generated schema must be a valid draft-07 document, and content
shaped like the microCMS content API must validate against it.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
from jsonschema import Draft7Validator

from mcschema_core import (
    ConversionOptions,
    bundle_to_json_schema,
    load_api_schema,
    load_bundle,
    to_json_schema,
)

pytestmark = pytest.mark.contract

API_FIXTURES = ["coffee-beans.json", "coffee-brews.json", "tech-articles.json", "tags.yaml"]


@pytest.mark.parametrize("fixture_name", API_FIXTURES)
@pytest.mark.parametrize("include_extensions", [False, True])
def test_api_schemas_are_valid_draft07(
    fixtures_dir: Path, fixture_name: str, include_extensions: bool
) -> None:
    """Converted API schemas pass the draft-07 meta-schema."""
    schema = to_json_schema(
        load_api_schema(fixtures_dir / fixture_name),
        ConversionOptions(title=fixture_name, include_extensions=include_extensions),
    )
    Draft7Validator.check_schema(schema)


def test_bundle_schemas_are_valid_draft07(fixtures_dir: Path) -> None:
    """Every bundle entry passes the draft-07 meta-schema."""
    for schema in bundle_to_json_schema(load_bundle(fixtures_dir / "bundle.json")).values():
        Draft7Validator.check_schema(schema)


def test_cyclic_schema_is_valid_draft07() -> None:
    """Cycle placeholders keep the document valid."""
    schema = to_json_schema(
        {
            "apiFields": [
                {
                    "fieldId": "node",
                    "name": "Node",
                    "kind": "custom",
                    "customFieldCreatedAt": "cf-a",
                }
            ],
            "customFields": [
                {
                    "createdAt": "cf-a",
                    "fields": [
                        {
                            "fieldId": "child",
                            "name": "Child",
                            "kind": "custom",
                            "customFieldCreatedAt": "cf-a",
                        }
                    ],
                }
            ],
        }
    )
    Draft7Validator.check_schema(schema)
    assert schema["properties"]["node"]["properties"]["child"] == {"type": "object"}


class TestContentValidation:
    """Content API payloads validated against generated schemas."""

    @pytest.fixture
    def articles_validator(self, fixtures_dir: Path) -> Draft7Validator:
        return Draft7Validator(to_json_schema(load_api_schema(fixtures_dir / "tech-articles.json")))

    @pytest.fixture
    def article(self) -> dict[str, Any]:
        return {
            "title": "Typed content",
            "content": "<p>Hello</p>",
            "lastReviewedAt": "2024-03-04T00:00:00.000Z",
            "seo": {
                "ogTitle": "Typed",
                "ogImage": {"url": "https://images.example/og.png", "width": 1200, "height": 630},
            },
            "blocks": [
                {"body": "<p>Intro</p>"},
                {"language": "python", "code": "print('hi')"},
            ],
        }

    def test_valid_article(
        self, articles_validator: Draft7Validator, article: dict[str, Any]
    ) -> None:
        assert list(articles_validator.iter_errors(article)) == []

    def test_missing_required(
        self, articles_validator: Draft7Validator, article: dict[str, Any]
    ) -> None:
        del article["content"]
        errors = list(articles_validator.iter_errors(article))
        assert [error.validator for error in errors] == ["required"]

    def test_wrong_enum_value(
        self, articles_validator: Draft7Validator, article: dict[str, Any]
    ) -> None:
        article["blocks"] = [{"language": "rust", "code": "fn main() {}"}]
        assert not articles_validator.is_valid(article)

    def test_missing_custom_required(
        self, articles_validator: Draft7Validator, article: dict[str, Any]
    ) -> None:
        article["seo"] = {"ogImage": {"url": "https://images.example/og.png"}}
        assert not articles_validator.is_valid(article)

    def test_number_bounds(self, fixtures_dir: Path) -> None:
        schema = to_json_schema(load_api_schema(fixtures_dir / "coffee-brews.json"))
        validator = Draft7Validator(schema)
        brew = {"bean": {"id": "b1"}, "date": "2024-03-04T00:00:00.000Z", "rating": 7}
        assert validator.is_valid(brew)
        assert not validator.is_valid({**brew, "rating": 11})
        assert not validator.is_valid({**brew, "methods": ["Chemex"]})
