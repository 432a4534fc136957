"""API schema and bundle models for microCMS.

This module defines the containers around field definitions:

- CustomFieldDefinition: a reusable group of fields, referenced by its
  ``createdAt`` identifier from custom and repeater fields
- MicroCMSApiSchema: the schema of one API endpoint
- MicroCMSSchemaBundle: every API of a service, as written by
  ``microcms schema pull``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from mcschema_core.schemas.fields import MICROCMS_MODEL_CONFIG, MicroCMSField


class CustomFieldDefinition(BaseModel):
    """Reusable custom field definition.

    Attributes:
        created_at: Stable identifier referenced by composite fields.
            microCMS uses the creation timestamp as the identifier.
        field_id: Identifier of the definition itself (not used for lookup).
        name: Human-readable label.
        fields: Field definitions in display order.

    Example:
        >>> definition = CustomFieldDefinition(
        ...     created_at="2024-01-01T00:00:00.000Z",
        ...     field_id="seoMeta",
        ...     name="SEO Meta",
        ...     fields=[{"fieldId": "ogTitle", "name": "OG Title", "kind": "text"}],
        ... )
    """

    model_config = MICROCMS_MODEL_CONFIG

    created_at: str = Field(..., description="Definition identifier")
    field_id: str = Field(default="", description="Definition field id")
    name: str = Field(default="", description="Definition label")
    fields: list[MicroCMSField] = Field(
        default_factory=list,
        description="Field definitions in display order",
    )


class MicroCMSApiSchema(BaseModel):
    """Schema of one microCMS API.

    Attributes:
        api_fields: Top-level field definitions in display order.
        custom_fields: Pool of custom field definitions the fields may reference.
    """

    model_config = MICROCMS_MODEL_CONFIG

    api_fields: list[MicroCMSField] = Field(
        default_factory=list,
        description="Top-level field definitions",
    )
    custom_fields: list[CustomFieldDefinition] = Field(
        default_factory=list,
        description="Custom field definitions",
    )

    @field_validator("api_fields", "custom_fields", mode="before")
    @classmethod
    def null_list_as_empty(cls, v: Any) -> Any:
        """Treat an explicit null list as an empty one."""
        return [] if v is None else v

    @classmethod
    def from_file(cls, path: str | Path) -> MicroCMSApiSchema:
        """Load and validate an API schema from a JSON or YAML file.

        Args:
            path: Path to the schema file.

        Returns:
            Validated MicroCMSApiSchema instance.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            SchemaLoadError: If the file cannot be parsed.
            pydantic.ValidationError: If the content has the wrong shape.
        """
        from mcschema_core.loader import load_document

        return cls.model_validate(load_document(path))


class ApiEntry(BaseModel):
    """One endpoint of a schema bundle."""

    model_config = MICROCMS_MODEL_CONFIG

    endpoint: str = Field(..., min_length=1, description="API endpoint name")
    api: MicroCMSApiSchema = Field(..., description="API schema")


class MicroCMSSchemaBundle(BaseModel):
    """All API schemas of a microCMS service.

    Attributes:
        version: Version of the tool that pulled the schemas.
        pulled_at: Timestamp of the pull, as written by the tool.
        service_domain: microCMS service domain, if known.
        apis: Endpoints in pull order.

    Example:
        >>> bundle = MicroCMSSchemaBundle.from_file("microcms-schema.json")
        >>> [entry.endpoint for entry in bundle.apis]
        ['posts', 'tags']
    """

    model_config = MICROCMS_MODEL_CONFIG

    version: str = Field(default="", description="Pull tool version")
    pulled_at: str = Field(default="", description="Pull timestamp")
    service_domain: str | None = Field(default=None, description="Service domain")
    apis: list[ApiEntry] = Field(default_factory=list, description="API entries")

    @classmethod
    def from_file(cls, path: str | Path) -> MicroCMSSchemaBundle:
        """Load and validate a schema bundle from a JSON or YAML file.

        Args:
            path: Path to the bundle file.

        Returns:
            Validated MicroCMSSchemaBundle instance.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            SchemaLoadError: If the file cannot be parsed.
            pydantic.ValidationError: If the content has the wrong shape.
        """
        from mcschema_core.loader import load_document

        return cls.model_validate(load_document(path))
