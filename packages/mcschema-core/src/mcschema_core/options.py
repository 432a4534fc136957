"""Conversion options.

Options accepted by the JSON Schema assemblers. Both snake_case and the
camelCase spelling used by JavaScript tooling (``includeExtensions``) are
accepted when validating from a mapping.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ConversionOptions(BaseModel):
    """Options for converting a microCMS API schema.

    Attributes:
        title: Title of the generated schema envelope. Omitted when unset.
        include_extensions: Add ``x-microcms-*`` provenance keys to every
            property schema.

    Example:
        >>> options = ConversionOptions(title="posts", include_extensions=True)
        >>> ConversionOptions.model_validate({"includeExtensions": True}).include_extensions
        True
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    title: str | None = Field(default=None, description="Schema title")
    include_extensions: bool = Field(
        default=False,
        description="Include x-microcms-* extension properties",
    )
