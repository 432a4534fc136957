"""Field definition models for microCMS API schemas.

This module defines one model per microCMS field kind and the
``MicroCMSField`` discriminated union over them.

The wire format is the camelCase JSON emitted by ``microcms schema pull``;
attributes are exposed in snake_case through an alias generator. Keys that
microCMS emits but the converter never reads (``position``, ``isUnique`` on
non-text kinds, UI hints) are ignored rather than rejected.

A field whose ``kind`` is not one of the known tags validates as
``UnknownField`` so that schemas pulled from a newer microCMS still load.
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, field_validator
from pydantic.alias_generators import to_camel

FIELD_KINDS: tuple[str, ...] = (
    "text",
    "textArea",
    "richEditorV2",
    "select",
    "number",
    "date",
    "boolean",
    "media",
    "relation",
    "relationList",
    "repeater",
    "custom",
)
"""Field kinds the converter maps explicitly."""

UNKNOWN_KIND_TAG = "__unknown__"
"""Discriminator tag for kinds outside FIELD_KINDS."""

MICROCMS_MODEL_CONFIG = ConfigDict(
    frozen=True,
    extra="ignore",
    alias_generator=to_camel,
    populate_by_name=True,
)
"""Shared config: immutable, camelCase on the wire, unknown keys ignored."""


class SelectItem(BaseModel):
    """One selectable value of a select field.

    Attributes:
        id: Stable choice identifier (not emitted in JSON Schema).
        value: Display value, used as the enum member.
    """

    model_config = MICROCMS_MODEL_CONFIG

    id: str = Field(..., description="Choice identifier")
    value: str = Field(..., description="Choice display value")


class FieldBase(BaseModel):
    """Attributes shared by every field kind.

    Attributes:
        field_id: Stable field identifier, used as the property name.
        name: Human-readable label.
        required: Whether the field must be present.
        description: Optional help text shown in the microCMS editor.
    """

    model_config = MICROCMS_MODEL_CONFIG

    field_id: str = Field(..., description="Field identifier")
    name: str = Field(default="", description="Field label")
    required: bool = Field(default=False, description="Whether the field is required")
    description: str | None = Field(default=None, description="Field help text")


class TextField(FieldBase):
    """Single-line text."""

    kind: Literal["text"] = "text"
    is_unique: bool | None = None


class TextAreaField(FieldBase):
    """Multi-line plain text."""

    kind: Literal["textArea"] = "textArea"


class RichEditorV2Field(FieldBase):
    """Rich text stored as HTML."""

    kind: Literal["richEditorV2"] = "richEditorV2"


class SelectField(FieldBase):
    """Single or multiple choice from a fixed list.

    Attributes:
        multiple_select: True when more than one value may be chosen.
        select_items: Choices in display order.
        select_initial_value: Choices selected by default.
    """

    kind: Literal["select"] = "select"
    multiple_select: bool = False
    select_items: list[SelectItem] = Field(default_factory=list)
    select_initial_value: list[SelectItem] | None = None


class NumberField(FieldBase):
    """Numeric value with optional bounds.

    Bounds are ``None`` when the definition does not declare them.
    """

    kind: Literal["number"] = "number"
    number_min: int | float | None = None
    number_max: int | float | None = None


class DateField(FieldBase):
    """Date/time value (ISO 8601 on the content API)."""

    kind: Literal["date"] = "date"
    date_format: bool | None = None


class BooleanField(FieldBase):
    """Boolean switch, optionally with an initial value."""

    kind: Literal["boolean"] = "boolean"
    boolean_initial_value: bool | None = None


class MediaField(FieldBase):
    """Image or file asset."""

    kind: Literal["media"] = "media"


class RelationField(FieldBase):
    """Reference to one content item of another API."""

    kind: Literal["relation"] = "relation"
    referenced_api_endpoint: str | None = None
    multiple_select: bool | None = None


class RelationListField(FieldBase):
    """References to several content items of another API."""

    kind: Literal["relationList"] = "relationList"
    referenced_api_endpoint: str | None = None


class RepeaterField(FieldBase):
    """Repeated composite field.

    Attributes:
        custom_field_created_at_list: Identifiers of the custom field
            definitions an item may take, in listing order.
    """

    kind: Literal["repeater"] = "repeater"
    custom_field_created_at_list: list[str] = Field(default_factory=list)


class CustomField(FieldBase):
    """Single composite field.

    Attributes:
        custom_field_created_at: Identifier of the custom field definition.
    """

    kind: Literal["custom"] = "custom"
    custom_field_created_at: str


class UnknownField(FieldBase):
    """Field of a kind this package does not know about.

    The original ``kind`` is kept so that it can be echoed in extension
    metadata and log events. It is None when the input has no kind, and
    non-string kinds are kept in their string form.
    """

    kind: str | None = None

    @field_validator("kind", mode="before")
    @classmethod
    def kind_as_string(cls, v: Any) -> Any:
        """Keep a non-string kind such as ``42`` as ``"42"``."""
        if v is None or isinstance(v, str):
            return v
        return str(v)


def _field_kind(value: Any) -> str:
    """Return the union tag for raw input or an already-built model."""
    if isinstance(value, dict):
        kind = value.get("kind")
    else:
        kind = getattr(value, "kind", None)
    if kind in FIELD_KINDS:
        return kind
    return UNKNOWN_KIND_TAG


# Union type with a callable discriminator on "kind"; unknown kinds fall
# through to UnknownField
MicroCMSField = Annotated[
    Union[
        Annotated[TextField, Tag("text")],
        Annotated[TextAreaField, Tag("textArea")],
        Annotated[RichEditorV2Field, Tag("richEditorV2")],
        Annotated[SelectField, Tag("select")],
        Annotated[NumberField, Tag("number")],
        Annotated[DateField, Tag("date")],
        Annotated[BooleanField, Tag("boolean")],
        Annotated[MediaField, Tag("media")],
        Annotated[RelationField, Tag("relation")],
        Annotated[RelationListField, Tag("relationList")],
        Annotated[RepeaterField, Tag("repeater")],
        Annotated[CustomField, Tag("custom")],
        Annotated[UnknownField, Tag(UNKNOWN_KIND_TAG)],
    ],
    Discriminator(_field_kind),
]
"""Field definition with a discriminated union over all field kinds."""
