"""Field to JSON Schema conversion.

This module maps microCMS field definitions to JSON Schema draft-07 nodes.

Composite kinds reference custom field definitions by their ``createdAt``
identifier:

- ``custom`` resolves one definition into an object schema
- ``repeater`` resolves each listed definition and wraps the results in an
  array schema (``oneOf`` when there is more than one alternative)

Resolution tracks the identifiers entered on the current recursion path in
an immutable ``frozenset``. Re-entering an identifier yields a plain
``{"type": "object"}`` instead of recursing, so self-referencing and
mutually-referencing definitions terminate.

Conversion never raises for validated input and never mutates it. Every
call returns freshly built dictionaries.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

import structlog

from mcschema_core.options import ConversionOptions
from mcschema_core.schemas.api_schema import CustomFieldDefinition
from mcschema_core.schemas.fields import (
    BooleanField,
    CustomField,
    DateField,
    MediaField,
    MicroCMSField,
    NumberField,
    RelationField,
    RelationListField,
    RepeaterField,
    RichEditorV2Field,
    SelectField,
    TextAreaField,
    TextField,
)

logger = structlog.get_logger(__name__)

# Extension keys added when ConversionOptions.include_extensions is set
EXTENSION_FIELD_ID = "x-microcms-field-id"
EXTENSION_FIELD_NAME = "x-microcms-field-name"
EXTENSION_KIND = "x-microcms-kind"

CustomFieldMap = Mapping[str, CustomFieldDefinition]
"""Custom field definitions keyed by ``createdAt`` identifier."""

JsonSchema = dict[str, Any]


def build_custom_field_map(
    custom_fields: Iterable[CustomFieldDefinition] | None,
) -> dict[str, CustomFieldDefinition]:
    """Index custom field definitions by identifier.

    A later definition with a duplicate identifier replaces an earlier one.

    Args:
        custom_fields: Custom field definitions, or None.

    Returns:
        New dictionary mapping ``createdAt`` to its definition.
    """
    custom_field_map: dict[str, CustomFieldDefinition] = {}
    if not custom_fields:
        return custom_field_map

    for definition in custom_fields:
        custom_field_map[definition.created_at] = definition

    return custom_field_map


def convert_field(
    field: MicroCMSField,
    custom_field_map: CustomFieldMap,
    visited: frozenset[str] = frozenset(),
    options: ConversionOptions | None = None,
) -> JsonSchema:
    """Convert one field definition to a JSON Schema node.

    Args:
        field: Field definition to convert.
        custom_field_map: Custom field definitions keyed by identifier.
        visited: Custom field identifiers already entered on this path.
        options: Conversion options. Defaults apply when None.

    Returns:
        JSON Schema node for the field, with ``x-microcms-*`` keys when
        extensions are enabled.

    Example:
        >>> convert_field(TextField(field_id="title", name="Title"), {})
        {'type': 'string'}
    """
    schema = convert_field_by_kind(field, custom_field_map, visited, options)

    if options is not None and options.include_extensions:
        schema = {
            **schema,
            EXTENSION_FIELD_ID: field.field_id,
            EXTENSION_FIELD_NAME: field.name,
        }
        # A field with no kind at all gets no kind key
        if field.kind is not None:
            schema[EXTENSION_KIND] = field.kind

    return schema


def convert_field_by_kind(
    field: MicroCMSField,
    custom_field_map: CustomFieldMap,
    visited: frozenset[str] = frozenset(),
    options: ConversionOptions | None = None,
) -> JsonSchema:
    """Map a field definition to its JSON Schema node, without extensions.

    Args:
        field: Field definition to convert.
        custom_field_map: Custom field definitions keyed by identifier.
        visited: Custom field identifiers already entered on this path.
        options: Conversion options, passed through to nested fields.

    Returns:
        JSON Schema node. Unknown kinds yield an empty (permissive) schema.
    """
    if isinstance(field, (TextField, TextAreaField)):
        return {"type": "string"}

    if isinstance(field, RichEditorV2Field):
        return {"type": "string", "contentMediaType": "text/html"}

    if isinstance(field, SelectField):
        values = [item.value for item in field.select_items]
        if field.multiple_select:
            return {"type": "array", "items": {"type": "string", "enum": values}}
        return {"type": "string", "enum": values}

    if isinstance(field, NumberField):
        schema: JsonSchema = {"type": "number"}
        if field.number_min is not None:
            schema["minimum"] = field.number_min
        if field.number_max is not None:
            schema["maximum"] = field.number_max
        return schema

    if isinstance(field, DateField):
        return {"type": "string", "format": "date-time"}

    if isinstance(field, BooleanField):
        schema = {"type": "boolean"}
        if field.boolean_initial_value is not None:
            schema["default"] = field.boolean_initial_value
        return schema

    if isinstance(field, MediaField):
        return _media_schema()

    if isinstance(field, RelationField):
        return _relation_schema()

    if isinstance(field, RelationListField):
        return {"type": "array", "items": _relation_schema()}

    if isinstance(field, RepeaterField):
        return convert_repeater(
            field.custom_field_created_at_list, custom_field_map, visited, options
        )

    if isinstance(field, CustomField):
        return convert_custom(field.custom_field_created_at, custom_field_map, visited, options)

    # UnknownField: permissive schema
    logger.warning("unknown_field_kind", field_id=field.field_id, kind=field.kind)
    return {}


def convert_repeater(
    created_at_list: Sequence[str],
    custom_field_map: CustomFieldMap,
    visited: frozenset[str] = frozenset(),
    options: ConversionOptions | None = None,
) -> JsonSchema:
    """Convert a repeater to an array schema.

    Each identifier is resolved from the same ``visited`` set, so sibling
    alternatives never see each other's resolution state. Unresolved
    identifiers are dropped.

    Args:
        created_at_list: Custom field identifiers in listing order.
        custom_field_map: Custom field definitions keyed by identifier.
        visited: Custom field identifiers already entered on this path.
        options: Conversion options.

    Returns:
        ``{"type": "array"}`` with no items when nothing resolves, the single
        object schema as ``items`` for one alternative, or ``items.oneOf``
        for several.
    """
    schemas: list[JsonSchema] = []

    for created_at in created_at_list:
        resolved = resolve_custom_field(created_at, custom_field_map, visited, options)
        if resolved is not None:
            schemas.append(resolved)

    if not schemas:
        return {"type": "array"}

    if len(schemas) == 1:
        return {"type": "array", "items": schemas[0]}

    return {"type": "array", "items": {"oneOf": schemas}}


def convert_custom(
    created_at: str,
    custom_field_map: CustomFieldMap,
    visited: frozenset[str] = frozenset(),
    options: ConversionOptions | None = None,
) -> JsonSchema:
    """Convert a custom field to an object schema.

    Falls back to ``{"type": "object"}`` when the identifier is unknown.
    """
    resolved = resolve_custom_field(created_at, custom_field_map, visited, options)
    if resolved is None:
        return {"type": "object"}
    return resolved


def resolve_custom_field(
    created_at: str,
    custom_field_map: CustomFieldMap,
    visited: frozenset[str] = frozenset(),
    options: ConversionOptions | None = None,
) -> JsonSchema | None:
    """Resolve a custom field definition into an object schema.

    Args:
        created_at: Identifier of the custom field definition.
        custom_field_map: Custom field definitions keyed by identifier.
        visited: Custom field identifiers already entered on this path.
        options: Conversion options.

    Returns:
        Object schema for the definition, ``{"type": "object"}`` if the
        identifier is already on the path, or None if it is not in the map.
    """
    if created_at in visited:
        logger.debug("custom_field_cycle_detected", created_at=created_at)
        return {"type": "object"}

    definition = custom_field_map.get(created_at)
    if definition is None:
        logger.debug("custom_field_unresolved", created_at=created_at)
        return None

    properties, required = assemble_object(
        definition.fields,
        custom_field_map,
        visited | {created_at},
        options,
    )

    schema: JsonSchema = {"type": "object", "properties": properties}
    if required:
        schema["required"] = required

    return schema


def assemble_object(
    fields: Sequence[MicroCMSField],
    custom_field_map: CustomFieldMap,
    visited: frozenset[str] = frozenset(),
    options: ConversionOptions | None = None,
) -> tuple[dict[str, JsonSchema], list[str]]:
    """Convert sibling fields into a properties map and required list.

    Args:
        fields: Sibling field definitions in display order.
        custom_field_map: Custom field definitions keyed by identifier.
        visited: Custom field identifiers already entered on this path.
        options: Conversion options.

    Returns:
        Tuple of (properties keyed by field id in field order, ids of
        required fields in field order).
    """
    properties: dict[str, JsonSchema] = {}
    required: list[str] = []

    for field in fields:
        properties[field.field_id] = convert_field(field, custom_field_map, visited, options)
        if field.required:
            required.append(field.field_id)

    return properties, required


def _media_schema() -> JsonSchema:
    """Build the schema of a media value.

    Returns:
        Object schema with a required ``url`` and optional ``height`` and
        ``width``. A new dict is built on every call.
    """
    return {
        "type": "object",
        "properties": {
            "url": {"type": "string", "format": "uri"},
            "height": {"type": "number"},
            "width": {"type": "number"},
        },
        "required": ["url"],
    }


def _relation_schema() -> JsonSchema:
    """Build the schema of one referenced content item.

    Returns:
        Object schema with a required string ``id``.
    """
    return {
        "type": "object",
        "properties": {
            "id": {"type": "string"},
        },
        "required": ["id"],
    }
