"""JSON Schema assembly for microCMS APIs and bundles.

This module wraps converted fields in a draft-07 object schema:

- to_json_schema(): one API schema -> one JSON Schema document
- bundle_to_json_schema(): a schema bundle -> JSON Schema per endpoint

Both accept validated models or raw camelCase mappings as produced by
``microcms schema pull``.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog

from mcschema_core.converter import assemble_object, build_custom_field_map
from mcschema_core.options import ConversionOptions
from mcschema_core.schemas import MicroCMSApiSchema, MicroCMSSchemaBundle

logger = structlog.get_logger(__name__)

JSON_SCHEMA_DRAFT_07 = "http://json-schema.org/draft-07/schema#"
"""Dialect marker written to every generated schema."""


def to_json_schema(
    schema: MicroCMSApiSchema | Mapping[str, Any],
    options: ConversionOptions | Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Convert a microCMS API schema to a JSON Schema draft-07 document.

    Args:
        schema: API schema, as a model or a raw mapping.
        options: Conversion options, as a model or a mapping
            (``{"title": ..., "includeExtensions": ...}``).

    Returns:
        JSON Schema with ``$schema``, ``type``, ``properties`` and, when
        applicable, ``title`` and ``required``.

    Raises:
        pydantic.ValidationError: If a raw mapping has the wrong shape.

    Example:
        >>> result = to_json_schema(
        ...     {"apiFields": [{"fieldId": "title", "name": "Title", "kind": "text"}]},
        ...     {"title": "posts"},
        ... )
        >>> result["properties"]
        {'title': {'type': 'string'}}
    """
    api_schema = _as_api_schema(schema)
    conversion_options = _as_options(options)

    custom_field_map = build_custom_field_map(api_schema.custom_fields)
    properties, required = assemble_object(
        api_schema.api_fields,
        custom_field_map,
        frozenset(),
        conversion_options,
    )

    result: dict[str, Any] = {
        "$schema": JSON_SCHEMA_DRAFT_07,
        "type": "object",
        "properties": properties,
    }

    if conversion_options.title:
        result["title"] = conversion_options.title

    if required:
        result["required"] = required

    logger.debug(
        "json_schema_assembled",
        title=conversion_options.title,
        property_count=len(properties),
        required_count=len(required),
    )

    return result


def bundle_to_json_schema(
    bundle: MicroCMSSchemaBundle | Mapping[str, Any],
    options: ConversionOptions | Mapping[str, Any] | None = None,
) -> dict[str, dict[str, Any]]:
    """Convert every API of a schema bundle to JSON Schema.

    Each endpoint name becomes the title of its schema; any title in
    ``options`` is replaced. Other options apply to every endpoint.

    Args:
        bundle: Schema bundle, as a model or a raw mapping.
        options: Conversion options shared by all endpoints.

    Returns:
        Dictionary mapping endpoint name to JSON Schema, in bundle order.

    Example:
        >>> schemas = bundle_to_json_schema(MicroCMSSchemaBundle.from_file("schema.json"))
        >>> list(schemas)
        ['posts', 'tags']
    """
    schema_bundle = (
        bundle
        if isinstance(bundle, MicroCMSSchemaBundle)
        else MicroCMSSchemaBundle.model_validate(bundle)
    )
    base_options = _as_options(options)

    result: dict[str, dict[str, Any]] = {}
    for entry in schema_bundle.apis:
        entry_options = base_options.model_copy(update={"title": entry.endpoint})
        result[entry.endpoint] = to_json_schema(entry.api, entry_options)

    logger.info(
        "bundle_converted",
        service_domain=schema_bundle.service_domain,
        endpoint_count=len(result),
    )

    return result


def _as_api_schema(schema: MicroCMSApiSchema | Mapping[str, Any]) -> MicroCMSApiSchema:
    if isinstance(schema, MicroCMSApiSchema):
        return schema
    return MicroCMSApiSchema.model_validate(schema)


def _as_options(options: ConversionOptions | Mapping[str, Any] | None) -> ConversionOptions:
    if options is None:
        return ConversionOptions()
    if isinstance(options, ConversionOptions):
        return options
    return ConversionOptions.model_validate(options)
