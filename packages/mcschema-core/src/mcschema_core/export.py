"""JSON Schema export functions for mcschema.

This module converts microCMS schemas and writes the resulting JSON Schema
draft-07 documents to disk for use by validators, type generators and
documentation tools.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog

from mcschema_core.assembler import bundle_to_json_schema, to_json_schema
from mcschema_core.errors import ExportError
from mcschema_core.options import ConversionOptions
from mcschema_core.schemas import MicroCMSApiSchema, MicroCMSSchemaBundle

logger = structlog.get_logger(__name__)

SCHEMA_FILE_SUFFIX = ".schema.json"
"""Suffix of per-endpoint files written by export_bundle()."""


def export_json_schema(
    schema: MicroCMSApiSchema | Mapping[str, Any],
    output_path: Path | str | None = None,
    options: ConversionOptions | Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Convert an API schema and optionally write it to a file.

    Args:
        schema: API schema, as a model or a raw mapping.
        output_path: Optional path to write the schema file. Parent
            directories are created as needed.
        options: Conversion options.

    Returns:
        Dictionary containing the JSON Schema.

    Raises:
        ExportError: If the file cannot be written.

    Example:
        >>> schema = export_json_schema(api, Path("schemas/posts.schema.json"))
        >>> schema["$schema"]
        'http://json-schema.org/draft-07/schema#'
    """
    json_schema = to_json_schema(schema, options)

    if output_path is not None:
        write_schema_file(json_schema, output_path)

    return json_schema


def export_bundle(
    bundle: MicroCMSSchemaBundle | Mapping[str, Any],
    output_dir: Path | str | None = None,
    options: ConversionOptions | Mapping[str, Any] | None = None,
) -> dict[str, dict[str, Any]]:
    """Convert a schema bundle and optionally write one file per endpoint.

    Files are named ``<endpoint>.schema.json`` inside ``output_dir``.

    Args:
        bundle: Schema bundle, as a model or a raw mapping.
        output_dir: Optional directory to write schema files into.
        options: Conversion options shared by all endpoints.

    Returns:
        Dictionary mapping endpoint name to JSON Schema.

    Raises:
        ExportError: If an endpoint name is not a plain file name, or a
            file cannot be written. Names are checked before anything is
            written.
    """
    schemas = bundle_to_json_schema(bundle, options)

    if output_dir is not None:
        directory = Path(output_dir)
        paths = {endpoint: _bundle_file_path(directory, endpoint) for endpoint in schemas}
        for endpoint, json_schema in schemas.items():
            write_schema_file(json_schema, paths[endpoint])

    return schemas


def _bundle_file_path(directory: Path, endpoint: str) -> Path:
    """Return the schema file path for an endpoint inside ``directory``.

    Raises:
        ExportError: If the endpoint name contains a path separator or
            would otherwise resolve outside ``directory``.
    """
    if Path(endpoint).name != endpoint or endpoint in (".", ".."):
        raise ExportError(
            f"Endpoint name '{endpoint}' cannot be used as a file name",
            output_path=str(directory),
        )
    return directory / f"{endpoint}{SCHEMA_FILE_SUFFIX}"


def write_schema_file(schema: dict[str, Any], path: Path | str) -> Path:
    """Write a schema to a pretty-printed JSON file.

    Args:
        schema: Schema dictionary to write.
        path: Output file path.

    Returns:
        The path written to.

    Raises:
        ExportError: If the directory or file cannot be written.
    """
    output_path = Path(path)

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        # Keep non-ASCII labels and enum values readable
        output_path.write_text(
            json.dumps(schema, indent=2, ensure_ascii=False) + "\n",
            encoding="utf-8",
        )
    except OSError as e:
        raise ExportError(
            f"Cannot write schema to {output_path}",
            output_path=str(output_path),
            internal_details=repr(e),
        ) from e

    logger.info("schema_written", path=str(output_path))
    return output_path
