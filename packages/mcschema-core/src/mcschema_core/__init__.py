"""mcschema-core: microCMS content model to JSON Schema conversion.

This package provides:
- MicroCMSApiSchema / MicroCMSSchemaBundle: Pydantic models for
  ``microcms schema pull`` output
- to_json_schema / bundle_to_json_schema: JSON Schema draft-07 assembly
- convert_field: per-field conversion with custom field resolution
- Loading and export utilities
"""

from __future__ import annotations

__version__ = "0.1.0"

# Assembly and conversion
from mcschema_core.assembler import (
    JSON_SCHEMA_DRAFT_07,
    bundle_to_json_schema,
    to_json_schema,
)
from mcschema_core.converter import build_custom_field_map, convert_field

# Error types
from mcschema_core.errors import ExportError, McSchemaError, SchemaLoadError

# Export and loading
from mcschema_core.export import export_bundle, export_json_schema
from mcschema_core.loader import load_any, load_api_schema, load_bundle
from mcschema_core.options import ConversionOptions

# Schema models
from mcschema_core.schemas import (
    ApiEntry,
    CustomFieldDefinition,
    MicroCMSApiSchema,
    MicroCMSField,
    MicroCMSSchemaBundle,
)

__all__ = [
    "__version__",
    # Conversion
    "JSON_SCHEMA_DRAFT_07",
    "to_json_schema",
    "bundle_to_json_schema",
    "convert_field",
    "build_custom_field_map",
    "ConversionOptions",
    # Errors
    "McSchemaError",
    "SchemaLoadError",
    "ExportError",
    # Export and loading
    "export_json_schema",
    "export_bundle",
    "load_api_schema",
    "load_bundle",
    "load_any",
    # Schema models
    "MicroCMSSchemaBundle",
    "ApiEntry",
    "MicroCMSApiSchema",
    "CustomFieldDefinition",
    "MicroCMSField",
]
