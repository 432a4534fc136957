"""Schema definitions for microCMS content models.

This module exports the Pydantic models for the input side of the
conversion:

Containers:
- MicroCMSSchemaBundle: every API of a service (``microcms schema pull``)
- ApiEntry: one endpoint of a bundle
- MicroCMSApiSchema: fields and custom field pool of one API
- CustomFieldDefinition: reusable group of fields

Fields:
- MicroCMSField: discriminated union over all field kinds
- One model per kind (TextField, SelectField, RepeaterField, ...)
- UnknownField: fallback for kinds this package does not know
"""

from __future__ import annotations

from mcschema_core.schemas.api_schema import (
    ApiEntry,
    CustomFieldDefinition,
    MicroCMSApiSchema,
    MicroCMSSchemaBundle,
)
from mcschema_core.schemas.fields import (
    FIELD_KINDS,
    BooleanField,
    CustomField,
    DateField,
    FieldBase,
    MediaField,
    MicroCMSField,
    NumberField,
    RelationField,
    RelationListField,
    RepeaterField,
    RichEditorV2Field,
    SelectField,
    SelectItem,
    TextAreaField,
    TextField,
    UnknownField,
)

__all__ = [
    # Containers
    "MicroCMSSchemaBundle",
    "ApiEntry",
    "MicroCMSApiSchema",
    "CustomFieldDefinition",
    # Fields
    "FIELD_KINDS",
    "MicroCMSField",
    "FieldBase",
    "SelectItem",
    "TextField",
    "TextAreaField",
    "RichEditorV2Field",
    "SelectField",
    "NumberField",
    "DateField",
    "BooleanField",
    "MediaField",
    "RelationField",
    "RelationListField",
    "RepeaterField",
    "CustomField",
    "UnknownField",
]
