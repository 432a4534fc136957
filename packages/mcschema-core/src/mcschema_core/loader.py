"""Loading microCMS schema files.

``microcms schema pull`` writes JSON. YAML copies (``.yaml``/``.yml``) are
accepted as well since hand-maintained fixtures are often kept in YAML.

A document is treated as a bundle when it carries an ``apis`` list;
otherwise it is a single API schema (``apiFields``/``customFields``).
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import structlog
import yaml

from mcschema_core.errors import SchemaLoadError
from mcschema_core.schemas import MicroCMSApiSchema, MicroCMSSchemaBundle

logger = structlog.get_logger(__name__)

YAML_SUFFIXES = frozenset({".yaml", ".yml"})
JSON_SUFFIXES = frozenset({".json"})


def load_document(path: str | Path) -> dict[str, Any]:
    """Read a JSON or YAML schema file into a mapping.

    Args:
        path: Path to the file. ``.yaml``/``.yml`` is parsed as YAML,
            anything else as JSON.

    Returns:
        Parsed top-level mapping.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        SchemaLoadError: If the content cannot be parsed or is not a mapping.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    content = path.read_text(encoding="utf-8")

    if path.suffix.lower() in YAML_SUFFIXES:
        data = _parse_yaml(content, path)
    else:
        data = _parse_json(content, path)

    if not isinstance(data, dict):
        raise SchemaLoadError(
            "Schema file must contain a mapping at the top level",
            file_path=str(path),
            internal_details=f"top-level type: {type(data).__name__}",
        )

    logger.debug("schema_document_loaded", path=str(path), keys=sorted(data))
    return data


def is_bundle(data: Mapping[str, Any]) -> bool:
    """Return True if a loaded document is a schema bundle."""
    return isinstance(data.get("apis"), list)


def load_api_schema(path: str | Path) -> MicroCMSApiSchema:
    """Load one API schema file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        SchemaLoadError: If the file cannot be parsed.
        pydantic.ValidationError: If the content has the wrong shape.
    """
    return MicroCMSApiSchema.model_validate(load_document(path))


def load_bundle(path: str | Path) -> MicroCMSSchemaBundle:
    """Load a schema bundle file.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        SchemaLoadError: If the file cannot be parsed or is not a bundle.
        pydantic.ValidationError: If the content has the wrong shape.
    """
    data = load_document(path)
    if not is_bundle(data):
        raise SchemaLoadError(
            "Schema file is not a bundle (missing 'apis' list)",
            file_path=str(path),
        )
    return MicroCMSSchemaBundle.model_validate(data)


def load_any(path: str | Path) -> MicroCMSApiSchema | MicroCMSSchemaBundle:
    """Load a file as a bundle or a single API schema, whichever it is."""
    data = load_document(path)
    if is_bundle(data):
        return MicroCMSSchemaBundle.model_validate(data)
    return MicroCMSApiSchema.model_validate(data)


def _parse_json(content: str, path: Path) -> Any:
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise SchemaLoadError(
            f"Invalid JSON: {e.msg}",
            file_path=str(path),
            line_number=e.lineno,
            internal_details=str(e),
        ) from e


def _parse_yaml(content: str, path: Path) -> Any:
    try:
        return yaml.safe_load(content)
    except yaml.YAMLError as e:
        # MarkedYAMLError carries the position of the problem
        line_number = None
        problem = str(e)
        mark = getattr(e, "problem_mark", None)
        if mark is not None:
            line_number = mark.line + 1
            problem = f"{getattr(e, 'problem', None) or e} at column {mark.column + 1}"
        raise SchemaLoadError(
            f"Invalid YAML: {problem}",
            file_path=str(path),
            line_number=line_number,
            internal_details=str(e),
        ) from e
