"""mcschema inspect command - List fields of a schema or bundle."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from mcschema_cli.inputs import load_schema_file
from mcschema_cli.output import print_table

if TYPE_CHECKING:
    from mcschema_core import MicroCMSApiSchema, MicroCMSField

FIELD_COLUMNS = ("Field ID", "Name", "Kind", "Required", "References")


@click.command("inspect")
@click.argument("file_path", type=click.Path(exists=False))
def inspect_cmd(file_path: str) -> None:
    """List the fields of a microCMS schema or bundle.

    Prints one table per API, plus one per custom field definition.

    Examples:

        mcschema inspect api-posts.json

        mcschema inspect microcms-schema.json
    """
    # Import here to avoid heavy imports at CLI startup
    from mcschema_core import MicroCMSSchemaBundle

    loaded = load_schema_file(file_path)

    if isinstance(loaded, MicroCMSSchemaBundle):
        for entry in loaded.apis:
            _print_api(entry.endpoint, entry.api)
    else:
        _print_api(Path(file_path).name, loaded)


def _print_api(title: str, api: MicroCMSApiSchema) -> None:
    print_table(title, FIELD_COLUMNS, [_field_row(field) for field in api.api_fields])
    for definition in api.custom_fields:
        print_table(
            f"{title} / custom: {definition.field_id or definition.created_at}",
            FIELD_COLUMNS,
            [_field_row(field) for field in definition.fields],
        )


def _field_row(field: MicroCMSField) -> list[str]:
    from mcschema_core.schemas import CustomField, RepeaterField

    references = ""
    if isinstance(field, CustomField):
        references = field.custom_field_created_at
    elif isinstance(field, RepeaterField):
        references = ", ".join(field.custom_field_created_at_list)

    return [
        field.field_id,
        field.name,
        field.kind or "",
        "yes" if field.required else "",
        references,
    ]
