"""mcschema convert command - Convert one API schema to JSON Schema."""

from __future__ import annotations

import click

from mcschema_cli.inputs import load_schema_file
from mcschema_cli.output import print_json, success, warning

DEFAULT_BUNDLE_OUTPUT_DIR = "./schemas"


@click.command()
@click.argument("file_path", type=click.Path(exists=False))
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(),
    default=None,
    help="Output file (directory for bundles) [default: print to stdout]",
)
@click.option(
    "-t",
    "--title",
    "title",
    type=str,
    default=None,
    help="Title of the generated schema",
)
@click.option(
    "--include-extensions",
    is_flag=True,
    default=False,
    help="Add x-microcms-field-id, x-microcms-field-name and x-microcms-kind to properties",
)
def convert(
    file_path: str,
    output_path: str | None,
    title: str | None,
    include_extensions: bool,
) -> None:
    """Convert a microCMS API schema to JSON Schema draft-07.

    FILE_PATH is a JSON or YAML API schema. A bundle written by
    `microcms schema pull` is converted per endpoint, as with
    `mcschema bundle`.

    Examples:

        mcschema convert api-posts.json

        mcschema convert api-posts.json --title posts -o schemas/posts.schema.json
    """
    # Import here to avoid heavy imports at CLI startup
    from mcschema_core import (
        ConversionOptions,
        ExportError,
        MicroCMSSchemaBundle,
        export_bundle,
        export_json_schema,
    )

    from mcschema_cli.errors import handle_export_error

    loaded = load_schema_file(file_path)
    options = ConversionOptions(title=title, include_extensions=include_extensions)

    try:
        if isinstance(loaded, MicroCMSSchemaBundle):
            if title is not None:
                warning("--title is ignored for bundles; endpoint names are used")
            output_dir = output_path or DEFAULT_BUNDLE_OUTPUT_DIR
            schemas = export_bundle(loaded, output_dir, options)
            success(f"Exported {len(schemas)} schema(s) to {output_dir}")
            return

        json_schema = export_json_schema(loaded, output_path, options)
    except ExportError as e:
        handle_export_error(e)

    if output_path is None:
        print_json(json_schema)
    else:
        success(f"Schema exported to {output_path}")
