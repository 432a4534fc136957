"""mcschema bundle command - Convert every endpoint of a schema bundle."""

from __future__ import annotations

import click

from mcschema_cli.errors import CLIError
from mcschema_cli.inputs import load_schema_file
from mcschema_cli.output import info, success


@click.command()
@click.argument("file_path", type=click.Path(exists=False))
@click.option(
    "-o",
    "--output",
    "output_dir",
    type=click.Path(file_okay=False),
    default="./schemas",
    help="Output directory [default: ./schemas]",
)
@click.option(
    "--include-extensions",
    is_flag=True,
    default=False,
    help="Add x-microcms-field-id, x-microcms-field-name and x-microcms-kind to properties",
)
def bundle(file_path: str, output_dir: str, include_extensions: bool) -> None:
    """Convert a `microcms schema pull` bundle to JSON Schema files.

    Writes `<endpoint>.schema.json` for every API in the bundle, each
    titled with its endpoint name.

    Examples:

        mcschema bundle microcms-schema.json

        mcschema bundle microcms-schema.json --output build/schemas
    """
    # Import here to avoid heavy imports at CLI startup
    from mcschema_core import ConversionOptions, ExportError, MicroCMSSchemaBundle, export_bundle

    from mcschema_cli.errors import handle_export_error

    loaded = load_schema_file(file_path)
    if not isinstance(loaded, MicroCMSSchemaBundle):
        raise CLIError(
            f"{file_path} is a single API schema, not a bundle.\n"
            "Use 'mcschema convert' instead."
        )

    options = ConversionOptions(include_extensions=include_extensions)

    try:
        schemas = export_bundle(loaded, output_dir, options)
    except ExportError as e:
        handle_export_error(e)

    for endpoint in schemas:
        info(f"  {endpoint}")
    success(f"Exported {len(schemas)} schema(s) to {output_dir}")
