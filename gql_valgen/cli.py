"""Command-line interface for gql-valgen."""

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .core.config import ValidationSchemaConfig, load_config
from .core.errors import ConfigurationError
from .core.generator import ValidationSchemaGenerator
from .core.parser import SchemaParser


@click.group()
@click.version_option(__version__, prog_name="gql-valgen")
def main():
    """Validation schema generator for GraphQL.

    Generate yup, zod or myzod schemas from GraphQL schemas.
    """
    pass


@main.command()
@click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True),
    help="Path to GraphQL schema file or directory.",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML or JSON file with generator options.",
)
@click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False),
    help="Output file for the generated code (default: stdout).",
)
@click.option(
    "--target",
    type=click.Choice(["yup", "zod", "myzod"]),
    help="Validation library, overrides the config's 'schema'.",
)
@click.option(
    "--export-type",
    type=click.Choice(["function", "const"]),
    help="Declaration style, overrides 'validationSchemaExportType'.",
)
@click.option(
    "--with-object-type",
    is_flag=True,
    help="Also generate schemas for object types and unions.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(schema, config_path, output, target, export_type, with_object_type, verbose):
    """Generate validation schemas from a GraphQL schema.

    Examples:

        gql-valgen generate -s ./schema.graphql -c ./valgen.yml -o ./schemas.ts

        gql-valgen generate -s ./schema --target zod --export-type const
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    overrides = {}
    if target:
        overrides["schema"] = target
    if export_type:
        overrides["validationSchemaExportType"] = export_type
    if with_object_type:
        overrides["withObjectType"] = with_object_type

    try:
        if config_path:
            config = load_config(config_path, overrides)
        else:
            config = ValidationSchemaConfig.from_mapping(overrides)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(2)

    schema_path = Path(schema).resolve()
    if verbose:
        click.echo(f"Schema: {schema_path}", err=True)
        click.echo(f"Target: {config.target.value} ({config.export_type.value})", err=True)

    ir = SchemaParser(str(schema_path)).parse_all()
    if verbose:
        click.echo(f"  Definitions: {len(ir.definitions)}", err=True)
        click.echo(f"  Inputs: {len(ir.inputs)}", err=True)
        click.echo(f"  Types: {len(ir.types)}", err=True)
        click.echo(f"  Enums: {len(ir.enums)}", err=True)
        click.echo(f"  Unions: {len(ir.unions)}", err=True)

    result = ValidationSchemaGenerator(ir, config).generate()
    code = result.render()

    if output:
        output_path = Path(output).resolve()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            f.write(code)
        click.echo(f"Done! Generated {len(result.declarations)} schemas in {output_path}", err=True)
    else:
        click.echo(code, nl=False)

    if result.errors:
        for error in result.errors:
            click.echo(f"Error: {error}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
