"""Command-line interface for gql-graphene."""

import click
from pathlib import Path

from graphql import GraphQLSyntaxError

from .core.config import GeneratorConfig
from .core.errors import CodegenError
from .core.generator import GrapheneGenerator
from .core.hooks import AddHeaderHook, FilterTypesHook, HookRunner
from .core.parser import SchemaParser


@click.group()
@click.version_option()
def main():
    """GraphQL SDL to graphene code generator.

    Generate graphene class declarations from GraphQL schemas.
    """
    pass


@main.command()
@click.option(
    "--schema",
    "-s",
    required=True,
    type=click.Path(exists=True),
    help="Path to GraphQL schema file or a directory of schema files.",
)
@click.option(
    "--output",
    "-o",
    default=GeneratorConfig.output_file,
    show_default=True,
    type=click.Path(),
    help="Output file for generated graphene code.",
)
@click.option(
    "--no-schema-wiring",
    is_flag=True,
    help="Do not append the `schema = Schema(...)` statement.",
)
@click.option(
    "--no-descriptions",
    is_flag=True,
    help="Drop schema descriptions from the generated code.",
)
@click.option(
    "--scalar-args-only",
    is_flag=True,
    help="Fail on field arguments that are not built-in scalars.",
)
@click.option(
    "--header",
    default=None,
    help="Text placed at the top of the generated file.",
)
@click.option(
    "--exclude-prefix",
    default=None,
    help="Skip types whose name starts with this prefix.",
)
@click.option(
    "--template-dir",
    default=None,
    type=click.Path(exists=True, file_okay=False),
    help="Directory with a custom module.py.j2 template.",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable verbose output.",
)
def generate(
    schema: str,
    output: str,
    no_schema_wiring: bool,
    no_descriptions: bool,
    scalar_args_only: bool,
    header: str | None,
    exclude_prefix: str | None,
    template_dir: str | None,
    verbose: bool,
):
    """Generate graphene code from a GraphQL schema.

    Examples:

        gql-graphene generate --schema ./schema.graphql

        gql-graphene generate -s ./schema -o ./app/types.py

        gql-graphene generate -s ./schema.graphql --no-schema-wiring
    """
    schema_path = Path(schema).resolve()
    output_path = Path(output).resolve()

    if verbose:
        click.echo(f"Schema: {schema_path}")
        click.echo(f"Output: {output_path}")

    config = GeneratorConfig(
        schema_wiring=not no_schema_wiring,
        descriptions=not no_descriptions,
        scalar_arguments_only=scalar_args_only,
        output_file=output_path.name,
    )
    hooks = HookRunner()
    if exclude_prefix:
        hooks.add_pre_hook(FilterTypesHook(exclude_prefix=exclude_prefix))
    if header:
        hooks.add_post_hook(AddHeaderHook(header))

    try:
        # Parse schema
        click.echo("Parsing schema...")
        document = SchemaParser(str(schema_path)).parse_all()

        if verbose:
            click.echo(f"  Definitions: {len(document.definitions)}")

        # Generate code
        click.echo("Generating code...")
        generator = GrapheneGenerator(config, template_dir=template_dir, hooks=hooks)
        result = generator.generate_result(document, filename=output_path.name)
    except (GraphQLSyntaxError, CodegenError) as e:
        raise click.ClickException(str(e)) from e

    if verbose:
        module = result.module
        click.echo(f"  Classes: {len(module.classes)}")
        click.echo(f"  Imports: {', '.join(module.imports) if module.classes else '(none)'}")

    # Create output directory if needed
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        f.write(result.content)

    click.echo(f"Wrote file at {output_path}")


if __name__ == "__main__":
    main()
