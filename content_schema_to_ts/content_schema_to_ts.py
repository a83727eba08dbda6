import json
import logging

import click

from .config import GenerationOptions, SourcePluginType
from .errors import SchemaLoadError, TypeGenerationError
from .generation import render_types
from .schema import load_schema
from .writer import AtomicWriter

logger = logging.getLogger(__name__)


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option(
    "--source-plugin",
    "-s",
    default=None,
    type=click.Choice([t.value for t in SourcePluginType]),
    help="Content source adapter the schema comes from (overrides config file)",
)
@click.option("--type-field-name", default=None, type=str, help="Name of the type discriminant field")
@click.option("--no-generation-comment", is_flag=True, default=False, help="Omit the do-not-edit banner")
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.argument("path", default=None, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, type=click.Path(resolve_path=True))
def content_schema_to_ts(config, source_plugin, type_field_name, no_generation_comment, verbose, path, output):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    if config is not None:
        with open(config) as f:
            options = GenerationOptions.from_dict(json.load(f))
    else:
        options = GenerationOptions()

    # CLI flags override the config file
    if source_plugin is not None:
        options.source_plugin_type = SourcePluginType.parse(source_plugin)
    if type_field_name is not None:
        options.field_options.type_field_name = type_field_name
    if no_generation_comment:
        options.add_generation_comment = False

    try:
        schema_def = load_schema(path)
        out = render_types(schema_def, options)
    except (SchemaLoadError, TypeGenerationError) as e:
        raise click.ClickException(str(e)) from e

    AtomicWriter().write(output, out)
    logger.info("Generated types for %d document types in %s", len(schema_def.document_type_def_map), output)
