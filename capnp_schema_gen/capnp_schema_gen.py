import json
import logging
import sys
from pathlib import Path

import click

from .pipeline import AtomicWriter, OutputMode, SchemaGenerationError, SchemaGenerator, SchemaGeneratorConfig, TypeLoadError
from .utils import load_type

logger = logging.getLogger(__name__)


@click.command()
@click.option("--output", "-o", default=None, type=click.Path(dir_okay=False, resolve_path=True), help="Schema file to write (default: stdout)")
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--force", "-f", is_flag=True, default=False, help="Overwrite the output file if it exists")
@click.option("--no-namespace", is_flag=True, default=False, help="Do not emit $namespace directives")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Enable debug logging")
@click.argument("type_paths", nargs=-1, required=True)
def capnp_schema_gen(output, config, force, no_namespace, verbose, type_paths):
    """Generate a Cap'n Proto schema for each TYPE_PATH ("package.module:Qualname")."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="[%(levelname)s] %(message)s",
    )

    if config is not None:
        with open(config) as f:
            config = SchemaGeneratorConfig.from_dict(json.load(f))
    else:
        config = SchemaGeneratorConfig()

    # CLI flags override the config file
    if no_namespace:
        config.include_namespace = False
    if force:
        config.output.mode = OutputMode.FORCE

    # Current directory first, so project modules resolve like `python -m`
    if "" not in sys.path:
        sys.path.insert(0, "")

    codegen = SchemaGenerator(config)

    failed = []

    def report_failure(type_path, error):
        logger.error("%s: %s", type_path, error)
        failed.append(type_path)

    host_types = []
    type_path_of = {}
    for type_path in type_paths:
        try:
            host_type = load_type(type_path)
        except TypeLoadError as e:
            report_failure(type_path, e)
            continue
        host_types.append(host_type)
        type_path_of.setdefault(id(host_type), type_path)

    out = codegen.generate_many(host_types, on_error=lambda host_type, e: report_failure(type_path_of[id(host_type)], e))
    if output is None:
        click.echo(out, nl=False)
    elif out:
        _write_output(Path(output), out, config)

    if failed:
        failed.sort(key=type_paths.index)
        raise click.ClickException(f"Schema generation failed for: {', '.join(failed)}")


def _write_output(path: Path, content: str, config: SchemaGeneratorConfig) -> None:
    writer = AtomicWriter()
    validate = config.output.validate_before_write

    try:
        if config.output.mode == OutputMode.ERROR_IF_EXISTS:
            writer.write_if_not_exists(path, content, validate=validate)
        elif config.output.atomic_write:
            writer.write(path, content, validate=validate)
        else:
            writer.write_direct(path, content, validate=validate)
    except (FileExistsError, SchemaGenerationError) as e:
        raise click.ClickException(str(e)) from e
    logger.info("Wrote %s", path)
