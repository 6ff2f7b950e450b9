import json
import logging

import click

from .cli_utils import generation_comment
from .pipeline import BatchDriver, EmitterConfig, OutputMode
from .pipeline.driver import UnitStatus


@click.command()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--force", "-f", is_flag=True, default=False, help="Overwrite existing output files")
@click.option("--no-crud", is_flag=True, default=False, help="Only emit the declared types, no CRUD inputs or root extensions")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log every emitted declaration")
@click.argument("pattern", type=str)
@click.argument("output", type=click.Path(file_okay=False, resolve_path=True))
def type_graph_to_graphql(config, force, no_crud, verbose, pattern, output):
    """Emit a GraphQL schema for every type graph file matching PATTERN into OUTPUT."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if config is not None:
        with open(config) as f:
            config = EmitterConfig.from_dict(json.load(f))
    else:
        config = EmitterConfig()

    # CLI flags override the config file
    if force:
        config.output.mode = OutputMode.FORCE
    if no_crud:
        config.emit_crud_artifacts = False

    driver = BatchDriver(config, header=lambda: generation_comment(type_graph_to_graphql))
    results = driver.run(pattern, output)

    generated = [r for r in results if r.status is UnitStatus.GENERATED]
    failed = [r for r in results if r.status is UnitStatus.FAILED]
    for result in failed:
        click.echo(f"Failed: {result.source}: {result.error}", err=True)
    click.echo(f"{len(generated)} schema(s) generated, {len(failed)} failed, {len(results) - len(generated) - len(failed)} skipped")

    if failed:
        raise SystemExit(1)
