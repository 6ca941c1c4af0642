"""Command-line interface for compound-xref."""

import asyncio
import logging
import sys

import click

from compound_xref.config import get_settings
from compound_xref.runners.xref_runner import InteractionParseError, run


@click.command()
@click.version_option(package_name="compound-xref")
@click.option(
    "--interactions",
    type=click.Path(dir_okay=False),
    help="Interactions file (JSON lines) generated by the DGIdb download",
)
@click.option(
    "--output",
    type=click.Path(dir_okay=False),
    help="Output file path (JSON lines); defaults to stdout",
)
@click.option(
    "--concurrency",
    type=click.IntRange(min=1),
    default=None,
    help="Maximum UniChem lookups in flight (output order is preserved)",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging level (logs go to stderr)",
)
def main(
    interactions: str | None,
    output: str | None,
    concurrency: int | None,
    log_level: str | None,
):
    """Map ChEMBL ids in DGIdb interactions to PubChem, DrugBank and ChEBI ids."""
    if not interactions:
        click.echo("interactions file must be provided", err=True)
        sys.exit(1)

    settings = get_settings()
    logging.basicConfig(
        level=(log_level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )

    try:
        asyncio.run(run(interactions, output, concurrency=concurrency))
    except (InteractionParseError, UnicodeDecodeError, OSError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
