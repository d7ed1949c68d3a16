"""
pool-tags command line interface
"""

import asyncio
import json
import os
import sys
from pathlib import Path
from typing import List

import click
from dotenv import load_dotenv
from loguru import logger
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .. import __version__
from ..errors import PoolTagsError
from ..models import ContractTag
from ..networks import NETWORK_ENDPOINTS, supported_networks
from ..service import return_tags

load_dotenv()

console = Console(stderr=True)


def setup_logging(debug: bool = False):
    logger.remove()
    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    if debug or os.getenv("DEBUG", "false").lower() == "true":
        log_level = "DEBUG"
    logger.add(
        sys.stderr,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        level=log_level,
        colorize=True
    )


def render_table(tags: List[ContractTag]) -> Table:
    table = Table(title=f"Pool Tags ({len(tags)})")
    table.add_column("Contract Address", style="cyan")
    table.add_column("Public Name Tag", style="green")
    table.add_column("Public Note", style="dim")
    for tag in tags:
        table.add_row(escape(tag.contract_address), escape(tag.public_name_tag), escape(tag.public_note))
    return table


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging')
@click.pass_context
def cli(ctx, debug):
    """Build contract tags for SushiSwap v3 pools from The Graph"""
    ctx.ensure_object(dict)
    ctx.obj['debug'] = debug
    setup_logging(debug)


@cli.command()
@click.argument('network_id')
@click.option('--api-key', envvar='GRAPH_API_KEY', required=True, help='The Graph gateway API key (or set GRAPH_API_KEY)')
@click.option('--format', 'output_format', type=click.Choice(['json', 'table']), default='json', help='Output format')
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path), help='Write JSON tags to this file')
def tags(network_id, api_key, output_format, output):
    """Fetch every pool on NETWORK_ID and print its tags"""
    try:
        result = asyncio.run(return_tags(network_id, api_key))
    except PoolTagsError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)

    records = [tag.as_record() for tag in result]
    if output:
        output.write_text(json.dumps(records, indent=2))
        console.print(f"[green]Wrote {len(records)} tags to {output}[/green]")
    elif output_format == 'table':
        Console().print(render_table(result))
    else:
        click.echo(json.dumps(records, indent=2))


@cli.command()
def networks():
    """List supported network ids"""
    table = Table(title="Supported Networks")
    table.add_column("Network ID", style="cyan")
    table.add_column("Endpoint Template", style="dim")
    for network_id in supported_networks():
        table.add_row(network_id, escape(NETWORK_ENDPOINTS[network_id]))
    Console().print(table)


@cli.command()
def version():
    """Show version information"""
    click.echo(f"pool-tags {__version__}")


def main():
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    main()
