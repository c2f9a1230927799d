"""CLI commands for the local logical clock."""

from __future__ import annotations

import click

from limestore.domain.exceptions import DomainException
from limestore.infrastructure.bootstrap import chain_clock
from limestore.infrastructure.cli.context import CliContext, pass_cli_context


@click.command("height")
@pass_cli_context
def chain_height(ctx: CliContext) -> None:
    """Show the current block height."""
    click.echo(chain_clock(ctx.settings).current_height())


@click.command("mine")
@click.option("--blocks", default=1, type=int, show_default=True, help="Blocks to mine.")
@pass_cli_context
def chain_mine(ctx: CliContext, blocks: int) -> None:
    """Advance the block height."""
    try:
        height = chain_clock(ctx.settings).mine(blocks)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Mined {blocks} block(s), height is now {height}")
