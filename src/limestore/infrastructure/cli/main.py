from __future__ import annotations

import click

from limestore.infrastructure.bootstrap import configure_logging
from limestore.infrastructure.cli.chain_commands import chain_height, chain_mine
from limestore.infrastructure.cli.context import CliContext
from limestore.infrastructure.cli.store_commands import (
    store_add,
    store_available,
    store_balance,
    store_buy,
    store_customers,
    store_init,
    store_orders,
    store_return,
    store_show,
    store_update,
)
from limestore.infrastructure.cli.token_commands import (
    token_balance,
    token_burn,
    token_init,
    token_mint,
    token_transfer,
)
from limestore.infrastructure.settings import Settings


@click.group()
@click.option("--as", "caller", default=None, metavar="IDENTITY", help="Identity of the caller.")
@click.option("--verbose", is_flag=True, default=False, help="Log at DEBUG level.")
@click.pass_context
def cli(ctx: click.Context, caller: str | None, verbose: bool) -> None:
    """LimeStore — inventory ledger and token"""
    try:
        settings = Settings.from_env()
    except ValueError as exc:
        raise click.ClickException(str(exc))
    configure_logging(settings, verbose=verbose)
    ctx.obj = CliContext(caller=caller, settings=settings)


@cli.group()
def store() -> None:
    """Manage the store: catalog, orders and returns."""


@cli.group()
def token() -> None:
    """Manage the LimeToken ledger."""


@cli.group()
def chain() -> None:
    """Inspect and advance the logical height."""


# Register subcommands
store.add_command(store_init)
store.add_command(store_add)
store.add_command(store_update)
store.add_command(store_buy)
store.add_command(store_return)
store.add_command(store_available)
store.add_command(store_customers)
store.add_command(store_orders)
store.add_command(store_balance)
store.add_command(store_show)
token.add_command(token_init)
token.add_command(token_mint)
token.add_command(token_transfer)
token.add_command(token_burn)
token.add_command(token_balance)
chain.add_command(chain_height)
chain.add_command(chain_mine)
