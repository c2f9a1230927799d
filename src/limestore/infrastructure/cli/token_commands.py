"""CLI commands for the token ledger."""

from __future__ import annotations

import click

from limestore.application.token_operations import (
    BurnTokensHandler,
    InitializeTokenHandler,
    MintTokensHandler,
    ShowTokenBalanceHandler,
    TransferTokensHandler,
)
from limestore.domain.exceptions import DomainException
from limestore.infrastructure.bootstrap import event_listeners, token_repository
from limestore.infrastructure.cli.context import CliContext, pass_cli_context


@click.command("init")
@click.option("--owner", required=True, help="Identity allowed to mint.")
@click.option("--name", default="LimeToken", show_default=True)
@click.option("--symbol", default="LMT", show_default=True)
@click.option("--decimals", default=18, type=int, show_default=True)
@pass_cli_context
def token_init(ctx: CliContext, owner: str, name: str, symbol: str, decimals: int) -> None:
    """Deploy the token with a fixed owner."""
    handler = InitializeTokenHandler(token_repo=token_repository(ctx.settings))

    try:
        ledger = handler.handle(owner=owner, name=name, symbol=symbol, decimals=decimals)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{ledger.name} ({ledger.symbol}) created for {ledger.owner}")


@click.command("mint")
@click.option("--to", "recipient", required=True, help="Account receiving the tokens.")
@click.option("--amount", required=True, help="Amount in whole tokens (e.g. 4 or 0.5).")
@pass_cli_context
def token_mint(ctx: CliContext, recipient: str, amount: str) -> None:
    """Mint new tokens (owner only)."""
    handler = MintTokensHandler(
        token_repo=token_repository(ctx.settings),
        listeners=event_listeners(),
    )

    try:
        handler.handle(caller=ctx.require_caller(), recipient=recipient, amount=amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Minted {amount} to {recipient}")


@click.command("transfer")
@click.option("--to", "recipient", required=True, help="Account receiving the tokens.")
@click.option("--amount", required=True, help="Amount in whole tokens.")
@pass_cli_context
def token_transfer(ctx: CliContext, recipient: str, amount: str) -> None:
    """Send tokens from the caller to another account."""
    handler = TransferTokensHandler(
        token_repo=token_repository(ctx.settings),
        listeners=event_listeners(),
    )
    caller = ctx.require_caller()

    try:
        handler.handle(caller=caller, recipient=recipient, amount=amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Transferred {amount} from {caller} to {recipient}")


@click.command("burn")
@click.option("--amount", required=True, help="Amount in whole tokens.")
@pass_cli_context
def token_burn(ctx: CliContext, amount: str) -> None:
    """Destroy tokens from the caller's own balance."""
    handler = BurnTokensHandler(
        token_repo=token_repository(ctx.settings),
        listeners=event_listeners(),
    )
    caller = ctx.require_caller()

    try:
        handler.handle(caller=caller, amount=amount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Burned {amount} from {caller}")


@click.command("balance")
@click.option("--account", default=None, help="Account to inspect (defaults to --as).")
@pass_cli_context
def token_balance(ctx: CliContext, account: str | None) -> None:
    """Show an account's token balance."""
    handler = ShowTokenBalanceHandler(token_repo=token_repository(ctx.settings))

    try:
        dto = handler.handle(account or ctx.require_caller())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{dto.account}: {dto.formatted}")
