"""CLI commands for the store ledger."""

from __future__ import annotations

import click

from limestore.application.add_product import AddProductHandler
from limestore.application.buy_product import BuyProductHandler
from limestore.application.initialize_store import InitializeStoreHandler
from limestore.application.return_product import ReturnProductHandler
from limestore.application.show_balance import ShowBalanceHandler
from limestore.application.show_customers import (
    ShowCustomerOrdersHandler,
    ShowCustomersHandler,
)
from limestore.application.show_products import (
    ShowAvailableProductsHandler,
    ShowProductHandler,
)
from limestore.application.update_quantity import UpdateQuantityHandler
from limestore.domain.exceptions import DomainException
from limestore.domain.model.store import PaymentPolicy
from limestore.infrastructure.bootstrap import (
    chain_clock,
    event_listeners,
    store_repository,
)
from limestore.infrastructure.cli.context import CliContext, pass_cli_context


@click.command("init")
@click.option("--owner", required=True, help="Identity that administers the store.")
@click.option("--return-window", type=int, default=None, help="Return window in blocks.")
@click.option(
    "--payment-policy",
    type=click.Choice([p.value for p in PaymentPolicy]),
    default=None,
    help="How payments are checked against prices.",
)
@pass_cli_context
def store_init(
    ctx: CliContext,
    owner: str,
    return_window: int | None,
    payment_policy: str | None,
) -> None:
    """Create the store with a fixed owner."""
    settings = ctx.settings
    handler = InitializeStoreHandler(store_repo=store_repository(settings))

    try:
        dto = handler.handle(
            owner=owner,
            return_window=return_window if return_window is not None else settings.return_window,
            payment_policy=(
                PaymentPolicy(payment_policy) if payment_policy else settings.payment_policy
            ),
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Store created for {dto.owner} "
        f"(return window={dto.return_window}, payments={dto.payment_policy})"
    )


@click.command("add")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="Units in stock.")
@click.option("--price", required=True, help="Price per unit (e.g. 3).")
@pass_cli_context
def store_add(ctx: CliContext, product_id: int, quantity: int, price: str) -> None:
    """Add a new product (owner only)."""
    handler = AddProductHandler(
        store_repo=store_repository(ctx.settings),
        listeners=event_listeners(),
    )

    try:
        event = handler.handle(
            caller=ctx.require_caller(),
            product_id=product_id,
            quantity=quantity,
            price=price,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{event.product_id} added: {event.quantity} at {event.price}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New stock level (0 delists).")
@pass_cli_context
def store_update(ctx: CliContext, product_id: int, quantity: int) -> None:
    """Overwrite a product's quantity (owner only)."""
    handler = UpdateQuantityHandler(
        store_repo=store_repository(ctx.settings),
        listeners=event_listeners(),
    )

    try:
        event = handler.handle(
            caller=ctx.require_caller(), product_id=product_id, quantity=quantity
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{event.product_id} quantity set to {event.quantity}")


@click.command("buy")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--payment", required=True, help="Amount attached to the purchase.")
@pass_cli_context
def store_buy(ctx: CliContext, product_id: int, payment: str) -> None:
    """Buy one unit of a product."""
    handler = BuyProductHandler(
        store_repo=store_repository(ctx.settings),
        clock=chain_clock(ctx.settings),
        listeners=event_listeners(),
    )

    try:
        receipt = handler.handle(
            caller=ctx.require_caller(), product_id=product_id, payment=payment
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Product #{receipt.product_id} bought by {receipt.customer} "
        f"at block {receipt.purchase_height} for {receipt.payment}"
    )
    click.echo(f"Returnable until block {receipt.returnable_until}")


@click.command("return")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@pass_cli_context
def store_return(ctx: CliContext, product_id: int) -> None:
    """Return a product bought earlier and get the payment back."""
    handler = ReturnProductHandler(
        store_repo=store_repository(ctx.settings),
        clock=chain_clock(ctx.settings),
        listeners=event_listeners(),
    )

    try:
        refund = handler.handle(caller=ctx.require_caller(), product_id=product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{refund.product_id} returned, {refund.refund} refunded to {refund.customer}")


@click.command("available")
@pass_cli_context
def store_available(ctx: CliContext) -> None:
    """List the ids of products in stock."""
    handler = ShowAvailableProductsHandler(store_repo=store_repository(ctx.settings))

    try:
        ids = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not ids:
        click.echo("No products available.")
        return
    for product_id in ids:
        click.echo(product_id)


@click.command("customers")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@pass_cli_context
def store_customers(ctx: CliContext, product_id: int) -> None:
    """List customers holding an active order for a product."""
    handler = ShowCustomersHandler(store_repo=store_repository(ctx.settings))

    try:
        customers = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not customers:
        click.echo(f"No active orders for product #{product_id}.")
        return
    for customer in customers:
        click.echo(customer)


@click.command("orders")
@click.option("--customer", default=None, help="Customer identity (defaults to --as).")
@pass_cli_context
def store_orders(ctx: CliContext, customer: str | None) -> None:
    """Show a customer's active orders."""
    handler = ShowCustomerOrdersHandler(store_repo=store_repository(ctx.settings))

    try:
        orders = handler.handle(customer or ctx.require_caller())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not orders:
        click.echo("No active orders.")
        return

    click.echo(f"{'Product':<10} {'Block':>8} {'Payment':>16} {'Return by':>10}")
    click.echo("-" * 47)
    for o in orders:
        click.echo(
            f"{o.product_id:<10} {o.purchase_height:>8} {o.payment:>16} {o.returnable_until:>10}"
        )


@click.command("balance")
@pass_cli_context
def store_balance(ctx: CliContext) -> None:
    """Show the store's accumulated balance."""
    handler = ShowBalanceHandler(store_repo=store_repository(ctx.settings))

    try:
        balance = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Total balance: {balance}")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@pass_cli_context
def store_show(ctx: CliContext, product_id: int) -> None:
    """Show one product, sold out or not."""
    handler = ShowProductHandler(store_repo=store_repository(ctx.settings))

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    status = "available" if dto.available else "sold out"
    click.echo(f"Product #{dto.id}  ({status})")
    click.echo(f"Quantity: {dto.quantity}")
    click.echo(f"Price:    {dto.price}")
