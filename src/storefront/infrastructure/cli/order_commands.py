"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.cancel_order import CancelOrderHandler
from storefront.application.create_order import CreateOrderHandler
from storefront.application.dto import OrderDTO
from storefront.application.list_orders import ListOrdersHandler
from storefront.application.list_vendor_orders import ListVendorOrdersHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.order import OrderStatus
from storefront.infrastructure.cli.context import acting_user, repositories, user_option


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status}, payment={dto.payment_method})")
    click.echo(f"Customer: {dto.user_id}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<20} {'Vendor':<10} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*58}")
    for item in dto.items:
        click.echo(
            f"  {item.product_name:<20} {item.vendor_id:<10} {item.quantity:>5} "
            f"{item.price:>10} {item.line_total:>10}"
        )
    click.echo(f"  {'-'*58}")
    if dto.vendor_subtotal is not None:
        click.echo(f"  {'Vendor Subtotal':<38} {dto.vendor_subtotal:>20}")
    else:
        click.echo(f"  {'Order Total':<38} {dto.total_amount:>20}")


@click.command("create")
@user_option
@click.option("--full-name", default=None, help="Recipient; defaults to the user's name.")
@click.option("--address", default="", help="Street address.")
@click.option("--city", default="")
@click.option("--state", default="")
@click.option("--zip", "zip_code", default="")
@click.option("--country", default="")
@click.option(
    "--payment",
    type=click.Choice(["cod", "card"]),
    default="cod",
    show_default=True,
    help="Payment method (recorded only).",
)
def order_create(
    user_id: str,
    full_name: str | None,
    address: str,
    city: str,
    state: str,
    zip_code: str,
    country: str,
    payment: str,
) -> None:
    """Place an order from the user's cart."""
    repos = repositories()
    handler = CreateOrderHandler(
        order_repo=repos.orders,
        product_repo=repos.products,
        cart_repo=repos.carts,
        ledger=repos.ledger,
    )
    shipping = {
        "fullName": full_name,
        "address": address,
        "city": city,
        "state": state,
        "zip": zip_code,
        "country": country,
    }

    try:
        dto = handler.handle(acting_user(user_id), shipping_address=shipping, payment_method=payment)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} placed.")
    _display_order(dto)


@click.command("list")
@user_option
def order_list(user_id: str) -> None:
    """List the user's orders, newest first."""
    dtos = ListOrdersHandler(order_repo=repositories().orders).handle(acting_user(user_id))
    if not dtos:
        click.echo("No orders found.")
        return

    click.echo(f"{'ID':<6} {'Status':<10} {'Items':>5} {'Total':>10}  Created")
    click.echo("-" * 60)
    for dto in dtos:
        click.echo(
            f"{dto.id:<6} {dto.status:<10} {len(dto.items):>5} {dto.total_amount:>10}  {dto.created_at}"
        )


@click.command("show")
@user_option
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
def order_show(user_id: str, order_id: int) -> None:
    """Show details of an existing order."""
    handler = ShowOrderHandler(order_repo=repositories().orders)

    try:
        dto = handler.handle(order_id, acting_user(user_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("cancel")
@user_option
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
def order_cancel(user_id: str, order_id: int) -> None:
    """Cancel your own pending or confirmed order (restocks its items)."""
    repos = repositories()
    handler = CancelOrderHandler(order_repo=repos.orders, ledger=repos.ledger)

    try:
        handler.handle(order_id, acting_user(user_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} cancelled.")


@click.command("status")
@user_option
@click.option("--id", "order_id", required=True, type=int, help="Order ID to update.")
@click.option(
    "--set",
    "status",
    required=True,
    type=click.Choice([s.value for s in OrderStatus]),
    help="New status.",
)
def order_status(user_id: str, order_id: int, status: str) -> None:
    """Set an order's status (vendor of an item, or admin)."""
    handler = UpdateOrderStatusHandler(order_repo=repositories().orders)

    try:
        dto = handler.handle(order_id, acting_user(user_id), status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} is now {dto.status}.")


@click.command("vendor")
@user_option
def order_vendor(user_id: str) -> None:
    """List orders containing the vendor's products, with vendor subtotals."""
    repos = repositories()
    handler = ListVendorOrdersHandler(order_repo=repos.orders, product_repo=repos.products)

    try:
        dtos = handler.handle(acting_user(user_id))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dtos:
        click.echo("No orders found.")
        return
    for dto in dtos:
        _display_order(dto)
        click.echo()
