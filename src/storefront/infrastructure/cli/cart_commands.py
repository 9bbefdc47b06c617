"""CLI commands for the user's cart."""

from __future__ import annotations

import click

from storefront.application.add_to_cart import AddToCartHandler
from storefront.application.clear_cart import ClearCartHandler
from storefront.application.dto import CartDTO
from storefront.application.remove_from_cart import RemoveFromCartHandler
from storefront.application.show_cart import ShowCartHandler
from storefront.application.update_cart_item import UpdateCartItemHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.cli.context import acting_user, repositories, user_option


def _display_cart(dto: CartDTO) -> None:
    if not dto.items:
        click.echo("Cart is empty.")
        return
    click.echo(f"{'Product':<8} {'Name':<20} {'Qty':>5} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 53)
    for line in dto.items:
        click.echo(
            f"{line.product_id:<8} {line.product_name or '(removed)':<20} {line.quantity:>5} "
            f"{line.price or '-':>10} {'-' if line.stock is None else line.stock:>6}"
        )


@click.command("add")
@user_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", default=1, type=int, show_default=True)
def cart_add(user_id: str, product_id: str, quantity: int) -> None:
    """Add a product to the cart (merges with an existing entry)."""
    repos = repositories()
    try:
        dto = AddToCartHandler(repos.carts, repos.products).handle(
            acting_user(user_id), product_id, quantity
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))
    _display_cart(dto)


@click.command("set")
@user_option
@click.option("--product", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New quantity; 0 removes.")
def cart_set(user_id: str, product_id: str, quantity: int) -> None:
    """Replace the quantity of a cart entry."""
    repos = repositories()
    try:
        dto = UpdateCartItemHandler(repos.carts, repos.products).handle(
            acting_user(user_id), product_id, quantity
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))
    _display_cart(dto)


@click.command("remove")
@user_option
@click.option("--product", "product_id", required=True, help="Product ID.")
def cart_remove(user_id: str, product_id: str) -> None:
    """Remove a product from the cart."""
    repos = repositories()
    try:
        dto = RemoveFromCartHandler(repos.carts, repos.products).handle(
            acting_user(user_id), product_id
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))
    _display_cart(dto)


@click.command("clear")
@user_option
def cart_clear(user_id: str) -> None:
    """Empty the cart."""
    ClearCartHandler(repositories().carts).handle(acting_user(user_id))
    click.echo("Cart cleared.")


@click.command("show")
@user_option
def cart_show(user_id: str) -> None:
    """Show the cart with current prices and stock."""
    repos = repositories()
    _display_cart(ShowCartHandler(repos.carts, repos.products).handle(acting_user(user_id)))
