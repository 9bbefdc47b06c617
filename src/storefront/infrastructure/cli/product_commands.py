"""CLI commands for browsing the product catalog."""

from __future__ import annotations

import click

from storefront.infrastructure.cli.context import repositories


@click.command("list")
@click.option("--vendor", "vendor_id", default=None, help="Only this vendor's products.")
def product_list(vendor_id: str | None) -> None:
    """List products with their price and stock."""
    repo = repositories().products
    products = repo.list_by_vendor(vendor_id) if vendor_id else repo.list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Vendor':<10} {'Price':>10} {'Stock':>6}")
    click.echo("-" * 56)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.vendor_id:<10} {str(p.price):>10} {p.stock:>6}")
