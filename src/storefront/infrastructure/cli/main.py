import click

from storefront.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_set,
    cart_show,
)
from storefront.infrastructure.cli.order_commands import (
    order_cancel,
    order_create,
    order_list,
    order_show,
    order_status,
    order_vendor,
)
from storefront.infrastructure.cli.product_commands import product_list
from storefront.infrastructure.config import Settings, configure_logging


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """Storefront — carts, orders and stock"""
    configure_logging("DEBUG" if verbose else Settings.from_env().log_level)


@cli.group()
def order() -> None:
    """Place and manage orders."""


@cli.group()
def cart() -> None:
    """Manage a user's cart."""


@cli.group()
def product() -> None:
    """Browse products."""


@cli.command()
@click.option("--host", default=None, help="Bind address (default from STOREFRONT_HOST).")
@click.option("--port", default=None, type=int, help="Port (default from STOREFRONT_PORT).")
def serve(host: str | None, port: int | None) -> None:
    """Run the HTTP API."""
    from storefront.infrastructure.http.app import create_app

    settings = Settings.from_env()
    app = create_app(settings=settings)
    app.run(host=host or settings.host, port=port or settings.port, threaded=True)


# Register subcommands
order.add_command(order_cancel)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_show)
order.add_command(order_status)
order.add_command(order_vendor)
cart.add_command(cart_add)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_set)
cart.add_command(cart_show)
product.add_command(product_list)
