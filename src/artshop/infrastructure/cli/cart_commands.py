"""CLI commands for the shopping cart."""

from __future__ import annotations

import click

from artshop.application.add_to_cart import AddToCartHandler
from artshop.application.checkout import CheckoutHandler
from artshop.application.show_cart import ShowCartHandler
from artshop.domain.exceptions import DomainException
from artshop.infrastructure.bootstrap import cart_store, catalog_source
from artshop.infrastructure.config import Settings


def _display_cart(settings: Settings) -> None:
    dto = ShowCartHandler(cart_store(settings)).handle()

    if not dto.items:
        click.echo("Your cart is empty.")
        return

    click.echo(f"  {'ID':<6} {'Artwork':<28} {'Qty':>5} {'Price':>12} {'Total':>12}")
    click.echo(f"  {'-'*67}")
    for item in dto.items:
        click.echo(
            f"  {item.id:<6} {item.name:<28} {item.quantity:>5} {item.unit_price:>12} {item.line_total:>12}"
        )
    click.echo(f"  {'-'*67}")
    click.echo(f"  {'Items':<41} {dto.count:>25}")
    click.echo(f"  {'Subtotal':<41} {dto.total:>25}")


@click.command("add")
@click.option("--id", "product_id", required=True, help="Product ID or slug.")
@click.pass_obj
def cart_add(settings: Settings, product_id: str) -> None:
    """Add one unit of an artwork to the cart."""
    handler = AddToCartHandler(cart_store(settings), catalog_source(settings))

    try:
        snapshot = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"'{snapshot.name}' added to cart at {snapshot.price}")


@click.command("remove")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def cart_remove(settings: Settings, product_id: str) -> None:
    """Remove an artwork from the cart."""
    cart_store(settings).remove_from_cart(product_id)
    click.echo(f"Product #{product_id} removed from cart.")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--quantity", required=True, type=int, help="New quantity (at least 1).")
@click.pass_obj
def cart_update(settings: Settings, product_id: str, quantity: int) -> None:
    """Set the quantity of an artwork already in the cart."""
    if quantity < 1:
        raise click.BadParameter("Quantity must be at least 1; use 'cart remove' instead.")

    store = cart_store(settings)
    if store.find(product_id) is None:
        raise click.ClickException(f"Product #{product_id} is not in the cart")

    store.update_quantity(product_id, quantity)
    click.echo(f"Product #{product_id} quantity set to {quantity}.")


@click.command("clear")
@click.pass_obj
def cart_clear(settings: Settings) -> None:
    """Empty the cart."""
    cart_store(settings).clear_cart()
    click.echo("Cart cleared.")


@click.command("show")
@click.pass_obj
def cart_show(settings: Settings) -> None:
    """Show the cart contents and subtotal."""
    _display_cart(settings)


@click.command("checkout")
@click.option("--number", default=None, help="WhatsApp number (defaults to the configured one).")
@click.pass_obj
def cart_checkout(settings: Settings, number: str | None) -> None:
    """Print the WhatsApp order message and link for the cart."""
    handler = CheckoutHandler(cart_store(settings), number or settings.whatsapp_number)

    try:
        dto = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(dto.message)
    click.echo()
    click.echo(f"Open this link to send the order: {dto.link}")
