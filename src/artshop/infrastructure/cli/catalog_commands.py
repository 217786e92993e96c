"""CLI commands for browsing the boutique."""

from __future__ import annotations

from decimal import Decimal

import click

from artshop.application.browse_catalog import BrowseCatalogHandler, BrowseRequest
from artshop.application.checkout import ProductInquiryHandler
from artshop.domain.exceptions import DomainException
from artshop.domain.model.filter_state import SortOption
from artshop.infrastructure.bootstrap import catalog_source
from artshop.infrastructure.config import Settings


@click.command("browse")
@click.option("--category", default=None, help="Category ID (default: all).")
@click.option("--min-price", type=click.FLOAT, default=None, help="Lowest price.")
@click.option("--max-price", type=click.FLOAT, default=None, help="Highest price.")
@click.option("--search", default="", help="Text to look for in name, description or artist.")
@click.option(
    "--sort",
    type=click.Choice([o.value for o in SortOption]),
    default=SortOption.NEWEST.value,
    show_default=True,
)
@click.option("--page", type=click.IntRange(min=1), default=1, show_default=True)
@click.option("--per-page", type=click.IntRange(min=1), default=None, help="Artworks per page.")
@click.pass_obj
def catalog_browse(
    settings: Settings,
    category: str | None,
    min_price: float | None,
    max_price: float | None,
    search: str,
    sort: str,
    page: int,
    per_page: int | None,
) -> None:
    """List artworks matching the given filters."""
    request = BrowseRequest(
        category=category,
        min_price=Decimal(str(min_price)) if min_price is not None else None,
        max_price=Decimal(str(max_price)) if max_price is not None else None,
        search=search,
        sort=SortOption.parse(sort),
        page=page,
        items_per_page=per_page or settings.items_per_page,
    )

    try:
        dto = BrowseCatalogHandler(catalog_source(settings)).handle(request)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not dto.products:
        click.echo("No artworks match these filters.")
        return

    click.echo(f"{'ID':<6} {'Artwork':<28} {'Artist':<18} {'Category':<14} {'Price':>14}")
    click.echo("-" * 84)
    for card in dto.products:
        marker = "" if card.in_stock else " (sold out)"
        click.echo(
            f"{card.id:<6} {card.name:<28} {card.artist or '-':<18} {card.category:<14} {card.price:>14}{marker}"
        )
    click.echo()
    click.echo(f"Page {dto.current_page} of {dto.total_pages} — {dto.total_count} artwork(s)")


@click.command("categories")
@click.pass_obj
def catalog_categories(settings: Settings) -> None:
    """List categories with their artwork counts."""
    try:
        categories = catalog_source(settings).fetch_categories()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not categories:
        click.echo("No categories found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Slug':<24} {'Artworks':>8}")
    click.echo("-" * 65)
    for c in categories:
        click.echo(f"{c.id:<6} {c.name:<24} {c.slug:<24} {c.product_count:>8}")


@click.command("inquire")
@click.option("--id", "product_ref", required=True, help="Artwork ID or slug.")
@click.option("--number", default=None, help="Override the gallery's WhatsApp number.")
@click.pass_obj
def catalog_inquire(settings: Settings, product_ref: str, number: str | None) -> None:
    """Ask the gallery about one artwork on WhatsApp."""
    handler = ProductInquiryHandler(catalog_source(settings), number or settings.whatsapp_number)
    try:
        dto = handler.handle(product_ref)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(dto.message)
    click.echo()
    click.echo(f"Open on WhatsApp: {dto.link}")
