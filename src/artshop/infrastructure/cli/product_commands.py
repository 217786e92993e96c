"""CLI commands for the Product aggregate (admin)."""

from __future__ import annotations

import click

from artshop.application.add_product import AddProductHandler, NewProductSpec
from artshop.application.delete_product import DeleteProductHandler
from artshop.application.update_product import UpdateProductHandler
from artshop.domain.exceptions import DomainException
from artshop.domain.model.product import slugify
from artshop.infrastructure.bootstrap import catalog_repository
from artshop.infrastructure.config import Settings


@click.command("add")
@click.option("--name", required=True, help="Artwork name.")
@click.option("--price", required=True, help="Price (e.g. 1500).")
@click.option("--category", "category_id", required=True, help="Category ID.")
@click.option("--slug", default=None, help="URL slug (derived from the name if omitted).")
@click.option("--description", default="", help="Description.")
@click.option("--artist", default=None, help="Artist name.")
@click.option("--stock", type=click.IntRange(min=0), default=1, show_default=True)
@click.option("--featured", is_flag=True, default=False, help="Show on the home page.")
@click.option("--latest", is_flag=True, default=False, help="Show among the latest arrivals.")
@click.option("--image", "images", multiple=True, help="Image URL (repeatable, first is primary).")
@click.pass_obj
def product_add(
    settings: Settings,
    name: str,
    price: str,
    category_id: str,
    slug: str | None,
    description: str,
    artist: str | None,
    stock: int,
    featured: bool,
    latest: bool,
    images: tuple[str, ...],
) -> None:
    """Add a new artwork to the catalog."""
    handler = AddProductHandler(catalog_repo=catalog_repository(settings))
    spec = NewProductSpec(
        name=name,
        price=price,
        category_id=category_id,
        slug=slug or slugify(name),
        description=description,
        artist=artist,
        stock=stock,
        featured=featured,
        latest=latest,
        images=list(images),
    )

    try:
        product = handler.handle(spec)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at {product.price} ({product.slug})")


@click.command("list")
@click.option("--category", "category_id", default=None, help="Only this category ID.")
@click.option("--featured", is_flag=True, default=False, help="Only featured artworks.")
@click.option("--latest", is_flag=True, default=False, help="Only artworks flagged as latest.")
@click.pass_obj
def product_list(settings: Settings, category_id: str | None, featured: bool, latest: bool) -> None:
    """List artworks in the catalog, newest first."""
    repo = catalog_repository(settings)
    products = repo.list_products(
        category_id=category_id,
        featured=True if featured else None,
        latest=True if latest else None,
    )

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<28} {'Price':>10} {'Stock':>6}  {'Slug'}")
    click.echo("-" * 70)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<28} {str(p.price):>10} {p.stock:>6}  {p.slug}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--slug", default=None, help="New URL slug.")
@click.option("--description", default=None, help="New description.")
@click.option("--artist", default=None, help="New artist name (empty to clear).")
@click.option("--category", "category_id", default=None, help="Move to this category ID.")
@click.option("--image", "images", multiple=True, help="Replace the images (repeatable).")
@click.option("--price", default=None, help="New price (e.g. 2900).")
@click.option("--stock", type=click.IntRange(min=0), default=None, help="New stock level.")
@click.option("--featured/--not-featured", default=None, help="Featured flag.")
@click.option("--latest/--not-latest", default=None, help="Latest-arrivals flag.")
@click.pass_obj
def product_update(
    settings: Settings,
    product_id: str,
    name: str | None,
    slug: str | None,
    description: str | None,
    artist: str | None,
    category_id: str | None,
    images: tuple[str, ...],
    price: str | None,
    stock: int | None,
    featured: bool | None,
    latest: bool | None,
) -> None:
    """Edit an artwork; options left out keep their current value."""
    handler = UpdateProductHandler(catalog_repo=catalog_repository(settings))

    try:
        handler.handle(
            product_id,
            new_price=price,
            stock=stock,
            featured=featured,
            latest=latest,
            name=name,
            description=description,
            category_id=category_id,
            slug=slug,
            images=list(images) if images else None,
            artist=artist,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} updated.")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.pass_obj
def product_delete(settings: Settings, product_id: str) -> None:
    """Remove an artwork from the catalog."""
    handler = DeleteProductHandler(catalog_repo=catalog_repository(settings))

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")
