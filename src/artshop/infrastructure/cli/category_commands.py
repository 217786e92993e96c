"""CLI commands for the Category aggregate (admin)."""

from __future__ import annotations

import click

from artshop.application.add_category import AddCategoryHandler
from artshop.application.delete_category import DeleteCategoryHandler
from artshop.application.update_category import UpdateCategoryHandler
from artshop.domain.exceptions import DomainException
from artshop.domain.model.product import slugify
from artshop.infrastructure.bootstrap import catalog_repository
from artshop.infrastructure.config import Settings


@click.command("add")
@click.option("--name", required=True, help="Category name.")
@click.option("--slug", default=None, help="URL slug (derived from the name if omitted).")
@click.pass_obj
def category_add(settings: Settings, name: str, slug: str | None) -> None:
    """Add a new category."""
    handler = AddCategoryHandler(catalog_repo=catalog_repository(settings))

    try:
        category = handler.handle(name=name, slug=slug or slugify(name))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{category.id} '{category.name}' added ({category.slug})")


@click.command("list")
@click.pass_obj
def category_list(settings: Settings) -> None:
    """List categories with their artwork counts."""
    categories = catalog_repository(settings).list_categories()

    if not categories:
        click.echo("No categories found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Slug':<24} {'Artworks':>8}")
    click.echo("-" * 65)
    for c in categories:
        click.echo(f"{c.id:<6} {c.name:<24} {c.slug:<24} {c.product_count:>8}")


@click.command("update")
@click.option("--id", "category_id", required=True, help="Category ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--slug", default=None, help="New URL slug.")
@click.pass_obj
def category_update(settings: Settings, category_id: str, name: str | None, slug: str | None) -> None:
    """Rename a category or change its slug."""
    handler = UpdateCategoryHandler(catalog_repo=catalog_repository(settings))

    try:
        category = handler.handle(category_id, name=name, slug=slug)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{category.id} is now '{category.name}' ({category.slug})")

@click.command("delete")
@click.option("--id", "category_id", required=True, help="Category ID.")
@click.pass_obj
def category_delete(settings: Settings, category_id: str) -> None:
    """Delete an empty category."""
    handler = DeleteCategoryHandler(catalog_repo=catalog_repository(settings))

    try:
        handler.handle(category_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Category #{category_id} deleted.")
