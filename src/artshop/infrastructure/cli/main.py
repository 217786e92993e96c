import locale
import logging

import click

from artshop.domain.exceptions import ConfigError
from artshop.infrastructure.cli.cart_commands import (
    cart_add,
    cart_checkout,
    cart_clear,
    cart_remove,
    cart_show,
    cart_update,
)
from artshop.infrastructure.cli.catalog_commands import (
    catalog_browse,
    catalog_categories,
    catalog_inquire,
)
from artshop.infrastructure.cli.category_commands import (
    category_add,
    category_delete,
    category_list,
    category_update,
)
from artshop.infrastructure.cli.product_commands import (
    product_add,
    product_delete,
    product_list,
    product_update,
)
from artshop.infrastructure.config import load_settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

logger = logging.getLogger(__name__)


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """artshop — art gallery storefront"""
    if ctx.obj is None:
        try:
            ctx.obj = load_settings()
        except ConfigError as exc:
            raise click.ClickException(str(exc))
    logging.basicConfig(level=ctx.obj.log_level, format=LOG_FORMAT)
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as exc:
        logger.debug("Keeping the C collation order: %s", exc)


@cli.group()
def cart() -> None:
    """Manage the shopping cart."""


@cli.group()
def catalog() -> None:
    """Browse the boutique."""


@cli.group()
def product() -> None:
    """Manage artworks (admin)."""


@cli.group()
def category() -> None:
    """Manage categories (admin)."""


# Register subcommands
cart.add_command(cart_add)
cart.add_command(cart_checkout)
cart.add_command(cart_clear)
cart.add_command(cart_remove)
cart.add_command(cart_show)
cart.add_command(cart_update)
catalog.add_command(catalog_browse)
catalog.add_command(catalog_categories)
catalog.add_command(catalog_inquire)
product.add_command(product_add)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_update)
category.add_command(category_add)
category.add_command(category_delete)
category.add_command(category_list)
category.add_command(category_update)
