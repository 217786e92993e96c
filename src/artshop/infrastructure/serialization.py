"""Mapping between domain objects and the storefront's JSON shapes.

The JSON files and the HTTP API share one format: the camelCase
records served by ``/api/products`` and ``/api/categories``.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from artshop.domain.model.product import Category, CategoryRef, Product


def product_to_raw(product: Product) -> dict[str, Any]:
    raw: dict[str, Any] = {
        "id": product.id,
        "name": product.name,
        "slug": product.slug,
        "description": product.description,
        "price": str(product.price),
        "images": list(product.images),
        "stock": product.stock,
        "categoryId": product.category_id,
        "artist": product.artist,
        "featured": product.featured,
        "latest": product.latest,
        "createdAt": product.created_at.isoformat(),
    }
    if product.category is not None:
        raw["category"] = {
            "id": product.category.id,
            "name": product.category.name,
            "slug": product.category.slug,
        }
    return raw


def product_from_raw(raw: dict[str, Any]) -> Product:
    category_raw = raw.get("category")
    category = None
    if isinstance(category_raw, dict):
        category = CategoryRef(
            id=str(category_raw["id"]),
            name=category_raw.get("name", ""),
            slug=category_raw.get("slug", ""),
        )
    created_at = raw.get("createdAt")
    return Product(
        id=str(raw["id"]),
        name=raw["name"],
        price=raw.get("price", "0"),
        category_id=str(raw.get("categoryId") or (category.id if category else "")),
        slug=raw.get("slug") or "",
        description=raw.get("description") or "",
        images=list(raw.get("images") or []),
        category=category,
        artist=raw.get("artist") or None,
        featured=bool(raw.get("featured", False)),
        latest=bool(raw.get("latest", False)),
        stock=int(raw.get("stock") or 0),
        created_at=_parse_datetime(created_at),
    )


def category_to_raw(category: Category) -> dict[str, Any]:
    return {"id": category.id, "name": category.name, "slug": category.slug}


def category_from_raw(raw: dict[str, Any]) -> Category:
    if "productCount" in raw:
        count = raw["productCount"]
    else:
        count = (raw.get("_count") or {}).get("products", 0)
    return Category(
        id=str(raw["id"]),
        name=raw["name"],
        slug=raw.get("slug", ""),
        product_count=int(count or 0),
    )


def _parse_datetime(value: str | None) -> datetime:
    if not value:
        return datetime.now(timezone.utc)
    # Python < 3.11 does not accept the trailing "Z" JavaScript emits.
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed
