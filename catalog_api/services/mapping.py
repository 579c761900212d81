"""
Row-to-entity factories.

Rows are any mapping keyed by column name (SQLAlchemy ``RowMapping`` or a
plain dict). The factories only rename fields; they never validate or touch
the store.
"""

from typing import Any, Iterable, List, Mapping
from catalog_api.entities.product import Product, Comment, ProductImage


def map_product_entity(row: Mapping[str, Any]) -> Product:
    return Product(
        id=row["product_id"],
        title=row.get("title"),
        description=row.get("description"),
        price=row.get("price"),
    )


def map_comment_entity(row: Mapping[str, Any]) -> Comment:
    return Comment(
        id=row["comment_id"],
        product_id=row["product_id"],
        name=row.get("name"),
        email=row.get("email"),
        body=row.get("body"),
    )


def map_image_entity(row: Mapping[str, Any]) -> ProductImage:
    # Drivers without a native boolean type hand back 0/1
    return ProductImage(
        id=row["image_id"],
        url=row["url"],
        product_id=row["product_id"],
        main=bool(row.get("main")),
    )


def map_products_entity(rows: Iterable[Mapping[str, Any]]) -> List[Product]:
    return [map_product_entity(row) for row in rows]


def map_comments_entity(rows: Iterable[Mapping[str, Any]]) -> List[Comment]:
    return [map_comment_entity(row) for row in rows]


def map_images_entity(rows: Iterable[Mapping[str, Any]]) -> List[ProductImage]:
    return [map_image_entity(row) for row in rows]
