"""
In-memory joins of comments and images onto already fetched products.

Comments and images are grouped by owning product id once, so each call is
linear in the number of products plus the number of attached records.
"""

from collections import defaultdict
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union
from catalog_api.entities.product import Product, Comment, ProductImage
from catalog_api.services.mapping import map_comment_entity, map_image_entity

CommentLike = Union[Comment, Mapping[str, Any]]
ImageLike = Union[ProductImage, Mapping[str, Any]]


def _group_by_product(items: Iterable) -> Dict[str, list]:
    groups: Dict[str, list] = defaultdict(list)
    for item in items:
        groups[item.product_id].append(item)
    return groups


def select_thumbnail(images: List[ProductImage]) -> Optional[ProductImage]:
    """First image flagged main, else the first image, else None."""
    for image in images:
        if image.main:
            return image
    return images[0] if images else None


def enhance_products_comments(products: List[Product], comments: Iterable[CommentLike]) -> List[Product]:
    entities = (c if isinstance(c, Comment) else map_comment_entity(c) for c in comments)
    groups = _group_by_product(entities)

    for product in products:
        product_comments = groups.get(product.id)
        if product_comments:
            product.comments = product_comments

    return products


def enhance_products_images(products: List[Product], images: Iterable[ImageLike]) -> List[Product]:
    entities = (i if isinstance(i, ProductImage) else map_image_entity(i) for i in images)
    groups = _group_by_product(entities)

    for product in products:
        product_images = groups.get(product.id)
        if product_images:
            product.images = product_images
            product.thumbnail = select_thumbnail(product_images)

    return products
