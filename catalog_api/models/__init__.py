# Import all table models so they register on SQLModel.metadata
from .product import Product, ProductBase
from .comment import Comment
from .image import Image
from .product_similar import ProductSimilar

__all__ = [
    "Product", "ProductBase",
    "Comment",
    "Image",
    "ProductSimilar",
]
