"""
Entities package for the product catalog API.
Contains the domain objects built from store rows.
"""

from .product import Product, Comment, ProductImage

__all__ = ["Product", "Comment", "ProductImage"]
