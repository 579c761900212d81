# Export all DAO classes
from .base_dao import BaseDAO
from .product_dao import product_dao
from .comment_dao import comment_dao
from .image_dao import image_dao
from .similar_product_dao import similar_product_dao

__all__ = [
    "BaseDAO",
    "product_dao",
    "comment_dao",
    "image_dao",
    "similar_product_dao",
]
