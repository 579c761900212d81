"""
Catalog entities handed from the mapping layer to the service and controllers.
"""

from typing import Optional, List
from dataclasses import dataclass


@dataclass
class Comment:
    id: str
    product_id: str
    name: Optional[str] = None
    email: Optional[str] = None
    body: Optional[str] = None


@dataclass
class ProductImage:
    id: str
    url: str
    product_id: str
    main: bool = False


@dataclass
class Product:
    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    comments: Optional[List[Comment]] = None
    images: Optional[List[ProductImage]] = None
    thumbnail: Optional[ProductImage] = None
