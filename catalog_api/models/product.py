from sqlmodel import SQLModel, Field
from typing import Optional


class ProductBase(SQLModel):
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None


class Product(ProductBase, table=True):
    __tablename__ = "products"

    product_id: str = Field(primary_key=True, index=True, nullable=False)
