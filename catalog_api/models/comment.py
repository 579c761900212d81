from sqlmodel import SQLModel, Field
from typing import Optional


class Comment(SQLModel, table=True):
    __tablename__ = "comments"

    comment_id: str = Field(primary_key=True, nullable=False)
    name: Optional[str] = None
    email: Optional[str] = None
    body: Optional[str] = None
    product_id: str = Field(foreign_key="products.product_id", index=True)
