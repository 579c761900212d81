from sqlmodel import SQLModel, Field


class ProductSimilar(SQLModel, table=True):
    """Directed edge: ``similar_product_id`` is listed as similar to ``product_id``."""
    __tablename__ = "product_similar"

    product_id: str = Field(primary_key=True)
    similar_product_id: str = Field(primary_key=True)
