from sqlmodel import SQLModel, Field


class Image(SQLModel, table=True):
    __tablename__ = "images"

    image_id: str = Field(primary_key=True, nullable=False)
    url: str
    product_id: str = Field(foreign_key="products.product_id", index=True)
    main: bool = Field(default=False)
