from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from typing import Optional, List


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, from_attributes=True)


class ImageCreateRequest(CamelModel):
    url: str
    main: bool = False


class ProductCreateRequest(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    images: Optional[List[ImageCreateRequest]] = None


class ProductAddImagesRequest(CamelModel):
    product_id: str = Field(..., alias="productId")
    images: Optional[List[ImageCreateRequest]] = None


class SimilarProductsRequest(CamelModel):
    similar_product_ids: List[str] = Field(..., alias="similarProductIds")


class ProductSearchFilter(CamelModel):
    title: Optional[str] = None
    description: Optional[str] = None
    price_from: Optional[float] = Field(None, alias="priceFrom")
    price_to: Optional[float] = Field(None, alias="priceTo")


# Entities carry product_id, stored payloads may carry productId
PRODUCT_ID_ALIASES = AliasChoices("product_id", "productId")


class CommentResponse(CamelModel):
    id: str
    name: Optional[str] = None
    email: Optional[str] = None
    body: Optional[str] = None
    product_id: str = Field(..., validation_alias=PRODUCT_ID_ALIASES, serialization_alias="productId")


class ImageResponse(CamelModel):
    id: str
    url: str
    product_id: str = Field(..., validation_alias=PRODUCT_ID_ALIASES, serialization_alias="productId")
    main: bool


class ProductResponse(CamelModel):
    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[float] = None
    comments: Optional[List[CommentResponse]] = None
    images: Optional[List[ImageResponse]] = None
    thumbnail: Optional[ImageResponse] = None
