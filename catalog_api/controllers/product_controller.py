from typing import List, Optional
from fastapi import APIRouter, Body, Depends, Query, Response, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.ext.asyncio import AsyncSession
from catalog_api.core.database import get_async_session
from catalog_api.schemas.product_schemas import (
    ProductAddImagesRequest,
    ProductCreateRequest,
    ProductResponse,
    ProductSearchFilter,
    SimilarProductsRequest,
)
from catalog_api.services.product_service import product_service
import structlog

logger = structlog.get_logger()

router = APIRouter(prefix="/products", tags=["Products"])


def get_search_filter(
    title: Optional[str] = None,
    description: Optional[str] = None,
    price_from: Optional[float] = Query(None, alias="priceFrom"),
    price_to: Optional[float] = Query(None, alias="priceTo"),
) -> ProductSearchFilter:
    return ProductSearchFilter(
        title=title,
        description=description,
        price_from=price_from,
        price_to=price_to,
    )


def to_response(products) -> List[ProductResponse]:
    return [ProductResponse.model_validate(product) for product in products]


@router.get("/", response_model=List[ProductResponse], response_model_exclude_none=True)
async def get_products(db: AsyncSession = Depends(get_async_session)):
    """List every product with its comments, images and thumbnail"""
    products = await product_service.get_products(db)
    return to_response(products)


@router.get("/search", response_model=List[ProductResponse], response_model_exclude_none=True)
async def search_products(
    search_filter: ProductSearchFilter = Depends(get_search_filter),
    db: AsyncSession = Depends(get_async_session)
):
    """Search products by title, description and price range"""
    products = await product_service.search_products(db, search_filter)
    return to_response(products)


@router.get("/{id}", response_model=ProductResponse, response_model_exclude_none=True)
async def get_product(id: str, db: AsyncSession = Depends(get_async_session)):
    product = await product_service.get_product(db, id)
    return ProductResponse.model_validate(product)


@router.post("/", response_class=PlainTextResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    product: ProductCreateRequest,
    db: AsyncSession = Depends(get_async_session)
):
    """Create a product together with its images"""
    product_id = await product_service.create_product(db, product)
    return f"Product id:{product_id} has been added!"


@router.delete("/{id}")
async def delete_product(id: str, db: AsyncSession = Depends(get_async_session)):
    """Delete a product after its images and comments"""
    await product_service.delete_product(db, id)
    return Response(status_code=status.HTTP_200_OK)


@router.post("/add-images", response_class=PlainTextResponse, status_code=status.HTTP_201_CREATED)
async def add_images(
    request: ProductAddImagesRequest,
    db: AsyncSession = Depends(get_async_session)
):
    product_id = await product_service.add_images(db, request)
    return f"Images for a product id:{product_id} have been added!"


@router.post("/remove-images", response_class=PlainTextResponse)
async def remove_images(
    image_ids: Optional[List[str]] = Body(None),
    db: AsyncSession = Depends(get_async_session)
):
    """Remove images by id; the body is a JSON array of image ids"""
    await product_service.remove_images(db, image_ids)
    return "Images have been removed!"


@router.get("/{product_id}/similar", response_model=List[ProductResponse], response_model_exclude_none=True)
async def get_similar_products(product_id: str, db: AsyncSession = Depends(get_async_session)):
    products = await product_service.get_similar_products(db, product_id)
    return to_response(products)


@router.put("/{product_id}/add-similar", status_code=status.HTTP_204_NO_CONTENT)
async def add_similar_products(
    product_id: str,
    request: SimilarProductsRequest,
    db: AsyncSession = Depends(get_async_session)
):
    await product_service.add_similar_products(db, product_id, request.similar_product_ids)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/{product_id}/pull-similar", status_code=status.HTTP_204_NO_CONTENT)
async def remove_similar_products(
    product_id: str,
    request: SimilarProductsRequest,
    db: AsyncSession = Depends(get_async_session)
):
    await product_service.remove_similar_products(db, product_id, request.similar_product_ids)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{product_id}/not-similar", response_model=List[ProductResponse], response_model_exclude_none=True)
async def get_not_similar_products(product_id: str, db: AsyncSession = Depends(get_async_session)):
    """Products that could still be marked as similar to the given one"""
    products = await product_service.get_not_similar_products(db, product_id)
    return to_response(products)
