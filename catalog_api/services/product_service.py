from typing import List, Optional
from uuid import uuid4
from sqlalchemy.ext.asyncio import AsyncSession
from catalog_api.core.exceptions import ClientError, NotFoundError
from catalog_api.dao.product_dao import product_dao
from catalog_api.dao.comment_dao import comment_dao
from catalog_api.dao.image_dao import image_dao
from catalog_api.dao.similar_product_dao import similar_product_dao
from catalog_api.entities.product import Product
from catalog_api.schemas.product_schemas import (
    ImageCreateRequest,
    ProductCreateRequest,
    ProductAddImagesRequest,
    ProductSearchFilter,
)
from catalog_api.services.enhancer import enhance_products_comments, enhance_products_images
from catalog_api.services.mapping import map_product_entity, map_products_entity
import structlog

logger = structlog.get_logger()


def _product_not_found(product_id: str) -> NotFoundError:
    return NotFoundError(f"Product with id {product_id} is not found")


def _image_rows(product_id: str, images: List[ImageCreateRequest]) -> List[dict]:
    return [
        {"image_id": str(uuid4()), "url": image.url, "product_id": product_id, "main": image.main}
        for image in images
    ]


class ProductService:
    """Runs the statements behind each catalog route.

    Steps run one after another with no enclosing transaction: when a later
    step fails the earlier ones stay applied.
    """

    def __init__(self):
        self.product_dao = product_dao
        self.comment_dao = comment_dao
        self.image_dao = image_dao
        self.similar_product_dao = similar_product_dao

    async def _enhance(self, db: AsyncSession, products: List[Product]) -> List[Product]:
        comment_rows = await self.comment_dao.get_all(db)
        image_rows = await self.image_dao.get_all(db)

        with_comments = enhance_products_comments(products, comment_rows)
        return enhance_products_images(with_comments, image_rows)

    async def get_products(self, db: AsyncSession) -> List[Product]:
        rows = await self.product_dao.get_all(db)
        products = await self._enhance(db, map_products_entity(rows))
        logger.info("Retrieved products", count=len(products))
        return products

    async def search_products(self, db: AsyncSession, search_filter: ProductSearchFilter) -> List[Product]:
        rows = await self.product_dao.search(db, search_filter)
        if not rows:
            logger.info("Product search matched nothing")
            return []

        products = await self._enhance(db, map_products_entity(rows))
        logger.info("Searched products", count=len(products))
        return products

    async def get_product(self, db: AsyncSession, product_id: str) -> Product:
        row = await self.product_dao.get_by_id(db, product_id)
        if not row:
            raise _product_not_found(product_id)

        comment_rows = await self.comment_dao.get_by_product_id(db, product_id)
        image_rows = await self.image_dao.get_by_product_id(db, product_id)

        products = [map_product_entity(row)]
        enhance_products_comments(products, comment_rows)
        enhance_products_images(products, image_rows)
        return products[0]

    async def create_product(self, db: AsyncSession, product_create: ProductCreateRequest) -> str:
        product_id = str(uuid4())
        await self.product_dao.create(
            db,
            product_id=product_id,
            title=product_create.title or None,
            description=product_create.description or None,
            price=product_create.price,
        )

        if product_create.images:
            await self.image_dao.create_many(db, _image_rows(product_id, product_create.images))

        return product_id

    async def delete_product(self, db: AsyncSession, product_id: str) -> None:
        row = await self.product_dao.get_by_id(db, product_id)
        if not row:
            raise _product_not_found(product_id)

        # Dependent rows go first
        await self.image_dao.delete_by_product_id(db, product_id)
        await self.comment_dao.delete_by_product_id(db, product_id)
        await self.product_dao.delete(db, product_id)

    async def add_images(self, db: AsyncSession, request: ProductAddImagesRequest) -> str:
        if not request.images:
            raise ClientError("Images array is empty")

        await self.image_dao.create_many(db, _image_rows(request.product_id, request.images))
        return request.product_id

    async def remove_images(self, db: AsyncSession, image_ids: Optional[List[str]]) -> int:
        if not image_ids:
            raise ClientError("Images array is empty")

        removed = await self.image_dao.delete_many(db, image_ids)
        if removed == 0:
            raise NotFoundError("No one image has been removed")
        return removed

    async def get_similar_products(self, db: AsyncSession, product_id: str) -> List[Product]:
        rows = await self.similar_product_dao.get_similar(db, product_id)
        return map_products_entity(rows)

    async def add_similar_products(self, db: AsyncSession, product_id: str, similar_product_ids: List[str]) -> None:
        unique_ids = list(dict.fromkeys(similar_product_ids))
        await self.similar_product_dao.add(db, product_id, unique_ids)

    async def remove_similar_products(self, db: AsyncSession, product_id: str, similar_product_ids: List[str]) -> None:
        await self.similar_product_dao.remove(db, product_id, similar_product_ids)

    async def get_not_similar_products(self, db: AsyncSession, product_id: str) -> List[Product]:
        rows = await self.similar_product_dao.get_not_similar(db, product_id)
        return map_products_entity(rows)


product_service = ProductService()
