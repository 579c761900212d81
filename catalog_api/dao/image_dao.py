from typing import List
from sqlalchemy import bindparam, text
from sqlalchemy.engine import RowMapping
from sqlalchemy.ext.asyncio import AsyncSession
from catalog_api.dao.base_dao import BaseDAO
from catalog_api.dao.queries import (
    SELECT_ALL_IMAGES_QUERY,
    SELECT_IMAGES_BY_PRODUCT_QUERY,
    INSERT_PRODUCT_IMAGES_QUERY,
    DELETE_IMAGES_BY_PRODUCT_QUERY,
    DELETE_IMAGES_QUERY,
)
import structlog

logger = structlog.get_logger()

delete_images_statement = text(DELETE_IMAGES_QUERY).bindparams(bindparam("image_ids", expanding=True))


class ImageDAO(BaseDAO):
    def __init__(self):
        super().__init__("images")

    async def get_all(self, db: AsyncSession) -> List[RowMapping]:
        return await self.fetch_all(db, SELECT_ALL_IMAGES_QUERY)

    async def get_by_product_id(self, db: AsyncSession, product_id: str) -> List[RowMapping]:
        return await self.fetch_all(db, SELECT_IMAGES_BY_PRODUCT_QUERY, {"product_id": product_id})

    async def create_many(self, db: AsyncSession, images: List[dict]) -> None:
        """Bulk insert rows shaped as ``{image_id, url, product_id, main}``."""
        if not images:
            return
        await self.execute(db, INSERT_PRODUCT_IMAGES_QUERY, images)
        logger.info("Created images", count=len(images))

    async def delete_by_product_id(self, db: AsyncSession, product_id: str) -> int:
        rowcount = await self.execute(db, DELETE_IMAGES_BY_PRODUCT_QUERY, {"product_id": product_id})
        logger.info("Deleted product images", product_id=product_id, count=rowcount)
        return rowcount

    async def delete_many(self, db: AsyncSession, image_ids: List[str]) -> int:
        rowcount = await self.execute(db, delete_images_statement, {"image_ids": image_ids})
        logger.info("Deleted images", requested=len(image_ids), count=rowcount)
        return rowcount


image_dao = ImageDAO()
