from typing import List
from sqlalchemy.engine import RowMapping
from sqlalchemy.ext.asyncio import AsyncSession
from catalog_api.dao.base_dao import BaseDAO
from catalog_api.dao.queries import (
    SELECT_ALL_COMMENTS_QUERY,
    SELECT_COMMENTS_BY_PRODUCT_QUERY,
    DELETE_COMMENTS_BY_PRODUCT_QUERY,
)
import structlog

logger = structlog.get_logger()


class CommentDAO(BaseDAO):
    def __init__(self):
        super().__init__("comments")

    async def get_all(self, db: AsyncSession) -> List[RowMapping]:
        return await self.fetch_all(db, SELECT_ALL_COMMENTS_QUERY)

    async def get_by_product_id(self, db: AsyncSession, product_id: str) -> List[RowMapping]:
        return await self.fetch_all(db, SELECT_COMMENTS_BY_PRODUCT_QUERY, {"product_id": product_id})

    async def delete_by_product_id(self, db: AsyncSession, product_id: str) -> int:
        rowcount = await self.execute(db, DELETE_COMMENTS_BY_PRODUCT_QUERY, {"product_id": product_id})
        logger.info("Deleted product comments", product_id=product_id, count=rowcount)
        return rowcount


comment_dao = CommentDAO()
