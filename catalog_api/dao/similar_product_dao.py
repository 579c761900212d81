from typing import List
from sqlalchemy import bindparam, text
from sqlalchemy.engine import RowMapping
from sqlalchemy.ext.asyncio import AsyncSession
from catalog_api.dao.base_dao import BaseDAO
from catalog_api.dao.queries import (
    SELECT_SIMILAR_PRODUCTS_QUERY,
    INSERT_SIMILAR_PRODUCT_QUERY,
    DELETE_SIMILAR_PRODUCTS_QUERY,
    SELECT_NOT_SIMILAR_PRODUCTS_QUERY,
)
import structlog

logger = structlog.get_logger()

delete_similar_statement = text(DELETE_SIMILAR_PRODUCTS_QUERY).bindparams(
    bindparam("similar_product_ids", expanding=True)
)


class SimilarProductDAO(BaseDAO):
    def __init__(self):
        super().__init__("product_similar")

    async def get_similar(self, db: AsyncSession, product_id: str) -> List[RowMapping]:
        return await self.fetch_all(db, SELECT_SIMILAR_PRODUCTS_QUERY, {"product_id": product_id})

    async def get_not_similar(self, db: AsyncSession, product_id: str) -> List[RowMapping]:
        return await self.fetch_all(db, SELECT_NOT_SIMILAR_PRODUCTS_QUERY, {"product_id": product_id})

    async def add(self, db: AsyncSession, product_id: str, similar_product_ids: List[str]) -> None:
        """Insert edges, silently skipping the ones that already exist."""
        if not similar_product_ids:
            return
        edges = [
            {"product_id": product_id, "similar_product_id": similar_id}
            for similar_id in similar_product_ids
        ]
        await self.execute(db, INSERT_SIMILAR_PRODUCT_QUERY, edges)
        logger.info("Added similar products", product_id=product_id, count=len(edges))

    async def remove(self, db: AsyncSession, product_id: str, similar_product_ids: List[str]) -> int:
        if not similar_product_ids:
            return 0
        rowcount = await self.execute(
            db,
            delete_similar_statement,
            {"product_id": product_id, "similar_product_ids": similar_product_ids},
        )
        logger.info("Removed similar products", product_id=product_id, count=rowcount)
        return rowcount


similar_product_dao = SimilarProductDAO()
