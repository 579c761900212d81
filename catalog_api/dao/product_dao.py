from typing import List, Optional
from sqlalchemy.engine import RowMapping
from sqlalchemy.ext.asyncio import AsyncSession
from catalog_api.dao.base_dao import BaseDAO
from catalog_api.dao.filters import build_products_filter_query
from catalog_api.dao.queries import (
    SELECT_ALL_PRODUCTS_QUERY,
    SELECT_PRODUCT_BY_ID_QUERY,
    INSERT_PRODUCT_QUERY,
    DELETE_PRODUCT_QUERY,
)
from catalog_api.schemas.product_schemas import ProductSearchFilter
import structlog

logger = structlog.get_logger()


class ProductDAO(BaseDAO):
    def __init__(self):
        super().__init__("products")

    async def get_all(self, db: AsyncSession) -> List[RowMapping]:
        return await self.fetch_all(db, SELECT_ALL_PRODUCTS_QUERY)

    async def get_by_id(self, db: AsyncSession, product_id: str) -> Optional[RowMapping]:
        return await self.fetch_one(db, SELECT_PRODUCT_BY_ID_QUERY, {"product_id": product_id})

    async def search(self, db: AsyncSession, search_filter: ProductSearchFilter) -> List[RowMapping]:
        query = build_products_filter_query(search_filter)
        logger.debug("Searching products", sql=query.sql, params=query.params)
        return await self.fetch_all(db, query.sql, query.params)

    async def create(self, db: AsyncSession, *, product_id: str, title: Optional[str],
                     description: Optional[str], price: Optional[float]) -> None:
        await self.execute(
            db,
            INSERT_PRODUCT_QUERY,
            {"product_id": product_id, "title": title, "description": description, "price": price},
        )
        logger.info("Created product", product_id=product_id)

    async def delete(self, db: AsyncSession, product_id: str) -> int:
        rowcount = await self.execute(db, DELETE_PRODUCT_QUERY, {"product_id": product_id})
        logger.info("Deleted product", product_id=product_id)
        return rowcount


product_dao = ProductDAO()
