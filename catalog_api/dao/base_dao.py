from typing import Any, Dict, List, Optional, Sequence, Union
from sqlalchemy import text
from sqlalchemy.engine import RowMapping
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import TextClause
from catalog_api.core.exceptions import StoreError
import structlog

logger = structlog.get_logger()

Statement = Union[str, TextClause]
Params = Union[Dict[str, Any], Sequence[Dict[str, Any]], None]


def _as_clause(statement: Statement) -> TextClause:
    return statement if isinstance(statement, TextClause) else text(statement)


class BaseDAO:
    """Runs raw parameterized statements against one table.

    Writes are committed one statement at a time; there is no transaction
    spanning several DAO calls.
    """

    def __init__(self, table: str):
        self.table = table

    async def fetch_all(self, db: AsyncSession, statement: Statement, params: Params = None) -> List[RowMapping]:
        try:
            result = await db.execute(_as_clause(statement), params or {})
            return list(result.mappings().all())
        except SQLAlchemyError as e:
            logger.error(f"Error querying {self.table}", error=str(e))
            raise StoreError(f"select from {self.table}", e) from e

    async def fetch_one(self, db: AsyncSession, statement: Statement, params: Params = None) -> Optional[RowMapping]:
        rows = await self.fetch_all(db, statement, params)
        return rows[0] if rows else None

    async def execute(self, db: AsyncSession, statement: Statement, params: Params = None) -> int:
        """Execute a write, commit it and return the number of affected rows."""
        try:
            result = await db.execute(_as_clause(statement), params or {})
            await db.commit()
            return result.rowcount
        except SQLAlchemyError as e:
            await db.rollback()
            logger.error(f"Error writing {self.table}", error=str(e))
            raise StoreError(f"write to {self.table}", e) from e
