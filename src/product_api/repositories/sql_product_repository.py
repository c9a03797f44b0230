"""SQLAlchemy implementation of ProductStore.

Every method borrows one connection from the engine pool for its own
duration. ``engine.begin()`` commits on normal exit, rolls back on error
and always returns the connection to the pool.
"""

from datetime import datetime
from typing import Any

from sqlalchemy import DateTime, Engine, bindparam, text
from sqlalchemy.exc import SQLAlchemyError

from product_api.entities import ProductEntity
from product_api.logging_config import get_logger

from .queries import ProductQueries, queries_for_dialect

logger = get_logger(__name__)


class SqlProductRepository:
    """Relational product repository on top of a SQLAlchemy engine.

    This class satisfies the ProductStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(self, engine: Engine, queries: ProductQueries | None = None) -> None:
        """Initialize the repository.

        Args:
            engine: SQLAlchemy engine (owns the connection pool)
            queries: Statement set. If None, picked from the engine dialect.
        """
        self._engine = engine
        self._queries = queries or queries_for_dialect(engine.dialect.name)

    @classmethod
    def create(cls, engine: Engine) -> "SqlProductRepository":
        """Factory method using the statements for the engine's dialect."""
        return cls(engine=engine)

    @staticmethod
    def _params(product: ProductEntity) -> dict[str, Any]:
        return {
            "ProductName": product.product_name,
            "Description": product.description,
            "Price": product.price,
            "CompanyId": product.company_id,
            "StoreId": product.store_id,
        }

    def list_as_json(self) -> str | None:
        with self._engine.begin() as conn:
            return conn.execute(text(self._queries.list_json)).scalar_one_or_none()

    def insert(self, product: ProductEntity) -> int:
        with self._engine.begin() as conn:
            return int(conn.execute(text(self._queries.insert), self._params(product)).scalar_one())

    def exists(self, product_id: int) -> bool:
        with self._engine.begin() as conn:
            count = conn.execute(text(self._queries.exists), {"ProductID": product_id}).scalar_one()
        return count > 0

    def update(self, product: ProductEntity, modified_at: datetime) -> int:
        statement = text(self._queries.update).bindparams(bindparam("ModifiedDate", type_=DateTime()))
        params = self._params(product) | {"Id": product.id, "ModifiedDate": modified_at}
        with self._engine.begin() as conn:
            return conn.execute(statement, params).rowcount

    def delete(self, product_id: int) -> int:
        with self._engine.begin() as conn:
            return conn.execute(text(self._queries.delete), {"ProductID": product_id}).rowcount

    def health_check(self) -> bool:
        """Check if the database is reachable.

        Returns:
            True if healthy, False otherwise
        """
        try:
            with self._engine.connect() as conn:
                conn.execute(text(self._queries.ping))
            return True
        except SQLAlchemyError:
            logger.warning("database_ping_failed", exc_info=True)
            return False

    @property
    def engine(self) -> Engine:
        """Get the SQLAlchemy engine."""
        return self._engine
