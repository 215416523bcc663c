"""SQLAlchemy data source for reporting."""

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Query, Session

from webstore.core.reporting.data_source import BaseDataSource
from webstore.core.reporting.exceptions import DataSourceUnavailableException
from webstore.models import (
    Category,
    Customer,
    Order,
    OrderItem,
    Product,
    Stock,
    Store,
    product_categories,
)

logger = logging.getLogger(__name__)


class SQLAlchemyDataSource(BaseDataSource):
    """Data source reading the store's tables through an ORM session."""

    def __init__(self, db: Session):
        """Initialize data source.

        Args:
            db: Database session
        """
        self.db = db

    def _fetch(self, collection: str, query: Query) -> list[Any]:
        try:
            records = query.all()
        except SQLAlchemyError as e:
            logger.error(f"Failed to read {collection}: {e}")
            raise DataSourceUnavailableException(collection, str(e)) from e
        logger.debug(f"Fetched {len(records)} {collection}")
        return records

    async def get_customers(self) -> list[Customer]:
        return self._fetch("customers", self.db.query(Customer).order_by(Customer.id))

    async def get_orders(self, status: str | None = None) -> list[Order]:
        query = self.db.query(Order)
        if status is not None:
            query = query.filter(Order.order_status == status)
        return self._fetch("orders", query.order_by(Order.id))

    async def get_order_items(self) -> list[OrderItem]:
        return self._fetch(
            "order_items", self.db.query(OrderItem).order_by(OrderItem.id)
        )

    async def get_products(self) -> list[Product]:
        return self._fetch("products", self.db.query(Product).order_by(Product.id))

    async def get_categories(self) -> list[Category]:
        return self._fetch(
            "categories", self.db.query(Category).order_by(Category.id)
        )

    async def get_product_categories(self) -> list[Any]:
        """Get association rows exposing product_id and category_id."""
        statement = select(
            product_categories.c.product_id, product_categories.c.category_id
        ).order_by(product_categories.c.product_id, product_categories.c.category_id)
        try:
            return list(self.db.execute(statement).all())
        except SQLAlchemyError as e:
            logger.error(f"Failed to read product_categories: {e}")
            raise DataSourceUnavailableException("product_categories", str(e)) from e

    async def get_stores(self) -> list[Store]:
        return self._fetch("stores", self.db.query(Store).order_by(Store.id))

    async def get_stocks(self) -> list[Stock]:
        return self._fetch(
            "stocks", self.db.query(Stock).order_by(Stock.product_id, Stock.store_id)
        )
