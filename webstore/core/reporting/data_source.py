"""Base data source for reporting infrastructure."""

from abc import ABC, abstractmethod
from typing import Any


class BaseDataSource(ABC):
    """Abstract read-only access to the store's entity collections.

    Every method returns the full collection in source order (the order the
    store keeps its records in). Implementations may push filters down, but
    they must never mutate anything, and records must stay consistent for the
    duration of a single report.

    Records only need the attributes the reports read (ids, foreign-key ids
    and scalar fields), so ORM instances and plain objects work equally well.
    """

    @abstractmethod
    async def get_customers(self) -> list[Any]:
        """Get all customers (id, first_name, last_name, email)."""
        pass

    @abstractmethod
    async def get_orders(self, status: str | None = None) -> list[Any]:
        """Get orders (id, customer_id, order_date, order_status).

        Args:
            status: Only return orders whose status equals this label exactly.
        """
        pass

    @abstractmethod
    async def get_order_items(self) -> list[Any]:
        """Get all order lines (order_id, product_id, quantity, unit_price, discount)."""
        pass

    @abstractmethod
    async def get_products(self) -> list[Any]:
        """Get all products (id, name, price)."""
        pass

    @abstractmethod
    async def get_categories(self) -> list[Any]:
        """Get all categories (id, name)."""
        pass

    @abstractmethod
    async def get_product_categories(self) -> list[Any]:
        """Get product/category links (product_id, category_id)."""
        pass

    @abstractmethod
    async def get_stores(self) -> list[Any]:
        """Get all stores (id, name)."""
        pass

    @abstractmethod
    async def get_stocks(self) -> list[Any]:
        """Get all stock levels (product_id, store_id, quantity_in_stock)."""
        pass
