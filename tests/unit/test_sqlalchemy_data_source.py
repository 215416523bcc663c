"""Unit tests for BaseDataSource and SQLAlchemyDataSource."""

from unittest.mock import Mock

import pytest
from sqlalchemy.exc import OperationalError

from webstore.core.reporting.data_source import BaseDataSource
from webstore.core.reporting.exceptions import DataSourceUnavailableException
from webstore.core.reporting.sources.sqlalchemy_data_source import SQLAlchemyDataSource


def test_base_data_source_is_abstract():
    """Test that BaseDataSource cannot be instantiated directly."""
    with pytest.raises(TypeError):
        BaseDataSource()


@pytest.mark.asyncio
async def test_collections_are_returned_in_primary_key_order(data_source, store_dataset):
    customers = await data_source.get_customers()
    items = await data_source.get_order_items()
    stocks = await data_source.get_stocks()

    assert [c.id for c in customers] == [1, 2, 3, 4]
    assert [i.id for i in items] == [1, 2, 3, 4, 5, 6, 7]
    assert [(s.product_id, s.store_id) for s in stocks] == [
        (1, 1),
        (1, 2),
        (1, 3),
        (2, 3),
        (3, 1),
    ]


@pytest.mark.asyncio
async def test_get_orders_filters_by_status(data_source, store_dataset):
    orders = await data_source.get_orders(status="Shipped")
    assert [o.id for o in orders] == [2, 5]

    all_orders = await data_source.get_orders()
    assert len(all_orders) == 5


@pytest.mark.asyncio
async def test_get_product_categories_links(data_source, store_dataset):
    links = await data_source.get_product_categories()

    assert [(link.product_id, link.category_id) for link in links] == [
        (1, 1),
        (2, 1),
        (2, 2),
        (3, 3),
        (4, 1),
    ]


@pytest.mark.asyncio
async def test_reference_collections(data_source, store_dataset):
    assert [c.name for c in await data_source.get_categories()] == [
        "Electronics",
        "Audio",
        "Kitchen",
    ]
    assert [s.name for s in await data_source.get_stores()] == [
        "Downtown",
        "Airport",
        "Mall",
    ]
    assert len(await data_source.get_products()) == 5


class TestUnavailableDatabase:
    """Errors raised by the database are wrapped for the failing report."""

    def setup_method(self):
        self.db = Mock()
        self.error = OperationalError(
            "SELECT", {}, Exception("could not connect to server")
        )
        self.data_source = SQLAlchemyDataSource(self.db)

    @pytest.mark.asyncio
    async def test_query_error_is_wrapped(self):
        self.db.query.return_value.order_by.return_value.all.side_effect = self.error

        with pytest.raises(DataSourceUnavailableException) as exc_info:
            await self.data_source.get_customers()

        exc = exc_info.value
        assert exc.collection == "customers"
        assert exc.status_code == 503
        assert exc.code == "REPORTING_DATA_SOURCE_UNAVAILABLE"
        assert exc.__cause__ is self.error

    @pytest.mark.asyncio
    async def test_association_read_error_is_wrapped(self):
        self.db.execute.side_effect = self.error

        with pytest.raises(DataSourceUnavailableException) as exc_info:
            await self.data_source.get_product_categories()

        assert exc_info.value.collection == "product_categories"
