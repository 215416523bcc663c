"""Report operations over the store's relational data.

Each report reads what it needs from a data source, joins records by id and
returns an ordered list of rows. Reports never depend on each other and never
write anything.
"""

from datetime import UTC, datetime, timedelta
from typing import Any

from webstore.core.reporting.aggregation import (
    count_by,
    distinct,
    group_by,
    index_by,
    rank,
    resolve,
    sum_by,
    sum_line_totals,
)
from webstore.core.reporting.data_source import BaseDataSource
from webstore.schemas.reporting import (
    CategoryProductRow,
    CustomerOrderCountRow,
    CustomerRow,
    DiscountedOrderRow,
    OrderItemCountRow,
    OrderReference,
    PendingOrderRow,
    ProductPriceRow,
    ProductSalesRow,
    RecentOrderRow,
    TopCustomerRow,
)

PENDING_STATUS = "Pending"
RECENT_ORDERS_DAYS = 30
TOP_CUSTOMERS_LIMIT = 3
FEATURED_CATEGORY = "Electronics"
PRODUCT_NAME_SEPARATOR = ", "


def full_name(customer: Any) -> str:
    return f"{customer.first_name} {customer.last_name}"


def _by_id(records: list[Any]) -> dict[Any, Any]:
    return index_by(records, lambda record: record.id)


def _customer_of(order: Any, customers: dict[Any, Any]) -> Any:
    return resolve(customers, order.customer_id, "Customer", f"Order {order.id}")


def _as_utc(moment: datetime) -> datetime:
    """Normalize to naive UTC. Naive values are taken to already be UTC."""
    if moment.tzinfo is not None:
        moment = moment.astimezone(UTC).replace(tzinfo=None)
    return moment


async def list_customers(source: BaseDataSource) -> list[CustomerRow]:
    customers = await source.get_customers()
    return [CustomerRow(full_name=full_name(c), email=c.email) for c in customers]


async def orders_with_item_count(source: BaseDataSource) -> list[OrderItemCountRow]:
    """List every order with its customer and the number of units ordered."""
    orders = await source.get_orders()
    customers = _by_id(await source.get_customers())
    quantities = sum_by(
        await source.get_order_items(),
        lambda item: item.order_id,
        lambda item: item.quantity,
    )

    return [
        OrderItemCountRow(
            order_id=order.id,
            customer_name=full_name(_customer_of(order, customers)),
            status=order.order_status,
            total_items=quantities.get(order.id, 0),
        )
        for order in orders
    ]


async def products_by_price(source: BaseDataSource) -> list[ProductPriceRow]:
    products = rank(await source.get_products(), lambda p: p.price)
    return [
        ProductPriceRow(product_id=p.id, product_name=p.name, price=p.price)
        for p in products
    ]


async def pending_orders_with_total(
    source: BaseDataSource, status: str = PENDING_STATUS
) -> list[PendingOrderRow]:
    """List orders with the given status and the amount each one is worth.

    Args:
        source: Data source
        status: Status label, matched exactly (case-sensitive)

    Returns:
        One row per matching order with total = sum(unit_price * quantity - discount)
    """
    orders = await source.get_orders(status=status)
    customers = _by_id(await source.get_customers())
    items_by_order = group_by(await source.get_order_items(), lambda i: i.order_id)

    rows = []
    for order in orders:
        # Guard against sources that ignore the status push-down
        if order.order_status != status:
            continue
        rows.append(
            PendingOrderRow(
                order_id=order.id,
                customer_name=full_name(_customer_of(order, customers)),
                order_date=order.order_date,
                total=sum_line_totals(items_by_order.get(order.id, [])),
            )
        )
    return rows


async def order_count_per_customer(
    source: BaseDataSource,
) -> list[CustomerOrderCountRow]:
    """Count orders per customer; customers without orders are left out."""
    orders = await source.get_orders()
    customers = _by_id(await source.get_customers())
    counts = count_by(orders, lambda o: o.customer_id)

    rows = []
    for customer_id, count in counts.items():
        customer = resolve(customers, customer_id, "Customer", "Order")
        rows.append(
            CustomerOrderCountRow(
                customer_id=customer_id,
                customer_name=full_name(customer),
                order_count=count,
            )
        )
    return rows


async def top_customers_by_order_value(
    source: BaseDataSource, limit: int = TOP_CUSTOMERS_LIMIT
) -> list[TopCustomerRow]:
    """Rank customers by the summed value of all their orders.

    Args:
        source: Data source
        limit: Number of customers to keep

    Returns:
        At most ``limit`` rows, highest total first; ties keep first-order order
    """
    orders = await source.get_orders()
    customers = _by_id(await source.get_customers())
    items_by_order = group_by(await source.get_order_items(), lambda i: i.order_id)

    totals = {}
    for customer_id, customer_orders in group_by(orders, lambda o: o.customer_id).items():
        items = [i for o in customer_orders for i in items_by_order.get(o.id, [])]
        totals[customer_id] = sum_line_totals(items)

    ranked = rank(totals.items(), lambda entry: entry[1], limit=limit)
    return [
        TopCustomerRow(
            customer_id=customer_id,
            customer_name=full_name(resolve(customers, customer_id, "Customer", "Order")),
            total_value=total,
        )
        for customer_id, total in ranked
    ]


async def recent_orders(
    source: BaseDataSource, now: datetime, days: int = RECENT_ORDERS_DAYS
) -> list[RecentOrderRow]:
    """List orders placed within ``days`` of ``now`` (boundary included)."""
    cutoff = _as_utc(now) - timedelta(days=days)
    orders = await source.get_orders()
    customers = _by_id(await source.get_customers())

    return [
        RecentOrderRow(
            order_id=order.id,
            order_date=order.order_date,
            customer_name=full_name(_customer_of(order, customers)),
        )
        for order in orders
        if _as_utc(order.order_date) >= cutoff
    ]


async def total_sold_per_product(source: BaseDataSource) -> list[ProductSalesRow]:
    """Sum units sold per product, best sellers first."""
    products = _by_id(await source.get_products())
    sold = sum_by(
        await source.get_order_items(),
        lambda item: item.product_id,
        lambda item: item.quantity,
    )

    return [
        ProductSalesRow(
            product_id=product_id,
            product_name=resolve(products, product_id, "Product", "OrderItem").name,
            total_sold=total,
        )
        for product_id, total in rank(sold.items(), lambda entry: entry[1])
    ]


async def discounted_orders(
    source: BaseDataSource, separator: str = PRODUCT_NAME_SEPARATOR
) -> list[DiscountedOrderRow]:
    """List orders with discounted lines and the products that were discounted."""
    orders = await source.get_orders()
    customers = _by_id(await source.get_customers())
    products = _by_id(await source.get_products())
    discounted = group_by(
        (i for i in await source.get_order_items() if i.discount > 0),
        lambda i: i.order_id,
    )

    rows = []
    for order in orders:
        items = discounted.get(order.id)
        if not items:
            continue
        names = distinct(
            resolve(products, i.product_id, "Product", f"OrderItem {i.id}").name
            for i in items
        )
        rows.append(
            DiscountedOrderRow(
                order_id=order.id,
                customer_name=full_name(_customer_of(order, customers)),
                discounted_products=separator.join(names),
            )
        )
    return rows


async def category_products_report(
    source: BaseDataSource, category_name: str = FEATURED_CATEGORY
) -> list[CategoryProductRow]:
    """Describe every product in a category: its orders and best-stocked store.

    Args:
        source: Data source
        category_name: Category name, matched exactly

    Returns:
        One row per product in the category, in product order. ``orders``
        lists each order containing the product once; ``top_store`` is the
        store with the largest stock (first one on ties), or None.
    """
    category_ids = {
        c.id for c in await source.get_categories() if c.name == category_name
    }
    product_ids = {
        link.product_id
        for link in await source.get_product_categories()
        if link.category_id in category_ids
    }
    if not product_ids:
        return []

    orders = await source.get_orders()
    order_index = _by_id(orders)
    stores = _by_id(await source.get_stores())
    items_by_product = group_by(await source.get_order_items(), lambda i: i.product_id)
    stocks_by_product = group_by(await source.get_stocks(), lambda s: s.product_id)

    rows = []
    for product in await source.get_products():
        if product.id not in product_ids:
            continue
        ordered_in = {
            resolve(order_index, i.order_id, "Order", f"OrderItem {i.id}").id
            for i in items_by_product.get(product.id, [])
        }
        stocks = stocks_by_product.get(product.id, [])
        top_store = None
        if stocks:
            best = max(stocks, key=lambda s: s.quantity_in_stock)
            top_store = resolve(
                stores, best.store_id, "Store", f"Stock of Product {product.id}"
            ).name
        rows.append(
            CategoryProductRow(
                product_id=product.id,
                product_name=product.name,
                top_store=top_store,
                orders=[
                    OrderReference(order_id=o.id, order_date=o.order_date)
                    for o in orders
                    if o.id in ordered_in
                ],
            )
        )
    return rows
