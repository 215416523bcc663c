"""Report definitions for the store's analytical reports."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any

from webstore.core.reporting import reports


@dataclass(frozen=True)
class ReportDefinition:
    """A named report and the operation that computes it.

    ``time_windowed`` reports take the evaluation time as ``now``.
    ``parameters`` maps operation keyword arguments to the settings field
    that supplies them.
    """

    report_id: str
    title: str
    description: str
    operation: Callable[..., Awaitable[list[Any]]]
    time_windowed: bool = False
    parameters: tuple[tuple[str, str], ...] = ()


LIST_CUSTOMERS_REPORT = ReportDefinition(
    report_id="customers",
    title="List All Customers",
    description="Every customer with full name and email",
    operation=reports.list_customers,
)

ORDERS_ITEM_COUNT_REPORT = ReportDefinition(
    report_id="orders-item-count",
    title="List Orders With Item Count",
    description="Every order with its customer, status and total units ordered",
    operation=reports.orders_with_item_count,
)

PRODUCTS_BY_PRICE_REPORT = ReportDefinition(
    report_id="products-by-price",
    title="List Products By Descending Price",
    description="All products, most expensive first",
    operation=reports.products_by_price,
)

PENDING_ORDERS_REPORT = ReportDefinition(
    report_id="pending-orders",
    title="List Pending Orders With Total Price",
    description="Pending orders with customer, date and order total",
    operation=reports.pending_orders_with_total,
    parameters=(("status", "PENDING_ORDER_STATUS"),),
)

ORDERS_PER_CUSTOMER_REPORT = ReportDefinition(
    report_id="orders-per-customer",
    title="Order Count Per Customer",
    description="Number of orders placed by each customer with at least one order",
    operation=reports.order_count_per_customer,
)

TOP_CUSTOMERS_REPORT = ReportDefinition(
    report_id="top-customers",
    title="Top 3 Customers By Order Value",
    description="Customers with the highest summed order value",
    operation=reports.top_customers_by_order_value,
    parameters=(("limit", "TOP_CUSTOMERS_LIMIT"),),
)

RECENT_ORDERS_REPORT = ReportDefinition(
    report_id="recent-orders",
    title="Recent Orders",
    description="Orders placed in the last 30 days",
    operation=reports.recent_orders,
    time_windowed=True,
    parameters=(("days", "RECENT_ORDERS_DAYS"),),
)

SALES_PER_PRODUCT_REPORT = ReportDefinition(
    report_id="sales-per-product",
    title="Total Sold Per Product",
    description="Units sold per product, best sellers first",
    operation=reports.total_sold_per_product,
)

DISCOUNTED_ORDERS_REPORT = ReportDefinition(
    report_id="discounted-orders",
    title="Discounted Orders",
    description="Orders with at least one discounted line and the discounted products",
    operation=reports.discounted_orders,
    parameters=(("separator", "DISCOUNTED_PRODUCTS_SEPARATOR"),),
)

CATEGORY_PRODUCTS_REPORT = ReportDefinition(
    report_id="electronics-products",
    title="Electronics Products With Orders And Top Store",
    description="Products in the featured category, their orders and best-stocked store",
    operation=reports.category_products_report,
    parameters=(("category_name", "FEATURED_CATEGORY_NAME"),),
)

# Registry of all report definitions, in presentation order
REPORT_DEFINITIONS: dict[str, ReportDefinition] = {
    definition.report_id: definition
    for definition in (
        LIST_CUSTOMERS_REPORT,
        ORDERS_ITEM_COUNT_REPORT,
        PRODUCTS_BY_PRICE_REPORT,
        PENDING_ORDERS_REPORT,
        ORDERS_PER_CUSTOMER_REPORT,
        TOP_CUSTOMERS_REPORT,
        RECENT_ORDERS_REPORT,
        SALES_PER_PRODUCT_REPORT,
        DISCOUNTED_ORDERS_REPORT,
        CATEGORY_PRODUCTS_REPORT,
    )
}


def get_report_definitions() -> dict[str, ReportDefinition]:
    """Get all report definitions.

    Returns:
        Dictionary mapping report IDs to ReportDefinition objects
    """
    return REPORT_DEFINITIONS


def get_report_definition(report_id: str) -> ReportDefinition | None:
    """Get a specific report definition by ID.

    Args:
        report_id: Report definition ID

    Returns:
        ReportDefinition if found, None otherwise
    """
    return REPORT_DEFINITIONS.get(report_id)
