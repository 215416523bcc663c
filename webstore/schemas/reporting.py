"""Reporting schemas: result rows for each report and API envelopes."""

from datetime import datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ReportRow(BaseModel):
    """Base class for report result rows (immutable)."""

    model_config = ConfigDict(frozen=True)


class CustomerRow(ReportRow):
    full_name: str
    email: str


class OrderItemCountRow(ReportRow):
    order_id: int
    customer_name: str
    status: str
    total_items: int


class ProductPriceRow(ReportRow):
    product_id: int
    product_name: str
    price: Decimal


class PendingOrderRow(ReportRow):
    order_id: int
    customer_name: str
    order_date: datetime
    total: Decimal


class CustomerOrderCountRow(ReportRow):
    customer_id: int
    customer_name: str
    order_count: int


class TopCustomerRow(ReportRow):
    customer_id: int
    customer_name: str
    total_value: Decimal


class RecentOrderRow(ReportRow):
    order_id: int
    order_date: datetime
    customer_name: str


class ProductSalesRow(ReportRow):
    product_id: int
    product_name: str
    total_sold: int


class DiscountedOrderRow(ReportRow):
    order_id: int
    customer_name: str
    discounted_products: str = Field(
        ..., description="Distinct names of the discounted items, delimited"
    )


class OrderReference(ReportRow):
    order_id: int
    order_date: datetime


class CategoryProductRow(ReportRow):
    product_id: int
    product_name: str
    top_store: str | None = Field(
        None, description="Store holding the most stock, None without stock"
    )
    orders: list[OrderReference] = Field(default_factory=list)


class ReportSummaryResponse(BaseModel):
    """Schema describing an available report."""

    model_config = ConfigDict(from_attributes=True)

    report_id: str
    title: str
    description: str
    time_windowed: bool


class ReportResultResponse(BaseModel):
    """Schema for an executed report."""

    report_id: str
    title: str
    generated_at: datetime
    rows: list[dict[str, Any]] = Field(..., description="Ordered result rows")
