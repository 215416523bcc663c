"""WebStore relational models."""

from webstore.models.customer import Customer
from webstore.models.order import Order, OrderItem
from webstore.models.product import Category, Product, product_categories
from webstore.models.store import Stock, Store

__all__ = [
    "Category",
    "Customer",
    "Order",
    "OrderItem",
    "Product",
    "Stock",
    "Store",
    "product_categories",
]
