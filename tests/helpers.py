"""Helper functions for tests."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy.orm import Session

from webstore.models import (
    Category,
    Customer,
    Order,
    OrderItem,
    Product,
    Stock,
    Store,
)


def add_customer(db: Session, id: int, first_name: str, last_name: str) -> Customer:
    customer = Customer(
        id=id,
        first_name=first_name,
        last_name=last_name,
        email=f"{first_name.lower()}.{last_name.lower()}@example.com",
    )
    db.add(customer)
    return customer


def add_product(
    db: Session,
    id: int,
    name: str,
    price: str,
    categories: list[Category] | None = None,
) -> Product:
    product = Product(id=id, name=name, price=Decimal(price))
    product.categories.extend(categories or [])
    db.add(product)
    return product


def add_order(
    db: Session, id: int, customer_id: int, order_date: datetime, status: str
) -> Order:
    order = Order(
        id=id, customer_id=customer_id, order_date=order_date, order_status=status
    )
    db.add(order)
    return order


def add_item(
    db: Session,
    id: int,
    order_id: int,
    product_id: int,
    quantity: int,
    unit_price: str,
    discount: str = "0.00",
) -> OrderItem:
    item = OrderItem(
        id=id,
        order_id=order_id,
        product_id=product_id,
        quantity=quantity,
        unit_price=Decimal(unit_price),
        discount=Decimal(discount),
    )
    db.add(item)
    return item


def seed_store_dataset(db: Session) -> dict:
    """
    Seed the reference dataset.

    Customers: Alice (orders 1, 3), Bob (order 2), Carol (orders 4, 5) and
    Dan (no orders). With evaluation time 2024-03-01 12:00 UTC, order 2 sits
    exactly on the 30-day boundary and order 3 one day outside it.

    Order totals: 1 -> 1125.00, 2 -> 435.00, 3 -> 50.00, 4 -> 0 (no items),
    5 -> 1210.00.

    Returns:
        Dictionary with the created customers, products, stores and orders.
    """
    electronics = Category(id=1, name="Electronics")
    audio = Category(id=2, name="Audio")
    kitchen = Category(id=3, name="Kitchen")
    db.add_all([electronics, audio, kitchen])

    customers = [
        add_customer(db, 1, "Alice", "Smith"),
        add_customer(db, 2, "Bob", "Jones"),
        add_customer(db, 3, "Carol", "White"),
        add_customer(db, 4, "Dan", "Brown"),
    ]

    products = [
        add_product(db, 1, "Laptop", "1200.00", [electronics]),
        add_product(db, 2, "Headphones", "150.00", [electronics, audio]),
        add_product(db, 3, "Coffee Mug", "12.50", [kitchen]),
        add_product(db, 4, "Phone", "800.00", [electronics]),
        add_product(db, 5, "Notebook", "150.00"),
    ]

    stores = [
        Store(id=1, name="Downtown"),
        Store(id=2, name="Airport"),
        Store(id=3, name="Mall"),
    ]
    db.add_all(stores)
    db.add_all(
        [
            Stock(product_id=1, store_id=1, quantity_in_stock=5),
            Stock(product_id=1, store_id=2, quantity_in_stock=12),
            Stock(product_id=1, store_id=3, quantity_in_stock=12),
            Stock(product_id=2, store_id=3, quantity_in_stock=30),
            Stock(product_id=3, store_id=1, quantity_in_stock=100),
        ]
    )

    orders = [
        add_order(db, 1, 1, datetime(2024, 2, 20, 9, 30), "Pending"),
        add_order(db, 2, 2, datetime(2024, 1, 31, 12, 0), "Shipped"),
        add_order(db, 3, 1, datetime(2024, 1, 30, 12, 0), "Delivered"),
        add_order(db, 4, 3, datetime(2024, 2, 28, 16, 45), "Pending"),
        add_order(db, 5, 3, datetime(2024, 2, 29, 10, 0), "Shipped"),
    ]

    add_item(db, 1, 1, 1, 1, "1200.00", "100.00")
    add_item(db, 2, 1, 3, 2, "12.50")
    add_item(db, 3, 2, 2, 2, "150.00", "10.00")
    add_item(db, 4, 2, 2, 1, "150.00", "5.00")
    add_item(db, 5, 3, 3, 4, "12.50")
    add_item(db, 6, 5, 1, 1, "1200.00")
    add_item(db, 7, 5, 3, 1, "12.50", "2.50")

    db.commit()
    return {
        "customers": customers,
        "products": products,
        "stores": stores,
        "orders": orders,
    }


def seed_two_order_scenario(db: Session) -> None:
    """
    Seed one customer with a pending order and a shipped, discounted order.

    Order A (id 1): Pending, 2024-01-01, P1 qty 1 at 10.00, no discount.
    Order B (id 2): Shipped, P2 qty 3 at 5.00, discount 1.00.
    """
    add_customer(db, 1, "Casey", "One")
    add_product(db, 1, "P1", "10.00")
    add_product(db, 2, "P2", "5.00")
    add_order(db, 1, 1, datetime(2024, 1, 1), "Pending")
    add_order(db, 2, 1, datetime(2024, 1, 5), "Shipped")
    add_item(db, 1, 1, 1, 1, "10.00", "0.00")
    add_item(db, 2, 2, 2, 3, "5.00", "1.00")
    db.commit()
