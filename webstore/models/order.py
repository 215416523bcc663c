"""Order and order line models."""

from sqlalchemy import (
    CheckConstraint,
    Column,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    Numeric,
    String,
)
from sqlalchemy.orm import relationship

from webstore.core.db.session import Base


class Order(Base):
    """Order placed by a customer."""

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    customer_id = Column(
        Integer,
        ForeignKey("customers.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    order_date = Column(DateTime, nullable=False)
    # Free-form label, e.g. "Pending", "Shipped"
    order_status = Column(String(50), nullable=False)

    # Relationships
    customer = relationship("Customer", back_populates="orders")
    items = relationship(
        "OrderItem", back_populates="order", cascade="all, delete-orphan"
    )

    __table_args__ = (
        Index("idx_orders_status", "order_status"),
        Index("idx_orders_date", "order_date"),
    )

    def __repr__(self) -> str:
        return (
            f"<Order(id={self.id}, customer_id={self.customer_id}, "
            f"status={self.order_status}, date={self.order_date})>"
        )


class OrderItem(Base):
    """Order line: a product, a quantity and the price it was sold at."""

    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(
        Integer,
        ForeignKey("orders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    product_id = Column(
        Integer,
        ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    quantity = Column(Integer, nullable=False, default=0)
    unit_price = Column(Numeric(10, 2), nullable=False)
    # Absolute amount, not a percentage
    discount = Column(Numeric(10, 2), nullable=False, default=0)

    # Relationships
    order = relationship("Order", back_populates="items")
    product = relationship("Product", back_populates="order_items")

    __table_args__ = (
        CheckConstraint("quantity >= 0", name="check_order_items_quantity_non_negative"),
        CheckConstraint("unit_price >= 0", name="check_order_items_price_non_negative"),
        CheckConstraint("discount >= 0", name="check_order_items_discount_non_negative"),
    )

    def __repr__(self) -> str:
        return (
            f"<OrderItem(id={self.id}, order_id={self.order_id}, "
            f"product_id={self.product_id}, quantity={self.quantity})>"
        )
