from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from webstore.core.db.session import Base


class Store(Base):
    __tablename__ = "stores"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False, unique=True)

    stocks = relationship(
        "Stock", back_populates="store", cascade="all, delete-orphan"
    )

    def __repr__(self) -> str:
        return f"<Store(id={self.id}, name={self.name})>"


class Stock(Base):
    __tablename__ = "stocks"

    product_id = Column(
        Integer,
        ForeignKey("products.id", ondelete="CASCADE"),
        primary_key=True,
    )
    store_id = Column(
        Integer,
        ForeignKey("stores.id", ondelete="CASCADE"),
        primary_key=True,
    )
    quantity_in_stock = Column(Integer, nullable=False, default=0)

    product = relationship("Product", back_populates="stocks")
    store = relationship("Store", back_populates="stocks")

    __table_args__ = (
        CheckConstraint(
            "quantity_in_stock >= 0", name="check_stocks_quantity_non_negative"
        ),
    )

    def __repr__(self) -> str:
        return (
            f"<Stock(product_id={self.product_id}, store_id={self.store_id}, "
            f"quantity={self.quantity_in_stock})>"
        )
