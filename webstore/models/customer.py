"""Customer model."""

from sqlalchemy import Column, Index, Integer, String
from sqlalchemy.orm import relationship

from webstore.core.db.session import Base


class Customer(Base):
    """Customer model for store buyers."""

    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), nullable=False, unique=True)

    # Relationships
    orders = relationship("Order", back_populates="customer")

    __table_args__ = (Index("idx_customers_last_name", "last_name"),)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        return f"<Customer(id={self.id}, name={self.full_name}, email={self.email})>"
