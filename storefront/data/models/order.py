import enum
import uuid

from sqlalchemy import Column, Enum, ForeignKey, Table, Uuid
from sqlalchemy.orm import relationship

from storefront.data.database import Base


class OrderStatus(str, enum.Enum):
    OPEN = "OPEN"
    CLOSED = "CLOSED"


order_products = Table(
    "orders_products",
    Base.metadata,
    Column("order_id", Uuid, ForeignKey("orders.id", ondelete="CASCADE"), primary_key=True),
    # no cascade on products: a product referenced by an order cannot be deleted
    Column("product_id", Uuid, ForeignKey("products.id"), primary_key=True),
)


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)

    status = Column(
        Enum(OrderStatus, name="order_status", native_enum=False, length=16),
        nullable=False,
        default=OrderStatus.OPEN,
    )  # OPEN, CLOSED

    products = relationship(
        "ProductModel",
        secondary=order_products,
        collection_class=set,
        lazy="selectin",
    )
