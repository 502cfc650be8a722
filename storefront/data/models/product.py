# storefront/data/models/product.py
import uuid

from sqlalchemy import CheckConstraint, Column, Integer, Numeric, String, Uuid

from storefront.data.database import Base


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)

    price = Column(Numeric(12, 2), nullable=False)
    stock = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
        CheckConstraint("stock >= 0", name="ck_products_stock_non_negative"),
    )

    def __repr__(self) -> str:
        return f"ProductModel(id={self.id}, name={self.name!r}, price={self.price}, stock={self.stock})"
