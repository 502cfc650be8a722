#storefront/data/models/cart.py
import uuid

from sqlalchemy import Column, ForeignKey, String, Table, Uuid
from sqlalchemy.orm import relationship

from storefront.data.database import Base
from storefront.utils.settings import CART_SLOT

cart_products = Table(
    "shopping_carts_products",
    Base.metadata,
    Column("cart_id", Uuid, ForeignKey("shopping_carts.id", ondelete="CASCADE"), primary_key=True),
    Column("product_id", Uuid, ForeignKey("products.id", ondelete="CASCADE"), primary_key=True),
)


class CartModel(Base):
    __tablename__ = "shopping_carts"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)

    # a second cart row violates the unique slot, the current cart stays single
    slot = Column(String(32), nullable=False, unique=True, default=CART_SLOT)

    # set semantics: a product is either in the cart or not, there is no quantity
    products = relationship(
        "ProductModel",
        secondary=cart_products,
        collection_class=set,
    )
