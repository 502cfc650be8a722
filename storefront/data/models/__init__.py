# import all models so SQLAlchemy registers them in Base.metadata

from storefront.data.models.product import ProductModel
from storefront.data.models.cart import CartModel, cart_products
from storefront.data.models.order import OrderModel, OrderStatus, order_products

__all__ = [
    "ProductModel",
    "CartModel",
    "OrderModel",
    "OrderStatus",
    "cart_products",
    "order_products",
]
