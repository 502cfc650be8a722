# storefront/services/cart_service.py
import uuid
from decimal import Decimal

from sqlalchemy.orm import sessionmaker

from storefront.data.database import SessionLocal
from storefront.data.models.cart import CartModel
from storefront.data.models.product import ProductModel
from storefront.data.unit_of_work import UnitOfWork
from storefront.domain.errors import InvalidStateError, NotFoundError
from storefront.domain.schemas import CartOut, ProductOut
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Use cases of the cart domain.
    command (add_to_cart) changes state inside one unit of work,
    query (get_cart) only reads
    """

    def __init__(self, session_factory: sessionmaker = SessionLocal):
        self.session_factory = session_factory

    #query
    def get_cart(self) -> CartOut | None:
        with UnitOfWork(self.session_factory) as uow:
            cart = uow.carts.find_first_by_id_asc()

            if not cart:
                return None

            products = sorted(cart.products, key=lambda p: p.name)
            total = sum((p.price for p in products), Decimal("0.00"))

            return CartOut(
                cart_id=cart.id,
                products=[ProductOut.model_validate(p) for p in products],
                total=total,
            )

    #command
    def add_to_cart(self, product_id: uuid.UUID) -> ProductModel:
        """
        Use case: put one unit of a product into the current cart.

        - product must exist and have stock left
        - stock goes down by one
        - the cart is created on first use
        Any failure rolls back the stock change together with the cart.
        """
        with UnitOfWork(self.session_factory) as uow:
            product = uow.products.get(product_id)

            if not product:
                raise NotFoundError(f"Product not found with id: {product_id}")

            if product.stock <= 0:
                logger.warning(f"Rejected add to cart, product {product.id} has no stock")
                raise InvalidStateError(f"Product out of stock: {product.name}")

            product.stock -= 1
            product = uow.products.save(product)

            cart = uow.carts.find_first_by_id_asc()

            if not cart:
                cart = uow.carts.save(CartModel(products=set()))
                logger.info(f"Created cart {cart.id}")

            cart.products.add(product)
            uow.carts.save(cart)

            logger.info(
                f"Product {product.id} added to cart {cart.id}, "
                f"stock left: {product.stock}"
            )

            return product
