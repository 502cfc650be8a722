# storefront/services/order_service.py
import uuid
from decimal import Decimal
from typing import Iterable, List

from sqlalchemy.orm import sessionmaker

from storefront.data.database import SessionLocal
from storefront.data.models.order import OrderModel, OrderStatus
from storefront.data.models.product import ProductModel
from storefront.data.unit_of_work import UnitOfWork
from storefront.domain.errors import InvalidStateError, NotFoundError
from storefront.domain.schemas import OrderOut, ProductOut
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def total_price(products: Iterable[ProductModel]) -> Decimal:
    return sum((p.price for p in products), Decimal("0.00"))


class OrderService:
    """
    Service of the order domain.
    checkout turns the current cart into an OPEN order,
    cancel closes an order and gives its stock back.
    """

    def __init__(self, session_factory: sessionmaker = SessionLocal):
        self.session_factory = session_factory

    def checkout(self) -> Decimal:
        """
        Use case: checkout of the current cart.

        1. The cart has to exist and hold products
        2. Creates an OPEN order from a copy of the cart products
        3. Calculates the total
        4. Empties the cart
        """
        with UnitOfWork(self.session_factory) as uow:
            cart = uow.carts.find_first_by_id_asc()

            if not cart:
                raise InvalidStateError("Cart not found")

            if not cart.products:
                logger.warning(f"Rejected checkout of empty cart {cart.id}")
                raise InvalidStateError("Cannot checkout with empty cart")

            order = OrderModel(
                products=set(cart.products),
                status=OrderStatus.OPEN,
            )

            total = total_price(order.products)

            cart.products.clear()
            uow.carts.save(cart)

            order = uow.orders.save(order)

            logger.info(
                f"Order {order.id} created from cart {cart.id} "
                f"with {len(order.products)} products, total {total}"
            )

            return total

    def cancel(self) -> None:
        """
        Use case: cancel an order and restore one unit of stock per product.

        The order picked is the first one storage returns, no ordering is
        applied and the status is only checked afterwards.
        """
        with UnitOfWork(self.session_factory) as uow:
            orders = uow.orders.find_all()
            order = orders[0] if orders else None

            if order is None:
                raise InvalidStateError("No order found to cancel")

            if order.status != OrderStatus.OPEN:
                logger.warning(f"Rejected cancel of order {order.id} in status {order.status.value}")
                raise InvalidStateError(f"Cannot cancel order with status: {order.status.value}")

            for product in order.products:
                db_product = uow.products.get(product.id)

                if not db_product:
                    raise InvalidStateError(f"Product not found during cancel: {product.id}")

                # no upper bound here, unlike the decrement in add_to_cart
                db_product.stock += 1
                uow.products.save(db_product)

            order.status = OrderStatus.CLOSED
            uow.orders.save(order)

            logger.info(f"Order {order.id} cancelled, stock restored for {len(order.products)} products")

    def get_order(self, order_id: uuid.UUID) -> OrderOut:
        with UnitOfWork(self.session_factory) as uow:
            order = uow.orders.get(order_id)

            if not order:
                raise NotFoundError(f"Order not found with id: {order_id}")

            return self._to_out(order)

    def list_orders(self) -> List[OrderOut]:
        with UnitOfWork(self.session_factory) as uow:
            return [self._to_out(order) for order in uow.orders.find_all()]

    @staticmethod
    def _to_out(order: OrderModel) -> OrderOut:
        products = sorted(order.products, key=lambda p: p.name)
        return OrderOut(
            id=order.id,
            status=order.status.value,
            products=[ProductOut.model_validate(p) for p in products],
            total=total_price(products),
        )
