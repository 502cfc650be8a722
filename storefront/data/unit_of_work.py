# storefront/data/unit_of_work.py
from sqlalchemy.orm import Session, sessionmaker

from storefront.data.database import SessionLocal
from storefront.repos.cart_repo import CartRepo
from storefront.repos.order_repo import OrderRepo
from storefront.repos.product_repo import ProductRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class UnitOfWork:
    """
    Transaction scope for one workflow call.

        with UnitOfWork() as uow:
            product = uow.products.get(product_id)
            ...

    Normal exit commits, an exception rolls everything back and is re-raised.
    The session is closed on every exit path.
    """

    session: Session
    products: ProductRepo
    carts: CartRepo
    orders: OrderRepo

    def __init__(self, session_factory: sessionmaker = SessionLocal):
        self.session_factory = session_factory

    def __enter__(self) -> "UnitOfWork":
        self.session = self.session_factory()
        self.products = ProductRepo(self.session)
        self.carts = CartRepo(self.session)
        self.orders = OrderRepo(self.session)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        try:
            if exc_type is None:
                self.commit()
            else:
                logger.debug(f"Rolling back unit of work: {exc_val!r}")
                self.rollback()
        finally:
            self.session.close()

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()
