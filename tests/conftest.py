"""Pytest fixtures: a fresh SQLite database per test plus small arrange helpers."""

from decimal import Decimal

import pytest

from storefront.data.database import create_db_engine, init_db, make_session_factory
from storefront.data.models import CartModel, OrderModel, OrderStatus, ProductModel
from storefront.data.unit_of_work import UnitOfWork


@pytest.fixture
def engine(tmp_path):
    engine = create_db_engine(f"sqlite:///{tmp_path / 'storefront.db'}", echo=False)
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def new_uow(session_factory):
    """Each call opens a separate transaction, used to arrange and inspect state."""

    def factory() -> UnitOfWork:
        return UnitOfWork(session_factory)

    return factory


@pytest.fixture
def make_product(new_uow):
    def factory(name: str, price: str, stock: int) -> ProductModel:
        with new_uow() as uow:
            return uow.products.save(ProductModel(name=name, price=Decimal(price), stock=stock))

    return factory


@pytest.fixture
def make_cart(new_uow):
    def factory(*products: ProductModel) -> CartModel:
        with new_uow() as uow:
            cart = CartModel(products={uow.products.get(p.id) for p in products})
            return uow.carts.save(cart)

    return factory


@pytest.fixture
def make_order(new_uow):
    def factory(status: OrderStatus, *products: ProductModel) -> OrderModel:
        with new_uow() as uow:
            order = OrderModel(status=status, products={uow.products.get(p.id) for p in products})
            return uow.orders.save(order)

    return factory


@pytest.fixture
def laptop(make_product) -> ProductModel:
    return make_product("Laptop", "1200.00", 5)


@pytest.fixture
def mouse(make_product) -> ProductModel:
    return make_product("Mouse", "25.50", 10)


@pytest.fixture
def stock_of(new_uow):
    def read(product: ProductModel) -> int:
        with new_uow() as uow:
            return uow.products.get(product.id).stock

    return read
