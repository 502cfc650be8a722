"""Tests for adding products to the current cart."""
import uuid
from decimal import Decimal

import pytest

from storefront.domain.errors import InvalidStateError, NotFoundError
from storefront.repos.cart_repo import CartRepo
from storefront.services.cart_service import CartService


@pytest.fixture
def service(session_factory) -> CartService:
    return CartService(session_factory)


def test_add_to_cart_decreases_stock_and_adds_product(service, new_uow, make_product):
    product = make_product("Test Laptop", "1500.00", 10)

    result = service.add_to_cart(product.id)

    assert result.id == product.id
    assert result.stock == 9

    with new_uow() as uow:
        assert uow.products.get(product.id).stock == 9

        cart = uow.carts.find_first_by_id_asc()
        assert cart is not None
        assert {p.id for p in cart.products} == {product.id}


def test_add_multiple_products_to_same_cart(service, new_uow, laptop, mouse):
    service.add_to_cart(laptop.id)
    service.add_to_cart(mouse.id)

    with new_uow() as uow:
        assert len(uow.carts.find_all()) == 1
        cart = uow.carts.find_first_by_id_asc()
        assert len(cart.products) == 2


def test_same_product_twice_is_kept_once(service, new_uow, stock_of, laptop):
    """No quantity in the cart: the second add only costs stock."""
    service.add_to_cart(laptop.id)
    service.add_to_cart(laptop.id)

    assert stock_of(laptop) == 3
    with new_uow() as uow:
        assert len(uow.carts.find_first_by_id_asc().products) == 1


def test_unknown_product_raises_not_found(service, new_uow):
    missing_id = uuid.uuid4()

    with pytest.raises(NotFoundError, match=f"Product not found with id: {missing_id}"):
        service.add_to_cart(missing_id)

    with new_uow() as uow:
        assert uow.carts.find_first_by_id_asc() is None


def test_out_of_stock_leaves_stock_and_creates_no_cart(service, new_uow, stock_of, make_product):
    product = make_product("Keyboard", "79.99", 0)

    with pytest.raises(InvalidStateError, match="Product out of stock: Keyboard"):
        service.add_to_cart(product.id)

    assert stock_of(product) == 0
    with new_uow() as uow:
        assert uow.carts.find_first_by_id_asc() is None


def test_second_add_fails_once_stock_is_gone(service, new_uow, stock_of, make_product):
    product = make_product("Last One", "10.00", 1)

    service.add_to_cart(product.id)
    assert stock_of(product) == 0

    with pytest.raises(InvalidStateError, match="out of stock"):
        service.add_to_cart(product.id)

    # still 0, never negative
    assert stock_of(product) == 0
    with new_uow() as uow:
        assert {p.id for p in uow.carts.find_first_by_id_asc().products} == {product.id}


def test_failure_after_decrement_rolls_back_stock(service, new_uow, stock_of, laptop, monkeypatch):
    def failing_save(self, cart):
        raise RuntimeError("cart storage unavailable")

    monkeypatch.setattr(CartRepo, "save", failing_save)

    with pytest.raises(RuntimeError, match="cart storage unavailable"):
        service.add_to_cart(laptop.id)

    monkeypatch.undo()

    assert stock_of(laptop) == 5
    with new_uow() as uow:
        assert uow.carts.find_all() == []


def test_service_is_usable_after_failure(service, stock_of, laptop, make_product):
    empty = make_product("Empty", "1.00", 0)

    with pytest.raises(InvalidStateError):
        service.add_to_cart(empty.id)

    service.add_to_cart(laptop.id)
    assert stock_of(laptop) == 4


def test_get_cart_returns_products_and_total(service, laptop, mouse):
    assert service.get_cart() is None

    service.add_to_cart(laptop.id)
    service.add_to_cart(mouse.id)

    cart = service.get_cart()
    assert [p.name for p in cart.products] == ["Laptop", "Mouse"]
    assert cart.total == Decimal("1225.50")
