# storefront/repos/cart_repo.py
from sqlalchemy import select
from sqlalchemy.orm import selectinload

from storefront.data.models.cart import CartModel
from storefront.repos.base import CrudRepo


class CartRepo(CrudRepo[CartModel]):
    model = CartModel

    def find_first_by_id_asc(self) -> CartModel | None:
        """
        The current cart: lowest id wins, products loaded eagerly.
        """
        stmt = (
            select(CartModel)
            .options(selectinload(CartModel.products))
            .order_by(CartModel.id.asc())
            .limit(1)
        )
        return self.db.execute(stmt).scalars().first()
