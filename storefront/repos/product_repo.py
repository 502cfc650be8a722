from sqlalchemy import func, select

from storefront.data.models.product import ProductModel
from storefront.repos.base import CrudRepo


class ProductRepo(CrudRepo[ProductModel]):
    model = ProductModel

    def count(self) -> int:
        return self.db.execute(select(func.count()).select_from(ProductModel)).scalar_one()
