# storefront/repos/order_repo.py
from storefront.data.models.order import OrderModel
from storefront.repos.base import CrudRepo


class OrderRepo(CrudRepo[OrderModel]):
    model = OrderModel
