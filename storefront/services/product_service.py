import uuid

from sqlalchemy.orm import sessionmaker

from storefront.data.database import SessionLocal
from storefront.data.models.product import ProductModel
from storefront.data.unit_of_work import UnitOfWork
from storefront.domain.errors import NotFoundError
from storefront.domain.schemas import ProductCreate, ProductOut
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class ProductService:
    def __init__(self, session_factory: sessionmaker = SessionLocal):
        self.session_factory = session_factory

    def create_product(self, payload: ProductCreate) -> ProductOut:
        with UnitOfWork(self.session_factory) as uow:
            product = uow.products.save(
                ProductModel(name=payload.name, price=payload.price, stock=payload.stock)
            )
            logger.info(f"Created product {product.id} ({product.name})")
            return ProductOut.model_validate(product)

    def get_product(self, product_id: uuid.UUID) -> ProductOut:
        with UnitOfWork(self.session_factory) as uow:
            product = uow.products.get(product_id)
            if not product:
                raise NotFoundError(f"Product not found with id: {product_id}")
            return ProductOut.model_validate(product)

    def restock(self, product_id: uuid.UUID, amount: int) -> ProductOut:
        if amount <= 0:
            raise ValueError("Restock amount must be greater than 0")

        with UnitOfWork(self.session_factory) as uow:
            product = uow.products.get(product_id)
            if not product:
                raise NotFoundError(f"Product not found with id: {product_id}")

            product.stock += amount
            product = uow.products.save(product)

            logger.info(f"Product {product.id} restocked by {amount}, stock: {product.stock}")
            return ProductOut.model_validate(product)
