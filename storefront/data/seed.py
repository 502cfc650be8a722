# storefront/data/seed.py
from decimal import Decimal

from sqlalchemy.orm import sessionmaker

from storefront.data.database import SessionLocal
from storefront.data.models.product import ProductModel
from storefront.data.unit_of_work import UnitOfWork
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

CATALOGUE = [
    {"name": "Laptop", "price": Decimal("1200.00"), "stock": 5},
    {"name": "Mouse", "price": Decimal("25.50"), "stock": 10},
    {"name": "Keyboard", "price": Decimal("79.99"), "stock": 0},
]


def seed(session_factory: sessionmaker = SessionLocal) -> int:
    with UnitOfWork(session_factory) as uow:
        # not forcing: only seed if empty
        if uow.products.count():
            return 0

        for data in CATALOGUE:
            uow.products.save(ProductModel(**data))

    logger.info(f"Seeded {len(CATALOGUE)} products")
    return len(CATALOGUE)
