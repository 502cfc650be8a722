# storefront/repos/base.py
import uuid
from typing import Generic, TypeVar

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from storefront.data.database import Base

ModelT = TypeVar("ModelT", bound=Base)


class CrudRepo(Generic[ModelT]):
    """
    Basic storage operations shared by every entity.
    Writes are flushed into the session, the unit of work decides about commit.
    """

    model: type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def save(self, entity: ModelT) -> ModelT:
        # upsert by identity: detached rows are merged, new or attached ones added
        if entity.id is not None and entity not in self.db:
            entity = self.db.merge(entity)
        else:
            self.db.add(entity)
        self.db.flush()
        return entity

    def get(self, entity_id: uuid.UUID) -> ModelT | None:
        return self.db.get(self.model, entity_id)

    def find_all(self) -> list[ModelT]:
        return list(self.db.execute(select(self.model)).scalars().all())

    def delete_all(self) -> None:
        self.db.execute(delete(self.model))
