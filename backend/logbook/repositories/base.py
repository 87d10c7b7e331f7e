# logbook/repositories/base.py
from __future__ import annotations
import logging
from contextlib import contextmanager
from typing import Generic, Iterator, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from logbook.errors import StorageError

T = TypeVar("T")  # SQLAlchemy model type

log = logging.getLogger(__name__)

class BaseRepository(Generic[T]):
    """Lightweight base for repositories using SQLAlchemy 2.0 style."""
    model: type[T]

    def __init__(self, db: Session):
        self.db = db

    def all(self) -> list[T]:
        """Every record of this kind in id order; callers re-sort as needed."""
        stmt = select(self.model).order_by(self.model.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    @contextmanager
    def write_unit(self, action: str) -> Iterator[None]:
        """Commit everything staged inside the block, or nothing at all."""
        try:
            yield
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            log.exception("%s failed, transaction rolled back", action)
            raise StorageError(f"{action} failed") from exc
        except Exception:
            self.db.rollback()
            raise
