# app/repositories/base.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from sqlalchemy.orm import Session

T = TypeVar("T")  # SQLAlchemy model type

@dataclass(slots=True)
class Page(Generic[T]):
    items: list[T]
    total: int
    limit: int
    offset: int

class BaseRepository(Generic[T]):
    """Lightweight base for repositories using SQLAlchemy 2.0 style.

    Writes only flush; the caller owns the transaction and decides when
    to commit or roll back.
    """
    model: type[T]

    def __init__(self, db: Session):
        self.db = db

    def get(self, entity_id: int) -> Optional[T]:
        return self.db.get(self.model, entity_id)

    def add_and_refresh(self, entity: T) -> T:
        self.db.add(entity)
        self.db.flush()
        self.db.refresh(entity)
        return entity

    def delete(self, entity: T) -> None:
        self.db.delete(entity)
        self.db.flush()
