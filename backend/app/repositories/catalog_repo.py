"""Read side of the exercise and RPE catalogs.

``create`` exists for seeding; nothing in the tracking core writes here.
"""
from __future__ import annotations
from typing import Optional

from sqlalchemy import select

from app.models import Exercise, RPEScaleValue
from app.repositories.base import BaseRepository

class ExerciseRepository(BaseRepository[Exercise]):
    model = Exercise

    def get_by_slug(self, slug: str) -> Optional[Exercise]:
        return self.db.execute(select(Exercise).where(Exercise.slug == slug)).scalar_one_or_none()

    def existing_ids(self, ids: set[int]) -> set[int]:
        if not ids:
            return set()
        stmt = select(Exercise.id).where(Exercise.id.in_(ids))
        return set(self.db.execute(stmt).scalars().all())

    def create(self, *, slug: str, name: str, description: str | None = None) -> Exercise:
        return self.add_and_refresh(Exercise(slug=slug, name=name, description=description))

class RPERepository(BaseRepository[RPEScaleValue]):
    model = RPEScaleValue

    def get_by_value(self, value: int) -> Optional[RPEScaleValue]:
        return self.db.execute(select(RPEScaleValue).where(RPEScaleValue.value == value)).scalars().first()

    def existing_ids(self, ids: set[int]) -> set[int]:
        if not ids:
            return set()
        stmt = select(RPEScaleValue.id).where(RPEScaleValue.id.in_(ids))
        return set(self.db.execute(stmt).scalars().all())

    def create(self, *, value: int, label: str, description: str | None = None) -> RPEScaleValue:
        return self.add_and_refresh(RPEScaleValue(value=value, label=label, description=description))
