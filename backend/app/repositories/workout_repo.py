from __future__ import annotations
from typing import Optional

from sqlalchemy import select, func

from app.models import Workout
from app.repositories.base import BaseRepository, Page

class WorkoutRepository(BaseRepository[Workout]):
    model = Workout

    def get_owned(self, workout_id: int, user_id: int) -> Optional[Workout]:
        stmt = select(Workout).where(Workout.id == workout_id, Workout.user_id == user_id)
        return self.db.execute(stmt).scalar_one_or_none()

    def list_by_user(self, user_id: int, *, limit: int = 50, offset: int = 0) -> Page[Workout]:
        stmt = select(Workout).where(Workout.user_id == user_id).order_by(Workout.id.desc())
        items = self.db.execute(stmt.limit(limit).offset(offset)).scalars().all()
        total = self.db.execute(
            select(func.count()).select_from(Workout).where(Workout.user_id == user_id)
        ).scalar_one()
        return Page(items=list(items), total=total, limit=limit, offset=offset)

    def create(self, user_id: int, *, title: str, description: str | None, visibility: str) -> Workout:
        return self.add_and_refresh(
            Workout(user_id=user_id, title=title, description=description, visibility=visibility)
        )
