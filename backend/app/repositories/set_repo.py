from __future__ import annotations
from typing import Optional
from sqlalchemy import select, func
from sqlalchemy.orm import selectinload
from app.models import SessionSet, SessionExerciseLog, SessionBlock
from app.repositories.base import BaseRepository

class SetRepository(BaseRepository[SessionSet]):
    model = SessionSet

    def get_with_owner(self, set_id: int) -> Optional[SessionSet]:
        stmt = select(SessionSet).where(SessionSet.id == set_id).options(
            selectinload(SessionSet.exercise_log)
            .selectinload(SessionExerciseLog.block)
            .selectinload(SessionBlock.session),
            selectinload(SessionSet.rpe_value),
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def next_set_number(self, exercise_log_id: int) -> int:
        # max + 1, never len + 1: numbers freed by deletes are not reused below the max
        max_num = self.db.execute(
            select(func.max(SessionSet.set_number)).where(SessionSet.exercise_log_id == exercise_log_id)
        ).scalar_one()
        return (max_num or 0) + 1

    def create(self, exercise_log_id: int, *, set_number: int, **fields) -> SessionSet:
        return self.add_and_refresh(
            SessionSet(exercise_log_id=exercise_log_id, set_number=set_number, **fields)
        )
