from __future__ import annotations
from typing import Optional
from sqlalchemy import select
from sqlalchemy.orm import selectinload
from app.models import WorkoutSession, SessionBlock, SessionExerciseLog, SessionSet
from app.repositories.base import BaseRepository

_FULL_TREE = (
    selectinload(WorkoutSession.blocks)
    .selectinload(SessionBlock.exercise_logs)
    .selectinload(SessionExerciseLog.sets)
    .selectinload(SessionSet.rpe_value)
)

class SessionRepository(BaseRepository[WorkoutSession]):
    model = WorkoutSession

    def get_full(self, session_id: int) -> Optional[WorkoutSession]:
        stmt = select(WorkoutSession).where(WorkoutSession.id == session_id).options(_FULL_TREE)
        return self.db.execute(stmt).scalar_one_or_none()

    def list_by_user(
        self,
        user_id: int,
        *,
        created_by_id: int | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> list[WorkoutSession]:
        stmt = select(WorkoutSession).where(WorkoutSession.user_id == user_id)
        if created_by_id is not None:
            stmt = stmt.where(WorkoutSession.created_by_id == created_by_id)
        stmt = stmt.options(selectinload(WorkoutSession.blocks))\
                   .order_by(WorkoutSession.started_at.desc(), WorkoutSession.id.desc())\
                   .limit(limit).offset(offset)
        return list(self.db.execute(stmt).scalars().all())

    def create(self, user_id: int, *, created_by_id: int, workout_id: int | None,
               started_at, notes: str | None) -> WorkoutSession:
        sess = WorkoutSession(
            user_id=user_id,
            created_by_id=created_by_id,
            workout_id=workout_id,
            started_at=started_at,
            notes=notes,
            completed=False,
        )
        return self.add_and_refresh(sess)

class BlockRepository(BaseRepository[SessionBlock]):
    model = SessionBlock

    def get_with_tree(self, block_id: int) -> Optional[SessionBlock]:
        stmt = select(SessionBlock).where(SessionBlock.id == block_id).options(
            selectinload(SessionBlock.session),
            selectinload(SessionBlock.exercise_logs)
            .selectinload(SessionExerciseLog.sets)
            .selectinload(SessionSet.rpe_value),
        )
        return self.db.execute(stmt).scalar_one_or_none()

class ExerciseLogRepository(BaseRepository[SessionExerciseLog]):
    model = SessionExerciseLog

    def get_with_sets(self, log_id: int) -> Optional[SessionExerciseLog]:
        stmt = select(SessionExerciseLog).where(SessionExerciseLog.id == log_id).options(
            selectinload(SessionExerciseLog.block).selectinload(SessionBlock.session),
            selectinload(SessionExerciseLog.sets).selectinload(SessionSet.rpe_value),
        )
        return self.db.execute(stmt).scalar_one_or_none()
