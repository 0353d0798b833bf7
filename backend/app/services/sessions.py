"""Session lifecycle: start (instantiate from a workout), read, list, update, end, delete."""
import logging

from sqlalchemy.orm import Session

from app.errors import NotFound
from app.models import (
    Workout,
    WorkoutSession,
    SessionBlock,
    SessionExerciseLog,
    SessionSet,
    ExercisePrescription,
)
from app.repositories.prescription_repo import PrescriptionGroupRepository
from app.repositories.session_repo import SessionRepository
from app.repositories.workout_repo import WorkoutRepository
from app.schemas.session import SessionCreate, SessionUpdate, SessionEnd
from app.services import transaction, utcnow, as_utc
from app.services.access import AccessPolicy

log = logging.getLogger("uvicorn")


def prefilled_sets(entry: ExercisePrescription) -> list[SessionSet]:
    """One editable set per prescribed set, seeded with the prescription's targets.

    An entry without a set count (e.g. a drop-set tier) still yields one set.
    """
    count = max(1, entry.sets or 1)
    return [
        SessionSet(
            set_number=n,
            actual_reps=entry.reps,
            hold_seconds_actual=entry.hold_seconds,
            actual_weight_kg=entry.target_weight_kg,
            rpe_value_id=entry.rpe_value_id,
            completed=False,
            was_failure=False,
        )
        for n in range(1, count + 1)
    ]


class SessionService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = SessionRepository(db)
        self.workouts = WorkoutRepository(db)
        self.groups = PrescriptionGroupRepository(db)
        self.access = AccessPolicy(db)

    # START
    def start(self, payload: SessionCreate, actor_id: int) -> WorkoutSession:
        """Create a session and, when a workout is given, its whole tracking tree.

        Session, blocks, exercise logs and sets are written in one transaction.
        """
        target_user_id = payload.user_id if payload.user_id is not None else actor_id
        self.access.ensure_can_act_for(actor_id, target_user_id, "create sessions")

        workout = None
        if payload.workout_id is not None:
            workout = self._usable_workout(payload.workout_id, actor_id, target_user_id)

        with transaction(self.db):
            sess = self.repo.create(
                target_user_id,
                created_by_id=actor_id,
                workout_id=workout.id if workout else None,
                started_at=payload.started_at or utcnow(),
                notes=payload.notes,
            )
            if workout is not None:
                self._instantiate(sess, workout)

        log.info("session=%s started for user=%s by user=%s from workout=%s with %d block(s)",
                 sess.id, target_user_id, actor_id, payload.workout_id, len(sess.blocks))
        return self.repo.get_full(sess.id)

    def _usable_workout(self, workout_id: int, actor_id: int, target_user_id: int) -> Workout:
        workout = self.workouts.get(workout_id)
        if workout is None or workout.user_id not in (actor_id, target_user_id):
            raise NotFound("Workout not found")
        return workout

    def _instantiate(self, sess: WorkoutSession, workout: Workout) -> None:
        for group in self.groups.list_by_workout(workout.id):
            block = SessionBlock(
                group_id=group.id,
                block_order=group.group_order,
                skipped=False,
            )
            for entry in group.exercises:
                block.exercise_logs.append(SessionExerciseLog(
                    prescription_id=entry.id,
                    exercise_id=entry.exercise_id,
                    exercise_order=entry.exercise_order,
                    skipped=False,
                    sets=prefilled_sets(entry),
                ))
            sess.blocks.append(block)
        self.db.flush()

    # READ
    def get(self, session_id: int, actor_id: int) -> WorkoutSession:
        sess = self.repo.get_full(session_id)
        self.access.ensure_readable(sess, actor_id, "Workout session")
        return sess

    def list(self, actor_id: int, *, client_id: int | None = None,
             limit: int = 50, offset: int = 0) -> list[WorkoutSession]:
        """Own sessions, or, for a trainer, the sessions they logged for a client."""
        if client_id is None or client_id == actor_id:
            return self.repo.list_by_user(actor_id, limit=limit, offset=offset)
        self.access.ensure_can_act_for(actor_id, client_id, "view sessions")
        return self.repo.list_by_user(client_id, created_by_id=actor_id, limit=limit, offset=offset)

    # MUTATE
    def _mutable(self, session_id: int, actor_id: int, action: str) -> WorkoutSession:
        sess = self.repo.get(session_id)
        self.access.ensure_mutable(sess, actor_id, "Workout session", action)
        return sess

    def update(self, session_id: int, payload: SessionUpdate, actor_id: int) -> WorkoutSession:
        sess = self._mutable(session_id, actor_id, "update")
        with transaction(self.db):
            if payload.notes is not None:
                sess.notes = payload.notes
            if payload.perceived_intensity is not None:
                sess.perceived_intensity = payload.perceived_intensity
            self.db.flush()
        return self.repo.get_full(sess.id)

    def end(self, session_id: int, payload: SessionEnd, actor_id: int) -> WorkoutSession:
        """Close the session; the athlete decides, child blocks may still be open."""
        sess = self._mutable(session_id, actor_id, "end")
        ended_at = payload.ended_at or utcnow()
        with transaction(self.db):
            sess.ended_at = ended_at
            sess.completed = True
            sess.duration_seconds = max(0, int((as_utc(ended_at) - as_utc(sess.started_at)).total_seconds()))
            if payload.notes is not None:
                sess.notes = payload.notes
            if payload.perceived_intensity is not None:
                sess.perceived_intensity = payload.perceived_intensity
            self.db.flush()
        log.info("session=%s ended after %ss", sess.id, sess.duration_seconds)
        return self.repo.get_full(sess.id)

    def delete(self, session_id: int, actor_id: int) -> None:
        sess = self._mutable(session_id, actor_id, "delete")
        with transaction(self.db):
            self.repo.delete(sess)
