"""Live-session transitions on blocks, exercise logs and sets.

Completion and skipping are two independent flags per record rather than a
single status; "pending" is simply neither. Completing clears a skip and
skipping clears a completion, so the two never hold at once. A block's state
does not constrain the exercise logs inside it.
"""
import logging

from sqlalchemy.orm import Session

from app.errors import ValidationFailed
from app.models import SessionBlock, SessionExerciseLog, SessionSet
from app.repositories.catalog_repo import RPERepository
from app.repositories.session_repo import BlockRepository, ExerciseLogRepository
from app.repositories.set_repo import SetRepository
from app.schemas.session_set import SetFields, SetCreate, SetUpdate, SetComplete
from app.services import transaction, utcnow
from app.services.access import AccessPolicy

log = logging.getLogger("uvicorn")


class SessionTracker:
    def __init__(self, db: Session):
        self.db = db
        self.blocks = BlockRepository(db)
        self.exercise_logs = ExerciseLogRepository(db)
        self.sets = SetRepository(db)
        self.rpe = RPERepository(db)
        self.access = AccessPolicy(db)

    # ---- lookups -------------------------------------------------------

    def _block(self, block_id: int, actor_id: int, action: str | None = None) -> SessionBlock:
        block = self.blocks.get_with_tree(block_id)
        sess = block.session if block else None
        if action is None:
            self.access.ensure_readable(sess, actor_id, "Session block")
        else:
            self.access.ensure_mutable(sess, actor_id, "Session block", action)
        return block

    def _exercise_log(self, log_id: int, actor_id: int, action: str | None = None) -> SessionExerciseLog:
        entry = self.exercise_logs.get_with_sets(log_id)
        sess = entry.block.session if entry else None
        if action is None:
            self.access.ensure_readable(sess, actor_id, "Session exercise")
        else:
            self.access.ensure_mutable(sess, actor_id, "Session exercise", action)
        return entry

    def _set(self, set_id: int, actor_id: int, action: str | None = None) -> SessionSet:
        s = self.sets.get_with_owner(set_id)
        sess = s.exercise_log.block.session if s else None
        if action is None:
            self.access.ensure_readable(sess, actor_id, "Session set")
        else:
            self.access.ensure_mutable(sess, actor_id, "Session set", action)
        return s

    def _check_rpe(self, rpe_value_id: int | None) -> None:
        if rpe_value_id is not None and self.rpe.get(rpe_value_id) is None:
            raise ValidationFailed(f"RPE value not found: {rpe_value_id}")

    # ---- blocks --------------------------------------------------------

    def get_block(self, block_id: int, actor_id: int) -> SessionBlock:
        return self._block(block_id, actor_id)

    def complete_block(self, block_id: int, actor_id: int) -> SessionBlock:
        block = self._block(block_id, actor_id, "complete")
        with transaction(self.db):
            block.completed_at = utcnow()
            block.skipped = False
            self.db.flush()
        return self.blocks.get_with_tree(block.id)

    def skip_block(self, block_id: int, actor_id: int) -> SessionBlock:
        block = self._block(block_id, actor_id, "skip")
        with transaction(self.db):
            block.skipped = True
            block.completed_at = None
            self.db.flush()
        return self.blocks.get_with_tree(block.id)

    def update_block_rpe(self, block_id: int, perceived_exertion: int, actor_id: int) -> SessionBlock:
        block = self._block(block_id, actor_id, "update")
        with transaction(self.db):
            block.perceived_exertion = perceived_exertion
            self.db.flush()
        return self.blocks.get_with_tree(block.id)

    # ---- exercise logs -------------------------------------------------

    def get_exercise_log(self, log_id: int, actor_id: int) -> SessionExerciseLog:
        return self._exercise_log(log_id, actor_id)

    def complete_exercise_log(self, log_id: int, actor_id: int) -> SessionExerciseLog:
        entry = self._exercise_log(log_id, actor_id, "complete")
        with transaction(self.db):
            entry.completed_at = utcnow()
            entry.skipped = False
            self.db.flush()
        return self.exercise_logs.get_with_sets(entry.id)

    def skip_exercise_log(self, log_id: int, actor_id: int) -> SessionExerciseLog:
        entry = self._exercise_log(log_id, actor_id, "skip")
        with transaction(self.db):
            entry.skipped = True
            entry.completed_at = None
            self.db.flush()
        return self.exercise_logs.get_with_sets(entry.id)

    def update_exercise_log_notes(self, log_id: int, notes: str, actor_id: int) -> SessionExerciseLog:
        entry = self._exercise_log(log_id, actor_id, "update")
        with transaction(self.db):
            entry.notes = notes
            self.db.flush()
        return self.exercise_logs.get_with_sets(entry.id)

    def add_set(self, log_id: int, payload: SetCreate, actor_id: int) -> SessionSet:
        """Append a set after the highest existing number (prescribed or extra)."""
        entry = self._exercise_log(log_id, actor_id, "add sets to")
        self._check_rpe(payload.rpe_value_id)
        with transaction(self.db):
            new_set = self.sets.create(
                entry.id,
                set_number=self.sets.next_set_number(entry.id),
                actual_reps=payload.actual_reps,
                hold_seconds_actual=payload.hold_seconds_actual,
                actual_weight_kg=payload.actual_weight.in_kg() if payload.actual_weight else None,
                rpe_value_id=payload.rpe_value_id,
                notes=payload.notes,
                completed=False,
                was_failure=False,
            )
        log.info("exercise_log=%s: added set #%s", entry.id, new_set.set_number)
        return self.sets.get_with_owner(new_set.id)

    # ---- sets ----------------------------------------------------------

    def get_set(self, set_id: int, actor_id: int) -> SessionSet:
        return self._set(set_id, actor_id)

    def _apply(self, s: SessionSet, payload: SetFields) -> None:
        """Copy only the fields the caller actually sent; weight lands in kg.

        The stored set must still record a single quantity kind once the
        payload is merged in; clearing the other kind takes an explicit null.
        """
        sent = payload.model_fields_set
        reps = payload.actual_reps if "actual_reps" in sent else s.actual_reps
        hold = payload.hold_seconds_actual if "hold_seconds_actual" in sent else s.hold_seconds_actual
        if reps is not None and hold is not None:
            raise ValidationFailed(
                "a set records either actual_reps or hold_seconds_actual, not both; "
                "send the other one as null to switch"
            )
        for name in ("actual_reps", "hold_seconds_actual", "rpe_value_id", "notes", "completed", "was_failure"):
            if name not in sent:
                continue
            value = getattr(payload, name)
            if name in ("completed", "was_failure") and value is None:
                continue
            setattr(s, name, value)
        if "actual_weight" in sent:
            s.actual_weight_kg = payload.actual_weight.in_kg() if payload.actual_weight else None

    def update_set(self, set_id: int, payload: SetUpdate, actor_id: int) -> SessionSet:
        s = self._set(set_id, actor_id, "update")
        self._check_rpe(payload.rpe_value_id)
        with transaction(self.db):
            self._apply(s, payload)
            self.db.flush()
        return self.sets.get_with_owner(s.id)

    def complete_set(self, set_id: int, payload: SetComplete | None, actor_id: int) -> SessionSet:
        """Mark done, optionally recording the final numbers in the same call."""
        s = self._set(set_id, actor_id, "complete")
        if payload is not None:
            self._check_rpe(payload.rpe_value_id)
        with transaction(self.db):
            if payload is not None:
                self._apply(s, payload)
            s.completed = True
            self.db.flush()
        return self.sets.get_with_owner(s.id)

    def delete_set(self, set_id: int, actor_id: int) -> None:
        # remaining sets keep their numbers; gaps are expected
        s = self._set(set_id, actor_id, "delete")
        with transaction(self.db):
            self.sets.delete(s)
