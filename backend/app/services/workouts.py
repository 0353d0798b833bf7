import logging

from sqlalchemy.orm import Session

from app.errors import NotFound, ValidationFailed
from app.models.workout import TITLE_MAX
from app.models import Workout, PrescriptionGroup, ExercisePrescription
from app.repositories.base import Page
from app.repositories.workout_repo import WorkoutRepository
from app.schemas.workout import WorkoutCreate, WorkoutUpdate
from app.services import transaction

log = logging.getLogger("uvicorn")

COPY_SUFFIX = " (Copy)"


def copy_title(title: str) -> str:
    return title[:TITLE_MAX - len(COPY_SUFFIX)] + COPY_SUFFIX


class WorkoutService:
    def __init__(self, db: Session):
        self.db = db
        self.repo = WorkoutRepository(db)

    def get(self, workout_id: int, actor_id: int) -> Workout:
        workout = self.repo.get_owned(workout_id, actor_id)
        if workout is None:
            raise NotFound("Workout not found")
        return workout

    def list(self, actor_id: int, *, limit: int = 50, offset: int = 0) -> Page[Workout]:
        return self.repo.list_by_user(actor_id, limit=limit, offset=offset)

    def create(self, payload: WorkoutCreate, actor_id: int) -> Workout:
        with transaction(self.db):
            workout = self.repo.create(
                actor_id,
                title=payload.title,
                description=payload.description,
                visibility=payload.visibility,
            )
        self.db.refresh(workout)
        return workout

    def update(self, workout_id: int, payload: WorkoutUpdate, actor_id: int) -> Workout:
        workout = self.get(workout_id, actor_id)
        changes = payload.model_dump(exclude_unset=True)
        for name in ("title", "visibility"):
            if name in changes and changes[name] is None:
                raise ValidationFailed(f"{name} cannot be null")
        with transaction(self.db):
            for name, value in changes.items():
                setattr(workout, name, value)
            self.db.flush()
        self.db.refresh(workout)
        return workout

    def delete(self, workout_id: int, actor_id: int) -> None:
        workout = self.get(workout_id, actor_id)
        with transaction(self.db):
            self.repo.delete(workout)

    def duplicate(self, workout_id: int, actor_id: int) -> Workout:
        """Copy the workout and its whole prescription tree; sessions stay behind."""
        original = self.get(workout_id, actor_id)
        with transaction(self.db):
            copy = Workout(
                user_id=actor_id,
                title=copy_title(original.title),
                description=original.description,
                visibility=original.visibility,
            )
            for group in original.groups:
                copy.groups.append(PrescriptionGroup(
                    type=group.type,
                    group_order=group.group_order,
                    group_rounds=group.group_rounds,
                    rest_between_sets=group.rest_between_sets,
                    group_name=group.group_name,
                    group_notes=group.group_notes,
                    exercises=[
                        ExercisePrescription(
                            exercise_id=e.exercise_id,
                            exercise_order=e.exercise_order,
                            sets=e.sets,
                            reps=e.reps,
                            hold_seconds=e.hold_seconds,
                            target_weight_kg=e.target_weight_kg,
                            rpe_value_id=e.rpe_value_id,
                            notes=e.notes,
                        )
                        for e in group.exercises
                    ],
                ))
            self.repo.add_and_refresh(copy)
        log.info("workout=%s duplicated as workout=%s (%d group(s))",
                 original.id, copy.id, len(original.groups))
        return copy
