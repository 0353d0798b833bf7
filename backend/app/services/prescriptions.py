"""Authoring side: prescription groups and their exercise entries.

Every operation is scoped to a workout the caller owns; anything else is
reported as not found.
"""
import logging
from typing import Iterable

from sqlalchemy.orm import Session

from app.errors import NotFound, ValidationFailed
from app.models import PrescriptionGroup, ExercisePrescription, Workout
from app.repositories.catalog_repo import ExerciseRepository, RPERepository
from app.repositories.prescription_repo import PrescriptionGroupRepository
from app.repositories.workout_repo import WorkoutRepository
from app.schemas.prescription import (
    PrescriptionTarget,
    PrescriptionGroupCreate,
    PrescriptionGroupUpdate,
    ReorderGroups,
)
from app.services import transaction

log = logging.getLogger("uvicorn")

# group columns that may not be cleared by an explicit null
_REQUIRED_GROUP_FIELDS = {"type", "group_order"}


def entry_fields(target: PrescriptionTarget) -> dict:
    return {
        "exercise_id": target.exercise_id,
        "sets": target.sets,
        "reps": target.reps,
        "hold_seconds": target.hold_seconds,
        "target_weight_kg": target.target_weight_kg(),
        "rpe_value_id": target.rpe_value_id,
        "notes": target.notes,
    }


class PrescriptionEditor:
    def __init__(self, db: Session):
        self.db = db
        self.workouts = WorkoutRepository(db)
        self.groups = PrescriptionGroupRepository(db)
        self.exercises = ExerciseRepository(db)
        self.rpe = RPERepository(db)

    # helpers
    def _owned_workout(self, workout_id: int, actor_id: int) -> Workout:
        workout = self.workouts.get_owned(workout_id, actor_id)
        if workout is None:
            raise NotFound("Workout not found")
        return workout

    def _group(self, workout_id: int, group_id: int) -> PrescriptionGroup:
        group = self.groups.get_in_workout(workout_id, group_id)
        if group is None:
            raise NotFound("Prescription group not found")
        return group

    def _check_references(self, targets: Iterable[PrescriptionTarget]) -> None:
        targets = list(targets)
        wanted = {t.exercise_id for t in targets}
        missing = wanted - self.exercises.existing_ids(wanted)
        if missing:
            raise ValidationFailed(f"Exercise not found: {sorted(missing)}")
        wanted_rpe = {t.rpe_value_id for t in targets if t.rpe_value_id is not None}
        missing_rpe = wanted_rpe - self.rpe.existing_ids(wanted_rpe)
        if missing_rpe:
            raise ValidationFailed(f"RPE value not found: {sorted(missing_rpe)}")

    # READS
    def list_groups(self, workout_id: int, actor_id: int) -> list[PrescriptionGroup]:
        self._owned_workout(workout_id, actor_id)
        return self.groups.list_by_workout(workout_id)

    def get_group(self, workout_id: int, group_id: int, actor_id: int) -> PrescriptionGroup:
        self._owned_workout(workout_id, actor_id)
        return self._group(workout_id, group_id)

    # WRITES
    def create_group(self, workout_id: int, payload: PrescriptionGroupCreate, actor_id: int) -> PrescriptionGroup:
        self._owned_workout(workout_id, actor_id)
        if self.groups.order_taken(workout_id, payload.group_order):
            raise ValidationFailed(f"group_order {payload.group_order} is already used in this workout")
        self._check_references(payload.exercises)

        with transaction(self.db):
            group = self.groups.create(
                workout_id,
                type=payload.type,
                group_order=payload.group_order,
                group_rounds=payload.group_rounds,
                rest_between_sets=payload.rest_between_sets,
                group_name=payload.group_name,
                group_notes=payload.group_notes,
            )
            for entry in sorted(payload.exercises, key=lambda e: e.exercise_order):
                self.groups.add_entry(group, exercise_order=entry.exercise_order, **entry_fields(entry))
        group = self.groups.get_in_workout(workout_id, group.id)
        log.info("workout=%s: created %s group id=%s with %d exercise(s)",
                 workout_id, group.type.value, group.id, len(group.exercises))
        return group

    def update_group(self, workout_id: int, group_id: int, payload: PrescriptionGroupUpdate,
                     actor_id: int) -> PrescriptionGroup:
        self._owned_workout(workout_id, actor_id)
        group = self._group(workout_id, group_id)

        changes = payload.model_dump(exclude_unset=True, exclude={"exercises"})
        for name in _REQUIRED_GROUP_FIELDS:
            if name in changes and changes[name] is None:
                raise ValidationFailed(f"{name} cannot be null")
        new_order = changes.get("group_order")
        if new_order is not None and self.groups.order_taken(workout_id, new_order, exclude_id=group.id):
            raise ValidationFailed(f"group_order {new_order} is already used in this workout")
        if payload.exercises is not None:
            self._check_references(payload.exercises)

        with transaction(self.db):
            for name, value in changes.items():
                setattr(group, name, value)
            if payload.exercises is not None:
                self.groups.clear_entries(group)
                for entry in sorted(payload.exercises, key=lambda e: e.exercise_order):
                    self.groups.add_entry(group, exercise_order=entry.exercise_order, **entry_fields(entry))
            self.db.flush()
        return self.groups.get_in_workout(workout_id, group.id)

    def delete_group(self, workout_id: int, group_id: int, actor_id: int) -> None:
        self._owned_workout(workout_id, actor_id)
        group = self._group(workout_id, group_id)
        with transaction(self.db):
            self.groups.delete(group)

    def reorder_groups(self, workout_id: int, payload: ReorderGroups, actor_id: int) -> list[PrescriptionGroup]:
        """Apply a complete permutation of group orders, or nothing at all."""
        self._owned_workout(workout_id, actor_id)
        groups = {g.id: g for g in self.groups.list_by_workout(workout_id)}
        new_orders = {item.group_id: item.group_order for item in payload.group_orders}

        foreign = set(new_orders) - set(groups)
        if foreign:
            raise ValidationFailed(f"Groups {sorted(foreign)} do not belong to this workout")
        left_out = set(groups) - set(new_orders)
        if left_out:
            raise ValidationFailed(f"Reorder must list every group of the workout; missing {sorted(left_out)}")

        with transaction(self.db):
            self.groups.apply_orders(groups, new_orders)
        log.info("workout=%s: reordered %d group(s)", workout_id, len(groups))
        return self.groups.list_by_workout(workout_id)

    def append_entry(self, workout_id: int, group_id: int, payload: PrescriptionTarget,
                     actor_id: int) -> ExercisePrescription:
        self._owned_workout(workout_id, actor_id)
        group = self._group(workout_id, group_id)
        self._check_references([payload])

        with transaction(self.db):
            order = self.groups.max_exercise_order(group.id) + 1
            entry = self.groups.add_entry(group, exercise_order=order, **entry_fields(payload))
        self.db.refresh(entry)
        return entry
