from __future__ import annotations
from typing import Optional

from sqlalchemy import select, func
from sqlalchemy.orm import selectinload

from app.models import PrescriptionGroup, ExercisePrescription
from app.repositories.base import BaseRepository

_WITH_ENTRIES = selectinload(PrescriptionGroup.exercises).options(
    selectinload(ExercisePrescription.exercise),
    selectinload(ExercisePrescription.rpe_value),
)

class PrescriptionGroupRepository(BaseRepository[PrescriptionGroup]):
    model = PrescriptionGroup

    # READS
    def get_in_workout(self, workout_id: int, group_id: int) -> Optional[PrescriptionGroup]:
        stmt = select(PrescriptionGroup).where(
            PrescriptionGroup.id == group_id,
            PrescriptionGroup.workout_id == workout_id,
        ).options(_WITH_ENTRIES)
        return self.db.execute(stmt).scalar_one_or_none()

    def list_by_workout(self, workout_id: int) -> list[PrescriptionGroup]:
        stmt = select(PrescriptionGroup).where(PrescriptionGroup.workout_id == workout_id)\
                                        .order_by(PrescriptionGroup.group_order.asc())\
                                        .options(_WITH_ENTRIES)
        return list(self.db.execute(stmt).scalars().all())

    def order_taken(self, workout_id: int, group_order: int, *, exclude_id: int | None = None) -> bool:
        stmt = select(PrescriptionGroup.id).where(
            PrescriptionGroup.workout_id == workout_id,
            PrescriptionGroup.group_order == group_order,
        )
        if exclude_id is not None:
            stmt = stmt.where(PrescriptionGroup.id != exclude_id)
        return self.db.execute(stmt).first() is not None

    def max_exercise_order(self, group_id: int) -> int:
        max_order = self.db.execute(
            select(func.max(ExercisePrescription.exercise_order))
            .where(ExercisePrescription.group_id == group_id)
        ).scalar_one()
        return max_order or 0

    # WRITES (flush only)
    def create(self, workout_id: int, **fields) -> PrescriptionGroup:
        return self.add_and_refresh(PrescriptionGroup(workout_id=workout_id, **fields))

    def add_entry(self, group: PrescriptionGroup, **fields) -> ExercisePrescription:
        entry = ExercisePrescription(**fields)
        group.exercises.append(entry)
        self.db.flush()
        return entry

    def clear_entries(self, group: PrescriptionGroup) -> None:
        group.exercises.clear()
        self.db.flush()

    def apply_orders(self, groups: dict[int, PrescriptionGroup], new_orders: dict[int, int]) -> None:
        """Move every group to its new order without tripping the unique constraint.

        Parks each row on a negative order first, then writes the final values.
        """
        for i, group in enumerate(groups.values(), start=1):
            group.group_order = -i
        self.db.flush()
        for group_id, order in new_orders.items():
            groups[group_id].group_order = order
        self.db.flush()
