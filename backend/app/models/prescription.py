from enum import Enum
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, Float, ForeignKey, String, Text, UniqueConstraint, Enum as SAEnum
from app.db import Base

class PrescriptionType(str, Enum):
    straight = "straight"
    superset = "superset"
    circuit = "circuit"
    drop_set = "drop_set"
    pyramid = "pyramid"
    amrap = "amrap"

class PrescriptionGroup(Base):
    __tablename__ = "prescription_groups"
    __table_args__ = (UniqueConstraint("workout_id", "group_order", name="uq_group_order"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    workout_id: Mapped[int] = mapped_column(ForeignKey("workouts.id", ondelete="CASCADE"), index=True)
    type: Mapped[PrescriptionType] = mapped_column(
        SAEnum(PrescriptionType, name="prescription_type"), nullable=False
    )
    group_order: Mapped[int] = mapped_column(Integer, nullable=False)
    group_rounds: Mapped[int | None] = mapped_column(Integer, nullable=True)
    rest_between_sets: Mapped[int | None] = mapped_column(Integer, nullable=True)
    group_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    group_notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    workout = relationship("Workout", back_populates="groups")
    exercises = relationship(
        "ExercisePrescription",
        back_populates="group",
        cascade="all, delete-orphan",
        order_by="ExercisePrescription.exercise_order",
    )

class ExercisePrescription(Base):
    __tablename__ = "exercise_prescriptions"
    __table_args__ = (UniqueConstraint("group_id", "exercise_order", name="uq_exercise_order"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    group_id: Mapped[int] = mapped_column(ForeignKey("prescription_groups.id", ondelete="CASCADE"), index=True)
    exercise_id: Mapped[int] = mapped_column(ForeignKey("exercises.id"), index=True)
    exercise_order: Mapped[int] = mapped_column(Integer, nullable=False)
    sets: Mapped[int | None] = mapped_column(Integer, nullable=True)
    # exactly one of reps / hold_seconds is set
    reps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    hold_seconds: Mapped[int | None] = mapped_column(Integer, nullable=True)
    target_weight_kg: Mapped[float | None] = mapped_column(Float, nullable=True)
    rpe_value_id: Mapped[int | None] = mapped_column(
        ForeignKey("rpe_scale_values.id", ondelete="SET NULL"), nullable=True
    )
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    group = relationship("PrescriptionGroup", back_populates="exercises")
    exercise = relationship("Exercise")
    rpe_value = relationship("RPEScaleValue")
