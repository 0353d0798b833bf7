from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, Boolean, Float, ForeignKey, Text
from app.db import Base

class SessionSet(Base):
    __tablename__ = "session_sets"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    exercise_log_id: Mapped[int] = mapped_column(
        ForeignKey("session_exercise_logs.id", ondelete="CASCADE"), index=True
    )
    set_number: Mapped[int] = mapped_column(Integer, nullable=False)
    actual_reps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    actual_weight_kg: Mapped[float | None] = mapped_column(Float, nullable=True)
    hold_seconds_actual: Mapped[int | None] = mapped_column(Integer, nullable=True)
    rpe_value_id: Mapped[int | None] = mapped_column(
        ForeignKey("rpe_scale_values.id", ondelete="SET NULL"), nullable=True
    )
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    was_failure: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    exercise_log = relationship("SessionExerciseLog", back_populates="sets")
    rpe_value = relationship("RPEScaleValue")
