from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, Boolean, ForeignKey, DateTime, Text
from app.db import Base

class SessionExerciseLog(Base):
    __tablename__ = "session_exercise_logs"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    block_id: Mapped[int] = mapped_column(ForeignKey("session_blocks.id", ondelete="CASCADE"), index=True)
    prescription_id: Mapped[int | None] = mapped_column(
        ForeignKey("exercise_prescriptions.id", ondelete="SET NULL"), nullable=True
    )
    exercise_id: Mapped[int] = mapped_column(ForeignKey("exercises.id"), index=True)
    exercise_order: Mapped[int] = mapped_column(Integer, nullable=False)
    skipped: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    block = relationship("SessionBlock", back_populates="exercise_logs")
    sets = relationship(
        "SessionSet",
        back_populates="exercise_log",
        cascade="all, delete-orphan",
        order_by="SessionSet.set_number",
    )
