from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, Boolean, ForeignKey, DateTime, Text, func
from app.db import Base

class WorkoutSession(Base):
    __tablename__ = "workout_sessions"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)
    created_by_id: Mapped[int | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"), nullable=True, index=True
    )
    workout_id: Mapped[int | None] = mapped_column(
        ForeignKey("workouts.id", ondelete="SET NULL"), nullable=True, index=True
    )
    started_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
    ended_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    duration_seconds: Mapped[int | None] = mapped_column(Integer, nullable=True)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    perceived_intensity: Mapped[int | None] = mapped_column(Integer, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    user = relationship("User", back_populates="sessions", foreign_keys=[user_id])
    workout = relationship("Workout")
    blocks = relationship(
        "SessionBlock",
        back_populates="session",
        cascade="all, delete-orphan",
        order_by="SessionBlock.block_order",
    )

class SessionBlock(Base):
    __tablename__ = "session_blocks"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    session_id: Mapped[int] = mapped_column(ForeignKey("workout_sessions.id", ondelete="CASCADE"), index=True)
    group_id: Mapped[int | None] = mapped_column(
        ForeignKey("prescription_groups.id", ondelete="SET NULL"), nullable=True
    )
    block_order: Mapped[int] = mapped_column(Integer, nullable=False)
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    skipped: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    perceived_exertion: Mapped[int | None] = mapped_column(Integer, nullable=True)

    session = relationship("WorkoutSession", back_populates="blocks")
    exercise_logs = relationship(
        "SessionExerciseLog",
        back_populates="block",
        cascade="all, delete-orphan",
        order_by="SessionExerciseLog.exercise_order",
    )
