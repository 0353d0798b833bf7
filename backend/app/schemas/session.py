from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, Field, StringConstraints
from app.schemas.session_set import SessionSetRead

# Notes: trimmed, up to 500 chars
NotesStr = Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)]
Intensity = Annotated[int, Field(ge=1, le=10)]

class SessionCreate(BaseModel):
    # omitted -> the caller logs for themself
    user_id: int | None = None
    # omitted -> ad-hoc session with no structure
    workout_id: int | None = None
    started_at: datetime | None = None
    notes: NotesStr | None = None

class SessionUpdate(BaseModel):
    notes: NotesStr | None = None
    perceived_intensity: Intensity | None = None

class SessionEnd(BaseModel):
    ended_at: datetime | None = None
    notes: NotesStr | None = None
    perceived_intensity: Intensity | None = None

class BlockRPEUpdate(BaseModel):
    perceived_exertion: Intensity

class ExerciseLogNotesUpdate(BaseModel):
    notes: NotesStr

class ExerciseLogRead(BaseModel):
    id: int
    block_id: int
    prescription_id: int | None = None
    exercise_id: int
    exercise_order: int
    skipped: bool
    completed_at: datetime | None = None
    notes: str | None = None
    sets: list[SessionSetRead] = []

    model_config = {"from_attributes": True}

class BlockRead(BaseModel):
    id: int
    session_id: int
    group_id: int | None = None
    block_order: int
    completed_at: datetime | None = None
    skipped: bool
    perceived_exertion: int | None = None
    exercise_logs: list[ExerciseLogRead] = []

    model_config = {"from_attributes": True}

class SessionRead(BaseModel):
    id: int
    user_id: int
    created_by_id: int | None = None
    workout_id: int | None = None
    started_at: datetime
    ended_at: datetime | None = None
    duration_seconds: int | None = None
    completed: bool
    perceived_intensity: int | None = None
    notes: str | None = None
    blocks: list[BlockRead] = []

    model_config = {"from_attributes": True}

class SessionSummary(BaseModel):
    """List view: no nested structure, just block progress."""
    id: int
    user_id: int
    created_by_id: int | None = None
    workout_id: int | None = None
    started_at: datetime
    ended_at: datetime | None = None
    completed: bool
    perceived_intensity: int | None = None
    total_blocks: int
    finished_blocks: int

    @classmethod
    def from_session(cls, sess) -> "SessionSummary":
        return cls(
            id=sess.id,
            user_id=sess.user_id,
            created_by_id=sess.created_by_id,
            workout_id=sess.workout_id,
            started_at=sess.started_at,
            ended_at=sess.ended_at,
            completed=sess.completed,
            perceived_intensity=sess.perceived_intensity,
            total_blocks=len(sess.blocks),
            finished_blocks=sum(1 for b in sess.blocks if b.completed_at is not None or b.skipped),
        )
