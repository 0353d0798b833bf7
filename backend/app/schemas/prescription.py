from typing import Annotated
from pydantic import BaseModel, Field, model_validator, field_validator
from app.models.prescription import PrescriptionType
from app.schemas.catalog import ExerciseBrief, RPEValueRead
from app.schemas.weight import WeightIn

PosInt = Annotated[int, Field(ge=1)]
NonNegInt = Annotated[int, Field(ge=0)]
NameStr = Annotated[str, Field(max_length=255)]

class PrescriptionTarget(BaseModel):
    """What one exercise should look like: sets x (reps XOR hold), weight, RPE."""
    exercise_id: int
    sets: PosInt | None = None
    reps: PosInt | None = None
    hold_seconds: PosInt | None = None
    target_weight: WeightIn | None = None
    rpe_value_id: int | None = None
    notes: str | None = None

    @model_validator(mode="after")
    def reps_xor_hold(self):
        if self.reps is not None and self.hold_seconds is not None:
            raise ValueError("prescription cannot have both reps and hold_seconds")
        if self.reps is None and self.hold_seconds is None:
            raise ValueError("prescription must have either reps or hold_seconds")
        return self

    def target_weight_kg(self) -> float | None:
        return self.target_weight.in_kg() if self.target_weight else None

class ExercisePrescriptionIn(PrescriptionTarget):
    exercise_order: PosInt

def _unique_exercise_orders(items: list[ExercisePrescriptionIn]) -> list[ExercisePrescriptionIn]:
    orders = [e.exercise_order for e in items]
    if len(orders) != len(set(orders)):
        raise ValueError("exercise_order values must be unique within a group")
    return items

class PrescriptionGroupCreate(BaseModel):
    type: PrescriptionType
    group_order: PosInt
    group_rounds: PosInt | None = None
    rest_between_sets: NonNegInt | None = None
    group_name: NameStr | None = None
    group_notes: str | None = None
    exercises: list[ExercisePrescriptionIn] = Field(min_length=1)

    @field_validator("exercises")
    @classmethod
    def unique_orders(cls, v):
        return _unique_exercise_orders(v)

class PrescriptionGroupUpdate(BaseModel):
    type: PrescriptionType | None = None
    group_order: PosInt | None = None
    group_rounds: PosInt | None = None
    rest_between_sets: NonNegInt | None = None
    group_name: NameStr | None = None
    group_notes: str | None = None
    # when present, replaces every entry of the group
    exercises: list[ExercisePrescriptionIn] | None = Field(default=None, min_length=1)

    @field_validator("exercises")
    @classmethod
    def unique_orders(cls, v):
        return _unique_exercise_orders(v) if v is not None else v

class GroupOrderItem(BaseModel):
    group_id: int
    group_order: PosInt

class ReorderGroups(BaseModel):
    group_orders: list[GroupOrderItem] = Field(min_length=1)

    @field_validator("group_orders")
    @classmethod
    def no_duplicates(cls, v: list[GroupOrderItem]):
        ids = [i.group_id for i in v]
        orders = [i.group_order for i in v]
        if len(ids) != len(set(ids)):
            raise ValueError("group_id listed more than once")
        if len(orders) != len(set(orders)):
            raise ValueError("group_order values must be unique")
        return v

class ExercisePrescriptionRead(BaseModel):
    id: int
    group_id: int
    exercise_id: int
    exercise_order: int
    sets: int | None = None
    reps: int | None = None
    hold_seconds: int | None = None
    target_weight_kg: float | None = None
    rpe_value_id: int | None = None
    notes: str | None = None
    exercise: ExerciseBrief | None = None
    rpe_value: RPEValueRead | None = None

    model_config = {"from_attributes": True}

class PrescriptionGroupRead(BaseModel):
    id: int
    workout_id: int
    type: PrescriptionType
    group_order: int
    group_rounds: int | None = None
    rest_between_sets: int | None = None
    group_name: str | None = None
    group_notes: str | None = None
    exercises: list[ExercisePrescriptionRead] = []

    model_config = {"from_attributes": True}
