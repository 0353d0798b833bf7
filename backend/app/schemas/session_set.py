from typing import Annotated
from pydantic import BaseModel, Field, ValidationInfo, model_validator
from app.schemas.catalog import RPEValueRead
from app.schemas.weight import WeightIn, WeightOut
from app.units import WeightUnit

NonNegInt = Annotated[int, Field(ge=0)]

class SetFields(BaseModel):
    actual_reps: NonNegInt | None = None
    hold_seconds_actual: NonNegInt | None = None
    actual_weight: WeightIn | None = None
    rpe_value_id: int | None = None
    notes: str | None = None

    @model_validator(mode="after")
    def one_quantity_kind(self):
        if self.actual_reps is not None and self.hold_seconds_actual is not None:
            raise ValueError("a set records either actual_reps or hold_seconds_actual, not both")
        return self

class SetCreate(SetFields):
    pass

class SetUpdate(SetFields):
    completed: bool | None = None
    was_failure: bool | None = None

class SetComplete(SetFields):
    was_failure: bool | None = None

class SessionSetRead(BaseModel):
    id: int
    exercise_log_id: int
    set_number: int
    actual_reps: int | None = None
    actual_weight_kg: float | None = None
    # actual_weight_kg in the unit passed as validation context {"unit": ...}
    actual_weight: WeightOut | None = None
    hold_seconds_actual: int | None = None
    rpe_value_id: int | None = None
    rpe_value: RPEValueRead | None = None
    completed: bool
    was_failure: bool
    notes: str | None = None

    model_config = {"from_attributes": True}

    @model_validator(mode="after")
    def display_weight(self, info: ValidationInfo):
        if self.actual_weight is None and self.actual_weight_kg is not None:
            unit = (info.context or {}).get("unit", WeightUnit.kg)
            self.actual_weight = WeightOut.render(self.actual_weight_kg, unit)
        return self
