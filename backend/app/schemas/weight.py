from typing import Annotated
from pydantic import BaseModel, Field, field_validator
from app.units import WeightUnit, normalize_unit, to_kg, from_kg

NonNegFloat = Annotated[float, Field(ge=0, le=2000)]

class WeightIn(BaseModel):
    """A weight as the user typed it; only the kg value is ever persisted."""
    value: NonNegFloat
    unit: WeightUnit = WeightUnit.kg

    @field_validator("unit", mode="before")
    @classmethod
    def accept_aliases(cls, v):
        # "lbs", "KG", ... -> canonical enum; unknown units raise ValueError -> 422
        return normalize_unit(v) if isinstance(v, str) else v

    def in_kg(self) -> float:
        return to_kg(self.value, self.unit)

class WeightOut(BaseModel):
    """A stored kg weight rendered in the unit the caller asked for."""
    value: float
    unit: WeightUnit

    @classmethod
    def render(cls, kg: float, unit: WeightUnit = WeightUnit.kg) -> "WeightOut":
        return cls(value=from_kg(kg, unit), unit=unit)
