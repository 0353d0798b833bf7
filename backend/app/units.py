"""Weight unit handling.

Every persisted weight is kilograms. Pounds are accepted at the API boundary
and converted here; the input unit is never stored.
"""
from enum import Enum

LB_TO_KG = 0.45359237  # exact, by definition of the avoirdupois pound


class WeightUnit(str, Enum):
    kg = "kg"
    lb = "lb"


_ALIASES = {"kg": WeightUnit.kg, "lb": WeightUnit.lb, "lbs": WeightUnit.lb}


def normalize_unit(unit: str | WeightUnit) -> WeightUnit:
    """Map ``kg`` / ``lb`` / ``lbs`` (any case) onto a :class:`WeightUnit`."""
    if isinstance(unit, WeightUnit):
        return unit
    try:
        return _ALIASES[unit.strip().lower()]
    except KeyError:
        raise ValueError(f"unsupported weight unit '{unit}'") from None


def to_kg(value: float, unit: str | WeightUnit = WeightUnit.kg) -> float:
    if normalize_unit(unit) is WeightUnit.lb:
        return value * LB_TO_KG
    return float(value)


def from_kg(kg: float, unit: str | WeightUnit = WeightUnit.kg) -> float:
    if normalize_unit(unit) is WeightUnit.lb:
        return kg / LB_TO_KG
    return float(kg)
