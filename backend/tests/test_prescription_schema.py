import pytest
from pydantic import ValidationError

from app.schemas.prescription import PrescriptionTarget, PrescriptionGroupCreate, ReorderGroups
from app.schemas.session_set import SetCreate

def test_reps_only_and_hold_only_are_valid():
    assert PrescriptionTarget(exercise_id=1, sets=3, reps=5).hold_seconds is None
    assert PrescriptionTarget(exercise_id=1, hold_seconds=60).reps is None

def test_both_reps_and_hold_rejected():
    with pytest.raises(ValidationError) as exc:
        PrescriptionTarget(exercise_id=1, reps=5, hold_seconds=30)
    assert "both reps and hold_seconds" in str(exc.value)

def test_neither_reps_nor_hold_rejected():
    with pytest.raises(ValidationError) as exc:
        PrescriptionTarget(exercise_id=1, sets=3)
    assert "either reps or hold_seconds" in str(exc.value)

def test_target_weight_stored_in_kg():
    t = PrescriptionTarget(exercise_id=1, reps=5, target_weight={"value": 100, "unit": "lb"})
    assert t.target_weight_kg() == pytest.approx(45.359237)
    assert PrescriptionTarget(exercise_id=1, reps=5).target_weight_kg() is None

def test_group_needs_entries_with_unique_orders():
    with pytest.raises(ValidationError):
        PrescriptionGroupCreate(type="straight", group_order=1, exercises=[])
    with pytest.raises(ValidationError):
        PrescriptionGroupCreate(type="superset", group_order=1, exercises=[
            {"exercise_id": 1, "exercise_order": 1, "reps": 10},
            {"exercise_id": 2, "exercise_order": 1, "reps": 10},
        ])

def test_unknown_group_type_rejected():
    with pytest.raises(ValidationError):
        PrescriptionGroupCreate(type="giant_set", group_order=1,
                                exercises=[{"exercise_id": 1, "exercise_order": 1, "reps": 10}])

def test_reorder_rejects_duplicates():
    with pytest.raises(ValidationError):
        ReorderGroups(group_orders=[{"group_id": 1, "group_order": 1}, {"group_id": 1, "group_order": 2}])
    with pytest.raises(ValidationError):
        ReorderGroups(group_orders=[{"group_id": 1, "group_order": 1}, {"group_id": 2, "group_order": 1}])

def test_set_cannot_record_reps_and_hold():
    with pytest.raises(ValidationError):
        SetCreate(actual_reps=5, hold_seconds_actual=30)
