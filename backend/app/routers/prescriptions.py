from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from app.db import get_db
from app.schemas.prescription import (
    PrescriptionTarget,
    PrescriptionGroupCreate,
    PrescriptionGroupUpdate,
    PrescriptionGroupRead,
    ExercisePrescriptionRead,
    ReorderGroups,
)
from app.services.prescriptions import PrescriptionEditor
from app.deps.auth import get_current_user
from app.models import User

router = APIRouter(prefix="/workouts/{workout_id}/groups", tags=["prescriptions"])

@router.get("", response_model=list[PrescriptionGroupRead])
def list_groups(workout_id: int, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return PrescriptionEditor(db).list_groups(workout_id, current.id)

@router.post("", response_model=PrescriptionGroupRead, status_code=status.HTTP_201_CREATED)
def create_group(
    workout_id: int,
    payload: PrescriptionGroupCreate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    return PrescriptionEditor(db).create_group(workout_id, payload, current.id)

@router.put("/order", response_model=list[PrescriptionGroupRead])
def reorder_groups(
    workout_id: int,
    payload: ReorderGroups,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    return PrescriptionEditor(db).reorder_groups(workout_id, payload, current.id)

@router.get("/{group_id}", response_model=PrescriptionGroupRead)
def get_group(workout_id: int, group_id: int, db: Session = Depends(get_db),
              current: User = Depends(get_current_user)):
    return PrescriptionEditor(db).get_group(workout_id, group_id, current.id)

@router.patch("/{group_id}", response_model=PrescriptionGroupRead)
def update_group(
    workout_id: int,
    group_id: int,
    payload: PrescriptionGroupUpdate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    return PrescriptionEditor(db).update_group(workout_id, group_id, payload, current.id)

@router.delete("/{group_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_group(workout_id: int, group_id: int, db: Session = Depends(get_db),
                 current: User = Depends(get_current_user)):
    PrescriptionEditor(db).delete_group(workout_id, group_id, current.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.post("/{group_id}/exercises", response_model=ExercisePrescriptionRead,
             status_code=status.HTTP_201_CREATED)
def append_exercise(
    workout_id: int,
    group_id: int,
    payload: PrescriptionTarget,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    return PrescriptionEditor(db).append_entry(workout_id, group_id, payload, current.id)
