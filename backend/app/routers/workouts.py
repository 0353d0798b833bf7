from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from app.db import get_db
from app.schemas.workout import WorkoutCreate, WorkoutUpdate, WorkoutRead
from app.services.workouts import WorkoutService
from app.deps.auth import get_current_user
from app.models import User

router = APIRouter(prefix="/workouts", tags=["workouts"])

@router.post("", response_model=WorkoutRead, status_code=status.HTTP_201_CREATED)
def create_workout(payload: WorkoutCreate, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return WorkoutService(db).create(payload, current.id)

@router.get("", response_model=list[WorkoutRead])
def list_my_workouts(
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
):
    return WorkoutService(db).list(current.id, limit=limit, offset=offset).items

@router.get("/{workout_id}", response_model=WorkoutRead)
def get_workout(workout_id: int, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return WorkoutService(db).get(workout_id, current.id)

@router.patch("/{workout_id}", response_model=WorkoutRead)
def update_workout(
    workout_id: int,
    payload: WorkoutUpdate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    return WorkoutService(db).update(workout_id, payload, current.id)

@router.delete("/{workout_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_workout(workout_id: int, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    WorkoutService(db).delete(workout_id, current.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.post("/{workout_id}/duplicate", response_model=WorkoutRead, status_code=status.HTTP_201_CREATED)
def duplicate_workout(workout_id: int, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return WorkoutService(db).duplicate(workout_id, current.id)
