from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from app.db import get_db
from app.schemas.session import ExerciseLogRead, ExerciseLogNotesUpdate
from app.schemas.session_set import SetCreate, SessionSetRead
from app.services.tracking import SessionTracker
from app.deps.auth import get_current_user
from app.models import User
from app.units import WeightUnit

router = APIRouter(prefix="/session-exercises", tags=["exercise-logs"])

@router.get("/{log_id}", response_model=ExerciseLogRead)
def get_exercise_log(
    log_id: int,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
    unit: WeightUnit = Query(WeightUnit.kg),
):
    entry = SessionTracker(db).get_exercise_log(log_id, current.id)
    return ExerciseLogRead.model_validate(entry, context={"unit": unit})

@router.post("/{log_id}/complete", response_model=ExerciseLogRead)
def complete_exercise_log(log_id: int, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return SessionTracker(db).complete_exercise_log(log_id, current.id)

@router.post("/{log_id}/skip", response_model=ExerciseLogRead)
def skip_exercise_log(log_id: int, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return SessionTracker(db).skip_exercise_log(log_id, current.id)

@router.patch("/{log_id}/notes", response_model=ExerciseLogRead)
def update_exercise_log_notes(
    log_id: int,
    payload: ExerciseLogNotesUpdate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    return SessionTracker(db).update_exercise_log_notes(log_id, payload.notes, current.id)

@router.post("/{log_id}/sets", response_model=SessionSetRead, status_code=status.HTTP_201_CREATED)
def add_set(
    log_id: int,
    payload: SetCreate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    return SessionTracker(db).add_set(log_id, payload, current.id)
