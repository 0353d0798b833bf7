from fastapi import APIRouter, Body, Depends, Query, Response, status
from sqlalchemy.orm import Session
from app.db import get_db
from app.schemas.session_set import SetUpdate, SetComplete, SessionSetRead
from app.services.tracking import SessionTracker
from app.deps.auth import get_current_user
from app.models import User
from app.units import WeightUnit

router = APIRouter(prefix="/session-sets", tags=["sets"])

@router.get("/{set_id}", response_model=SessionSetRead)
def get_set(
    set_id: int,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
    unit: WeightUnit = Query(WeightUnit.kg),
):
    s = SessionTracker(db).get_set(set_id, current.id)
    return SessionSetRead.model_validate(s, context={"unit": unit})

@router.patch("/{set_id}", response_model=SessionSetRead)
def update_set(
    set_id: int,
    payload: SetUpdate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    return SessionTracker(db).update_set(set_id, payload, current.id)

@router.post("/{set_id}/complete", response_model=SessionSetRead)
def complete_set(
    set_id: int,
    # body is optional: the final numbers may be sent along with the completion
    payload: SetComplete | None = Body(default=None),
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    return SessionTracker(db).complete_set(set_id, payload, current.id)

@router.delete("/{set_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_set(set_id: int, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    SessionTracker(db).delete_set(set_id, current.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
