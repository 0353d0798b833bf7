from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session
from app.db import get_db
from app.schemas.session import SessionCreate, SessionUpdate, SessionEnd, SessionRead, SessionSummary
from app.services.sessions import SessionService
from app.deps.auth import get_current_user
from app.models import User  # type only
from app.units import WeightUnit

router = APIRouter(prefix="/sessions", tags=["sessions"])

@router.post("", response_model=SessionRead, status_code=status.HTTP_201_CREATED)
def create_session(payload: SessionCreate, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return SessionService(db).start(payload, current.id)

@router.get("", response_model=list[SessionSummary])
def list_sessions(
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
    client_id: int | None = Query(None, description="Trainer view: sessions you logged for this client"),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
):
    sessions = SessionService(db).list(current.id, client_id=client_id, limit=limit, offset=offset)
    return [SessionSummary.from_session(s) for s in sessions]

@router.get("/{session_id}", response_model=SessionRead)
def get_session(
    session_id: int,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
    unit: WeightUnit = Query(WeightUnit.kg, description="Unit for the rendered set weights"),
):
    sess = SessionService(db).get(session_id, current.id)
    return SessionRead.model_validate(sess, context={"unit": unit})

@router.patch("/{session_id}", response_model=SessionRead)
def update_session(
    session_id: int,
    payload: SessionUpdate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    return SessionService(db).update(session_id, payload, current.id)

@router.post("/{session_id}/end", response_model=SessionRead)
def end_session(
    session_id: int,
    payload: SessionEnd,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    return SessionService(db).end(session_id, payload, current.id)

@router.delete("/{session_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_session(session_id: int, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    SessionService(db).delete(session_id, current.id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
