from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from app.db import get_db
from app.schemas.session import BlockRead, BlockRPEUpdate
from app.services.tracking import SessionTracker
from app.deps.auth import get_current_user
from app.models import User
from app.units import WeightUnit

router = APIRouter(prefix="/session-blocks", tags=["blocks"])

@router.get("/{block_id}", response_model=BlockRead)
def get_block(
    block_id: int,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
    unit: WeightUnit = Query(WeightUnit.kg),
):
    block = SessionTracker(db).get_block(block_id, current.id)
    return BlockRead.model_validate(block, context={"unit": unit})

@router.post("/{block_id}/complete", response_model=BlockRead)
def complete_block(block_id: int, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return SessionTracker(db).complete_block(block_id, current.id)

@router.post("/{block_id}/skip", response_model=BlockRead)
def skip_block(block_id: int, db: Session = Depends(get_db), current: User = Depends(get_current_user)):
    return SessionTracker(db).skip_block(block_id, current.id)

@router.patch("/{block_id}/rpe", response_model=BlockRead)
def update_block_rpe(
    block_id: int,
    payload: BlockRPEUpdate,
    db: Session = Depends(get_db),
    current: User = Depends(get_current_user),
):
    return SessionTracker(db).update_block_rpe(block_id, payload.perceived_exertion, current.id)
