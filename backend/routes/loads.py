# backend/routes/loads.py
import logging
from datetime import datetime, timezone
from typing import List
from fastapi import APIRouter, Depends, HTTPException, Request, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from database import get_db
from models.load import Load
from models.users import User
from utils.tokenJWT import get_current_user
from utils.audit import write_log, client_ip
from utils.loads import build_load, apply_load_update
from schemas.load import LoadCreate, LoadUpdate, LoadOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/loads", tags=["Loads"])


def _get_owned_load(db: Session, user_id: int, pro_number: str) -> Load:
    # Loads owned by someone else are reported as missing
    load = db.query(Load).filter(Load.pro_number == pro_number, Load.user_id == user_id).first()
    if not load:
        raise HTTPException(status_code=404, detail="Load not found")
    return load


@router.get("", response_model=List[LoadOut])
def list_loads(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return (
        db.query(Load)
        .filter(Load.user_id == current_user.id)
        .order_by(Load.date_dispatched.desc())
        .all()
    )


@router.post("", response_model=LoadOut, status_code=status.HTTP_201_CREATED)
def create_load(
    payload: LoadCreate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    load = build_load(db, current_user.id, payload.model_dump())

    # PRO numbers are unique across all drivers
    if db.get(Load, load.pro_number) is not None:
        raise HTTPException(status_code=409, detail="Load with this Pro Number already exists.")

    db.add(load)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Load with this Pro Number already exists.")
    db.refresh(load)

    write_log(db, user_id=current_user.id, action="LOAD_CREATE", resource="loads",
              status="SUCCESS", ip=client_ip(request), meta={"pro_number": load.pro_number})
    logger.info("User %s booked load %s", current_user.id, load.pro_number)
    return load


@router.put("/{pro_number}", response_model=LoadOut)
def update_load(
    pro_number: str,
    payload: LoadUpdate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    load = _get_owned_load(db, current_user.id, pro_number)
    changes = payload.model_dump(exclude_unset=True)
    apply_load_update(db, load, changes)

    db.commit()
    db.refresh(load)

    write_log(db, user_id=current_user.id, action="LOAD_UPDATE", resource="loads",
              status="SUCCESS", ip=client_ip(request), meta={"pro_number": pro_number, "fields": sorted(changes)})
    return load


# Mark a load delivered as of now
@router.put("/{pro_number}/complete", response_model=LoadOut)
def complete_load(
    pro_number: str,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    load = _get_owned_load(db, current_user.id, pro_number)
    if load.date_delivered:
        raise HTTPException(status_code=400, detail="Load already completed")

    load.date_delivered = datetime.now(timezone.utc)
    db.commit()
    db.refresh(load)

    write_log(db, user_id=current_user.id, action="LOAD_COMPLETE", resource="loads",
              status="SUCCESS", ip=client_ip(request), meta={"pro_number": pro_number})
    return load
