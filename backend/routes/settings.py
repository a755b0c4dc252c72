# backend/routes/settings.py
from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.orm import Session
from database import get_db
from models.user_settings import UserSettings
from models.users import User
from utils.tokenJWT import get_current_user
from utils.audit import write_log, client_ip
from utils.loads import PAY_FIELDS
from schemas.settings import SettingsOut, SettingsUpdate

router = APIRouter(prefix="/users/settings", tags=["Settings"])


def _get_or_create_settings(db: Session, user_id: int) -> UserSettings:
    # First read creates the row with model defaults
    settings = db.query(UserSettings).filter(UserSettings.user_id == user_id).first()
    if not settings:
        settings = UserSettings(user_id=user_id)
        db.add(settings)
        db.commit()
        db.refresh(settings)
    return settings


@router.get("", response_model=SettingsOut)
def get_settings(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return _get_or_create_settings(db, current_user.id)


@router.put("", response_model=SettingsOut)
def update_settings(
    payload: SettingsUpdate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    changes = payload.model_dump(exclude_unset=True)

    if "driver_pay_type" in changes and changes["driver_pay_type"] not in PAY_FIELDS:
        raise HTTPException(status_code=400, detail="Invalid driverPayType")

    rate = changes.get("percentage_rate")
    if rate is not None and not 0 <= rate <= 1:
        raise HTTPException(
            status_code=400,
            detail="Invalid percentageRate. Must be a decimal between 0 and 1, or null.",
        )

    settings = _get_or_create_settings(db, current_user.id)
    for field, value in changes.items():
        setattr(settings, field, value)

    # Mileage pay has no percentage rate
    if settings.driver_pay_type == "mileage":
        settings.percentage_rate = None

    db.commit()
    db.refresh(settings)

    write_log(db, user_id=current_user.id, action="SETTINGS_UPDATE", resource="settings",
              status="SUCCESS", ip=client_ip(request), meta={"fields": sorted(changes)})
    return settings
