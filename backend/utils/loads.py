"""Load booking rules.

A driver may have at most one active load (no delivery date) at a time, and
the pay fields kept on a load depend on its driver pay type. The active-load
check is a plain read before the write, so two simultaneous requests for the
same driver can both pass it.
"""
import logging
from datetime import date, datetime, time, timezone
from typing import Optional

from fastapi import HTTPException, status
from pydantic.alias_generators import to_camel
from sqlalchemy.orm import Session

from models.load import Load
from utils.errors import missing_field_message

logger = logging.getLogger(__name__)

BASE_REQUIRED_FIELDS = (
    "pro_number",
    "date_dispatched",
    "origin_city",
    "origin_state",
    "destination_city",
    "destination_state",
    "deadhead_miles",
    "loaded_miles",
    "weight",
    "driver_pay_type",
)

# Pay fields used by each driver pay type
PAY_FIELDS = {
    "percentage": ("linehaul", "fsc"),
    "mileage": ("fsc_per_loaded_mile",),
}
ALL_PAY_FIELDS = ("linehaul", "fsc", "fsc_per_loaded_mile")

ACTIVE_LOAD_EXISTS = "An active load already exists. Please complete it before adding a new active load."
ANOTHER_LOAD_ACTIVE = "Another load is already active. Cannot set this load as active."


def parse_delivery_date(value) -> Optional[datetime]:
    """Turn a client-supplied delivery date into a datetime, or None.

    Missing, blank, "Invalid date" and unparseable values all mean the load
    has not been delivered yet. Numbers are epoch milliseconds.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text or text == "Invalid date":
        return None
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return None


def _is_blank(value) -> bool:
    # 0 is a legitimate value for miles and money
    return value is None or value == ""


def find_active_load(db: Session, user_id: int, exclude_pro_number: Optional[str] = None) -> Optional[Load]:
    query = db.query(Load).filter(Load.user_id == user_id, Load.date_delivered.is_(None))
    if exclude_pro_number is not None:
        query = query.filter(Load.pro_number != exclude_pro_number)
    return query.first()


def _conflict(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=message)


def _bad_request(message: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)


def _select_pay_fields(values: dict, pay_type: str):
    # Null out the branch the pay type does not use
    for field in ALL_PAY_FIELDS:
        if field not in PAY_FIELDS[pay_type]:
            values[field] = None


def build_load(db: Session, user_id: int, values: dict) -> Load:
    """Validate a new load's values and return an unsaved Load."""
    values = dict(values)
    values["user_id"] = user_id
    if values.get("scale_cost") is None:
        values["scale_cost"] = 0

    if values.get("date_delivered") is None:
        active = find_active_load(db, user_id)
        if active:
            logger.warning("User %s already has active load %s", user_id, active.pro_number)
            raise _conflict(ACTIVE_LOAD_EXISTS)

    pay_type = values.get("driver_pay_type")
    if pay_type not in PAY_FIELDS:
        raise _bad_request("Invalid driverPayType specified.")
    _select_pay_fields(values, pay_type)

    for field in BASE_REQUIRED_FIELDS + PAY_FIELDS[pay_type]:
        if _is_blank(values.get(field)):
            raise _bad_request(missing_field_message(to_camel(field)))

    return Load(**values)


def apply_load_update(db: Session, load: Load, changes: dict):
    """Apply an edit to a stored load in place.

    ``changes`` holds only the fields the client sent. The stored pay type
    governs which pay fields are kept when the edit does not name one.
    """
    changes = dict(changes)

    if "date_delivered" in changes and changes["date_delivered"] is None:
        other = find_active_load(db, load.user_id, exclude_pro_number=load.pro_number)
        if other:
            logger.warning("User %s tried to reopen %s while %s is active", load.user_id, load.pro_number, other.pro_number)
            raise _conflict(ANOTHER_LOAD_ACTIVE)

    if "driver_pay_type" in changes and changes["driver_pay_type"] not in PAY_FIELDS:
        raise _bad_request("Invalid driverPayType specified for update.")
    pay_type = changes.get("driver_pay_type") or load.driver_pay_type
    _select_pay_fields(changes, pay_type)

    for field in BASE_REQUIRED_FIELDS + PAY_FIELDS[pay_type]:
        current = changes[field] if field in changes else getattr(load, field)
        if _is_blank(current):
            raise _bad_request(missing_field_message(to_camel(field)))

    for field, value in changes.items():
        setattr(load, field, value)
