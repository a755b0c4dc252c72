# backend/routes/fuel_stops.py
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, Request, status
from sqlalchemy.orm import Session, joinedload

from database import get_db
from models.fuel_stop import FuelStop
from models.load import Load
from models.users import User
from utils.tokenJWT import get_current_user
from utils.audit import write_log, client_ip
from utils.fuel import FuelInputs, calculate_fuel_stop, merge_fuel_inputs
from schemas.fuel_stop import FuelStopCreate, FuelStopUpdate, FuelStopOut, MessageOut

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/fuelstops", tags=["Fuel Stops"])

# Wire names the entry form must send
REQUIRED_FIELDS = {
    "proNumber": "pro_number",
    "dateOfStop": "date_of_stop",
    "vendorName": "vendor_name",
    "location": "location",
    "gallonsDieselPurchased": "gallons_diesel_purchased",
    "pumpPriceDiesel": "pump_price_diesel",
}

# Form field -> calculator input
INPUT_FIELDS = {
    "gallons_diesel_purchased": "gallons_diesel",
    "pump_price_diesel": "price_diesel",
    "gallons_def_purchased": "gallons_def",
    "pump_price_def": "price_def",
    "fuel_card_used": "fuel_card_used",
    "discount_eligible": "discount_eligible",
}


def _apply_inputs(stop: FuelStop, inputs: FuelInputs):
    # Inputs and derived totals are always written together
    costs = calculate_fuel_stop(inputs)
    stop.gallons_diesel_purchased = inputs.gallons_diesel
    stop.diesel_price_per_gallon = inputs.price_diesel
    stop.gallons_def_purchased = inputs.gallons_def
    stop.def_price_per_gallon = inputs.price_def
    stop.fuel_card_used = inputs.fuel_card_used
    stop.discount_eligible = inputs.discount_eligible
    stop.total_diesel_cost = costs.total_diesel_cost
    stop.total_def_cost = costs.total_def_cost
    stop.total_fuel_stop = costs.total_fuel_stop


def _get_owned_stop(db: Session, user_id: int, stop_id: int) -> FuelStop:
    stop = db.query(FuelStop).filter(FuelStop.id == stop_id, FuelStop.user_id == user_id).first()
    if not stop:
        raise HTTPException(status_code=404, detail="Fuel stop not found or access denied")
    return stop


@router.get("", response_model=List[FuelStopOut])
def list_fuel_stops(
    pro_number: Optional[str] = Query(None, alias="proNumber"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    query = db.query(FuelStop).options(joinedload(FuelStop.load)).filter(FuelStop.user_id == current_user.id)
    if pro_number:
        query = query.filter(FuelStop.pro_number == pro_number)

    # Newest stops first
    return query.order_by(FuelStop.date_of_stop.desc(), FuelStop.id.desc()).all()


@router.post("", response_model=FuelStopOut, status_code=status.HTTP_201_CREATED)
def create_fuel_stop(
    payload: FuelStopCreate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    for wire_name, field in REQUIRED_FIELDS.items():
        value = getattr(payload, field)
        if value is None or value == "":
            raise HTTPException(status_code=400, detail=f"Missing required field from payload: {wire_name}")

    load = db.query(Load).filter(Load.pro_number == payload.pro_number, Load.user_id == current_user.id).first()
    if not load:
        raise HTTPException(status_code=404, detail="Associated load not found or access denied.")

    stop = FuelStop(
        pro_number=load.pro_number,
        user_id=current_user.id,
        date_of_stop=payload.date_of_stop,
        vendor=payload.vendor_name,
        location=payload.location,
    )
    _apply_inputs(stop, FuelInputs(
        gallons_diesel=payload.gallons_diesel_purchased,
        price_diesel=payload.pump_price_diesel,
        gallons_def=payload.gallons_def_purchased,
        price_def=payload.pump_price_def,
        fuel_card_used=payload.fuel_card_used,
        discount_eligible=payload.discount_eligible,
    ))

    db.add(stop)
    db.commit()
    db.refresh(stop)

    write_log(db, user_id=current_user.id, action="FUELSTOP_CREATE", resource="fuelstops",
              status="SUCCESS", ip=client_ip(request),
              meta={"id": stop.id, "pro_number": stop.pro_number, "total": stop.total_fuel_stop})
    return stop


@router.put("/{stop_id}", response_model=FuelStopOut)
def update_fuel_stop(
    stop_id: int,
    payload: FuelStopUpdate,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    stop = _get_owned_stop(db, current_user.id, stop_id)
    changes = payload.model_dump(exclude_unset=True)

    # Descriptive fields keep their stored value when sent as null
    if changes.get("date_of_stop") is not None:
        stop.date_of_stop = changes["date_of_stop"]
    if changes.get("vendor_name") is not None:
        stop.vendor = changes["vendor_name"]
    if changes.get("location") is not None:
        stop.location = changes["location"]

    # Totals are recomputed from stored inputs merged with the edit
    edits = {INPUT_FIELDS[k]: v for k, v in changes.items() if k in INPUT_FIELDS}
    _apply_inputs(stop, merge_fuel_inputs(FuelInputs.from_stop(stop), edits))

    db.commit()
    db.refresh(stop)

    write_log(db, user_id=current_user.id, action="FUELSTOP_UPDATE", resource="fuelstops",
              status="SUCCESS", ip=client_ip(request), meta={"id": stop.id, "fields": sorted(changes)})
    return stop


@router.delete("/{stop_id}", response_model=MessageOut)
def delete_fuel_stop(
    stop_id: int,
    request: Request,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    stop = _get_owned_stop(db, current_user.id, stop_id)
    db.delete(stop)
    db.commit()

    write_log(db, user_id=current_user.id, action="FUELSTOP_DELETE", resource="fuelstops",
              status="SUCCESS", ip=client_ip(request), meta={"id": stop_id})
    logger.info("User %s deleted fuel stop %s", current_user.id, stop_id)
    return {"message": "Fuel stop deleted successfully"}
