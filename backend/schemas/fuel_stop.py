# backend/schemas/fuel_stop.py
from datetime import datetime
from typing import Optional

from schemas.load import CamelModel, LoadSummary

# Pump-side names used by the entry form
class FuelStopFields(CamelModel):
    date_of_stop: Optional[datetime] = None
    vendor_name: Optional[str] = None
    location: Optional[str] = None
    gallons_diesel_purchased: Optional[float] = None
    pump_price_diesel: Optional[float] = None
    gallons_def_purchased: Optional[float] = None
    pump_price_def: Optional[float] = None


# Schema for recording a new fuel stop
class FuelStopCreate(FuelStopFields):
    pro_number: Optional[str] = None
    fuel_card_used: bool = False
    discount_eligible: bool = False


# Schema for editing a fuel stop; omitted fields keep their stored values
class FuelStopUpdate(FuelStopFields):
    fuel_card_used: Optional[bool] = None
    discount_eligible: Optional[bool] = None


# Output schema for fuel stop details including computed costs
class FuelStopOut(CamelModel):
    id: int
    pro_number: str
    user_id: int
    date_of_stop: datetime
    vendor: str
    location: str
    gallons_diesel_purchased: Optional[float] = None
    diesel_price_per_gallon: Optional[float] = None
    total_diesel_cost: Optional[float] = None
    gallons_def_purchased: Optional[float] = None
    def_price_per_gallon: Optional[float] = None
    total_def_cost: Optional[float] = None
    total_fuel_stop: Optional[float] = None
    fuel_card_used: bool
    discount_eligible: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    load: Optional[LoadSummary] = None


class MessageOut(CamelModel):
    message: str
