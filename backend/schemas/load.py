# backend/schemas/load.py
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field, AliasChoices, field_validator
from pydantic.alias_generators import to_camel

from utils.loads import parse_delivery_date

# Shared wire format: camelCase JSON, snake_case attributes
class CamelModel(BaseModel):
    # Infinity and NaN are not amounts
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, from_attributes=True, allow_inf_nan=False
    )


# Fields a driver may send when booking or editing a load.
# Presence rules depend on driverPayType and are checked in utils.loads.
class LoadFields(CamelModel):
    date_dispatched: Optional[datetime] = None
    date_delivered: Optional[datetime] = None
    origin_city: Optional[str] = None
    origin_state: Optional[str] = None
    destination_city: Optional[str] = None
    destination_state: Optional[str] = None
    deadhead_miles: Optional[float] = None
    loaded_miles: Optional[float] = None
    weight: Optional[float] = None

    driver_pay_type: Optional[str] = None
    linehaul: Optional[float] = None
    fsc: Optional[float] = None
    fsc_per_loaded_mile: Optional[float] = None

    calculated_gross: Optional[float] = None
    projected_net: Optional[float] = None
    scale_cost: Optional[float] = None
    total_deductions: Optional[float] = Field(
        None, validation_alias=AliasChoices("calculatedDeductions", "totalDeductions")
    )
    fuel_road_use_tax: Optional[float] = None
    maintenance_reserve: Optional[float] = None
    bond_deposit: Optional[float] = None
    mrp_fee: Optional[float] = None

    # Empty strings and "Invalid date" mean the load is still active
    @field_validator("date_delivered", mode="before")
    @classmethod
    def _normalize_delivered(cls, value):
        return parse_delivery_date(value)


# Schema for booking a new load
class LoadCreate(LoadFields):
    pro_number: Optional[str] = None


# Schema for editing a load; the PRO number comes from the URL
class LoadUpdate(LoadFields):
    pass


# Output schema for load details
class LoadOut(CamelModel):
    pro_number: str
    user_id: int
    date_dispatched: datetime
    date_delivered: Optional[datetime] = None
    origin_city: str
    origin_state: str
    destination_city: str
    destination_state: str
    deadhead_miles: float
    loaded_miles: float
    weight: float

    driver_pay_type: str
    linehaul: Optional[float] = None
    fsc: Optional[float] = None
    fsc_per_loaded_mile: Optional[float] = None

    calculated_gross: Optional[float] = None
    projected_net: Optional[float] = None
    scale_cost: Optional[float] = None
    total_deductions: Optional[float] = None
    fuel_road_use_tax: Optional[float] = None
    maintenance_reserve: Optional[float] = None
    bond_deposit: Optional[float] = None
    mrp_fee: Optional[float] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# Compact load reference embedded in fuel stop listings
class LoadSummary(CamelModel):
    pro_number: str
    origin_city: str
    destination_city: str
