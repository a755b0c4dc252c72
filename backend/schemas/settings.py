# backend/schemas/settings.py
from typing import Optional

from schemas.load import CamelModel

# Output schema for a driver's pay settings
class SettingsOut(CamelModel):
    id: int
    user_id: int
    driver_pay_type: str
    percentage_rate: Optional[float] = None
    fuel_road_use_tax: Optional[float] = None
    maintenance_reserve: Optional[float] = None
    bond_deposit: Optional[float] = None
    mrp_fee: Optional[float] = None


# Schema for updating settings; rates are fractions between 0 and 1
class SettingsUpdate(CamelModel):
    driver_pay_type: Optional[str] = None
    percentage_rate: Optional[float] = None
    fuel_road_use_tax: Optional[float] = None
    maintenance_reserve: Optional[float] = None
    bond_deposit: Optional[float] = None
    mrp_fee: Optional[float] = None
