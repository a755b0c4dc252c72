"""Fuel stop cost calculation.

All three derived amounts of a fuel stop come from here, both when a stop is
created and when one is edited, so stored totals always match their inputs.
"""
from dataclasses import dataclass, replace
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

# Discount taken off the pump price for eligible stops, per gallon
DIESEL_DISCOUNT_PER_GALLON = 0.05
# Flat service charge when the stop is paid with a fuel card
FUEL_CARD_FEE = 1.00

_CENT = Decimal("0.01")


def round2(value: float) -> float:
    # Half away from zero on the float's exact decimal value
    return float(Decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class FuelInputs:
    gallons_diesel: float
    price_diesel: float
    gallons_def: Optional[float] = None
    price_def: Optional[float] = None
    fuel_card_used: bool = False
    discount_eligible: bool = False

    @classmethod
    def from_stop(cls, stop) -> "FuelInputs":
        return cls(
            gallons_diesel=stop.gallons_diesel_purchased,
            price_diesel=stop.diesel_price_per_gallon,
            gallons_def=stop.gallons_def_purchased,
            price_def=stop.def_price_per_gallon,
            fuel_card_used=bool(stop.fuel_card_used),
            discount_eligible=bool(stop.discount_eligible),
        )


@dataclass(frozen=True)
class FuelStopCosts:
    total_diesel_cost: float
    total_def_cost: float
    total_fuel_stop: float


def def_applies(gallons_def: Optional[float], price_def: Optional[float]) -> bool:
    return bool(gallons_def and price_def and gallons_def > 0 and price_def > 0)


def calculate_fuel_stop(inputs: FuelInputs) -> FuelStopCosts:
    discount = DIESEL_DISCOUNT_PER_GALLON if inputs.discount_eligible else 0
    total_diesel_cost = round2((inputs.price_diesel - discount) * inputs.gallons_diesel)

    total_def_cost = 0.0
    if def_applies(inputs.gallons_def, inputs.price_def):
        total_def_cost = round2(inputs.price_def * inputs.gallons_def)

    fee = FUEL_CARD_FEE if inputs.fuel_card_used else 0
    total_fuel_stop = round2(total_diesel_cost + total_def_cost + fee)

    return FuelStopCosts(
        total_diesel_cost=total_diesel_cost,
        total_def_cost=total_def_cost,
        total_fuel_stop=total_fuel_stop,
    )


# Fields where an explicit None in an edit clears the stored value
_CLEARABLE = ("gallons_def", "price_def")


def merge_fuel_inputs(stored: FuelInputs, changes: dict) -> FuelInputs:
    """Overlay an edit onto the stored inputs.

    Keys absent from ``changes`` keep their stored value. DEF quantities can be
    cleared with None; for every other field None also keeps the stored value.
    """
    updates = {}
    for key, value in changes.items():
        if key not in FuelInputs.__dataclass_fields__:
            raise KeyError(key)
        if value is None and key not in _CLEARABLE:
            continue
        updates[key] = value
    return replace(stored, **updates)
