# backend/models/fuel_stop.py
from sqlalchemy import Column, Integer, String, Float, Boolean, ForeignKey, DateTime, func
from sqlalchemy.orm import relationship
from database import Base

# A fuel purchase made while running a load
class FuelStop(Base):
    __tablename__ = "fuel_stops"

    id = Column(Integer, primary_key=True, index=True)
    pro_number = Column(String, ForeignKey("loads.pro_number"), index=True, nullable=False)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)

    date_of_stop = Column(DateTime(timezone=True), nullable=False)
    vendor = Column(String, nullable=False)
    location = Column(String, nullable=False)

    gallons_diesel_purchased = Column(Float, nullable=True)
    diesel_price_per_gallon = Column(Float, nullable=True)
    gallons_def_purchased = Column(Float, nullable=True)
    def_price_per_gallon = Column(Float, nullable=True)

    # Derived by utils.fuel.calculate_fuel_stop, never written directly
    total_diesel_cost = Column(Float, nullable=True)
    total_def_cost = Column(Float, nullable=True)
    total_fuel_stop = Column(Float, nullable=True)

    fuel_card_used = Column(Boolean, nullable=False, default=False)
    discount_eligible = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    load = relationship("Load", back_populates="fuel_stops")
    user = relationship("User", back_populates="fuel_stops")
