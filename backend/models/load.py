# backend/models/load.py
from sqlalchemy import Column, Integer, String, Float, ForeignKey, DateTime, func
from sqlalchemy.orm import relationship
from database import Base

# A freight job. A load with no delivery date is the driver's active load.
class Load(Base):
    __tablename__ = "loads"

    # PRO number is the natural key users see on paperwork
    pro_number = Column(String, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)

    date_dispatched = Column(DateTime(timezone=True), nullable=False)
    date_delivered = Column(DateTime(timezone=True), nullable=True, index=True)

    origin_city = Column(String, nullable=False)
    origin_state = Column(String, nullable=False)
    destination_city = Column(String, nullable=False)
    destination_state = Column(String, nullable=False)

    deadhead_miles = Column(Float, nullable=False)
    loaded_miles = Column(Float, nullable=False)
    weight = Column(Float, nullable=False)

    # "percentage" uses linehaul + fsc, "mileage" uses fsc_per_loaded_mile
    driver_pay_type = Column(String, nullable=False)
    linehaul = Column(Float, nullable=True)
    fsc = Column(Float, nullable=True)
    fsc_per_loaded_mile = Column(Float, nullable=True)

    # Pay figures computed by the client
    calculated_gross = Column(Float, nullable=True)
    projected_net = Column(Float, nullable=True)
    scale_cost = Column(Float, nullable=True, default=0)
    total_deductions = Column(Float, nullable=True)

    # Deduction rates in effect when the load was booked
    fuel_road_use_tax = Column(Float, nullable=True)
    maintenance_reserve = Column(Float, nullable=True)
    bond_deposit = Column(Float, nullable=True)
    mrp_fee = Column(Float, nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())

    user = relationship("User", back_populates="loads")
    fuel_stops = relationship("FuelStop", back_populates="load")
