# backend/models/user_settings.py
from sqlalchemy import Column, Integer, String, Float, ForeignKey
from sqlalchemy.orm import relationship
from database import Base

DEFAULT_DRIVER_PAY_TYPE = "percentage"

# Per-user pay configuration; rates are stored as fractions (0.68 == 68%)
class UserSettings(Base):
    __tablename__ = "user_settings"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False, index=True)

    driver_pay_type = Column(String, nullable=False, default=DEFAULT_DRIVER_PAY_TYPE)
    # Null whenever driver_pay_type is "mileage"
    percentage_rate = Column(Float, nullable=True, default=0.68)

    # Deduction rates applied to gross pay
    fuel_road_use_tax = Column(Float, nullable=True, default=0.01)
    maintenance_reserve = Column(Float, nullable=True, default=0.04)
    bond_deposit = Column(Float, nullable=True, default=0.04)
    mrp_fee = Column(Float, nullable=True, default=0.01)

    user = relationship("User", back_populates="settings")
