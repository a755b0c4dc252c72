# backend/models/users.py
from sqlalchemy import Column, Integer, String, DateTime, func
from sqlalchemy.orm import relationship
from database import Base

# Represents a driver account with authentication details
class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, nullable=False)
    email = Column(String, unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Everything a driver records belongs to them
    loads = relationship("Load", back_populates="user")
    fuel_stops = relationship("FuelStop", back_populates="user")
    settings = relationship("UserSettings", back_populates="user", uselist=False)
