# go4motors/models/vehicle.py
"""
Vehicles offered for sale or rental.
Every vehicle references its managing admin (User), a Category, a Brand and a
Supplier. Images and per-language translations are owned rows: they are removed
with the vehicle and replaced wholesale on update.
"""

import enum

from sqlalchemy import (Boolean, Column, DateTime, Enum, Float, ForeignKey, Integer,
                        String, Text, UniqueConstraint)
from sqlalchemy.orm import relationship

from go4motors.database import Base
from go4motors.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class VehicleStatus(str, enum.Enum):
    available = "available"
    reserved = "reserved"
    sold = "sold"
    rented = "rented"


class Vehicle(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "vehicles"

    model = Column(String(200), nullable=False)
    body_type = Column(String(100))
    range = Column(String(100))
    condition = Column(String(100), nullable=False)
    status = Column(Enum(VehicleStatus, name="vehicle_status"), nullable=False,
                    default=VehicleStatus.available)
    stock = Column(Integer, nullable=False, default=1)
    price = Column(Float)
    rental_price_per_day = Column(Float)
    first_registration = Column(DateTime)
    country_origin = Column(String(100))
    axle_count = Column(Integer)
    axle_brand = Column(String(100))
    mileage = Column(Integer)
    emission_norm = Column(String(50))
    gearbox = Column(String(100))
    engine_power = Column(Integer)       # hp
    engine_size = Column(Integer)        # cm3
    dimensions = Column(String(100))
    fuel_type = Column(String(50))
    tonnage = Column(String(50))
    tires = Column(String(100))
    cabin_type = Column(String(100))
    cabin_equipments = Column(Text)
    specific_equipments = Column(Text)

    admin_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    category_id = Column(String(36), ForeignKey("categories.id"), nullable=False, index=True)
    brand_id = Column(String(36), ForeignKey("brands.id"), nullable=False, index=True)
    supplier_id = Column(String(36), ForeignKey("suppliers.id"), nullable=False, index=True)

    admin = relationship("User")
    category = relationship("Category", back_populates="vehicles")
    brand = relationship("Brand", back_populates="vehicles")
    supplier = relationship("Supplier", back_populates="vehicles")
    images = relationship("VehicleImage", back_populates="vehicle", cascade="all, delete-orphan")
    translations = relationship("VehicleTranslation", back_populates="vehicle",
                                cascade="all, delete-orphan", order_by="VehicleTranslation.language")

    def __repr__(self):
        return f"<Vehicle {self.id} model={self.model} status={self.status}>"


class VehicleImage(UUIDPrimaryKeyMixin, Base):
    __tablename__ = "vehicle_images"

    vehicle_id = Column(String(36), ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False, index=True)
    url = Column(String(500), nullable=False)
    alt = Column(String(255))
    is_main = Column(Boolean, default=False, nullable=False)

    vehicle = relationship("Vehicle", back_populates="images")


class VehicleTranslation(UUIDPrimaryKeyMixin, Base):
    __tablename__ = "vehicle_translations"
    __table_args__ = (UniqueConstraint("vehicle_id", "language", name="uq_vehicle_translation_language"),)

    vehicle_id = Column(String(36), ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False, index=True)
    language = Column(String(5), nullable=False)
    title = Column(String(255))
    description = Column(Text)

    vehicle = relationship("Vehicle", back_populates="translations")
