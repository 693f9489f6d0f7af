# go4motors/models/supplier.py
"""Vehicle suppliers. Unique by name; translations are optional."""

from sqlalchemy import Column, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from go4motors.database import Base
from go4motors.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Supplier(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "suppliers"

    name = Column(String(200), unique=True, nullable=False, index=True)
    address = Column(String(500))
    phone = Column(String(50))
    email = Column(String(255))

    translations = relationship("SupplierTranslation", back_populates="supplier",
                                cascade="all, delete-orphan", order_by="SupplierTranslation.language")
    vehicles = relationship("Vehicle", back_populates="supplier")

    def __repr__(self):
        return f"<Supplier {self.name}>"


class SupplierTranslation(UUIDPrimaryKeyMixin, Base):
    __tablename__ = "supplier_translations"
    __table_args__ = (UniqueConstraint("supplier_id", "language", name="uq_supplier_translation_language"),)

    supplier_id = Column(String(36), ForeignKey("suppliers.id", ondelete="CASCADE"), nullable=False, index=True)
    language = Column(String(5), nullable=False)
    name = Column(String(200), nullable=False)
    description = Column(Text)

    supplier = relationship("Supplier", back_populates="translations")
