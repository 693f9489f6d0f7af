# go4motors/models/brand.py
from sqlalchemy import Column, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from go4motors.database import Base
from go4motors.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Brand(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "brands"

    slug = Column(String(150), unique=True, nullable=False, index=True)
    image = Column(String(500))

    translations = relationship("BrandTranslation", back_populates="brand",
                                cascade="all, delete-orphan", order_by="BrandTranslation.language")
    vehicles = relationship("Vehicle", back_populates="brand")

    def __repr__(self):
        return f"<Brand {self.slug}>"


class BrandTranslation(UUIDPrimaryKeyMixin, Base):
    __tablename__ = "brand_translations"
    __table_args__ = (UniqueConstraint("brand_id", "language", name="uq_brand_translation_language"),)

    brand_id = Column(String(36), ForeignKey("brands.id", ondelete="CASCADE"), nullable=False, index=True)
    language = Column(String(5), nullable=False)
    name = Column(String(200), nullable=False)
    description = Column(Text)

    brand = relationship("Brand", back_populates="translations")
