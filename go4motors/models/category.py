# go4motors/models/category.py
from sqlalchemy import Column, ForeignKey, String, Text, UniqueConstraint
from sqlalchemy.orm import relationship

from go4motors.database import Base
from go4motors.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class Category(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "categories"

    slug = Column(String(150), unique=True, nullable=False, index=True)
    image = Column(String(500))

    translations = relationship("CategoryTranslation", back_populates="category",
                                cascade="all, delete-orphan", order_by="CategoryTranslation.language")
    vehicles = relationship("Vehicle", back_populates="category")

    def __repr__(self):
        return f"<Category {self.slug}>"


class CategoryTranslation(UUIDPrimaryKeyMixin, Base):
    __tablename__ = "category_translations"
    __table_args__ = (UniqueConstraint("category_id", "language", name="uq_category_translation_language"),)

    category_id = Column(String(36), ForeignKey("categories.id", ondelete="CASCADE"), nullable=False, index=True)
    language = Column(String(5), nullable=False)
    name = Column(String(200), nullable=False)
    description = Column(Text)

    category = relationship("Category", back_populates="translations")
