# go4motors/schemas/category.py
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from go4motors.schemas.common import CamelModel, TranslationIn, TranslationOut


class CategoryCreate(CamelModel):
    slug: str = Field(..., min_length=1)
    image: Optional[str] = None
    translations: List[TranslationIn]


class CategoryUpdate(CamelModel):
    slug: Optional[str] = Field(None, min_length=1)
    image: Optional[str] = None
    translations: Optional[List[TranslationIn]] = None   # replaces the whole set


class CategoryOut(CamelModel):
    id: str
    slug: str
    image: Optional[str]
    translations: List[TranslationOut] = []
    created_at: datetime
    updated_at: datetime


class CategoryResponse(CamelModel):
    message: str
    category: CategoryOut
