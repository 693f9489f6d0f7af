# go4motors/schemas/brand.py
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from go4motors.schemas.common import CamelModel, TranslationIn, TranslationOut


class BrandCreate(CamelModel):
    slug: str = Field(..., min_length=1)
    image: Optional[str] = None
    translations: List[TranslationIn]


class BrandUpdate(CamelModel):
    slug: Optional[str] = Field(None, min_length=1)
    image: Optional[str] = None
    translations: Optional[List[TranslationIn]] = None   # replaces the whole set


class BrandOut(CamelModel):
    id: str
    slug: str
    image: Optional[str]
    translations: List[TranslationOut] = []
    created_at: datetime
    updated_at: datetime


class BrandResponse(CamelModel):
    message: str
    brand: BrandOut
