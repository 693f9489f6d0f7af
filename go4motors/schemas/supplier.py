# go4motors/schemas/supplier.py
from datetime import datetime
from typing import List, Optional

from pydantic import EmailStr

from go4motors.schemas.common import CamelModel, TranslationIn, TranslationOut


class SupplierCreate(CamelModel):
    name: Optional[str] = None     # required, checked by the service for a localized message
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
    translations: Optional[List[TranslationIn]] = None


class SupplierUpdate(CamelModel):
    name: Optional[str] = None
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[EmailStr] = None
    translations: Optional[List[TranslationIn]] = None


class SupplierOut(CamelModel):
    id: str
    name: str
    address: Optional[str]
    phone: Optional[str]
    email: Optional[str]
    translations: List[TranslationOut] = []
    created_at: datetime
    updated_at: datetime


class SupplierResponse(CamelModel):
    message: str
    supplier: SupplierOut
