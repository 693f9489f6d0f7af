# go4motors/schemas/vehicle.py
from datetime import datetime
from typing import List, Optional

from pydantic import AliasChoices, Field

from go4motors.models.vehicle import VehicleStatus
from go4motors.schemas.brand import BrandOut
from go4motors.schemas.category import CategoryOut
from go4motors.schemas.common import CamelModel
from go4motors.schemas.supplier import SupplierOut


class VehicleImageIn(CamelModel):
    url: str = Field(..., min_length=1)
    alt: Optional[str] = None
    is_main: bool = False


class VehicleImageOut(CamelModel):
    id: str
    url: str
    alt: Optional[str]
    is_main: bool


class VehicleTranslationIn(CamelModel):
    language: str = Field(..., min_length=2, max_length=5,
                          validation_alias=AliasChoices("languageId", "language"))
    title: Optional[str] = None
    description: Optional[str] = None


class VehicleTranslationOut(CamelModel):
    id: str
    language: str
    title: Optional[str]
    description: Optional[str]


class VehicleFields(CamelModel):
    """Descriptive columns shared by create, update and read shapes."""
    body_type: Optional[str] = None
    range: Optional[str] = None
    stock: Optional[int] = Field(None, ge=0)
    price: Optional[float] = Field(None, ge=0)
    rental_price_per_day: Optional[float] = Field(None, ge=0)
    first_registration: Optional[datetime] = None
    country_origin: Optional[str] = None
    axle_count: Optional[int] = Field(None, ge=1)
    axle_brand: Optional[str] = None
    mileage: Optional[int] = Field(None, ge=0)
    emission_norm: Optional[str] = None
    gearbox: Optional[str] = None
    engine_power: Optional[int] = Field(None, ge=1)
    engine_size: Optional[int] = Field(None, ge=1)
    dimensions: Optional[str] = None
    fuel_type: Optional[str] = None
    tonnage: Optional[str] = None
    tires: Optional[str] = None
    cabin_type: Optional[str] = None
    cabin_equipments: Optional[str] = None
    specific_equipments: Optional[str] = None


class VehicleCreate(VehicleFields):
    model: str = Field(..., min_length=1)
    condition: str = Field(..., min_length=1)
    status: VehicleStatus = VehicleStatus.available
    stock: int = Field(1, ge=0)
    admin_id: str
    category_id: str
    brand_id: str
    supplier_id: str
    images: Optional[List[VehicleImageIn]] = None
    translations: Optional[List[VehicleTranslationIn]] = None


class VehicleUpdate(VehicleFields):
    model: Optional[str] = Field(None, min_length=1)
    condition: Optional[str] = Field(None, min_length=1)
    status: Optional[VehicleStatus] = None
    admin_id: Optional[str] = None
    category_id: Optional[str] = None
    brand_id: Optional[str] = None
    supplier_id: Optional[str] = None
    images: Optional[List[VehicleImageIn]] = None               # replaces the whole set
    translations: Optional[List[VehicleTranslationIn]] = None   # replaces the whole set


class AdminSummary(CamelModel):
    id: str
    first_name: str
    last_name: str
    email: str


class VehicleOut(VehicleFields):
    id: str
    model: str
    condition: str
    status: VehicleStatus
    stock: int
    admin_id: str
    category_id: str
    brand_id: str
    supplier_id: str
    admin: Optional[AdminSummary] = None
    category: Optional[CategoryOut] = None
    brand: Optional[BrandOut] = None
    supplier: Optional[SupplierOut] = None
    images: List[VehicleImageOut] = []
    translations: List[VehicleTranslationOut] = []
    created_at: datetime
    updated_at: datetime


class VehicleResponse(CamelModel):
    message: str
    vehicle: VehicleOut


class VehicleListResponse(CamelModel):
    message: str
    vehicles: List[VehicleOut]
    count: int
