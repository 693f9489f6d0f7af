# go4motors/schemas/transaction.py
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from go4motors.models.transaction import TransactionStatus, TransactionType
from go4motors.models.vehicle import VehicleStatus
from go4motors.schemas.common import CamelModel
from go4motors.schemas.vehicle import VehicleImageOut


class VehicleTransactionIn(CamelModel):
    vehicle_id: str
    price: float = Field(..., ge=0)
    quantity: int = Field(1, ge=1)


class TransactionCreate(CamelModel):
    # Required fields are optional here: the service reports them all at once
    total_amount: Optional[float] = Field(None, ge=0)
    type: Optional[TransactionType] = None
    status: Optional[TransactionStatus] = None
    start_date: Optional[str] = None   # "YYYY-MM-DD" or full ISO timestamp
    end_date: Optional[str] = None
    whatsapp_link: Optional[str] = None
    user_id: Optional[str] = None
    vehicle_transactions: Optional[List[VehicleTransactionIn]] = None


class TransactionStatusUpdate(CamelModel):
    status: str


class UserSummary(CamelModel):
    id: str
    first_name: str
    last_name: str
    email: str


class VehicleSummary(CamelModel):
    id: str
    model: str
    status: VehicleStatus
    price: Optional[float]
    rental_price_per_day: Optional[float]
    images: List[VehicleImageOut] = []


class VehicleTransactionOut(CamelModel):
    id: str
    vehicle_id: str
    price: float
    quantity: int
    vehicle: Optional[VehicleSummary] = None


class TransactionOut(CamelModel):
    id: str
    total_amount: float
    type: TransactionType
    status: TransactionStatus
    start_date: Optional[datetime]
    end_date: Optional[datetime]
    whatsapp_link: Optional[str]
    user_id: str
    user: Optional[UserSummary] = None
    vehicle_transactions: List[VehicleTransactionOut] = []
    created_at: datetime
    updated_at: datetime


class TransactionResponse(CamelModel):
    message: str
    transaction: TransactionOut
