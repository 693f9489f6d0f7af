# go4motors/models/transaction.py
"""
Sale and rental transactions.
A transaction belongs to one user and lists one or more vehicles as line items
(VehicleTransaction). Rentals carry start/end dates.
"""

import enum

from sqlalchemy import Column, DateTime, Enum, Float, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from go4motors.database import Base
from go4motors.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class TransactionType(str, enum.Enum):
    sale = "sale"
    rental = "rental"


class TransactionStatus(str, enum.Enum):
    pending = "pending"
    completed = "completed"
    cancelled = "cancelled"


TERMINAL_STATUSES = {TransactionStatus.completed, TransactionStatus.cancelled}


class Transaction(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "transactions"

    total_amount = Column(Float, nullable=False)
    type = Column(Enum(TransactionType, name="transaction_type"), nullable=False)
    status = Column(Enum(TransactionStatus, name="transaction_status"), nullable=False,
                    default=TransactionStatus.pending)
    start_date = Column(DateTime)
    end_date = Column(DateTime)
    whatsapp_link = Column(String(500))

    user_id = Column(String(36), ForeignKey("users.id"), nullable=False, index=True)
    user = relationship("User", back_populates="transactions")
    vehicle_transactions = relationship("VehicleTransaction", back_populates="transaction",
                                        cascade="all, delete-orphan")

    def __repr__(self):
        return f"<Transaction {self.id} type={self.type} status={self.status}>"


class VehicleTransaction(UUIDPrimaryKeyMixin, Base):
    __tablename__ = "vehicle_transactions"

    transaction_id = Column(String(36), ForeignKey("transactions.id", ondelete="CASCADE"),
                            nullable=False, index=True)
    vehicle_id = Column(String(36), ForeignKey("vehicles.id"), nullable=False, index=True)
    price = Column(Float, nullable=False)
    quantity = Column(Integer, nullable=False, default=1)

    transaction = relationship("Transaction", back_populates="vehicle_transactions")
    vehicle = relationship("Vehicle")
