# go4motors/services/transaction_service.py
"""
Sale and rental transactions.

Creation stores the transaction and its line items in one commit. Vehicle ids
and stock are not checked. Status changes overwrite unconditionally unless
STRICT_TRANSACTION_STATUS is enabled, in which case completed and cancelled
transactions can no longer change.
"""

from datetime import datetime, timezone
from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from go4motors.config import settings
from go4motors.errors import ConflictError, InternalError, NotFoundError, ValidationError
from go4motors.models.transaction import (TERMINAL_STATUSES, Transaction, TransactionStatus,
                                          VehicleTransaction)
from go4motors.models.vehicle import Vehicle
from go4motors.schemas.transaction import TransactionCreate, TransactionOut
from go4motors.utils.i18n import translate
from go4motors.utils.logger import get_logger
from go4motors.utils.persistence import storage_boundary

logger = get_logger(__name__)

REQUIRED_FIELDS = ("total_amount", "type", "status", "user_id")


def _with_relations(query):
    return query.options(
        selectinload(Transaction.user),
        selectinload(Transaction.vehicle_transactions)
        .selectinload(VehicleTransaction.vehicle)
        .selectinload(Vehicle.images),
    )


def parse_date(value: Optional[str], lang: str) -> Optional[datetime]:
    """
    'YYYY-MM-DD' -> midnight UTC. Full ISO timestamps are converted to UTC.
    Stored naive, like every other DateTime column.
    """
    if not value:
        return None
    raw = value.strip()
    try:
        if len(raw) == 10:
            return datetime.strptime(raw, "%Y-%m-%d")
        parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
    except ValueError:
        raise ValidationError("common.VALIDATION_FAILED", lang)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def _load(db: Session, transaction_id: str, lang: str) -> Transaction:
    transaction = None
    if transaction_id:
        transaction = (
            _with_relations(db.query(Transaction))
            .filter(Transaction.id == transaction_id)
            .first()
        )
    if not transaction:
        raise NotFoundError("transaction.NOT_FOUND", lang)
    return transaction


def list_transactions(db: Session, lang: str) -> List[Transaction]:
    with storage_boundary(db, lang, "common.FAILED_TO_FETCH"):
        return _with_relations(db.query(Transaction)).order_by(Transaction.created_at.desc()).all()


def list_by_user(db: Session, user_id: str, lang: str) -> List[Transaction]:
    with storage_boundary(db, lang, "common.FAILED_TO_FETCH"):
        return (
            _with_relations(db.query(Transaction))
            .filter(Transaction.user_id == user_id)
            .order_by(Transaction.created_at.desc())
            .all()
        )


def list_by_vehicle(db: Session, vehicle_id: str, lang: str) -> List[TransactionOut]:
    """Transactions involving the vehicle, each listing only its matching line items."""
    with storage_boundary(db, lang, "common.FAILED_TO_FETCH"):
        transactions = (
            _with_relations(db.query(Transaction))
            .filter(Transaction.vehicle_transactions.any(VehicleTransaction.vehicle_id == vehicle_id))
            .order_by(Transaction.created_at.desc())
            .all()
        )

    result = []
    for transaction in transactions:
        out = TransactionOut.model_validate(transaction)
        items = [item for item in out.vehicle_transactions if item.vehicle_id == vehicle_id]
        result.append(out.model_copy(update={"vehicle_transactions": items}))
    return result


def get_transaction(db: Session, transaction_id: str, lang: str) -> dict:
    transaction = _load(db, transaction_id, lang)
    return {"message": translate("transaction.DETAIL_SUCCESS", lang), "transaction": transaction}


def create_transaction(db: Session, body: TransactionCreate, lang: str) -> dict:
    missing = [name for name in REQUIRED_FIELDS if getattr(body, name) is None]
    if missing or not body.vehicle_transactions:
        logger.warning(f"[TRANSACTION] Missing required fields: {missing or ['vehicle_transactions']}")
        raise InternalError("transaction.MISSING_REQUIRED_FIELDS", lang)

    start_date = parse_date(body.start_date, lang)
    end_date = parse_date(body.end_date, lang)

    with storage_boundary(db, lang, "common.FAILED_TO_CREATE"):
        transaction = Transaction(
            total_amount=body.total_amount,
            type=body.type,
            status=body.status,
            start_date=start_date,
            end_date=end_date,
            whatsapp_link=body.whatsapp_link,
            user_id=body.user_id,
            vehicle_transactions=[
                VehicleTransaction(vehicle_id=item.vehicle_id, price=item.price, quantity=item.quantity)
                for item in body.vehicle_transactions
            ],
        )
        db.add(transaction)
        db.commit()
        transaction = _load(db, transaction.id, lang)

    logger.info(f"[TRANSACTION] Created {transaction.id} ({transaction.type.value}, "
                f"{len(transaction.vehicle_transactions)} items)")
    return {"message": translate("transaction.CREATE_SUCCESS", lang), "transaction": transaction}


def update_status(db: Session, transaction_id: str, status: Optional[str], lang: str) -> dict:
    try:
        new_status = TransactionStatus(status)
    except ValueError:
        raise ValidationError("transaction.INVALID_STATUS", lang)

    with storage_boundary(db, lang, "common.FAILED_TO_UPDATE"):
        transaction = _load(db, transaction_id, lang)
        current = transaction.status
        if (settings.STRICT_TRANSACTION_STATUS and current in TERMINAL_STATUSES
                and new_status != current):
            raise ConflictError("transaction.STATUS_LOCKED", lang, status=current.value)

        transaction.status = new_status
        db.commit()
        transaction = _load(db, transaction_id, lang)

    logger.info(f"[TRANSACTION] {transaction_id}: {current.value} -> {new_status.value}")
    return {"message": translate("transaction.STATUS_UPDATED", lang), "transaction": transaction}


def delete_transaction(db: Session, transaction_id: str, lang: str) -> dict:
    with storage_boundary(db, lang, "common.FAILED_TO_DELETE"):
        transaction = _load(db, transaction_id, lang)
        db.delete(transaction)
        db.commit()

    logger.info(f"[TRANSACTION] Deleted {transaction_id}")
    return {"message": translate("transaction.DELETE_SUCCESS", lang)}
