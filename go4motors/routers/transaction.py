# go4motors/routers/transaction.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from go4motors.database import get_db
from go4motors.schemas.common import MessageResponse
from go4motors.schemas.transaction import (TransactionCreate, TransactionOut, TransactionResponse,
                                           TransactionStatusUpdate)
from go4motors.services import transaction_service
from go4motors.utils.i18n import get_lang

router = APIRouter()


@router.get("/transaction/all", response_model=List[TransactionOut], summary="List transactions")
def list_transactions(db: Session = Depends(get_db), lang: str = Depends(get_lang)):
    return transaction_service.list_transactions(db, lang)


@router.get("/transaction/user/{user_id}", response_model=List[TransactionOut],
            summary="Transactions of a user, newest first")
def list_by_user(user_id: str, db: Session = Depends(get_db), lang: str = Depends(get_lang)):
    return transaction_service.list_by_user(db, user_id, lang)


@router.get("/transaction/vehicle/{vehicle_id}", response_model=List[TransactionOut],
            summary="Transactions involving a vehicle, newest first")
def list_by_vehicle(vehicle_id: str, db: Session = Depends(get_db), lang: str = Depends(get_lang)):
    """Each transaction lists only the line items for this vehicle."""
    return transaction_service.list_by_vehicle(db, vehicle_id, lang)


@router.get("/transaction/{transaction_id}", response_model=TransactionResponse,
            summary="Get one transaction")
def get_transaction(transaction_id: str, db: Session = Depends(get_db), lang: str = Depends(get_lang)):
    return transaction_service.get_transaction(db, transaction_id, lang)


@router.post("/transaction/create", response_model=TransactionResponse,
             status_code=status.HTTP_201_CREATED, summary="Create a sale or rental")
def create_transaction(body: TransactionCreate, db: Session = Depends(get_db),
                       lang: str = Depends(get_lang)):
    return transaction_service.create_transaction(db, body, lang)


@router.patch("/transaction/update/{transaction_id}/status", response_model=TransactionResponse,
              summary="Change the status of a transaction")
def update_status(transaction_id: str, body: TransactionStatusUpdate, db: Session = Depends(get_db),
                  lang: str = Depends(get_lang)):
    return transaction_service.update_status(db, transaction_id, body.status, lang)


@router.delete("/transaction/delete/{transaction_id}", response_model=MessageResponse,
               summary="Delete a transaction and its line items")
def delete_transaction(transaction_id: str, db: Session = Depends(get_db),
                       lang: str = Depends(get_lang)):
    return transaction_service.delete_transaction(db, transaction_id, lang)
