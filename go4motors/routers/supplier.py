# go4motors/routers/supplier.py
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from go4motors.database import get_db
from go4motors.schemas.supplier import SupplierCreate, SupplierOut, SupplierResponse, SupplierUpdate
from go4motors.schemas.common import MessageResponse
from go4motors.services import supplier_service
from go4motors.utils.i18n import get_lang

router = APIRouter()


@router.get("/supplier/all", response_model=List[SupplierOut], summary="List suppliers with translations")
def list_suppliers(db: Session = Depends(get_db), lang: str = Depends(get_lang)):
    return supplier_service.list_suppliers(db, lang)


@router.get("/supplier/{supplier_id}", response_model=SupplierOut, summary="Get one supplier")
def get_supplier(supplier_id: str, db: Session = Depends(get_db), lang: str = Depends(get_lang)):
    return supplier_service.get_supplier(db, supplier_id, lang)


@router.post("/supplier/create", response_model=SupplierResponse, status_code=status.HTTP_201_CREATED,
             summary="Create a supplier")
def create_supplier(body: SupplierCreate, db: Session = Depends(get_db), lang: str = Depends(get_lang)):
    return supplier_service.create_supplier(db, body, lang)


@router.put("/supplier/update/{supplier_id}", response_model=SupplierResponse,
            summary="Update a supplier (translations are replaced as a whole)")
def update_supplier(supplier_id: str, body: SupplierUpdate, db: Session = Depends(get_db),
                    lang: str = Depends(get_lang)):
    return supplier_service.update_supplier(db, supplier_id, body, lang)


@router.delete("/supplier/delete/{supplier_id}", response_model=MessageResponse, summary="Delete a supplier")
def delete_supplier(supplier_id: str, db: Session = Depends(get_db), lang: str = Depends(get_lang)):
    return supplier_service.delete_supplier(db, supplier_id, lang)
