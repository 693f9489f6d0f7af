# go4motors/services/supplier_service.py
"""Suppliers, unique by name. Translations are optional."""

from sqlalchemy.orm import Session, selectinload

from go4motors.errors import ConflictError, NotFoundError, ValidationError
from go4motors.models.supplier import Supplier, SupplierTranslation
from go4motors.schemas.supplier import SupplierCreate, SupplierUpdate
from go4motors.services.translations import build_children, replace_collection
from go4motors.utils.i18n import translate
from go4motors.utils.logger import get_logger
from go4motors.utils.persistence import storage_boundary

logger = get_logger(__name__)


def list_suppliers(db: Session, lang: str):
    with storage_boundary(db, lang, "common.FAILED_TO_FETCH"):
        return (
            db.query(Supplier)
            .options(selectinload(Supplier.translations))
            .order_by(Supplier.name)
            .all()
        )


def get_supplier(db: Session, supplier_id: str, lang: str) -> Supplier:
    supplier = db.query(Supplier).filter(Supplier.id == supplier_id).first() if supplier_id else None
    if not supplier:
        raise NotFoundError("supplier.NOT_FOUND", lang)
    return supplier


def _ensure_name_free(db: Session, name: str, lang: str, exclude_id: str = None):
    q = db.query(Supplier).filter(Supplier.name == name)
    if exclude_id:
        q = q.filter(Supplier.id != exclude_id)
    if q.first():
        raise ConflictError("supplier.ALREADY_EXISTS", lang, name=name)


def create_supplier(db: Session, body: SupplierCreate, lang: str) -> dict:
    name = (body.name or "").strip()
    if not name:
        raise ValidationError("supplier.NAME_REQUIRED", lang)

    with storage_boundary(db, lang, "common.FAILED_TO_CREATE"):
        _ensure_name_free(db, name, lang)
        supplier = Supplier(
            name=name,
            address=body.address,
            phone=body.phone,
            email=body.email,
            translations=build_children(SupplierTranslation, body.translations),
        )
        db.add(supplier)
        db.commit()
        db.refresh(supplier)

    logger.info(f"[SUPPLIER] Created {supplier.name}")
    return {"message": translate("supplier.CREATE_SUCCESS", lang), "supplier": supplier}


def update_supplier(db: Session, supplier_id: str, body: SupplierUpdate, lang: str) -> dict:
    with storage_boundary(db, lang, "common.FAILED_TO_UPDATE"):
        supplier = get_supplier(db, supplier_id, lang)

        if body.name is not None:
            name = body.name.strip()
            if not name:
                raise ValidationError("supplier.NAME_REQUIRED", lang)
            if name != supplier.name:
                _ensure_name_free(db, name, lang, exclude_id=supplier.id)
                supplier.name = name
        for field in ("address", "phone", "email"):
            value = getattr(body, field)
            if value is not None:
                setattr(supplier, field, value)
        if body.translations:
            replace_collection(db, supplier, "translations",
                               build_children(SupplierTranslation, body.translations))

        db.commit()
        db.refresh(supplier)

    logger.info(f"[SUPPLIER] Updated {supplier.name}")
    return {"message": translate("supplier.UPDATE_SUCCESS", lang), "supplier": supplier}


def delete_supplier(db: Session, supplier_id: str, lang: str) -> dict:
    with storage_boundary(db, lang, "common.FAILED_TO_DELETE"):
        supplier = get_supplier(db, supplier_id, lang)
        db.delete(supplier)
        db.commit()

    logger.info(f"[SUPPLIER] Deleted {supplier_id}")
    return {"message": translate("supplier.DELETE_SUCCESS", lang)}
