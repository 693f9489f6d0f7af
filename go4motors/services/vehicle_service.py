# go4motors/services/vehicle_service.py
"""
Vehicle catalogue.

Reads restrict translation rows to one language (VEHICLE_DEFAULT_LANGUAGE when
the caller gives none) on the vehicle and on its category, brand and supplier.
Writes check that every referenced admin, category, brand and supplier exists.
"""

from typing import Optional

from sqlalchemy.orm import Session, selectinload

from go4motors.config import settings
from go4motors.errors import NotFoundError
from go4motors.models.brand import Brand
from go4motors.models.category import Category
from go4motors.models.supplier import Supplier
from go4motors.models.user import User
from go4motors.models.vehicle import Vehicle, VehicleImage, VehicleTranslation
from go4motors.schemas.vehicle import VehicleCreate, VehicleOut, VehicleUpdate
from go4motors.services.translations import build_children, in_language, replace_collection
from go4motors.utils.i18n import normalize_language, translate
from go4motors.utils.logger import get_logger
from go4motors.utils.persistence import storage_boundary

logger = get_logger(__name__)

# (foreign key attribute, model, not-found key)
REFERENCES = (
    ("admin_id", User, "user.NOT_FOUND"),
    ("category_id", Category, "category.NOT_FOUND"),
    ("brand_id", Brand, "brand.NOT_FOUND"),
    ("supplier_id", Supplier, "supplier.NOT_FOUND"),
)


def _with_relations(query):
    return query.options(
        selectinload(Vehicle.admin),
        selectinload(Vehicle.category).selectinload(Category.translations),
        selectinload(Vehicle.brand).selectinload(Brand.translations),
        selectinload(Vehicle.supplier).selectinload(Supplier.translations),
        selectinload(Vehicle.images),
        selectinload(Vehicle.translations),
    )


def _filter_language(language: Optional[str]) -> str:
    return normalize_language(language) or settings.VEHICLE_DEFAULT_LANGUAGE


def localize(vehicle: Vehicle, language: str) -> VehicleOut:
    """Project a vehicle keeping only the translation rows in `language`."""
    out = VehicleOut.model_validate(vehicle)
    nested = {}
    for name in ("category", "brand", "supplier"):
        related = getattr(out, name)
        if related is not None:
            nested[name] = related.model_copy(
                update={"translations": in_language(related.translations, language)}
            )
    nested["translations"] = in_language(out.translations, language)
    return out.model_copy(update=nested)


def _load(db: Session, vehicle_id: str, lang: str) -> Vehicle:
    vehicle = None
    if vehicle_id:
        vehicle = _with_relations(db.query(Vehicle)).filter(Vehicle.id == vehicle_id).first()
    if not vehicle:
        raise NotFoundError("vehicle.NOT_FOUND", lang)
    return vehicle


def _check_references(db: Session, values: dict, lang: str) -> None:
    for attr, model, not_found_key in REFERENCES:
        ref_id = values.get(attr)
        if ref_id is None:
            continue
        if not db.query(model.id).filter(model.id == ref_id).first():
            raise NotFoundError(not_found_key, lang)


def list_vehicles(db: Session, lang: str, language: Optional[str] = None) -> dict:
    language = _filter_language(language)
    with storage_boundary(db, lang, "common.FAILED_TO_FETCH"):
        vehicles = _with_relations(db.query(Vehicle)).order_by(Vehicle.created_at.desc()).all()
    items = [localize(v, language) for v in vehicles]
    return {"message": translate("vehicle.LIST_SUCCESS", lang), "vehicles": items, "count": len(items)}


def list_vehicles_by_category(db: Session, category_id: str, lang: str,
                              language: Optional[str] = None) -> dict:
    """No existence check on the category: an unknown id yields an empty list."""
    language = _filter_language(language)
    with storage_boundary(db, lang, "common.FAILED_TO_FETCH"):
        vehicles = (
            _with_relations(db.query(Vehicle))
            .filter(Vehicle.category_id == category_id)
            .order_by(Vehicle.created_at.desc())
            .all()
        )
    items = [localize(v, language) for v in vehicles]
    return {"message": translate("vehicle.LIST_SUCCESS", lang), "vehicles": items, "count": len(items)}


def get_vehicle(db: Session, vehicle_id: str, lang: str, language: Optional[str] = None) -> dict:
    vehicle = _load(db, vehicle_id, lang)
    return {
        "message": translate("vehicle.DETAIL_SUCCESS", lang),
        "vehicle": localize(vehicle, _filter_language(language)),
    }


def create_vehicle(db: Session, body: VehicleCreate, lang: str) -> dict:
    values = body.model_dump(exclude={"images", "translations"})

    with storage_boundary(db, lang, "common.FAILED_TO_CREATE"):
        _check_references(db, values, lang)
        vehicle = Vehicle(
            **values,
            images=build_children(VehicleImage, body.images),
            translations=build_children(VehicleTranslation, body.translations),
        )
        db.add(vehicle)
        db.commit()
        vehicle = _load(db, vehicle.id, lang)

    logger.info(f"[VEHICLE] Created {vehicle.id} ({vehicle.model})")
    return {"message": translate("vehicle.CREATE_SUCCESS", lang), "vehicle": vehicle}


def update_vehicle(db: Session, vehicle_id: str, body: VehicleUpdate, lang: str) -> dict:
    """
    Scalar fields are patched when present. `images` and `translations`
    replace the stored sets when supplied; an empty list clears them.
    """
    values = body.model_dump(exclude_unset=True, exclude={"images", "translations"})
    values = {k: v for k, v in values.items() if v is not None}

    with storage_boundary(db, lang, "common.FAILED_TO_UPDATE"):
        vehicle = _load(db, vehicle_id, lang)
        _check_references(db, values, lang)

        for field, value in values.items():
            setattr(vehicle, field, value)
        if body.images is not None:
            replace_collection(db, vehicle, "images", build_children(VehicleImage, body.images))
        if body.translations is not None:
            replace_collection(db, vehicle, "translations",
                               build_children(VehicleTranslation, body.translations))

        db.commit()
        vehicle = _load(db, vehicle_id, lang)

    logger.info(f"[VEHICLE] Updated {vehicle_id} ({sorted(values)})")
    return {"message": translate("vehicle.UPDATE_SUCCESS", lang), "vehicle": vehicle}


def delete_vehicle(db: Session, vehicle_id: str, lang: str) -> dict:
    with storage_boundary(db, lang, "common.FAILED_TO_DELETE"):
        vehicle = _load(db, vehicle_id, lang)
        db.delete(vehicle)
        db.commit()

    logger.info(f"[VEHICLE] Deleted {vehicle_id}")
    return {"message": translate("vehicle.DELETE_SUCCESS", lang)}
