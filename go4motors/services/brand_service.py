# go4motors/services/brand_service.py
"""
Brand catalogue: CRUD with per-language translations.
Slugs are unique; a supplied translation list replaces the stored one.
"""

from sqlalchemy.orm import Session, selectinload

from go4motors.errors import ConflictError, NotFoundError
from go4motors.models.brand import Brand, BrandTranslation
from go4motors.schemas.brand import BrandCreate, BrandUpdate
from go4motors.services.translations import build_children, replace_collection
from go4motors.utils.i18n import translate
from go4motors.utils.logger import get_logger
from go4motors.utils.persistence import storage_boundary

logger = get_logger(__name__)


def list_brands(db: Session, lang: str):
    with storage_boundary(db, lang, "common.FAILED_TO_FETCH"):
        return db.query(Brand).options(selectinload(Brand.translations)).order_by(Brand.slug).all()


def get_brand(db: Session, brand_id: str, lang: str) -> Brand:
    brand = db.query(Brand).filter(Brand.id == brand_id).first() if brand_id else None
    if not brand:
        raise NotFoundError("brand.NOT_FOUND", lang)
    return brand


def _ensure_slug_free(db: Session, slug: str, lang: str, exclude_id: str = None):
    q = db.query(Brand).filter(Brand.slug == slug)
    if exclude_id:
        q = q.filter(Brand.id != exclude_id)
    if q.first():
        raise ConflictError("brand.SLUG_ALREADY_EXISTS", lang, slug=slug)


def create_brand(db: Session, body: BrandCreate, lang: str) -> dict:
    with storage_boundary(db, lang, "common.FAILED_TO_CREATE"):
        _ensure_slug_free(db, body.slug, lang)
        brand = Brand(
            slug=body.slug,
            image=body.image,
            translations=build_children(BrandTranslation, body.translations),
        )
        db.add(brand)
        db.commit()
        db.refresh(brand)

    logger.info(f"[BRAND] Created {brand.slug} ({len(brand.translations)} translations)")
    return {"message": translate("brand.CREATE_SUCCESS", lang), "brand": brand}


def update_brand(db: Session, brand_id: str, body: BrandUpdate, lang: str) -> dict:
    with storage_boundary(db, lang, "common.FAILED_TO_UPDATE"):
        brand = get_brand(db, brand_id, lang)
        if body.slug and body.slug != brand.slug:
            _ensure_slug_free(db, body.slug, lang, exclude_id=brand.id)
            brand.slug = body.slug
        if body.image is not None:
            brand.image = body.image
        if body.translations:
            replace_collection(db, brand, "translations",
                               build_children(BrandTranslation, body.translations))
        db.commit()
        db.refresh(brand)

    logger.info(f"[BRAND] Updated {brand.slug}")
    return {"message": translate("brand.UPDATE_SUCCESS", lang), "brand": brand}


def delete_brand(db: Session, brand_id: str, lang: str) -> dict:
    with storage_boundary(db, lang, "common.FAILED_TO_DELETE"):
        brand = get_brand(db, brand_id, lang)
        db.delete(brand)
        db.commit()

    logger.info(f"[BRAND] Deleted {brand_id}")
    return {"message": translate("brand.DELETE_SUCCESS", lang)}
