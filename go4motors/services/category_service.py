# go4motors/services/category_service.py
"""
Vehicle category catalogue: CRUD with per-language translations.
Slugs are unique; a supplied translation list replaces the stored one.
"""

from sqlalchemy.orm import Session, selectinload

from go4motors.errors import ConflictError, NotFoundError
from go4motors.models.category import Category, CategoryTranslation
from go4motors.schemas.category import CategoryCreate, CategoryUpdate
from go4motors.services.translations import build_children, replace_collection
from go4motors.utils.i18n import translate
from go4motors.utils.logger import get_logger
from go4motors.utils.persistence import storage_boundary

logger = get_logger(__name__)


def list_categories(db: Session, lang: str):
    with storage_boundary(db, lang, "common.FAILED_TO_FETCH"):
        return db.query(Category).options(selectinload(Category.translations)).order_by(Category.slug).all()


def get_category(db: Session, category_id: str, lang: str) -> Category:
    category = db.query(Category).filter(Category.id == category_id).first() if category_id else None
    if not category:
        raise NotFoundError("category.NOT_FOUND", lang)
    return category


def _ensure_slug_free(db: Session, slug: str, lang: str, exclude_id: str = None):
    q = db.query(Category).filter(Category.slug == slug)
    if exclude_id:
        q = q.filter(Category.id != exclude_id)
    if q.first():
        raise ConflictError("category.SLUG_ALREADY_EXISTS", lang, slug=slug)


def create_category(db: Session, body: CategoryCreate, lang: str) -> dict:
    with storage_boundary(db, lang, "common.FAILED_TO_CREATE"):
        _ensure_slug_free(db, body.slug, lang)
        category = Category(
            slug=body.slug,
            image=body.image,
            translations=build_children(CategoryTranslation, body.translations),
        )
        db.add(category)
        db.commit()
        db.refresh(category)

    logger.info(f"[CATEGORY] Created {category.slug} ({len(category.translations)} translations)")
    return {"message": translate("category.CREATE_SUCCESS", lang), "category": category}


def update_category(db: Session, category_id: str, body: CategoryUpdate, lang: str) -> dict:
    with storage_boundary(db, lang, "common.FAILED_TO_UPDATE"):
        category = get_category(db, category_id, lang)
        if body.slug and body.slug != category.slug:
            _ensure_slug_free(db, body.slug, lang, exclude_id=category.id)
            category.slug = body.slug
        if body.image is not None:
            category.image = body.image
        if body.translations:
            replace_collection(db, category, "translations",
                               build_children(CategoryTranslation, body.translations))
        db.commit()
        db.refresh(category)

    logger.info(f"[CATEGORY] Updated {category.slug}")
    return {"message": translate("category.UPDATE_SUCCESS", lang), "category": category}


def delete_category(db: Session, category_id: str, lang: str) -> dict:
    with storage_boundary(db, lang, "common.FAILED_TO_DELETE"):
        category = get_category(db, category_id, lang)
        db.delete(category)
        db.commit()

    logger.info(f"[CATEGORY] Deleted {category_id}")
    return {"message": translate("category.DELETE_SUCCESS", lang)}
