# go4motors/services/user_service.py
"""Account administration: listing, role changes and deletion."""

from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from go4motors.errors import NotFoundError, ValidationError
from go4motors.models.user import Role, User
from go4motors.utils.i18n import translate
from go4motors.utils.logger import get_logger
from go4motors.utils.persistence import storage_boundary

logger = get_logger(__name__)


def list_users(db: Session, lang: str) -> List[User]:
    with storage_boundary(db, lang, "common.FAILED_TO_FETCH"):
        return db.query(User).options(selectinload(User.role)).order_by(User.created_at.desc()).all()


def get_user(db: Session, user_id: Optional[str], lang: str) -> User:
    if not user_id:
        raise ValidationError("user.INVALID_ID", lang)
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        raise NotFoundError("user.NOT_FOUND", lang)
    return user


def update_user_role(db: Session, user_id: str, role_name: Optional[str], lang: str) -> dict:
    with storage_boundary(db, lang, "common.FAILED_TO_UPDATE"):
        user = get_user(db, user_id, lang)
        name = (role_name or "").strip().lower()
        role = db.query(Role).filter(Role.name == name).first() if name else None
        if not role:
            raise NotFoundError("user.ROLE_NOT_FOUND", lang)

        previous = user.role.name
        user.role = role
        db.commit()
        db.refresh(user)

    logger.info(f"[USER] {user.email}: role {previous} -> {role.name}")
    return {"message": translate("user.ROLE_UPDATED", lang), "user": user}


def delete_user(db: Session, user_id: Optional[str], lang: str) -> dict:
    with storage_boundary(db, lang, "common.FAILED_TO_DELETE"):
        user = get_user(db, user_id, lang)
        db.delete(user)
        db.commit()

    logger.info(f"[USER] Deleted {user_id}")
    return {"message": translate("user.DELETE_SUCCESS", lang)}
