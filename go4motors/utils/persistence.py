# go4motors/utils/persistence.py
"""
Storage boundary shared by all services.

Uniqueness is ultimately enforced by the database constraints: the pre-checks in
the services only produce friendlier messages. Anything that slips past them
surfaces here as an IntegrityError and becomes a ConflictError.
"""

from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from go4motors.errors import ConflictError, InternalError
from go4motors.utils.logger import get_logger

logger = get_logger(__name__)


@contextmanager
def storage_boundary(db: Session, lang: str, failure_key: str):
    """Roll back and re-raise storage failures as domain errors."""
    try:
        yield
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Integrity violation ({failure_key}): {e.orig}")
        raise ConflictError("common.UNIQUE_CONSTRAINT", lang) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Storage failure ({failure_key}): {e}", exc_info=True)
        raise InternalError(failure_key, lang) from e
