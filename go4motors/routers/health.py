# go4motors/routers/health.py
"""
System health check endpoint.
Returns status of backend + DB.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from go4motors.config import settings
from go4motors.database import get_db
from go4motors.utils.logger import get_logger

router = APIRouter()
logger = get_logger(__name__)


@router.get("/health", summary="System health check")
def health_check(db: Session = Depends(get_db)):
    """
    Returns:
    - Backend status
    - Database connectivity
    - Email delivery configured or not
    """
    result = {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "backend": "ok",
        "database": "unknown",
        "email": "configured" if settings.EMAIL_ENABLED else "disabled",
    }

    try:
        db.execute(text("SELECT 1"))
        result["database"] = "ok"
    except SQLAlchemyError as e:
        logger.warning(f"Health check: database unreachable: {e}")
        result["database"] = f"error: {str(e)}"
        result["status"] = "degraded"

    return result
