import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from database.db import db_error_message, get_db
from schemas.common import HealthStatus

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Meta"])


# ✅ [HEALTH] DB 까지 닿는지 확인 (DB 현재 시각 반환)
@router.get("/health", response_model=HealthStatus, response_model_exclude_none=True)
def health_check(db: Session = Depends(get_db)):
    try:
        now = db.execute(select(func.now())).scalar()
    except SQLAlchemyError as exc:
        logger.warning("Health check failed: %s", exc)
        return JSONResponse(status_code=500, content={"status": "error", "message": db_error_message(exc, "Database unavailable")})
    return HealthStatus(status="ok", now=now)
