"""Health check routes"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging

from domain.models import get_db_session
from api.responses import HealthResponse
from app.config import settings

router = APIRouter(tags=["Health"])
logger = logging.getLogger("fitnesscenter.api.health")


@router.get("/health-check", response_model=HealthResponse)
def health_check(db: Session = Depends(get_db_session)):
    """Basic health check endpoint with a database round trip"""
    try:
        db.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as e:
        logger.error(f"health_check_database_failed error={e}")
        database = "unavailable"
    return HealthResponse(
        status="ok" if database == "ok" else "degraded",
        service=settings.app_name,
        version=settings.app_version,
        database=database,
    )
