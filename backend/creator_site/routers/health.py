"""Health check and monitoring endpoints."""

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from datetime import datetime

from creator_site.database import get_db
from creator_site.services.logging_service import app_metrics
from creator_site.config import settings

router = APIRouter()


@router.get("/health")
def health_check():
    """
    Basic health check endpoint.

    Returns 200 if the application is running.
    """
    return {
        "status": "ok",
        "timestamp": datetime.utcnow().isoformat(),
        "environment": settings.ENVIRONMENT
    }


@router.get("/health/ready")
def readiness_check(db: Session = Depends(get_db)):
    """
    Readiness probe.

    Verifies database connectivity.
    """
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={
                "status": "not_ready",
                "checks": {"database": False},
                "errors": [f"Database: {e}"],
                "timestamp": datetime.utcnow().isoformat()
            }
        )

    return {
        "status": "ready",
        "checks": {"database": True},
        "timestamp": datetime.utcnow().isoformat()
    }


@router.get("/health/metrics")
def metrics():
    """Directory operation counters since process start."""
    return {
        **app_metrics.get_metrics(),
        "error_rate_percent": round(app_metrics.get_error_rate(), 2)
    }
