"""
System API

Liveness endpoints used by the frontend and by API documentation checks.
"""

from datetime import datetime
from fastapi import APIRouter

router = APIRouter()


@router.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "UP", "timestamp": datetime.now().isoformat()}


@router.get("/swagger-test/ping")
def ping():
    """Confirm the API and its documentation are reachable."""
    return {
        "status": "success",
        "message": "API is up and running",
        "timestamp": datetime.now().isoformat()
    }
