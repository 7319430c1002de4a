"""
Liveness endpoint. It never touches the secret store or the remote API.
"""

from datetime import datetime, timezone
from fastapi import APIRouter

from ..models.common import HealthStatus

router = APIRouter()


@router.get("", response_model=HealthStatus)
def health_check():
    """Return ok with the current server time."""
    return HealthStatus(
        status="ok",
        timestamp=datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")
    )
