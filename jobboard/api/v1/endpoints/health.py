from datetime import datetime, timezone

from fastapi import APIRouter, Depends, Request

from jobboard.core.constants import EndpointPaths
from jobboard.db.session import MongoDBManager
from jobboard.dependencies import get_database
from jobboard.schemas.common import HealthResponse

router = APIRouter(tags=["health"])


@router.get(EndpointPaths.HEALTH, response_model=HealthResponse)
async def health_check(request: Request, mongodb: MongoDBManager = Depends(get_database)):
    """Liveness plus a database ping"""
    database_ok = await mongodb.ping()
    return HealthResponse(
        status="healthy" if database_ok else "degraded",
        version=request.app.version,
        timestamp=datetime.now(timezone.utc).isoformat(),
        services={"database": "healthy" if database_ok else "unavailable"},
    )
