from fastapi import APIRouter

from jobboard.api.v1.endpoints import companies, health, jobs
from jobboard.core.constants import EndpointPaths

api_router = APIRouter()

# Health endpoints at root level
api_router.include_router(health.router)
api_router.include_router(jobs.router, prefix=EndpointPaths.CANDIDATE_JOB_PREFIX)
api_router.include_router(companies.router, prefix=EndpointPaths.COMPANIES_PREFIX)
