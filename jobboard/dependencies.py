"""
Application dependencies exposing the services built at startup.

Services live on ``app.state``; tests replace them through
``app.dependency_overrides``.
"""

from fastapi import Request

from jobboard.db.session import MongoDBManager
from jobboard.domain.companies.services import CompanyDomainService
from jobboard.domain.jobs.services import JobRankingService
from jobboard.domain.jobs.suggestions import JobSuggestionEngine


async def get_database(request: Request) -> MongoDBManager:
    return request.app.state.mongodb


async def get_ranking_service(request: Request) -> JobRankingService:
    """Get the job ranking service."""
    return request.app.state.ranking_service


async def get_suggestion_engine(request: Request) -> JobSuggestionEngine:
    return request.app.state.suggestion_engine


async def get_company_service(request: Request) -> CompanyDomainService:
    """Get the company domain service."""
    return request.app.state.company_service
