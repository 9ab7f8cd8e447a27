from typing import List, Optional

from fastapi import APIRouter, BackgroundTasks, Depends, Query

from jobboard.core.auth import get_current_candidate_id
from jobboard.core.constants import APIConstants, EndpointPaths, ErrorCodes
from jobboard.dependencies import get_ranking_service, get_suggestion_engine
from jobboard.domain.jobs.services import JobRankingService
from jobboard.domain.jobs.suggestions import JobSuggestionEngine
from jobboard.schemas.common import ErrorResponse
from jobboard.schemas.jobs import (
    JobDetailResponse,
    JobSearchResponse,
    JobSuggestionsResponse,
    LocationSuggestionsResponse,
    RankedJobsResponse,
)
from jobboard.utils.error_handling import BadRequestError
from jobboard.utils.responses import success_response

router = APIRouter(
    tags=["jobs"],
    responses={
        401: {"model": ErrorResponse, "description": "Not authenticated"},
        404: {"model": ErrorResponse, "description": "Not found"},
    },
)


def _require_query(q: Optional[str]) -> str:
    if not q:
        raise BadRequestError(
            "Search query is required",
            field_name="q",
            error_code=ErrorCodes.VALIDATION_REQUIRED_FIELD_MISSING,
        )
    return q


@router.get(EndpointPaths.RANKING, responses={200: {"model": RankedJobsResponse}})
async def get_ranking_jobs(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    location: Optional[str] = None,
    jobTitle: Optional[str] = None,
    jobType: Optional[str] = None,
    experienceLevel: Optional[List[str]] = Query(None),
    minSalary: Optional[str] = None,
    maxSalary: Optional[str] = None,
    isRemote: Optional[str] = None,
    postedWithin: Optional[str] = None,
    candidate_id: str = Depends(get_current_candidate_id),
    ranking_service: JobRankingService = Depends(get_ranking_service),
):
    """
    Jobs ranked by how well they match the authenticated candidate's skills
    and experience.
    """
    params = {
        "page": page,
        "limit": limit,
        "location": location,
        "jobTitle": jobTitle,
        "jobType": jobType,
        "experienceLevel": ",".join(experienceLevel) if experienceLevel else None,
        "minSalary": minSalary,
        "maxSalary": maxSalary,
        "isRemote": isRemote,
        "postedWithin": postedWithin,
    }
    result = await ranking_service.get_ranking_jobs(candidate_id, params)
    return success_response(data=result, message=APIConstants.JOBS_RETRIEVED)


@router.get(EndpointPaths.SUGGESTIONS, responses={200: {"model": JobSuggestionsResponse}})
async def get_job_suggestions(
    q: Optional[str] = None,
    limit: Optional[str] = None,
    candidate_id: str = Depends(get_current_candidate_id),
    engine: JobSuggestionEngine = Depends(get_suggestion_engine),
):
    """Autocomplete for job titles and company names."""
    result = await engine.get_job_suggestions(_require_query(q), limit)
    return success_response(data=result, message=APIConstants.SUGGESTIONS_RETRIEVED)


@router.get(
    EndpointPaths.LOCATION_SUGGESTIONS,
    responses={200: {"model": LocationSuggestionsResponse}},
)
async def get_location_suggestions(
    q: Optional[str] = None,
    limit: Optional[str] = None,
    candidate_id: str = Depends(get_current_candidate_id),
    engine: JobSuggestionEngine = Depends(get_suggestion_engine),
):
    """Autocomplete for cities, states and countries."""
    result = await engine.get_location_suggestions(_require_query(q), limit)
    return success_response(
        data=result, message=APIConstants.LOCATION_SUGGESTIONS_RETRIEVED
    )


@router.get(EndpointPaths.SEARCH, responses={200: {"model": JobSearchResponse}})
async def search_jobs(
    q: Optional[str] = None,
    page: Optional[str] = None,
    limit: Optional[str] = None,
    candidate_id: str = Depends(get_current_candidate_id),
    ranking_service: JobRankingService = Depends(get_ranking_service),
):
    result = await ranking_service.search_jobs(q, page, limit)
    return success_response(data=result, message=APIConstants.SEARCH_COMPLETED)


@router.get(EndpointPaths.JOB_DETAIL, responses={200: {"model": JobDetailResponse}})
async def get_job_by_id(
    job_id: str,
    background_tasks: BackgroundTasks,
    candidate_id: str = Depends(get_current_candidate_id),
    ranking_service: JobRankingService = Depends(get_ranking_service),
):
    """
    Job detail. The view counter is bumped after the response is sent.
    """
    result = await ranking_service.get_job_by_id(job_id)
    background_tasks.add_task(ranking_service.increment_job_views, job_id)
    return success_response(data=result, message=APIConstants.JOB_RETRIEVED)
