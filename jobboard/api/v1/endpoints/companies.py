from typing import Optional

from fastapi import APIRouter, Depends

from jobboard.core.constants import APIConstants, EndpointPaths
from jobboard.dependencies import get_company_service
from jobboard.domain.companies.services import CompanyDomainService
from jobboard.schemas.common import ErrorResponse
from jobboard.schemas.companies import (
    CompanyListResponse,
    CompanyResponse,
    CompanySearchResponse,
)
from jobboard.utils.responses import success_response

router = APIRouter(
    tags=["companies"],
    responses={404: {"model": ErrorResponse, "description": "Not found"}},
)


@router.get("", responses={200: {"model": CompanyListResponse}})
async def get_companies(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    search: Optional[str] = None,
    company_service: CompanyDomainService = Depends(get_company_service),
):
    """Active companies sorted by name."""
    result = await company_service.get_companies(page=page, limit=limit, search=search)
    return success_response(data=result, message=APIConstants.COMPANIES_RETRIEVED)


@router.get(EndpointPaths.SEARCH, responses={200: {"model": CompanySearchResponse}})
async def search_companies(
    q: Optional[str] = None,
    limit: Optional[str] = None,
    company_service: CompanyDomainService = Depends(get_company_service),
):
    result = await company_service.search_companies(q or "", limit)
    return success_response(data=result, message=APIConstants.COMPANIES_RETRIEVED)


@router.get(EndpointPaths.COMPANY_BY_NAME, responses={200: {"model": CompanyResponse}})
async def get_company_by_name(
    name: Optional[str] = None,
    company_service: CompanyDomainService = Depends(get_company_service),
):
    """Exact case-insensitive name match, falling back to the first partial match."""
    result = await company_service.lookup_company_by_name(name)
    return success_response(data=result, message=APIConstants.COMPANY_RETRIEVED)


@router.get(EndpointPaths.COMPANY_DETAIL, responses={200: {"model": CompanyResponse}})
async def get_company_by_id(
    company_id: str,
    company_service: CompanyDomainService = Depends(get_company_service),
):
    result = await company_service.get_company_by_id(company_id)
    return success_response(data=result, message=APIConstants.COMPANY_RETRIEVED)
