"""
Company domain service: listing, lookup and name search.
"""

import re
from typing import Any, Dict, List, Optional

from jobboard.core.constants import BusinessRules, ErrorCodes
from jobboard.domain.jobs.filters import contains_pattern
from jobboard.utils.error_handling import BadRequestError, NotFoundError
from jobboard.utils.logger import get_logger
from jobboard.utils.pagination import calculate_pagination, clamp_limit, clamp_page

from .entities import Company
from .repositories import CompanyRepository

logger = get_logger(__name__)


class CompanyDomainService:
    """Domain service for company reads."""

    def __init__(
        self,
        repository: CompanyRepository,
        default_limit: int = BusinessRules.DEFAULT_COMPANY_PAGE_LIMIT,
        max_limit: int = BusinessRules.MAX_PAGE_LIMIT,
    ):
        self.repository = repository
        self.default_limit = default_limit
        self.max_limit = max_limit

    async def get_companies(
        self,
        page: Any = None,
        limit: Any = None,
        search: Optional[str] = None,
        active: Optional[bool] = True,
    ) -> Dict[str, Any]:
        page = clamp_page(page)
        limit = clamp_limit(limit, default=self.default_limit, maximum=self.max_limit)

        query: Dict[str, Any] = {}
        if active is not None:
            query["active"] = active
        if search and search.strip():
            query["companyName"] = contains_pattern(search.strip())

        companies, total = await self.repository.find_companies(
            query, skip=(page - 1) * limit, limit=limit
        )
        logger.debug("Companies listed", page=page, limit=limit, total=total)

        return {
            "companies": [company.to_dict() for company in companies],
            "pagination": calculate_pagination(page, limit, total, total_key="totalCompanies"),
        }

    async def get_company_by_id(self, company_id: str) -> Dict[str, Any]:
        company = await self.repository.get_company_by_id(company_id)
        if company is None:
            raise NotFoundError(
                "Company not found", error_code=ErrorCodes.RESOURCE_COMPANY_NOT_FOUND
            )
        return company.to_dict()

    async def search_companies(
        self, query: str, limit: Any = BusinessRules.DEFAULT_COMPANY_SEARCH_LIMIT
    ) -> List[Dict[str, Any]]:
        query = (query or "").strip()
        if not query:
            return []
        limit = clamp_limit(
            limit, default=BusinessRules.DEFAULT_COMPANY_SEARCH_LIMIT, maximum=self.max_limit
        )
        companies, _ = await self.repository.find_companies(
            {"active": True, "companyName": contains_pattern(query)}, skip=0, limit=limit
        )
        return [company.to_dict() for company in companies]

    async def get_company_by_name(self, name: str) -> Optional[Company]:
        """Exact case-insensitive match first, then the first partial match."""
        name = (name or "").strip()
        if not name:
            return None

        company = await self.repository.find_one(
            {"companyName": {"$regex": f"^{re.escape(name)}$", "$options": "i"}}
        )
        if company is None:
            company = await self.repository.find_one({"companyName": contains_pattern(name)})
        return company

    async def lookup_company_by_name(self, name: Optional[str]) -> Dict[str, Any]:
        """``get_company_by_name`` for the API: a name is required and a miss is a 404."""
        if not (name or "").strip():
            raise BadRequestError(
                "Company name is required",
                field_name="name",
                error_code=ErrorCodes.VALIDATION_REQUIRED_FIELD_MISSING,
            )
        company = await self.get_company_by_name(name)
        if company is None:
            raise NotFoundError(
                "Company not found", error_code=ErrorCodes.RESOURCE_COMPANY_NOT_FOUND
            )
        return company.to_dict()
