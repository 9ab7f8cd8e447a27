"""
Jobs domain service: candidate-specific ranking, job detail and text search.
"""

from typing import Any, Dict, Mapping, Optional

from jobboard.core.constants import BusinessRules, ErrorCodes
from jobboard.domain.candidates.services import CandidateSkillSetReader
from jobboard.domain.skills.repositories import SkillCatalogRepository
from jobboard.utils.error_handling import BadRequestError, NotFoundError
from jobboard.utils.logger import get_logger
from jobboard.utils.pagination import calculate_pagination, clamp_limit, clamp_page

from .entities import resolve_skill_details
from .filters import JobFilterBuilder, JobFilterOptions
from .repositories import JobRepository
from .scoring import MatchScorer

logger = get_logger(__name__)


class JobRankingService:
    """
    Core service ranking active job postings for one candidate.

    A request is one aggregation: the filter, the scorer's stages, the sort
    and the page slice all run on the server, and company and skill joins
    only touch the returned page.
    """

    def __init__(
        self,
        job_repository: JobRepository,
        candidate_reader: CandidateSkillSetReader,
        skill_repository: SkillCatalogRepository,
        filter_builder: Optional[JobFilterBuilder] = None,
        scorer: Optional[MatchScorer] = None,
        default_limit: int = BusinessRules.DEFAULT_PAGE_LIMIT,
        max_limit: int = BusinessRules.MAX_PAGE_LIMIT,
    ):
        self.job_repository = job_repository
        self.candidate_reader = candidate_reader
        self.skill_repository = skill_repository
        self.filter_builder = filter_builder or JobFilterBuilder()
        self.scorer = scorer or MatchScorer()
        self.default_limit = default_limit
        self.max_limit = max_limit

    async def get_ranking_jobs(
        self, candidate_id: str, params: Mapping[str, Any]
    ) -> Dict[str, Any]:
        """
        Rank jobs for a candidate and return the requested page.

        Args:
            candidate_id: Authenticated candidate's id
            params: Raw query options (page, limit, location, jobTitle, ...)

        Returns:
            ``{"jobs": [...], "pagination": {...}}``

        Raises:
            NotFoundError: If the candidate does not exist
        """
        options = JobFilterOptions.from_query(
            params, default_limit=self.default_limit, max_limit=self.max_limit
        )

        try:
            skill_set = await self.candidate_reader.read(candidate_id)
            predicate = self.filter_builder.build(options)
            page, total = await self.job_repository.find_ranked_jobs(
                predicate,
                self.scorer.scoring_stages(
                    skill_set.skill_ids, skill_set.overall_experience
                ),
                skip=options.skip,
                limit=options.limit,
            )
        except NotFoundError:
            raise
        except Exception:
            logger.error(
                "Failed to rank jobs",
                candidate_id=candidate_id,
                options=options.to_log_context(),
                exc_info=True,
            )
            raise

        logger.info(
            "Jobs ranked",
            candidate_id=candidate_id,
            total=total,
            returned=len(page),
            **options.to_log_context(),
        )

        return {
            "jobs": [item.to_dict() for item in page],
            "pagination": calculate_pagination(options.page, options.limit, total),
        }

    async def get_job_by_id(self, job_id: str) -> Dict[str, Any]:
        """Job detail with resolved skills, regardless of listing eligibility."""
        job = await self.job_repository.get_job_by_id(job_id)
        if job is None:
            raise NotFoundError("Job not found", error_code=ErrorCodes.RESOURCE_JOB_NOT_FOUND)

        skill_ids = job.skill_ids()
        catalog = await self.skill_repository.get_skill_names(skill_ids) if skill_ids else {}

        data = job.to_dict()
        data["views"] = job.views
        data["skillDetails"] = [
            detail.to_dict() for detail in resolve_skill_details(job, catalog)
        ]
        return data

    async def increment_job_views(self, job_id: str) -> None:
        """Fire-and-forget view counter update; failures are logged, never raised."""
        try:
            await self.job_repository.increment_views(job_id)
        except Exception:
            logger.warning("Failed to increment job views", job_id=job_id, exc_info=True)

    async def search_jobs(
        self, query: Optional[str], page: Any = None, limit: Any = None
    ) -> Dict[str, Any]:
        """Full-text search over listable jobs, ordered by relevance then recency."""
        query = (query or "").strip()
        if not query:
            raise BadRequestError(
                "Search query is required",
                field_name="q",
                error_code=ErrorCodes.VALIDATION_REQUIRED_FIELD_MISSING,
            )

        page = clamp_page(page)
        limit = clamp_limit(limit, default=self.default_limit, maximum=self.max_limit)

        jobs, total = await self.job_repository.search_jobs(
            query, skip=(page - 1) * limit, limit=limit
        )
        logger.info("Job search completed", query=query, total=total, page=page)

        return {
            "jobs": [job.to_dict() for job in jobs],
            "pagination": calculate_pagination(page, limit, total),
        }
