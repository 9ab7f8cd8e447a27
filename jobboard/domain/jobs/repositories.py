"""
Jobs domain repositories providing data access interfaces and implementations.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Tuple

from pymongo.asynchronous.database import AsyncDatabase

from jobboard.db.session import id_filter

from .entities import JobPosting
from .pipelines import (
    JOB_PROJECTION,
    build_location_suggestion_pipeline,
    build_ranking_pipeline,
    build_text_search_pipeline,
    build_title_suggestion_pipeline,
    company_lookup_stage,
)
from .scoring import RankedJob


class JobRepository(ABC):
    """
    Abstract repository interface for job postings.

    Implementations return normalized ``JobPosting`` entities; raw documents
    never leave the repository.
    """

    @abstractmethod
    async def find_ranked_jobs(
        self,
        predicate: Dict[str, Any],
        scoring_stages: List[Dict[str, Any]],
        skip: int,
        limit: int,
    ) -> Tuple[List[RankedJob], int]:
        """
        One page of postings matching the predicate, best score first.

        Returns the page (company name and skill details resolved) and the
        total number of matching postings.
        """
        pass

    @abstractmethod
    async def get_job_by_id(self, job_id: str) -> Optional[JobPosting]:
        """Retrieve a job by its ID."""
        pass

    @abstractmethod
    async def increment_views(self, job_id: str) -> bool:
        """Add one to the job's view counter."""
        pass

    @abstractmethod
    async def search_jobs(
        self, query: str, skip: int, limit: int
    ) -> Tuple[List[JobPosting], int]:
        """Full-text search; returns the requested slice and the total hit count."""
        pass

    @abstractmethod
    async def suggest_titles(
        self, pattern: Dict[str, str], limit: int
    ) -> Dict[str, List[Any]]:
        """Raw ``{titles, companies}`` facets for the pattern."""
        pass

    @abstractmethod
    async def suggest_locations(
        self, pattern: Dict[str, str], limit: int
    ) -> Dict[str, List[Any]]:
        """Raw ``{cities, states, countries}`` facets for the pattern."""
        pass


def _facet_values(result: Dict[str, Any], facet: str) -> List[Any]:
    return [row.get("_id") for row in result.get(facet, [])]


def _facet_total(result: Dict[str, Any]) -> int:
    metadata = result.get("metadata") or [{}]
    return metadata[0].get("total", 0)


class MongoJobRepository(JobRepository):
    """
    MongoDB implementation of the job repository.

    Each operation is a single round trip: filtering, scoring, company and
    skill joins and faceting run inside the aggregation pipeline on the server.
    """

    def __init__(
        self,
        db: AsyncDatabase,
        collection: str = "jobs",
        company_collection: str = "companies",
        skill_collection: str = "skills",
    ):
        self.collection = db[collection]
        self.company_collection = company_collection
        self.skill_collection = skill_collection

    async def _first(self, pipeline: List[Dict[str, Any]]) -> Dict[str, Any]:
        cursor = await self.collection.aggregate(pipeline)
        result = await cursor.to_list(1)
        return result[0] if result else {}

    async def find_ranked_jobs(
        self,
        predicate: Dict[str, Any],
        scoring_stages: List[Dict[str, Any]],
        skip: int,
        limit: int,
    ) -> Tuple[List[RankedJob], int]:
        pipeline = build_ranking_pipeline(
            predicate,
            scoring_stages,
            skip,
            limit,
            company_collection=self.company_collection,
            skill_collection=self.skill_collection,
        )
        facets = await self._first(pipeline)
        jobs = [RankedJob.from_document(doc) for doc in facets.get("jobs", [])]
        return jobs, _facet_total(facets)

    async def get_job_by_id(self, job_id: str) -> Optional[JobPosting]:
        pipeline = [
            {"$match": id_filter(job_id)},
            {"$limit": 1},
            company_lookup_stage(self.company_collection),
            {"$project": JOB_PROJECTION},
        ]
        document = await self._first(pipeline)
        return JobPosting.from_document(document) if document else None

    async def increment_views(self, job_id: str) -> bool:
        result = await self.collection.update_one(id_filter(job_id), {"$inc": {"views": 1}})
        return result.matched_count > 0

    async def search_jobs(
        self, query: str, skip: int, limit: int
    ) -> Tuple[List[JobPosting], int]:
        pipeline = build_text_search_pipeline(query, skip, limit, self.company_collection)
        facets = await self._first(pipeline)
        jobs = [JobPosting.from_document(doc) for doc in facets.get("jobs", [])]
        return jobs, _facet_total(facets)

    async def suggest_titles(
        self, pattern: Dict[str, str], limit: int
    ) -> Dict[str, List[Any]]:
        facets = await self._first(build_title_suggestion_pipeline(pattern, limit))
        return {
            "titles": _facet_values(facets, "titles"),
            "companies": _facet_values(facets, "companies"),
        }

    async def suggest_locations(
        self, pattern: Dict[str, str], limit: int
    ) -> Dict[str, List[Any]]:
        facets = await self._first(build_location_suggestion_pipeline(pattern, limit))
        return {
            "cities": _facet_values(facets, "cities"),
            "states": _facet_values(facets, "states"),
            "countries": _facet_values(facets, "countries"),
        }
