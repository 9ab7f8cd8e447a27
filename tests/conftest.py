import os
import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

import pytest

os.environ.setdefault("ENVIRONMENT", "testing")

from jobboard.domain.candidates.entities import CandidateSkillSet
from jobboard.domain.candidates.repositories import CandidateRepository
from jobboard.domain.candidates.services import CandidateSkillSetReader
from jobboard.domain.companies.entities import Company
from jobboard.domain.companies.repositories import CompanyRepository
from jobboard.domain.jobs.entities import JobPosting, resolve_skill_details
from jobboard.domain.jobs.repositories import JobRepository
from jobboard.domain.jobs.scoring import MatchScorer, RankedJob
from jobboard.domain.jobs.services import JobRankingService
from jobboard.domain.skills.repositories import SkillCatalogRepository

_UNDATED = datetime.min.replace(tzinfo=timezone.utc)


class FakeJobRepository(JobRepository):
    """
    In-memory job store. Predicates are recorded, not evaluated.

    Ranking mirrors the server-side pipeline for ``ranking_candidate``:
    score, order by score, posting date (undated last) and id, then slice.
    """

    def __init__(
        self,
        jobs: Optional[List[JobPosting]] = None,
        ranking_candidate: Optional[CandidateSkillSet] = None,
        skill_names: Optional[Dict[str, str]] = None,
    ):
        self.jobs = list(jobs or [])
        self.ranking_candidate = ranking_candidate
        self.skill_names = dict(skill_names or {})
        self.scorer = MatchScorer()
        self.predicates: List[Dict[str, Any]] = []
        self.ranking_calls: List[Dict[str, Any]] = []
        self.viewed: List[str] = []
        self.suggestion_calls: List[Any] = []
        self.title_facets: Dict[str, List[Any]] = {"titles": [], "companies": []}
        self.location_facets: Dict[str, List[Any]] = {
            "cities": [],
            "states": [],
            "countries": [],
        }
        self.error: Optional[Exception] = None

    async def find_ranked_jobs(self, predicate, scoring_stages, skip, limit):
        self.predicates.append(predicate)
        self.ranking_calls.append(
            {"stages": scoring_stages, "skip": skip, "limit": limit}
        )
        if self.error:
            raise self.error

        candidate = self.ranking_candidate or CandidateSkillSet(candidate_id="")
        ranked = [
            (job, self.scorer.score(job, candidate.skill_ids, candidate.overall_experience))
            for job in self.jobs
        ]
        ranked.sort(key=lambda item: item[0].id)
        ranked.sort(key=lambda item: item[0].posted_on or _UNDATED, reverse=True)
        ranked.sort(key=lambda item: item[1].match_score, reverse=True)

        page = [
            RankedJob(
                job=job,
                match=match,
                skill_details=resolve_skill_details(job, self.skill_names),
            )
            for job, match in ranked[skip:skip + limit]
        ]
        return page, len(ranked)

    async def get_job_by_id(self, job_id):
        return next((job for job in self.jobs if job.id == job_id), None)

    async def increment_views(self, job_id):
        if self.error:
            raise self.error
        self.viewed.append(job_id)
        return True

    async def search_jobs(self, query, skip, limit):
        hits = [job for job in self.jobs if query.lower() in job.title.lower()]
        return hits[skip:skip + limit], len(hits)

    async def suggest_titles(self, pattern, limit):
        self.suggestion_calls.append(("titles", pattern, limit))
        return self.title_facets

    async def suggest_locations(self, pattern, limit):
        self.suggestion_calls.append(("locations", pattern, limit))
        return self.location_facets


class FakeCandidateRepository(CandidateRepository):
    def __init__(self, candidates: Optional[Dict[str, CandidateSkillSet]] = None):
        self.candidates = dict(candidates or {})

    async def get_skill_set(self, candidate_id):
        return self.candidates.get(candidate_id)


class FakeSkillCatalogRepository(SkillCatalogRepository):
    def __init__(self, names: Optional[Dict[str, str]] = None):
        self.names = dict(names or {})
        self.calls: List[set] = []

    async def get_skill_names(self, skill_ids):
        ids = set(skill_ids)
        self.calls.append(ids)
        return {skill_id: name for skill_id, name in self.names.items() if skill_id in ids}


class FakeCompanyRepository(CompanyRepository):
    def __init__(self, companies: Optional[List[Company]] = None):
        self.companies = list(companies or [])
        self.queries: List[Dict[str, Any]] = []

    async def find_companies(self, query, skip, limit):
        self.queries.append(query)
        ordered = sorted(self.companies, key=lambda company: company.company_name)
        return ordered[skip:skip + limit], len(ordered)

    async def get_company_by_id(self, company_id):
        return next((c for c in self.companies if c.id == company_id), None)

    async def find_one(self, query):
        self.queries.append(query)
        regex = query["companyName"]
        pattern = re.compile(regex["$regex"], re.IGNORECASE)
        return next((c for c in self.companies if pattern.search(c.company_name)), None)


def make_job(job_id: str, **overrides) -> JobPosting:
    fields = {
        "id": job_id,
        "title": f"Job {job_id}",
        "company_name": "Acme",
        "active": True,
        "status": "APPROVED",
        "posted_on": datetime(2024, 1, 1, tzinfo=timezone.utc),
    }
    fields.update(overrides)
    return JobPosting(**fields)


@pytest.fixture
def candidate_repository():
    return FakeCandidateRepository(
        {
            "cand-1": CandidateSkillSet(
                candidate_id="cand-1",
                skill_ids=frozenset({"S1", "S2"}),
                overall_experience=3,
            )
        }
    )


@pytest.fixture
def skill_repository():
    return FakeSkillCatalogRepository({"S1": "Python", "S2": "MongoDB", "S3": "Docker"})


@pytest.fixture
def job_repository(candidate_repository, skill_repository):
    return FakeJobRepository(
        ranking_candidate=candidate_repository.candidates["cand-1"],
        skill_names=skill_repository.names,
    )


@pytest.fixture
def ranking_service(job_repository, candidate_repository, skill_repository):
    return JobRankingService(
        job_repository=job_repository,
        candidate_reader=CandidateSkillSetReader(candidate_repository),
        skill_repository=skill_repository,
    )
