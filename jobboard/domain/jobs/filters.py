"""
Translation of client query options into a MongoDB filter over the job collection.
"""

import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Mapping, Optional

from jobboard.config.base_config import FilterCombinationPolicy
from jobboard.core.constants import BusinessRules, JobStatus
from jobboard.utils.logger import get_logger
from jobboard.utils.pagination import clamp_limit, clamp_page, parse_int

from .entities import ExperienceBracket

logger = get_logger(__name__)


def contains_pattern(text: str) -> Dict[str, str]:
    """Case-insensitive substring match on user text, with regex metacharacters escaped."""
    return {"$regex": re.escape(text), "$options": "i"}


def _text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _labels(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split(",")
    return [str(item).strip() for item in value if str(item).strip()]


@dataclass
class JobFilterOptions:
    """
    Recognized ranking options after parsing and clamping.

    ``is_remote``, ``min_salary`` and ``max_salary`` are accepted for
    interface compatibility but impose no constraint: postings carry no
    remote or salary fields.
    """

    page: int = BusinessRules.DEFAULT_PAGE
    limit: int = BusinessRules.DEFAULT_PAGE_LIMIT
    location: Optional[str] = None
    job_title: Optional[str] = None
    job_type: Optional[str] = None
    experience_levels: List[ExperienceBracket] = field(default_factory=list)
    posted_within: Optional[int] = None
    is_remote: Optional[str] = None
    min_salary: Optional[str] = None
    max_salary: Optional[str] = None

    @property
    def skip(self) -> int:
        return (self.page - 1) * self.limit

    @classmethod
    def from_query(
        cls,
        params: Mapping[str, Any],
        default_limit: int = BusinessRules.DEFAULT_PAGE_LIMIT,
        max_limit: int = BusinessRules.MAX_PAGE_LIMIT,
    ) -> "JobFilterOptions":
        """
        Parse raw query parameters (camelCase keys, string values).

        Unknown experience labels are dropped with a warning instead of
        failing the request.
        """
        levels = []
        for label in _labels(params.get("experienceLevel")):
            bracket = ExperienceBracket.parse(label)
            if bracket is None:
                logger.warning("Ignoring unknown experience level", label=label)
            elif bracket not in levels:
                levels.append(bracket)

        posted_within = parse_int(params.get("postedWithin"))

        return cls(
            page=clamp_page(params.get("page")),
            limit=clamp_limit(params.get("limit"), default=default_limit, maximum=max_limit),
            location=_text(params.get("location")),
            job_title=_text(params.get("jobTitle")),
            job_type=_text(params.get("jobType")),
            experience_levels=levels,
            posted_within=posted_within if posted_within and posted_within > 0 else None,
            is_remote=_text(params.get("isRemote")),
            min_salary=_text(params.get("minSalary")),
            max_salary=_text(params.get("maxSalary")),
        )

    def to_log_context(self) -> Dict[str, Any]:
        return {
            "page": self.page,
            "limit": self.limit,
            "location": self.location,
            "job_title": self.job_title,
            "job_type": self.job_type,
            "experience_levels": [level.value for level in self.experience_levels],
            "posted_within": self.posted_within,
        }


class JobFilterBuilder:
    """
    Builds the ranking predicate: active, approved postings narrowed by the options.

    Location, title and experience options each produce an OR-group. With the
    ``INTERSECT`` policy the groups are AND-combined; with ``OVERWRITE`` each
    group is written to the single ``$or`` key and the last one wins, which
    reproduces the historical behavior.
    """

    def __init__(
        self,
        combination_policy: FilterCombinationPolicy = FilterCombinationPolicy.INTERSECT,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.combination_policy = FilterCombinationPolicy(combination_policy)
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def build(self, options: JobFilterOptions) -> Dict[str, Any]:
        query: Dict[str, Any] = {
            JobStatus.ACTIVE_FIELD: True,
            "status": JobStatus.APPROVED,
        }
        or_groups: List[List[Dict[str, Any]]] = []

        if options.location:
            pattern = contains_pattern(options.location)
            or_groups.append([{"city": pattern}, {"state": pattern}, {"country": pattern}])

        if options.job_title:
            pattern = contains_pattern(options.job_title)
            or_groups.append([{"title": pattern}, {"companyName": pattern}])

        if options.job_type:
            query["jobType"] = options.job_type

        if options.experience_levels:
            or_groups.append(
                [self._experience_clause(level) for level in options.experience_levels]
            )

        if options.posted_within:
            since = self.clock() - timedelta(days=options.posted_within)
            query["postedOn"] = {"$gte": since}

        self._combine(query, or_groups)
        return query

    def _combine(self, query: Dict[str, Any], or_groups: List[List[Dict[str, Any]]]) -> None:
        if not or_groups:
            return
        if self.combination_policy == FilterCombinationPolicy.OVERWRITE:
            for group in or_groups:
                query["$or"] = group
        elif len(or_groups) == 1:
            query["$or"] = or_groups[0]
        else:
            query["$and"] = [{"$or": group} for group in or_groups]

    @staticmethod
    def _experience_clause(level: ExperienceBracket) -> Dict[str, Any]:
        low, high = level.years_range
        bounds: Dict[str, Any] = {"$gte": low}
        if high is not None:
            bounds["$lte"] = high
        return {"workExperience": bounds}
