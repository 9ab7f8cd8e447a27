"""
Autocomplete suggestions for job titles, company names and locations.
"""

from typing import Any, Dict, Iterable, List

from jobboard.core.constants import BusinessRules
from jobboard.utils.logger import get_logger
from jobboard.utils.pagination import clamp_limit

from .filters import contains_pattern
from .repositories import JobRepository

logger = get_logger(__name__)


def _clean(values: Iterable[Any], limit: int) -> List[str]:
    """Deduplicate in order, drop empty values, cap at limit."""
    seen: Dict[str, None] = {}
    for value in values:
        if value is None:
            continue
        text = str(value).strip()
        if text and text not in seen:
            seen[text] = None
            if len(seen) >= limit:
                break
    return list(seen)


class JobSuggestionEngine:
    """
    Suggestion engine over listable jobs.

    Eligibility is legacy tolerant: either activity flag, and either the
    current or the legacy listable status.
    """

    def __init__(
        self,
        repository: JobRepository,
        default_limit: int = BusinessRules.DEFAULT_SUGGESTION_LIMIT,
        max_limit: int = BusinessRules.MAX_PAGE_LIMIT,
    ):
        self.repository = repository
        self.default_limit = default_limit
        self.max_limit = max_limit

    def _limit(self, limit: Any) -> int:
        return clamp_limit(limit, default=self.default_limit, maximum=self.max_limit)

    async def get_job_suggestions(self, query: Any, limit: Any = None) -> Dict[str, List[str]]:
        """Distinct titles and company names containing the query."""
        text = str(query or "").strip()
        if not text:
            return {"titles": [], "companies": []}

        limit = self._limit(limit)
        facets = await self.repository.suggest_titles(contains_pattern(text), limit)
        suggestions = {
            "titles": _clean(facets.get("titles", []), limit),
            "companies": _clean(facets.get("companies", []), limit),
        }
        logger.debug("Job suggestions", query=text, limit=limit)
        return suggestions

    async def get_location_suggestions(
        self, query: Any, limit: Any = None
    ) -> Dict[str, List[str]]:
        """Distinct cities, states and countries containing the query."""
        text = str(query or "").strip()
        if not text:
            return {"cities": [], "states": [], "countries": []}

        limit = self._limit(limit)
        facets = await self.repository.suggest_locations(contains_pattern(text), limit)
        return {
            "cities": _clean(facets.get("cities", []), limit),
            "states": _clean(facets.get("states", []), limit),
            "countries": _clean(facets.get("countries", []), limit),
        }
