"""
Jobs domain module: postings, filtering, scoring, ranking and suggestions.
"""

from .entities import ExperienceBracket, JobPosting, SkillDetail, SkillRequirement
from .filters import JobFilterBuilder, JobFilterOptions
from .repositories import JobRepository, MongoJobRepository
from .scoring import MatchResult, MatchScorer, RankedJob
from .services import JobRankingService
from .suggestions import JobSuggestionEngine

__all__ = [
    "ExperienceBracket",
    "JobPosting",
    "SkillDetail",
    "SkillRequirement",
    "JobFilterBuilder",
    "JobFilterOptions",
    "JobRepository",
    "MongoJobRepository",
    "MatchResult",
    "MatchScorer",
    "RankedJob",
    "JobRankingService",
    "JobSuggestionEngine",
]
