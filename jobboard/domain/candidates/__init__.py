"""
Candidates domain module: the read-only candidate profile slice used for ranking.
"""

from .entities import CandidateSkillSet
from .repositories import CandidateRepository, MongoCandidateRepository
from .services import CandidateSkillSetReader

__all__ = [
    "CandidateSkillSet",
    "CandidateRepository",
    "MongoCandidateRepository",
    "CandidateSkillSetReader",
]
