"""
Candidate repositories providing read-only access to candidate profiles.
"""

from abc import ABC, abstractmethod
from typing import Optional

from pymongo.asynchronous.database import AsyncDatabase

from jobboard.db.session import id_filter

from .entities import CandidateSkillSet

# Only the fields scoring needs are read from the profile.
SKILL_SET_PROJECTION = {
    "skills.skillId": 1,
    "overallExperience": 1,
    "currentCity": 1,
    "country": 1,
}


class CandidateRepository(ABC):
    """Abstract repository interface for candidate reads."""

    @abstractmethod
    async def get_skill_set(self, candidate_id: str) -> Optional[CandidateSkillSet]:
        """Load the candidate's scoring inputs, or None when the id does not resolve."""
        pass


class MongoCandidateRepository(CandidateRepository):
    """MongoDB implementation of the candidate repository."""

    def __init__(self, db: AsyncDatabase, collection: str = "candidates"):
        self.collection = db[collection]

    async def get_skill_set(self, candidate_id: str) -> Optional[CandidateSkillSet]:
        document = await self.collection.find_one(
            id_filter(candidate_id), SKILL_SET_PROJECTION
        )
        if document is None:
            return None
        return CandidateSkillSet.from_document(document)
