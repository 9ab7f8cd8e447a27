"""
Candidate skill set reader.
"""

from jobboard.core.constants import ErrorCodes
from jobboard.utils.error_handling import NotFoundError
from jobboard.utils.logger import get_logger

from .entities import CandidateSkillSet
from .repositories import CandidateRepository

logger = get_logger(__name__)


class CandidateSkillSetReader:
    """Resolves a candidate id into the skill ids and experience used for scoring."""

    def __init__(self, repository: CandidateRepository):
        self.repository = repository

    async def read(self, candidate_id: str) -> CandidateSkillSet:
        """
        Load the candidate's skill set.

        Raises:
            NotFoundError: If the candidate id does not resolve
        """
        skill_set = await self.repository.get_skill_set(candidate_id)
        if skill_set is None:
            logger.info("Candidate not found", candidate_id=candidate_id)
            raise NotFoundError(
                "Candidate not found", error_code=ErrorCodes.RESOURCE_CANDIDATE_NOT_FOUND
            )
        return skill_set
