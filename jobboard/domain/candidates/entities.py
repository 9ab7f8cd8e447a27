"""
Candidate entities used as scoring inputs.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional

from jobboard.utils.serialization import coerce_number


@dataclass(frozen=True)
class CandidateSkillSet:
    """
    The slice of a candidate profile the ranking core needs.

    Skill ids are stringified so ObjectId and string references compare equal.
    """

    candidate_id: str
    skill_ids: FrozenSet[str] = field(default_factory=frozenset)
    overall_experience: float = 0
    current_city: Optional[str] = None
    country: Optional[str] = None

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "CandidateSkillSet":
        skills = doc.get("skills") if isinstance(doc.get("skills"), list) else []
        skill_ids = frozenset(
            str(skill["skillId"])
            for skill in skills
            if isinstance(skill, dict) and skill.get("skillId") is not None
        )
        experience = coerce_number(doc.get("overallExperience"))

        return cls(
            candidate_id=str(doc.get("_id")),
            skill_ids=skill_ids,
            overall_experience=experience if experience is not None else 0,
            current_city=doc.get("currentCity"),
            country=doc.get("country"),
        )
