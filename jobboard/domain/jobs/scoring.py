"""
Match scoring between a candidate's skill set and a job posting.

The score is a weighted blend of skill overlap (percentage of the job's
required skills the candidate holds) and a flat experience bonus:

    match_score = match_percentage * 0.7 + experience_match * 30

which keeps every score inside [0, 100].

Ranking evaluates the score inside the aggregation pipeline
(``MatchScorer.scoring_stages``); ``MatchScorer.score`` computes the same
fields for a single posting in process.
"""

from dataclasses import dataclass, field
from typing import AbstractSet, Any, Dict, List, Optional

from jobboard.config.base_config import ExperienceMatchPolicy
from jobboard.core.constants import BusinessRules
from jobboard.utils.serialization import coerce_number

from .entities import JobPosting, SkillDetail, resolve_skill_details

# Required skill entries that carry an id, current or legacy field name.
_REQUIRED_SKILLS = {
    "$filter": {
        "input": {
            "$let": {
                "vars": {"skills": {"$ifNull": ["$skillRequired", "$requiredSkills"]}},
                "in": {"$cond": [{"$isArray": "$$skills"}, "$$skills", []]},
            }
        },
        "as": "skill",
        "cond": {"$ne": [{"$ifNull": ["$$skill.skillId", None]}, None]},
    }
}

_WORK_EXPERIENCE = {
    "$convert": {
        "input": {"$ifNull": ["$workExperience", "$minExperience"]},
        "to": "double",
        "onError": None,
        "onNull": None,
    }
}


@dataclass(frozen=True)
class MatchResult:
    """Per-job scoring fields computed for one candidate."""

    match_percentage: float
    skill_match_count: int
    total_required_skills: int
    experience_match: int
    match_score: float


class MatchScorer:
    """
    Scorer of (job, candidate skill ids, candidate experience).

    The experience rule is selected by policy. ``EXACT`` reproduces the
    long-standing production rule, which only awards the bonus when the
    candidate's overall experience equals the job's ``workExperience``.
    ``MEETS_OR_EXCEEDS`` awards it whenever the candidate has at least the
    required years.
    """

    def __init__(
        self,
        experience_policy: ExperienceMatchPolicy = ExperienceMatchPolicy.EXACT,
        skill_weight: float = BusinessRules.SKILL_MATCH_WEIGHT,
        experience_points: float = BusinessRules.EXPERIENCE_MATCH_POINTS,
    ):
        self.experience_policy = ExperienceMatchPolicy(experience_policy)
        self.skill_weight = skill_weight
        self.experience_points = experience_points

    def experience_match(
        self, candidate_experience: Optional[float], required: Optional[float]
    ) -> int:
        candidate_experience = candidate_experience or 0
        if self.experience_policy == ExperienceMatchPolicy.MEETS_OR_EXCEEDS:
            return int(required is None or candidate_experience >= required)
        if required is None:
            return 0
        return int(candidate_experience >= required and candidate_experience <= required)

    def score(
        self,
        job: JobPosting,
        candidate_skill_ids: AbstractSet[str],
        candidate_experience: Optional[float],
    ) -> MatchResult:
        required = job.skill_required or []
        total = len(required)
        matched = sum(1 for skill in required if str(skill.skill_id) in candidate_skill_ids)
        percentage = (matched / total) * 100 if total > 0 else 0
        experience = self.experience_match(candidate_experience, job.work_experience)

        return MatchResult(
            match_percentage=percentage,
            skill_match_count=matched,
            total_required_skills=total,
            experience_match=experience,
            match_score=percentage * self.skill_weight + experience * self.experience_points,
        )

    def _experience_expression(self, candidate_experience: float) -> Dict[str, Any]:
        if self.experience_policy == ExperienceMatchPolicy.MEETS_OR_EXCEEDS:
            condition = {
                "$or": [
                    {"$eq": ["$requiredExperienceYears", None]},
                    {"$gte": [candidate_experience, "$requiredExperienceYears"]},
                ]
            }
        else:
            condition = {
                "$and": [
                    {"$ne": ["$requiredExperienceYears", None]},
                    {"$gte": [candidate_experience, "$requiredExperienceYears"]},
                    {"$lte": [candidate_experience, "$requiredExperienceYears"]},
                ]
            }
        return {"$cond": [condition, 1, 0]}

    def scoring_stages(
        self,
        candidate_skill_ids: AbstractSet[str],
        candidate_experience: Optional[float],
    ) -> List[Dict[str, Any]]:
        """
        ``$addFields`` stages computing the same fields as ``score`` on the server.

        Skill ids are compared as strings so ObjectId and string references match.
        """
        candidate_experience = coerce_number(candidate_experience) or 0
        skill_ids = sorted(str(skill_id) for skill_id in candidate_skill_ids)
        return [
            {
                "$addFields": {
                    "requiredSkillIds": {
                        "$map": {
                            "input": _REQUIRED_SKILLS,
                            "as": "skill",
                            "in": {"$toString": "$$skill.skillId"},
                        }
                    },
                    "requiredExperienceYears": _WORK_EXPERIENCE,
                }
            },
            {
                "$addFields": {
                    "totalRequiredSkills": {"$size": "$requiredSkillIds"},
                    "skillMatchCount": {
                        "$size": {
                            "$filter": {
                                "input": "$requiredSkillIds",
                                "as": "skillId",
                                "cond": {"$in": ["$$skillId", skill_ids]},
                            }
                        }
                    },
                    "experienceMatch": self._experience_expression(candidate_experience),
                }
            },
            {
                "$addFields": {
                    "matchPercentage": {
                        "$cond": [
                            {"$gt": ["$totalRequiredSkills", 0]},
                            {
                                "$multiply": [
                                    {"$divide": ["$skillMatchCount", "$totalRequiredSkills"]},
                                    100,
                                ]
                            },
                            0,
                        ]
                    }
                }
            },
            {
                "$addFields": {
                    "matchScore": {
                        "$add": [
                            {"$multiply": ["$matchPercentage", self.skill_weight]},
                            {"$multiply": ["$experienceMatch", self.experience_points]},
                        ]
                    }
                }
            },
        ]


@dataclass
class RankedJob:
    """A job posting augmented with request-scoped scoring fields. Never persisted."""

    job: JobPosting
    match: MatchResult
    skill_details: List[SkillDetail] = field(default_factory=list)

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "RankedJob":
        """Build from a ranked document carrying score fields and a ``skillCatalog`` join."""
        job = JobPosting.from_document(doc)
        catalog = {
            str(entry["_id"]): entry.get("name") or ""
            for entry in doc.get("skillCatalog") or []
            if isinstance(entry, dict) and entry.get("_id") is not None
        }
        match = MatchResult(
            match_percentage=coerce_number(doc.get("matchPercentage")) or 0,
            skill_match_count=int(doc.get("skillMatchCount") or 0),
            total_required_skills=int(doc.get("totalRequiredSkills") or 0),
            experience_match=int(doc.get("experienceMatch") or 0),
            match_score=coerce_number(doc.get("matchScore")) or 0,
        )
        return cls(job=job, match=match, skill_details=resolve_skill_details(job, catalog))

    def to_dict(self) -> Dict[str, Any]:
        data = self.job.to_dict()
        data.update(
            {
                "matchScore": self.match.match_score,
                "matchPercentage": self.match.match_percentage,
                "skillMatchCount": self.match.skill_match_count,
                "totalRequiredSkills": self.match.total_required_skills,
                "skillDetails": [detail.to_dict() for detail in self.skill_details],
            }
        )
        return data
