"""
Jobs domain entities representing job postings and their ranked projections.

Documents are read from two schema generations. ``JobPosting.from_document``
is the single place where legacy field names and shapes are mapped onto the
canonical in-memory representation, so nothing downstream (filters aside)
has to know about them.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from jobboard.core.constants import BusinessRules, JobTypes
from jobboard.utils.serialization import coerce_number


class ExperienceBracket(str, Enum):
    """Named experience-years ranges shared by candidates and job postings."""

    ENTRY = "Entry Level"
    MID = "Mid Level"
    SENIOR = "Senior Level"
    LEAD = "Lead"
    DIRECTOR = "Director"

    @classmethod
    def from_years(cls, years: Optional[float]) -> Optional["ExperienceBracket"]:
        """Fixed step function: <=2 Entry, <=5 Mid, <=8 Senior, <=12 Lead, else Director."""
        if years is None:
            return None
        if years <= 2:
            return cls.ENTRY
        if years <= 5:
            return cls.MID
        if years <= 8:
            return cls.SENIOR
        if years <= 12:
            return cls.LEAD
        return cls.DIRECTOR

    @classmethod
    def parse(cls, label: Any) -> Optional["ExperienceBracket"]:
        """Resolve a client-supplied label (full name or short alias, any case)."""
        if not isinstance(label, str):
            return None
        return _BRACKET_ALIASES.get(label.strip().lower())

    @property
    def years_range(self) -> Tuple[float, Optional[float]]:
        """Inclusive workExperience range used when filtering; None means unbounded."""
        return _BRACKET_RANGES[self]


_BRACKET_RANGES = {
    ExperienceBracket.ENTRY: (0, 2),
    ExperienceBracket.MID: (2, 5),
    ExperienceBracket.SENIOR: (5, 8),
    ExperienceBracket.LEAD: (8, 12),
    ExperienceBracket.DIRECTOR: (12, None),
}

_BRACKET_ALIASES = {
    "entry level": ExperienceBracket.ENTRY,
    "entry": ExperienceBracket.ENTRY,
    "mid level": ExperienceBracket.MID,
    "mid": ExperienceBracket.MID,
    "senior level": ExperienceBracket.SENIOR,
    "senior": ExperienceBracket.SENIOR,
    "lead": ExperienceBracket.LEAD,
    "director": ExperienceBracket.DIRECTOR,
    "executive": ExperienceBracket.DIRECTOR,
}


def derive_experience_level(years: Optional[float]) -> Optional[str]:
    bracket = ExperienceBracket.from_years(years)
    return bracket.value if bracket else None


def _first_present(doc: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        value = doc.get(key)
        if value is not None:
            return value
    return None


def _as_id(value: Any) -> Optional[str]:
    return str(value) if value is not None else None


@dataclass(frozen=True)
class SkillRequirement:
    """A skill a job asks for, with its importance rating and expected years."""

    skill_id: str
    rating: Optional[float] = None
    required_experience: Optional[float] = None

    @classmethod
    def from_document(cls, entry: Any) -> Optional["SkillRequirement"]:
        if not isinstance(entry, dict) or entry.get("skillId") is None:
            return None
        return cls(
            skill_id=str(entry["skillId"]),
            rating=coerce_number(entry.get("rating")),
            required_experience=coerce_number(
                _first_present(entry, "requiredExperience", "experience")
            ),
        )


def _skill_list(value: Any) -> List[SkillRequirement]:
    if not isinstance(value, list):
        return []
    skills = (SkillRequirement.from_document(entry) for entry in value)
    return [skill for skill in skills if skill is not None]


@dataclass(frozen=True)
class SkillDetail:
    """A job skill resolved against the skill catalog for display."""

    skill_id: str
    name: str
    rating: Optional[float] = None
    required_experience: Optional[float] = None
    is_optional: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "skillId": self.skill_id,
            "name": self.name,
            "rating": self.rating,
            "requiredExperience": self.required_experience,
            "isOptional": self.is_optional,
        }


@dataclass
class JobPosting:
    """
    Canonical job posting as seen by the ranking core.

    ``company_name`` holds the resolved display name: the joined company
    record first, then the denormalized snapshot, then a fixed placeholder.
    """

    id: str
    title: str = ""
    description: Optional[str] = None
    job_id: Optional[str] = None
    job_role: Optional[str] = None
    company_id: Optional[str] = None
    company_name: str = BusinessRules.UNKNOWN_COMPANY_NAME
    job_type: Optional[str] = None
    work_experience: Optional[float] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    posted_on: Optional[datetime] = None
    last_date: Optional[datetime] = None
    active: bool = False
    status: Optional[str] = None
    skill_required: List[SkillRequirement] = field(default_factory=list)
    optional_skills: List[SkillRequirement] = field(default_factory=list)
    openings: Optional[int] = None
    applications_count: int = 0
    views: int = 0

    @classmethod
    def from_document(cls, doc: Dict[str, Any]) -> "JobPosting":
        """
        Build a job posting from a raw MongoDB document.

        Current field names win over legacy ones when both are present. A
        ``companyInfo`` array (the result of a company lookup stage) takes
        precedence over the denormalized ``companyName``.
        """
        location = doc.get("location") if isinstance(doc.get("location"), dict) else {}

        joined_name = None
        company_info = doc.get("companyInfo")
        if isinstance(company_info, list) and company_info:
            joined_name = (company_info[0] or {}).get("companyName")

        active = doc.get("active")
        if active is None:
            active = doc.get("isActive", False)

        return cls(
            id=str(doc.get("_id")),
            title=_first_present(doc, "title", "jobTitle") or "",
            description=_first_present(doc, "description", "jobDescription"),
            job_id=_as_id(doc.get("jobId")),
            job_role=doc.get("jobRole"),
            company_id=_as_id(doc.get("companyId")),
            company_name=(
                joined_name
                or doc.get("companyName")
                or BusinessRules.UNKNOWN_COMPANY_NAME
            ),
            job_type=JobTypes.normalize(doc.get("jobType")),
            work_experience=coerce_number(_first_present(doc, "workExperience", "minExperience")),
            city=_first_present(doc, "city") or location.get("city"),
            state=_first_present(doc, "state") or location.get("state"),
            country=_first_present(doc, "country") or location.get("country"),
            posted_on=_first_present(doc, "postedOn", "postedDate"),
            last_date=_first_present(doc, "lastDate", "applicationDeadline"),
            active=bool(active),
            status=doc.get("status"),
            skill_required=_skill_list(_first_present(doc, "skillRequired", "requiredSkills")),
            optional_skills=_skill_list(doc.get("optionalSkills")),
            openings=doc.get("openings"),
            applications_count=doc.get("applicationsCount") or 0,
            views=doc.get("views") or 0,
        )

    @property
    def experience_level(self) -> Optional[str]:
        return derive_experience_level(self.work_experience)

    def skill_ids(self) -> List[str]:
        """All referenced skill ids, required first, without duplicates."""
        seen = dict.fromkeys(
            skill.skill_id for skill in self.skill_required + self.optional_skills
        )
        return list(seen)

    def to_dict(self) -> Dict[str, Any]:
        """Public job fields shared by the ranking, search and detail responses."""
        return {
            "_id": self.id,
            "jobId": self.job_id,
            "title": self.title,
            "description": self.description,
            "jobRole": self.job_role,
            "companyId": self.company_id,
            "companyName": self.company_name,
            "jobType": self.job_type,
            "workExperience": self.work_experience,
            "experienceLevel": self.experience_level,
            "city": self.city,
            "state": self.state,
            "country": self.country,
            "postedOn": self.posted_on,
            "lastDate": self.last_date,
            "openings": self.openings,
            "applicationsCount": self.applications_count,
        }


def resolve_skill_details(
    job: JobPosting, catalog: Dict[str, str]
) -> List[SkillDetail]:
    """
    Attach catalog names to the job's required and optional skills.

    Skills missing from the catalog are left out, mirroring a join that only
    yields rows for existing catalog entries.
    """
    details = []
    seen = set()
    for is_optional, skills in ((False, job.skill_required), (True, job.optional_skills)):
        for skill in skills:
            name = catalog.get(skill.skill_id)
            if name is None or skill.skill_id in seen:
                continue
            seen.add(skill.skill_id)
            details.append(
                SkillDetail(
                    skill_id=skill.skill_id,
                    name=name,
                    rating=skill.rating,
                    required_experience=skill.required_experience,
                    is_optional=is_optional,
                )
            )
    return details
