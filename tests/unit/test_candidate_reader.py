import asyncio

import pytest
from bson import Decimal128, ObjectId

from jobboard.core.constants import ErrorCodes
from jobboard.domain.candidates.entities import CandidateSkillSet
from jobboard.domain.candidates.services import CandidateSkillSetReader
from jobboard.domain.jobs.entities import JobPosting
from jobboard.utils.error_handling import NotFoundError


def test_skill_set_from_document():
    skill_id = ObjectId()
    doc = {
        "_id": ObjectId("507f1f77bcf86cd799439011"),
        "skills": [{"skillId": skill_id}, {"skillId": "S2"}, {"name": "no id"}],
        "overallExperience": 6,
        "currentCity": "Pune",
    }

    skill_set = CandidateSkillSet.from_document(doc)

    assert skill_set.candidate_id == "507f1f77bcf86cd799439011"
    assert skill_set.skill_ids == frozenset({str(skill_id), "S2"})
    assert skill_set.overall_experience == 6
    assert skill_set.current_city == "Pune"


def test_missing_skills_and_experience_default_to_empty():
    skill_set = CandidateSkillSet.from_document({"_id": "c1", "overallExperience": "lots"})

    assert skill_set.skill_ids == frozenset()
    assert skill_set.overall_experience == 0


@pytest.mark.parametrize(
    "stored,expected",
    [("3", 3.0), (" 4.5 ", 4.5), (Decimal128("2"), 2.0), (7, 7), ("NaN", 0), (True, 0)],
)
def test_overall_experience_is_normalized_like_job_experience(stored, expected):
    skill_set = CandidateSkillSet.from_document({"_id": "c1", "overallExperience": stored})
    job = JobPosting.from_document({"_id": "j1", "workExperience": stored})

    assert skill_set.overall_experience == expected
    assert (job.work_experience or 0) == expected


def test_reader_returns_skill_set(candidate_repository):
    skill_set = asyncio.run(CandidateSkillSetReader(candidate_repository).read("cand-1"))
    assert skill_set.skill_ids == frozenset({"S1", "S2"})


def test_reader_raises_for_unknown_candidate(candidate_repository):
    with pytest.raises(NotFoundError) as excinfo:
        asyncio.run(CandidateSkillSetReader(candidate_repository).read("ghost"))

    assert excinfo.value.error_code == ErrorCodes.RESOURCE_CANDIDATE_NOT_FOUND
    assert excinfo.value.status_code == 404
