from datetime import datetime, timedelta, timezone

from jobboard.config.base_config import FilterCombinationPolicy
from jobboard.domain.jobs.entities import ExperienceBracket
from jobboard.domain.jobs.filters import JobFilterBuilder, JobFilterOptions, contains_pattern

NOW = datetime(2024, 6, 1, tzinfo=timezone.utc)


def _builder(policy=FilterCombinationPolicy.INTERSECT):
    return JobFilterBuilder(combination_policy=policy, clock=lambda: NOW)


def test_base_predicate_without_options():
    predicate = _builder().build(JobFilterOptions.from_query({}))
    assert predicate == {"active": True, "status": "APPROVED"}


def test_location_matches_city_state_or_country():
    predicate = _builder().build(JobFilterOptions.from_query({"location": "Pune"}))
    pattern = {"$regex": "Pune", "$options": "i"}
    assert predicate["$or"] == [{"city": pattern}, {"state": pattern}, {"country": pattern}]


def test_user_text_is_regex_escaped():
    assert contains_pattern("C++ (dev)") == {"$regex": r"C\+\+\ \(dev\)", "$options": "i"}


def test_job_type_is_exact_match():
    predicate = _builder().build(JobFilterOptions.from_query({"jobType": "full-time"}))
    assert predicate["jobType"] == "full-time"


def test_experience_levels_become_range_clauses():
    options = JobFilterOptions.from_query({"experienceLevel": "Mid Level,director"})
    predicate = _builder().build(options)

    assert predicate["$or"] == [
        {"workExperience": {"$gte": 2, "$lte": 5}},
        {"workExperience": {"$gte": 12}},
    ]


def test_unknown_experience_labels_are_ignored():
    options = JobFilterOptions.from_query({"experienceLevel": "wizard,senior"})
    assert options.experience_levels == [ExperienceBracket.SENIOR]


def test_posted_within_uses_clock():
    predicate = _builder().build(JobFilterOptions.from_query({"postedWithin": "7"}))
    assert predicate["postedOn"] == {"$gte": NOW - timedelta(days=7)}


def test_non_positive_posted_within_is_dropped():
    options = JobFilterOptions.from_query({"postedWithin": "0"})
    assert options.posted_within is None


def test_intersect_policy_ands_or_groups():
    options = JobFilterOptions.from_query(
        {"location": "Pune", "jobTitle": "dev", "experienceLevel": "entry"}
    )
    predicate = _builder().build(options)

    assert "$or" not in predicate
    assert len(predicate["$and"]) == 3
    assert predicate["$and"][2] == {"$or": [{"workExperience": {"$gte": 0, "$lte": 2}}]}


def test_overwrite_policy_keeps_last_group():
    options = JobFilterOptions.from_query({"location": "Pune", "jobTitle": "dev"})
    predicate = _builder(FilterCombinationPolicy.OVERWRITE).build(options)

    pattern = {"$regex": "dev", "$options": "i"}
    assert predicate["$or"] == [{"title": pattern}, {"companyName": pattern}]
    assert "$and" not in predicate


def test_options_clamp_page_and_limit():
    options = JobFilterOptions.from_query({"page": "0", "limit": "500"})
    assert options.page == 1
    assert options.limit == 50
    assert options.skip == 0


def test_salary_and_remote_options_do_not_constrain():
    options = JobFilterOptions.from_query({"minSalary": "1000", "isRemote": "true"})
    assert _builder().build(options) == {"active": True, "status": "APPROVED"}
