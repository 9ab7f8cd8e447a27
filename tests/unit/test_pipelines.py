from jobboard.domain.jobs.filters import contains_pattern
from jobboard.domain.jobs.pipelines import (
    build_location_suggestion_pipeline,
    build_ranking_pipeline,
    build_text_search_pipeline,
    build_title_suggestion_pipeline,
    listable_jobs_clause,
)
from jobboard.domain.jobs.scoring import MatchScorer


def test_ranking_pipeline_scores_sorts_then_paginates():
    predicate = {"active": True, "status": "APPROVED"}
    stages = MatchScorer().scoring_stages(frozenset({"S1"}), 2)
    pipeline = build_ranking_pipeline(predicate, stages, 20, 10, "companies", "skills")

    assert pipeline[0] == {"$match": predicate}
    assert pipeline[1:1 + len(stages)] == stages
    assert pipeline[-2] == {"$sort": {"matchScore": -1, "rankPostedOn": -1, "_id": 1}}

    facet = pipeline[-1]["$facet"]
    assert facet["metadata"] == [{"$count": "total"}]
    jobs = facet["jobs"]
    assert jobs[0] == {"$skip": 20}
    assert jobs[1] == {"$limit": 10}
    # Joins only touch the sliced page.
    assert jobs[2]["$lookup"]["from"] == "companies"
    assert jobs[3]["$lookup"]["from"] == "skills"
    assert jobs[3]["$lookup"]["as"] == "skillCatalog"
    assert jobs[4]["$project"]["matchScore"] == 1
    assert jobs[4]["$project"]["skillCatalog"] == 1


def test_ranking_pipeline_has_no_unbounded_stage_before_the_slice():
    stages = MatchScorer().scoring_stages(frozenset(), 0)
    pipeline = build_ranking_pipeline({}, stages, 0, 10, "companies", "skills")

    operators = [next(iter(stage)) for stage in pipeline[:-1]]
    assert "$lookup" not in operators


def test_listable_clause_accepts_legacy_flags():
    clause = listable_jobs_clause()
    assert clause["$and"][0] == {"$or": [{"active": True}, {"isActive": True}]}
    assert clause["$and"][1] == {"status": {"$in": ["APPROVED", "active"]}}


def test_title_suggestions_facet_titles_and_companies():
    pattern = contains_pattern("eng")
    pipeline = build_title_suggestion_pipeline(pattern, 5)

    facets = pipeline[-1]["$facet"]
    assert set(facets) == {"titles", "companies"}
    assert facets["titles"][0] == {"$match": {"suggestTitle": pattern}}
    assert facets["companies"][-1] == {"$limit": 5}


def test_location_suggestions_cover_nested_legacy_fields():
    pattern = contains_pattern("aus")
    pipeline = build_location_suggestion_pipeline(pattern, 8)

    fields = [next(iter(clause)) for clause in pipeline[0]["$match"]["$or"]]
    assert "location.city" in fields
    assert "city" in fields
    assert set(pipeline[-1]["$facet"]) == {"cities", "states", "countries"}


def test_text_search_paginates_inside_facet():
    pipeline = build_text_search_pipeline("python", 20, 10, "companies")

    assert pipeline[0]["$match"]["$text"] == {"$search": "python"}
    jobs_facet = pipeline[-1]["$facet"]["jobs"]
    assert jobs_facet[0] == {"$skip": 20}
    assert jobs_facet[1] == {"$limit": 10}
    assert pipeline[-1]["$facet"]["metadata"] == [{"$count": "total"}]


def test_location_suggestions_prefer_flat_fields_over_nested_ones():
    pipeline = build_location_suggestion_pipeline(contains_pattern("aus"), 8)

    projection = pipeline[1]["$project"]
    assert projection["suggestCity"] == {"$ifNull": ["$city", "$location.city"]}
    assert projection["suggestState"] == {"$ifNull": ["$state", "$location.state"]}
    assert projection["suggestCountry"] == {"$ifNull": ["$country", "$location.country"]}


def test_title_suggestions_fall_back_to_legacy_title():
    pipeline = build_title_suggestion_pipeline(contains_pattern("eng"), 5)

    projection = pipeline[1]["$project"]
    assert projection["suggestTitle"] == {"$ifNull": ["$title", "$jobTitle"]}
    assert projection["companyName"] == 1
