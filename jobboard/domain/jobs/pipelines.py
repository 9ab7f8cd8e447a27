"""
MongoDB aggregation pipeline builders for the jobs collection.

Builders are pure functions returning stage lists, so the exact query shape
can be asserted without a running database.
"""

from typing import Any, Dict, List

from jobboard.core.constants import JobStatus

# Raw fields read by JobPosting.from_document, current and legacy names alike.
JOB_PROJECTION: Dict[str, int] = {
    field: 1
    for field in (
        "_id",
        "jobId",
        "title",
        "jobTitle",
        "description",
        "jobDescription",
        "jobRole",
        "companyId",
        "companyName",
        "companyInfo",
        "jobType",
        "workExperience",
        "minExperience",
        "city",
        "state",
        "country",
        "location",
        "postedOn",
        "postedDate",
        "lastDate",
        "applicationDeadline",
        "active",
        "isActive",
        "status",
        "skillRequired",
        "requiredSkills",
        "optionalSkills",
        "openings",
        "applicationsCount",
        "views",
    )
}

# Job fields plus the score fields and skill join added by the ranking pipeline.
RANKED_JOB_PROJECTION: Dict[str, int] = {
    **JOB_PROJECTION,
    **{
        field: 1
        for field in (
            "matchScore",
            "matchPercentage",
            "skillMatchCount",
            "totalRequiredSkills",
            "experienceMatch",
            "skillCatalog",
        )
    },
}

# Legacy-shape aware location values, flat fields preferred.
_CITY = {"$ifNull": ["$city", "$location.city"]}
_STATE = {"$ifNull": ["$state", "$location.state"]}
_COUNTRY = {"$ifNull": ["$country", "$location.country"]}
_TITLE = {"$ifNull": ["$title", "$jobTitle"]}


def _as_array(expression: Any) -> Dict[str, Any]:
    return {"$cond": [{"$isArray": expression}, expression, []]}


def listable_jobs_clause() -> Dict[str, Any]:
    """Active and approved postings under either schema generation's conventions."""
    return {
        "$and": [
            {
                "$or": [
                    {JobStatus.ACTIVE_FIELD: True},
                    {JobStatus.LEGACY_ACTIVE_FIELD: True},
                ]
            },
            {"status": {"$in": JobStatus.LISTABLE_STATUSES}},
        ]
    }


def company_lookup_stage(company_collection: str) -> Dict[str, Any]:
    """Join the company record by id; ids are compared as strings since either side may be an ObjectId."""
    return {
        "$lookup": {
            "from": company_collection,
            "let": {"companyIdStr": {"$toString": "$companyId"}},
            "pipeline": [
                {"$match": {"$expr": {"$eq": [{"$toString": "$_id"}, "$$companyIdStr"]}}},
                {"$project": {"_id": 0, "companyName": 1}},
            ],
            "as": "companyInfo",
        }
    }


def skill_lookup_stage(skill_collection: str) -> Dict[str, Any]:
    """Join catalog names for every required and optional skill id of the posting."""
    skill_ids = {
        "$map": {
            "input": {
                "$concatArrays": [
                    _as_array({"$ifNull": ["$skillRequired", "$requiredSkills"]}),
                    _as_array("$optionalSkills"),
                ]
            },
            "as": "skill",
            "in": {"$toString": "$$skill.skillId"},
        }
    }
    return {
        "$lookup": {
            "from": skill_collection,
            "let": {"skillIds": skill_ids},
            "pipeline": [
                {"$match": {"$expr": {"$in": [{"$toString": "$_id"}, "$$skillIds"]}}},
                {"$project": {"_id": 1, "name": 1}},
            ],
            "as": "skillCatalog",
        }
    }


def build_ranking_pipeline(
    predicate: Dict[str, Any],
    scoring_stages: List[Dict[str, Any]],
    skip: int,
    limit: int,
    company_collection: str,
    skill_collection: str,
) -> List[Dict[str, Any]]:
    """
    Filter, score, order and paginate postings in one round trip.

    Order is score desc, then posting date desc (undated last), then id. The
    company and skill joins only run on the requested page.
    """
    return [
        {"$match": predicate},
        *scoring_stages,
        {"$addFields": {"rankPostedOn": {"$ifNull": ["$postedOn", "$postedDate"]}}},
        {"$sort": {"matchScore": -1, "rankPostedOn": -1, "_id": 1}},
        {
            "$facet": {
                "metadata": [{"$count": "total"}],
                "jobs": [
                    {"$skip": skip},
                    {"$limit": limit},
                    company_lookup_stage(company_collection),
                    skill_lookup_stage(skill_collection),
                    {"$project": RANKED_JOB_PROJECTION},
                ],
            }
        },
    ]


def build_text_search_pipeline(
    query: str, skip: int, limit: int, company_collection: str
) -> List[Dict[str, Any]]:
    """Full-text search ordered by relevance then recency, with the total in a facet."""
    return [
        {"$match": {"$text": {"$search": query}, **listable_jobs_clause()}},
        {"$addFields": {"textScore": {"$meta": "textScore"}}},
        {"$sort": {"textScore": -1, "postedOn": -1, "_id": 1}},
        {
            "$facet": {
                "metadata": [{"$count": "total"}],
                "jobs": [
                    {"$skip": skip},
                    {"$limit": limit},
                    company_lookup_stage(company_collection),
                    {"$project": JOB_PROJECTION},
                ],
            }
        },
    ]


def _distinct_facet(field: str, pattern: Dict[str, str], limit: int) -> List[Dict[str, Any]]:
    return [
        {"$match": {field: pattern}},
        {"$group": {"_id": f"${field}"}},
        {"$sort": {"_id": 1}},
        {"$limit": limit},
    ]


def build_title_suggestion_pipeline(
    pattern: Dict[str, str], limit: int
) -> List[Dict[str, Any]]:
    """Distinct titles and company names containing the pattern, one facet each."""
    return [
        {
            "$match": {
                **listable_jobs_clause(),
                "$or": [
                    {"title": pattern},
                    {"jobTitle": pattern},
                    {"companyName": pattern},
                ],
            }
        },
        {"$project": {"_id": 0, "suggestTitle": _TITLE, "companyName": 1}},
        {
            "$facet": {
                "titles": _distinct_facet("suggestTitle", pattern, limit),
                "companies": _distinct_facet("companyName", pattern, limit),
            }
        },
    ]


def build_location_suggestion_pipeline(
    pattern: Dict[str, str], limit: int
) -> List[Dict[str, Any]]:
    """Distinct cities, states and countries containing the pattern, one facet each."""
    return [
        {
            "$match": {
                **listable_jobs_clause(),
                "$or": [
                    {"city": pattern},
                    {"state": pattern},
                    {"country": pattern},
                    {"location.city": pattern},
                    {"location.state": pattern},
                    {"location.country": pattern},
                ],
            }
        },
        {
            "$project": {
                "_id": 0,
                "suggestCity": _CITY,
                "suggestState": _STATE,
                "suggestCountry": _COUNTRY,
            }
        },
        {
            "$facet": {
                "cities": _distinct_facet("suggestCity", pattern, limit),
                "states": _distinct_facet("suggestState", pattern, limit),
                "countries": _distinct_facet("suggestCountry", pattern, limit),
            }
        },
    ]
