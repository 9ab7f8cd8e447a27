"""
API-related constants for standardized responses and endpoints.
"""


class APIConstants:
    """API response constants and standardized messages."""

    SUCCESS_DEFAULT = "Operation completed successfully"
    JOBS_RETRIEVED = "Jobs retrieved successfully"
    JOB_RETRIEVED = "Job retrieved successfully"
    SEARCH_COMPLETED = "Search completed successfully"
    SUGGESTIONS_RETRIEVED = "Suggestions retrieved successfully"
    LOCATION_SUGGESTIONS_RETRIEVED = "Location suggestions retrieved successfully"
    COMPANIES_RETRIEVED = "Companies retrieved successfully"
    COMPANY_RETRIEVED = "Company retrieved successfully"


class HTTPStatusMessages:
    """HTTP status code related messages."""

    BAD_REQUEST_400 = "Invalid request data provided"
    INTERNAL_ERROR_500 = "Internal server error"


class EndpointPaths:
    """API endpoint path constants."""

    CANDIDATE_JOB_PREFIX = "/candidate/job"
    COMPANIES_PREFIX = "/companies"

    RANKING = "/ranking"
    SUGGESTIONS = "/suggestions"
    LOCATION_SUGGESTIONS = "/location-suggestions"
    SEARCH = "/search"
    JOB_DETAIL = "/{job_id}"
    COMPANY_BY_NAME = "/by-name"
    COMPANY_DETAIL = "/{company_id}"

    HEALTH = "/health"


class ResponseFields:
    """Standard response field names."""

    SUCCESS = "success"
    MESSAGE = "message"
    DATA = "data"

    ERROR = "error"
    ERROR_CODE = "code"
    ERROR_DETAILS = "details"
