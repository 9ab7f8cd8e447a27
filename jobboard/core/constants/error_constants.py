"""
Error codes and standardized error messages for the job board ranking service.
"""


class ErrorCodes:
    """Standardized error codes following conventional patterns."""

    # Authentication (1000-1099)
    AUTH_TOKEN_INVALID = "AUTH_1001"
    AUTH_TOKEN_MISSING = "AUTH_1003"
    AUTH_SERVICE_UNAVAILABLE = "AUTH_1006"

    # Input Validation (1100-1199)
    VALIDATION_REQUIRED_FIELD_MISSING = "VAL_1101"
    VALIDATION_INVALID_FORMAT = "VAL_1102"

    # Resource Not Found (1200-1299)
    RESOURCE_CANDIDATE_NOT_FOUND = "RES_1202"
    RESOURCE_JOB_NOT_FOUND = "RES_1203"
    RESOURCE_COMPANY_NOT_FOUND = "RES_1207"
    RESOURCE_NOT_FOUND = "RES_1299"

    # External Service Errors (1400-1499)
    SERVICE_DATABASE_UNAVAILABLE = "SVC_1403"

    # System Errors (1500-1599)
    SYSTEM_INTERNAL_ERROR = "SYS_1501"


class ErrorMessages:
    """Standardized error messages corresponding to error codes."""

    MESSAGES = {
        ErrorCodes.AUTH_TOKEN_INVALID: "Authentication token is invalid or malformed",
        ErrorCodes.AUTH_TOKEN_MISSING: "Authentication token is required but not provided",
        ErrorCodes.AUTH_SERVICE_UNAVAILABLE: "Authentication service is temporarily unavailable",
        ErrorCodes.VALIDATION_REQUIRED_FIELD_MISSING: "Required field '{field}' is missing",
        ErrorCodes.VALIDATION_INVALID_FORMAT: "Field '{field}' has invalid format",
        ErrorCodes.RESOURCE_CANDIDATE_NOT_FOUND: "Candidate not found",
        ErrorCodes.RESOURCE_JOB_NOT_FOUND: "Job not found",
        ErrorCodes.RESOURCE_COMPANY_NOT_FOUND: "Company not found",
        ErrorCodes.RESOURCE_NOT_FOUND: "Resource not found",
        ErrorCodes.SERVICE_DATABASE_UNAVAILABLE: "Database is temporarily unavailable",
        ErrorCodes.SYSTEM_INTERNAL_ERROR: "Internal server error",
    }

    @classmethod
    def get_message(cls, error_code: str, **kwargs) -> str:
        """
        Get error message for the given error code.

        Args:
            error_code: The error code to get message for
            **kwargs: Format parameters for the message template

        Returns:
            Formatted error message
        """
        template = cls.MESSAGES.get(error_code, "An unexpected error occurred")
        try:
            return template.format(**kwargs)
        except KeyError:
            return template
