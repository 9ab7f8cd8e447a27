"""
Centralized constants module for the job board ranking service.

This module provides centralized access to all application constants including
API responses, business rules and error codes.
"""

from .api_constants import (
    APIConstants,
    HTTPStatusMessages,
    EndpointPaths,
    ResponseFields,
)
from .business_constants import BusinessRules, JobStatus, JobTypes
from .error_constants import ErrorCodes, ErrorMessages

__all__ = [
    "APIConstants",
    "HTTPStatusMessages",
    "EndpointPaths",
    "ResponseFields",
    "BusinessRules",
    "JobStatus",
    "JobTypes",
    "ErrorCodes",
    "ErrorMessages",
]
