"""
Standardized API response utilities for the job board ranking service.

Every endpoint answers with the same envelope: ``{success, message, data}``
on success and ``{success: false, message, error}`` on failure.
"""

from typing import Any, Dict, Optional

from jobboard.core.constants import APIConstants, ResponseFields
from jobboard.utils.serialization import JSONSerializer


class APIResponse:
    """
    Standardized API response builder.
    """

    @staticmethod
    def success(
        data: Any = None,
        message: str = APIConstants.SUCCESS_DEFAULT,
    ) -> Dict[str, Any]:
        """
        Create a standardized success response.

        Args:
            data: Response data (will be serialized)
            message: Success message

        Returns:
            Standardized success response dictionary
        """
        return {
            ResponseFields.SUCCESS: True,
            ResponseFields.MESSAGE: message,
            ResponseFields.DATA: JSONSerializer.make_serializable(data),
        }

    @staticmethod
    def error(
        message: str,
        error_code: Optional[str] = None,
        details: Any = None,
    ) -> Dict[str, Any]:
        """
        Create a standardized error response.

        Internal details are only attached when explicitly passed; handlers for
        unexpected errors never pass them.
        """
        response: Dict[str, Any] = {
            ResponseFields.SUCCESS: False,
            ResponseFields.MESSAGE: message,
        }
        if error_code:
            error: Dict[str, Any] = {ResponseFields.ERROR_CODE: error_code}
            if details is not None:
                error[ResponseFields.ERROR_DETAILS] = JSONSerializer.make_serializable(details)
            response[ResponseFields.ERROR] = error
        return response


def success_response(data: Any = None, message: str = APIConstants.SUCCESS_DEFAULT) -> Dict[str, Any]:
    return APIResponse.success(data=data, message=message)
