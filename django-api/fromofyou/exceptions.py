"""Maps domain errors and DRF exceptions to the API error body.

Every error response has the shape::

    {"error": {"code": "...", "message": "..."}}

Validation failures add a ``fields`` map. Internal details never leave here.
"""

import logging

from rest_framework import status
from rest_framework.exceptions import APIException, ValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler

from fromofyou.errors import DomainError, ErrorCode, ValidationFailedError

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.EXHIBITION_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PLACE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PROFILE_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_EXHIBITION_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PLACE_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PROFILE_ID: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_FILTER: status.HTTP_400_BAD_REQUEST,
    ErrorCode.VALIDATION_FAILED: status.HTTP_400_BAD_REQUEST,
    ErrorCode.MALFORMED_DATE: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


def error_body(code: str, message: str, fields=None) -> dict:
    body = {"code": code, "message": message}
    if fields is not None:
        body["fields"] = fields
    return {"error": body}


def domain_exception_handler(exc, context):
    if isinstance(exc, DomainError):
        http_status = STATUS_BY_CODE.get(exc.code, status.HTTP_400_BAD_REQUEST)
        if http_status >= 500:
            logger.error("Unhandled data error in %s: %s", context.get("view"), exc.message)
        fields = exc.fields if isinstance(exc, ValidationFailedError) else None
        return Response(error_body(exc.code.value, exc.message, fields), status=http_status)

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, ValidationError):
        response.data = error_body(
            ErrorCode.VALIDATION_FAILED.value, "Submitted data is invalid", response.data
        )
    elif isinstance(exc, APIException):
        response.data = error_body(str(exc.default_code).upper(), str(exc.detail))
    else:
        detail = response.data.get("detail", "") if isinstance(response.data, dict) else ""
        response.data = error_body("ERROR", str(detail))
    return response
