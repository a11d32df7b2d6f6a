"""
Error taxonomy for the catalog API.

Each error is a Django REST Framework ``APIException`` so that views can
simply raise it and let ``api_exception_handler`` turn it into a response.
"""

import logging

from rest_framework import exceptions, status
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class NotFound(exceptions.NotFound):
    default_detail = "Record not found."


class ValidationError(exceptions.ValidationError):
    """Missing or malformed fields; ``detail`` maps each field to its messages."""


class Unauthorized(exceptions.NotAuthenticated):
    default_detail = "Access denied. No token provided."


class Forbidden(exceptions.PermissionDenied):
    default_detail = "Access denied. Admin privileges required."


class StoreUnavailable(exceptions.APIException):
    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    default_detail = "Content store is unavailable, please try again later."
    default_code = "store_unavailable"


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is None:
        return None

    if response.status_code >= 500:
        view = context.get("view")
        logger.error("API error in %s: %s", view.__class__.__name__ if view else "unknown view", exc)

    # {"detail": "..."} -> {"error": "..."}; field errors are left as they are
    if isinstance(response.data, dict) and list(response.data) == ["detail"]:
        response.data = {"error": response.data["detail"]}
    return response
