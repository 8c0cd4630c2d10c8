"""Custom exception handler for the shop REST API."""

from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from rest_framework.exceptions import ValidationError as DRFValidationError
from rest_framework.response import Response
from rest_framework.views import exception_handler


def custom_exception_handler(exc, context):
    """Handle Django ValidationError as a REST framework validation error.

    Other exceptions follow DRF's default behaviour; handled responses carry
    their ``status_code`` in the payload as well.
    """
    if isinstance(exc, DjangoValidationError):
        exc = DRFValidationError(detail=exc.messages)

    if isinstance(exc, Http404):
        return Response({"detail": "Not found.", "status_code": 404}, status=404)

    response = exception_handler(exc, context)
    if response is not None and isinstance(response.data, dict):
        response.data["status_code"] = response.status_code

    return response
