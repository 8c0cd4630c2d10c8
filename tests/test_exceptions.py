from django.core.exceptions import ValidationError as DjangoValidationError
from django.http import Http404
from rest_framework.exceptions import NotFound

from shop.exceptions import custom_exception_handler


def test_django_validation_error_becomes_400():
    resp = custom_exception_handler(DjangoValidationError("bad value"), {})
    assert resp.status_code == 400
    assert resp.data == ["bad value"]


def test_http404_returns_not_found():
    resp = custom_exception_handler(Http404(), {})
    assert resp.status_code == 404
    assert resp.data["detail"] == "Not found."


def test_handled_errors_include_status_code():
    resp = custom_exception_handler(NotFound("missing"), {})
    assert resp.status_code == 404
    assert resp.data["status_code"] == 404


def test_unhandled_errors_return_none():
    assert custom_exception_handler(RuntimeError("boom"), {}) is None
