import logging

import pytest
from django.core.exceptions import ImproperlyConfigured
from django.http import HttpResponse

from client_validation.errors import RuleExtractionError
from client_validation.middleware import ErrorHandlingMiddleware
from validationbridge.env_validation import validate_env
from validationbridge.middleware import RequestIDFilter, RequestIDMiddleware, get_current_request_id


class TestRequestIDMiddleware:
    def test_generates_request_id(self, rf):
        seen = {}

        def view(request):
            seen["id"] = get_current_request_id()
            return HttpResponse("ok")

        response = RequestIDMiddleware(view)(rf.get("/"))

        assert response["X-Request-ID"] == seen["id"]
        assert get_current_request_id() == "no-id"

    def test_filter_adds_request_id_to_records(self):
        record = logging.LogRecord("test", logging.INFO, __file__, 1, "message", None, None)

        assert RequestIDFilter().filter(record) is True
        assert record.request_id == "no-id"


class TestErrorHandlingMiddleware:
    def test_api_error_on_api_path(self, rf):
        request = rf.get("/api/v1/client-validation-rules/json/")
        request.request_id = "req-9"
        middleware = ErrorHandlingMiddleware(lambda r: HttpResponse())

        response = middleware.process_exception(request, RuleExtractionError("app.Form", "email"))

        assert response.status_code == 500
        assert b"RULE_EXTRACTION_FAILED" in response.content
        assert b"req-9" in response.content

    def test_non_api_request_falls_through(self, rf):
        middleware = ErrorHandlingMiddleware(lambda r: HttpResponse())

        assert middleware.process_exception(rf.get("/page/"), RuntimeError("boom")) is None

    def test_debug_exposes_exception_text(self, rf, settings):
        settings.DEBUG = True
        middleware = ErrorHandlingMiddleware(lambda r: HttpResponse())

        response = middleware.process_exception(rf.get("/api/v1/x/"), RuntimeError("boom"))

        assert response.status_code == 500
        assert b"RuntimeError: boom" in response.content


class TestEnvValidation:
    def test_development_without_secret_key(self, monkeypatch):
        monkeypatch.delenv("PRODUCTION", raising=False)
        monkeypatch.delenv("SECRET_KEY", raising=False)

        validate_env()

    def test_production_requires_secret_key(self, monkeypatch):
        monkeypatch.setenv("PRODUCTION", "true")
        monkeypatch.delenv("SECRET_KEY", raising=False)

        with pytest.raises(ImproperlyConfigured):
            validate_env()

    def test_production_rejects_weak_secret_key(self, monkeypatch):
        monkeypatch.setenv("PRODUCTION", "true")
        monkeypatch.setenv("SECRET_KEY", "django-insecure-short")
        monkeypatch.setenv("ALLOWED_HOSTS", "rules.example.com")

        with pytest.raises(ImproperlyConfigured):
            validate_env()
