import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy.exc import OperationalError

from legacore.config import settings
from legacore.core.errors import format_error_response, register_exception_handlers
from legacore.core.exceptions import (
    ConflictException,
    DatabaseException,
    ExternalServiceException,
    NotFoundException,
    ValidationException,
    validate_enum,
)
from legacore.main import app
from legacore.models.enums import CaseStatus

ENVELOPE_KEYS = {"message", "code", "status_code", "timestamp", "path"}


@pytest.fixture
def boundary_client():
    """Bare app with only the error boundary, for failure paths the API can't trigger"""
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/boom")
    def boom():
        raise RuntimeError("secret internals")

    @app.get("/db")
    def db_failure():
        raise OperationalError("SELECT 1", {}, Exception("connection refused"))

    @app.get("/ai")
    def ai_failure():
        raise ExternalServiceException("ai", "provider timeout with key sk-123")

    return TestClient(app, raise_server_exceptions=False)


class TestTenantResolution:
    def test_unknown_tenant(self, client, serve):
        serve("ghost-co")

        response = client.get("/api/cases/")

        assert response.status_code == 404
        error = response.json()["error"]
        assert set(error) == ENVELOPE_KEYS
        assert error["message"] == "Company not found"
        assert error["code"] == "NotFoundException"
        assert error["status_code"] == 404
        assert error["path"] == "/api/cases/"

    def test_inactive_tenant(self, client, make_tenant, serve):
        make_tenant("dormant-co", active=False)
        serve("dormant-co")

        response = client.get("/api/projects/")

        assert response.status_code == 403
        assert response.json()["error"]["message"] == "Company is inactive"

    def test_unknown_tenant_aborts_writes(self, client, tenant, serve, db_session):
        serve("ghost-co")

        response = client.post("/api/cases/", json={"title": "Never stored"})

        assert response.status_code == 404
        serve("hbu-asset-recovery")
        assert client.get("/api/cases/").json()["pagination"]["total"] == 0


class TestValidationErrors:
    def test_request_validation_is_400(self, client, tenant):
        response = client.post("/api/cases/", json={"title": "", "priority": "urgent"})

        assert response.status_code == 400
        error = response.json()["error"]
        assert error["code"] == "ValidationException"
        assert error["message"].startswith("Invalid request:")
        assert "details" not in error

    def test_details_only_in_development(self, client, tenant, monkeypatch):
        monkeypatch.setattr(settings, "ENVIRONMENT", "development")

        response = client.post("/api/cases/", json={})

        details = response.json()["error"]["details"]
        assert details[0]["loc"] == ["body", "title"]
        assert details[0]["type"] == "missing"


class TestErrorBoundary:
    def test_unexpected_error_is_generic(self, boundary_client):
        response = boundary_client.get("/boom")

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == "InternalServerError"
        assert error["message"] == "An unexpected error occurred"
        assert "secret internals" not in response.text

    def test_database_error(self, boundary_client):
        response = boundary_client.get("/db")

        assert response.status_code == 500
        error = response.json()["error"]
        assert error["code"] == "DatabaseException"
        assert error["message"] == "Database operation failed"
        assert "connection refused" not in response.text

    def test_external_service_message_hidden(self, boundary_client):
        response = boundary_client.get("/ai")

        assert response.status_code == 503
        assert "sk-123" not in response.text


class TestExceptions:
    def test_status_codes(self):
        assert ValidationException().status_code == 400
        assert NotFoundException().status_code == 404
        assert ConflictException().status_code == 409
        assert DatabaseException().status_code == 500

    def test_format_operational(self):
        body = format_error_response(NotFoundException("Case 7 not found"), "/api/cases/7")

        assert body["error"]["message"] == "Case 7 not found"
        assert body["error"]["path"] == "/api/cases/7"

    def test_format_non_operational(self):
        body = format_error_response(DatabaseException("deadlock on credits"), "/api/credits/use")

        assert body["error"]["message"] == "Database operation failed"

    def test_validate_enum(self):
        assert validate_enum("CLOSED", CaseStatus, "status") is CaseStatus.CLOSED
        with pytest.raises(ValidationException, match="Invalid status"):
            validate_enum("DONE", CaseStatus, "status")


class TestAppEndpoints:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root(self, client):
        body = client.get("/").json()

        assert body["message"] == settings.APP_NAME
        assert "version" in body

    def test_unknown_ai_provider_fails_startup(self, monkeypatch):
        monkeypatch.setattr(settings, "AI_PROVIDER", "openai")

        with pytest.raises(ValueError, match="Unknown AI provider"):
            with TestClient(app):
                pass
