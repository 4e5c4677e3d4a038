"""
Tests for shared response schemas
"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from entrolytics_shared.constants import CliConfig, CliTokenStatus, HttpStatus, OnboardingStep
from entrolytics_shared.frameworks import Framework
from entrolytics_shared.schemas import (
    CliTokenResponse,
    CliValidateResponse,
    ErrorResponse,
    HealthResponse,
    MessageResponse,
    OnboardingStatusResponse,
)


class TestMessageResponses:

    def test_message_from_key(self):
        response = MessageResponse.from_key("token_generated")
        assert response.message == "Setup token generated successfully"
        assert response.success is True

    def test_error_from_key(self):
        response = ErrorResponse.from_key("token_expired", status_code=HttpStatus.UNAUTHORIZED)
        assert response.error == "token_expired"
        assert response.message == "Token has expired"
        assert response.status_code == 401
        assert response.model_dump()["status_code"] == 401

    def test_error_default_status(self):
        assert ErrorResponse.from_key("invalid_input").status_code == 400

    def test_from_key_accepts_camel_case(self):
        response = ErrorResponse.from_key("tokenExpired", status_code=HttpStatus.UNAUTHORIZED)
        assert response.error == "token_expired"
        assert response.message == "Token has expired"
        assert MessageResponse.from_key("tokenGenerated").message == "Setup token generated successfully"

    def test_unknown_key_raises(self):
        with pytest.raises(KeyError):
            ErrorResponse.from_key("no_such_error")
        with pytest.raises(KeyError):
            MessageResponse.from_key("no_such_message")

    def test_health_response(self):
        response = HealthResponse(
            status="healthy",
            service="entrolytics-edge",
            version="1.0.0",
            timestamp="2026-01-07T10:00:00Z",
        )
        assert response.timestamp.year == 2026


class TestCliSchemas:

    def test_issue_sets_expiry_from_cli_config(self):
        now = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
        token = CliTokenResponse.issue("tok_123", now=now)
        assert token.status is CliTokenStatus.PENDING
        assert token.expires_at == now + timedelta(minutes=CliConfig.TOKEN_EXPIRY_MINUTES)
        assert token.poll_interval_ms == CliConfig.POLL_INTERVAL_MS

    def test_is_expired(self):
        now = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)
        token = CliTokenResponse.issue("tok_123", now=now)
        assert token.is_expired(now + timedelta(minutes=14)) is False
        assert token.is_expired(now + timedelta(minutes=15)) is True

    def test_status_parsed_from_wire_value(self):
        token = CliTokenResponse(token="t", status="revoked", expires_at="2026-01-01T00:00:00Z")
        assert token.status is CliTokenStatus.REVOKED

    def test_invalid_status_rejected(self):
        with pytest.raises(ValidationError):
            CliTokenResponse(token="t", status="lost", expires_at="2026-01-01T00:00:00Z")

    def test_validate_response_framework(self):
        response = CliValidateResponse(valid=True, website_id="w1", framework="nextjs")
        assert response.framework is Framework.NEXTJS

    def test_validate_response_rejects_unknown_framework(self):
        with pytest.raises(ValidationError):
            CliValidateResponse(valid=True, framework="cobol")


class TestOnboardingStatus:

    def test_defaults(self):
        status = OnboardingStatusResponse()
        assert status.step is OnboardingStep.WELCOME
        assert status.completed_steps == []
        assert status.is_finished is False

    def test_finished_states(self):
        assert OnboardingStatusResponse(step="complete").is_finished is True
        assert OnboardingStatusResponse(step="skipped").is_finished is True
        assert OnboardingStatusResponse(step="verify").is_finished is False
