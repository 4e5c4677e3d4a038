"""
Response Schemas Package

Pydantic models for API payloads shared by the API and its consumers.
"""

from entrolytics_shared.schemas.cli import (
    CliTokenResponse,
    CliValidateResponse,
    OnboardingStatusResponse,
)
from entrolytics_shared.schemas.common import (
    ErrorResponse,
    HealthResponse,
    MessageResponse,
)

__all__ = [
    "CliTokenResponse",
    "CliValidateResponse",
    "OnboardingStatusResponse",
    "ErrorResponse",
    "HealthResponse",
    "MessageResponse",
]
