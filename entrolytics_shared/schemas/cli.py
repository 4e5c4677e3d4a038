"""
CLI & Onboarding Schemas

Payloads exchanged between the CLI setup flow and the API.
"""

from datetime import datetime, timedelta, timezone
from typing import List, Optional

from pydantic import BaseModel, Field

from entrolytics_shared.constants import CliConfig, CliTokenStatus, OnboardingStep
from entrolytics_shared.frameworks import Framework


class CliTokenResponse(BaseModel):
    """Setup token issued for `entrolytics init`"""
    token: str
    status: CliTokenStatus = CliTokenStatus.PENDING
    expires_at: datetime
    poll_interval_ms: int = CliConfig.POLL_INTERVAL_MS

    @classmethod
    def issue(cls, token: str, now: Optional[datetime] = None) -> "CliTokenResponse":
        """New pending token expiring after CliConfig.TOKEN_EXPIRY_MINUTES"""
        now = now or datetime.now(timezone.utc)
        return cls(
            token=token,
            expires_at=now + timedelta(minutes=CliConfig.TOKEN_EXPIRY_MINUTES),
        )

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        now = now or datetime.now(timezone.utc)
        return now >= self.expires_at


class CliValidateResponse(BaseModel):
    """Result of validating a setup token"""
    valid: bool
    website_id: Optional[str] = None
    framework: Optional[Framework] = None
    host: Optional[str] = None


class OnboardingStatusResponse(BaseModel):
    """Current onboarding position for a user"""
    step: OnboardingStep = OnboardingStep.WELCOME
    completed_steps: List[OnboardingStep] = Field(default_factory=list)

    @property
    def is_finished(self) -> bool:
        return self.step in (OnboardingStep.COMPLETE, OnboardingStep.SKIPPED)
