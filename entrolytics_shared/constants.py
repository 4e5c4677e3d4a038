"""
Shared Constants - Single Source of Truth

Enumerations, CLI settings and rate limits shared by the CLI, SDKs,
dashboard and integrations. Frontend version is generated from this file.

Usage:
    from entrolytics_shared.constants import EventType, HttpStatus, RATE_LIMITS
"""

import re
from dataclasses import dataclass
from enum import Enum, IntEnum
from types import MappingProxyType
from typing import Optional


# ==================== KEY NAMING ====================
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def to_snake(name: str) -> str:
    """camelCase key (as the JavaScript side spells it) to snake_case; snake_case passes through"""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


# ==================== CLI CONFIG ====================
@dataclass
class CliConfig:
    """CLI setup token settings"""
    TOKEN_EXPIRY_MINUTES = 15
    MAX_TOKENS_PER_USER = 10
    POLL_INTERVAL_MS = 2000
    SETUP_TIMEOUT_MS = 300_000  # 5 minutes
    MIN_CLI_VERSION = "1.0.0"


CLI_CONFIG = MappingProxyType({
    "token_expiry_minutes": CliConfig.TOKEN_EXPIRY_MINUTES,
    "max_tokens_per_user": CliConfig.MAX_TOKENS_PER_USER,
    "poll_interval_ms": CliConfig.POLL_INTERVAL_MS,
    "setup_timeout_ms": CliConfig.SETUP_TIMEOUT_MS,
    "min_cli_version": CliConfig.MIN_CLI_VERSION,
})


# ==================== EVENT TYPES ====================
class EventType(str, Enum):
    PAGE_VIEW = "page_view"
    CLICK = "click"
    FORM_SUBMIT = "form_submit"
    CUSTOM = "custom"
    ERROR = "error"
    PERFORMANCE = "performance"


# ==================== HTTP STATUS ====================
class HttpStatus(IntEnum):
    OK = 200
    CREATED = 201
    ACCEPTED = 202
    NO_CONTENT = 204
    BAD_REQUEST = 400
    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    CONFLICT = 409
    TOO_MANY_REQUESTS = 429
    INTERNAL_SERVER_ERROR = 500
    SERVICE_UNAVAILABLE = 503


# ==================== ONBOARDING ====================
class OnboardingStep(str, Enum):
    WELCOME = "welcome"
    CREATE_WEBSITE = "create-website"
    INSTALL_TRACKING = "install-tracking"
    VERIFY = "verify"
    COMPLETE = "complete"
    SKIPPED = "skipped"


# ==================== TOKENS & ROLES ====================
class CliTokenStatus(str, Enum):
    # Transitions are enforced by the token service, not here
    PENDING = "pending"
    USED = "used"
    EXPIRED = "expired"
    REVOKED = "revoked"


class UserRole(str, Enum):
    ADMIN = "admin"
    USER = "user"
    VIEWER = "viewer"


# ==================== RATE LIMITS ====================
@dataclass(frozen=True)
class RateLimitRule:
    """Request budget over a window in seconds"""
    window_seconds: int
    max_requests: int

    def __post_init__(self):
        if self.window_seconds <= 0 or self.max_requests <= 0:
            raise ValueError(f"Rate limit window and max must be positive: {self}")


@dataclass(frozen=True)
class LegacyRateLimitRule:
    """Request budget over a window in milliseconds (pre-seconds schema)"""
    window_ms: int
    max_requests: int

    def __post_init__(self):
        if self.window_ms <= 0 or self.max_requests <= 0:
            raise ValueError(f"Rate limit window and max must be positive: {self}")


RATE_LIMITS: "MappingProxyType[str, RateLimitRule]" = MappingProxyType({
    "cli_token_generation": RateLimitRule(window_seconds=3600, max_requests=10),
    "cli_validation": RateLimitRule(window_seconds=3600, max_requests=100),
    "event_collection": RateLimitRule(window_seconds=60, max_requests=1000),
    "batch_collection": RateLimitRule(window_seconds=60, max_requests=100),
    "share_view": RateLimitRule(window_seconds=60, max_requests=300),
    "link_redirect": RateLimitRule(window_seconds=60, max_requests=600),
    "general_api": RateLimitRule(window_seconds=60, max_requests=120),
})

# Still read by services that have not moved to RATE_LIMITS. Never merged.
LEGACY_RATE_LIMITS: "MappingProxyType[str, LegacyRateLimitRule]" = MappingProxyType({
    "cliTokenGeneration": LegacyRateLimitRule(window_ms=3_600_000, max_requests=10),  # 1 hour
    "cliValidation": LegacyRateLimitRule(window_ms=3_600_000, max_requests=100),  # 1 hour
    "eventCollection": LegacyRateLimitRule(window_ms=60_000, max_requests=1000),  # 1 minute
})


def get_rate_limit(operation: str) -> Optional[RateLimitRule]:
    """Get the current rule for an operation, or None"""
    return RATE_LIMITS.get(operation)


def get_legacy_rate_limit(operation: str) -> Optional[LegacyRateLimitRule]:
    """Get the legacy millisecond rule for an operation, or None"""
    return LEGACY_RATE_LIMITS.get(operation)
