"""
Entrolytics Shared Contracts Layer

This package is the SINGLE SOURCE OF TRUTH for:
- API endpoints and route paths
- Framework environment variable conventions
- Plan limits, feature flags and usage thresholds
- Enumerations, rate limits and message catalogs

Rules:
1. The CLI, SDKs, dashboard and integrations import these tables
2. Frontend constants are generated from here
3. NEVER hardcode routes, env var names or limits elsewhere
"""

from entrolytics_shared.api_routes import API_ROUTES, ApiRoute, build_endpoint, get_api_route
from entrolytics_shared.config import API_ENDPOINTS, DEFAULT_API_HOST, get_api_url
from entrolytics_shared.constants import (
    CLI_CONFIG,
    LEGACY_RATE_LIMITS,
    RATE_LIMITS,
    CliConfig,
    CliTokenStatus,
    EventType,
    HttpStatus,
    OnboardingStep,
    UserRole,
)
from entrolytics_shared.frameworks import (
    ENV_VAR_NAMES,
    FRAMEWORK_PACKAGES,
    FRAMEWORK_PATTERNS,
    Framework,
    get_env_var_names,
    get_framework_package,
    is_valid_framework,
)
from entrolytics_shared.messages import ERROR_MESSAGES, SUCCESS_MESSAGES
from entrolytics_shared.plans import (
    PLANS,
    UNLIMITED,
    USAGE_THRESHOLDS,
    PlanId,
    PlanManager,
    get_plan,
    get_plan_limit,
    is_plan_feature_enabled,
    is_usage_critical,
    is_usage_warning,
)

__version__ = "1.0.0"

__all__ = [
    "API_ENDPOINTS",
    "DEFAULT_API_HOST",
    "get_api_url",
    "API_ROUTES",
    "ApiRoute",
    "build_endpoint",
    "get_api_route",
    "CLI_CONFIG",
    "CliConfig",
    "CliTokenStatus",
    "EventType",
    "HttpStatus",
    "OnboardingStep",
    "UserRole",
    "RATE_LIMITS",
    "LEGACY_RATE_LIMITS",
    "ENV_VAR_NAMES",
    "FRAMEWORK_PACKAGES",
    "FRAMEWORK_PATTERNS",
    "Framework",
    "get_env_var_names",
    "get_framework_package",
    "is_valid_framework",
    "ERROR_MESSAGES",
    "SUCCESS_MESSAGES",
    "PLANS",
    "UNLIMITED",
    "USAGE_THRESHOLDS",
    "PlanId",
    "PlanManager",
    "get_plan",
    "get_plan_limit",
    "is_plan_feature_enabled",
    "is_usage_critical",
    "is_usage_warning",
]
