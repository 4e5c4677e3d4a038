"""
User-facing message catalogs.

Keys are the stable contract; the text may be reworded at any time.
Lookups accept the camelCase spelling of a key ("tokenExpired") as well.
"""

from types import MappingProxyType
from typing import Optional

from entrolytics_shared.constants import to_snake


ERROR_MESSAGES = MappingProxyType({
    # Authentication
    "unauthorized": "Unauthorized access",
    "forbidden": "Access forbidden",
    "token_expired": "Token has expired",
    "token_invalid": "Invalid token",
    "token_not_found": "Token not found",
    "token_already_used": "Token has already been used",

    # Validation
    "invalid_input": "Invalid input provided",
    "missing_required": "Missing required fields",
    "invalid_format": "Invalid format",
    "invalid_framework": "Unsupported framework",

    # Resources
    "not_found": "Resource not found",
    "website_not_found": "Website not found",
    "user_not_found": "User not found",

    # Plans
    "plan_limit_reached": "Your plan limit has been reached. Please upgrade to continue.",
    "feature_not_available": "This feature is not available on your plan",

    # Rate limiting
    "too_many_requests": "Too many requests. Please try again later.",

    # Server
    "internal_error": "Internal server error",
    "service_unavailable": "Service temporarily unavailable",
})


SUCCESS_MESSAGES = MappingProxyType({
    "token_generated": "Setup token generated successfully",
    "token_validated": "Token validated successfully",
    "website_created": "Website created successfully",
    "onboarding_complete": "Onboarding completed successfully",
    "setup_complete": "Setup completed successfully",
})


def get_error_message(key: str, default: Optional[str] = None) -> Optional[str]:
    return ERROR_MESSAGES.get(to_snake(key), default)


def get_success_message(key: str, default: Optional[str] = None) -> Optional[str]:
    return SUCCESS_MESSAGES.get(to_snake(key), default)
