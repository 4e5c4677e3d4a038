"""
Tests for shared enumerations, rate limits and message catalogs
"""

import pytest

from entrolytics_shared.constants import (
    CLI_CONFIG,
    LEGACY_RATE_LIMITS,
    RATE_LIMITS,
    CliConfig,
    CliTokenStatus,
    EventType,
    HttpStatus,
    LegacyRateLimitRule,
    OnboardingStep,
    RateLimitRule,
    UserRole,
    get_legacy_rate_limit,
    get_rate_limit,
    to_snake,
)
from entrolytics_shared.messages import (
    ERROR_MESSAGES,
    SUCCESS_MESSAGES,
    get_error_message,
    get_success_message,
)


class TestCliConfig:

    def test_values(self):
        assert CliConfig.TOKEN_EXPIRY_MINUTES == 15
        assert CliConfig.MAX_TOKENS_PER_USER == 10
        assert CliConfig.POLL_INTERVAL_MS == 2000
        assert CliConfig.SETUP_TIMEOUT_MS == 5 * 60 * 1000
        assert CliConfig.MIN_CLI_VERSION == "1.0.0"

    def test_mapping_view_matches_class(self):
        assert CLI_CONFIG["token_expiry_minutes"] == CliConfig.TOKEN_EXPIRY_MINUTES
        assert CLI_CONFIG["setup_timeout_ms"] == CliConfig.SETUP_TIMEOUT_MS


class TestEnumerations:
    """Wire values are shared with every consumer"""

    def test_event_types(self):
        assert EventType.PAGE_VIEW == "page_view"
        assert EventType("form_submit") is EventType.FORM_SUBMIT
        assert len(EventType) == 6

    def test_onboarding_steps_use_kebab_case(self):
        assert OnboardingStep.CREATE_WEBSITE.value == "create-website"
        assert OnboardingStep.INSTALL_TRACKING.value == "install-tracking"

    def test_token_statuses(self):
        assert {s.value for s in CliTokenStatus} == {"pending", "used", "expired", "revoked"}

    def test_user_roles(self):
        assert {r.value for r in UserRole} == {"admin", "user", "viewer"}

    def test_unknown_value_rejected(self):
        with pytest.raises(ValueError):
            UserRole("owner")

    def test_http_status_aliases(self):
        assert HttpStatus.OK == 200
        assert HttpStatus.NO_CONTENT == 204
        assert HttpStatus.TOO_MANY_REQUESTS == 429
        assert HttpStatus.SERVICE_UNAVAILABLE == 503
        assert HttpStatus(404) is HttpStatus.NOT_FOUND


class TestRateLimits:

    def test_current_schema_uses_seconds(self):
        rule = get_rate_limit("cli_token_generation")
        assert rule == RateLimitRule(window_seconds=3600, max_requests=10)
        assert get_rate_limit("event_collection").window_seconds == 60

    def test_legacy_schema_uses_milliseconds(self):
        rule = get_legacy_rate_limit("cliTokenGeneration")
        assert rule == LegacyRateLimitRule(window_ms=3_600_000, max_requests=10)

    def test_schemas_coexist_without_merging(self):
        """Each table only answers for its own key namespace"""
        assert get_rate_limit("cliTokenGeneration") is None
        assert get_legacy_rate_limit("cli_token_generation") is None

    def test_schemas_agree_on_shared_operations(self):
        pairs = [
            ("cli_token_generation", "cliTokenGeneration"),
            ("cli_validation", "cliValidation"),
            ("event_collection", "eventCollection"),
        ]
        for current, legacy in pairs:
            assert RATE_LIMITS[current].window_seconds * 1000 == LEGACY_RATE_LIMITS[legacy].window_ms
            assert RATE_LIMITS[current].max_requests == LEGACY_RATE_LIMITS[legacy].max_requests

    def test_unknown_operation(self):
        assert get_rate_limit("launch_rockets") is None

    @pytest.mark.parametrize("window, maximum", [(0, 10), (60, 0), (-1, 5)])
    def test_non_positive_rules_rejected(self, window, maximum):
        with pytest.raises(ValueError):
            RateLimitRule(window_seconds=window, max_requests=maximum)
        with pytest.raises(ValueError):
            LegacyRateLimitRule(window_ms=window, max_requests=maximum)


class TestMessages:

    def test_error_message_lookup(self):
        assert get_error_message("token_expired") == "Token has expired"
        assert ERROR_MESSAGES["too_many_requests"].startswith("Too many requests")

    def test_success_message_lookup(self):
        assert get_success_message("website_created") == "Website created successfully"

    def test_unknown_key_default(self):
        assert get_error_message("nope") is None
        assert get_success_message("nope", "fallback") == "fallback"

    def test_camel_case_keys_resolve_to_the_same_text(self):
        assert get_error_message("tokenExpired") == get_error_message("token_expired")
        assert get_success_message("websiteCreated") == "Website created successfully"
        assert get_error_message("noSuchKey") is None

    def test_catalogs_are_read_only(self):
        with pytest.raises(TypeError):
            SUCCESS_MESSAGES["x"] = "y"

    def test_no_empty_messages(self):
        for catalog in (ERROR_MESSAGES, SUCCESS_MESSAGES):
            for key, text in catalog.items():
                assert text.strip(), key


class TestKeyNaming:

    @pytest.mark.parametrize("name, expected", [
        ("websiteById", "website_by_id"),
        ("tokenExpired", "token_expired"),
        ("website_by_id", "website_by_id"),
        ("WEBSITE_BY_ID", "website_by_id"),
        ("health", "health"),
    ])
    def test_to_snake(self, name, expected):
        assert to_snake(name) == expected
