"""
Tests for the frontend constants generator
"""

import json
from datetime import datetime, timezone

import pytest

from entrolytics_shared.generate_frontend_constants import (
    build_frontend_constants,
    build_plan_table,
    camelize_keys,
    main,
    render_typescript,
    to_camel,
    to_constant_name,
)


class TestNameConversion:

    @pytest.mark.parametrize("name, expected", [
        ("website_by_id", "websiteById"),
        ("PAGE_VIEW", "pageView"),
        ("OK", "ok"),
        ("nextjs", "nextjs"),
        ("cliTokenGeneration", "cliTokenGeneration"),
    ])
    def test_to_camel(self, name, expected):
        assert to_camel(name) == expected

    def test_to_constant_name(self):
        assert to_constant_name("apiEndpoints") == "API_ENDPOINTS"
        assert to_constant_name("usageThresholds") == "USAGE_THRESHOLDS"
        assert to_constant_name("plans") == "PLANS"

    def test_camelize_keys_leaves_values(self):
        data = camelize_keys({"api_routes": {"website_by_id": "/api/websites/{website_id}"}})
        assert data == {"apiRoutes": {"websiteById": "/api/websites/{website_id}"}}


class TestBuildFrontendConstants:

    def test_matches_javascript_key_names(self):
        data = build_frontend_constants()
        assert data["apiEndpoints"]["production"] == "https://edge.entrolytics.click"
        assert data["envVarNames"]["nextjs"]["websiteId"] == "NEXT_PUBLIC_ENTROLYTICS_WEBSITE_ID"
        assert data["envVarNames"]["react"]["fallback"]["host"] == "REACT_APP_ENTROLYTICS_HOST"
        assert data["apiRoutes"]["websiteById"] == "/api/websites/{website_id}"
        assert data["errorMessages"]["tokenExpired"] == "Token has expired"
        assert data["httpStatus"]["tooManyRequests"] == 429
        assert data["eventTypes"]["pageView"] == "page_view"

    def test_optional_fallback_omitted(self):
        data = build_frontend_constants()
        assert "fallback" not in data["envVarNames"]["vue"]

    def test_rate_limit_schemas_exported_separately(self):
        data = build_frontend_constants()
        assert data["rateLimits"]["cliTokenGeneration"] == {"windowSeconds": 3600, "maxRequests": 10}
        assert data["legacyRateLimits"]["cliTokenGeneration"] == {"windowMs": 3_600_000, "maxRequests": 10}

    def test_plans_keep_sentinels(self):
        data = build_frontend_constants()
        assert data["plans"]["business"]["limits"]["websites"] == -1
        assert data["plans"]["enterprise"]["priceMonthly"] == -1
        assert data["usageThresholds"] == {"warningPercent": 90, "criticalPercent": 95}

    def test_deprecated_routes_listed(self):
        data = build_frontend_constants()
        assert "send" in data["deprecatedRoutes"]
        assert "collect" not in data["deprecatedRoutes"]

    def test_json_serialisable(self):
        json.dumps(build_frontend_constants())


class TestRenderTypescript:

    def test_header_and_constants(self):
        generated_at = datetime(2026, 1, 1, tzinfo=timezone.utc)
        ts = render_typescript(build_frontend_constants(), generated_at=generated_at)
        assert ts.startswith("// AUTO-GENERATED")
        assert "2026-01-01T00:00:00+00:00" in ts
        assert "export const API_ROUTES = {" in ts
        assert "export const ENV_VAR_NAMES = {" in ts
        assert "export const getApiRoute" in ts
        assert "as const;" in ts


class TestCli:

    def test_write_json(self, tmp_path):
        output = tmp_path / "out" / "constants.json"
        assert main(["--format", "json", "--write", str(output)]) == 0
        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["plans"]["starter"]["limits"]["websites"] == 2

    def test_write_typescript(self, tmp_path):
        output = tmp_path / "constants.generated.ts"
        assert main(["--write", str(output)]) == 0
        assert "export const PLANS" in output.read_text(encoding="utf-8")

    def test_plans_table(self):
        table = build_plan_table()
        assert len(table.columns) == 5
        assert main(["--plans"]) == 0
