#!/usr/bin/env python3
"""
Generate Frontend Constants
===========================
Generates the TypeScript (or JSON) constants module consumed by the
dashboard, SDKs and CLI from the tables in this package.

Usage:
    python -m entrolytics_shared.generate_frontend_constants
    python -m entrolytics_shared.generate_frontend_constants --write src/constants.generated.ts
    python -m entrolytics_shared.generate_frontend_constants --format json --write constants.json
    python -m entrolytics_shared.generate_frontend_constants --plans

This ensures every consumer has up-to-date definitions without manual
synchronization.
"""

import argparse
import json
import logging
import re
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table

from entrolytics_shared.api_routes import API_ROUTES, get_route_templates
from entrolytics_shared.config import API_ENDPOINTS
from entrolytics_shared.constants import (
    CLI_CONFIG,
    LEGACY_RATE_LIMITS,
    RATE_LIMITS,
    CliTokenStatus,
    EventType,
    HttpStatus,
    OnboardingStep,
    UserRole,
)
from entrolytics_shared.frameworks import ENV_VAR_NAMES, FRAMEWORK_PACKAGES, FRAMEWORK_PATTERNS
from entrolytics_shared.messages import ERROR_MESSAGES, SUCCESS_MESSAGES
from entrolytics_shared.plans import PLANS, UNLIMITED, USAGE_THRESHOLDS, FeatureId, LimitId

logger = logging.getLogger(__name__)

console = Console()

_UPPER_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def to_camel(name: str) -> str:
    """snake_case (or UPPER_SNAKE) to camelCase; camelCase passes through"""
    if "_" not in name:
        return name if not name.isupper() else name.lower()
    head, *rest = name.lower().split("_")
    return head + "".join(part.capitalize() for part in rest)


def to_constant_name(name: str) -> str:
    """camelCase to UPPER_SNAKE for exported TypeScript consts"""
    return _UPPER_BOUNDARY.sub("_", name).upper()


def camelize_keys(value: Any) -> Any:
    if isinstance(value, dict):
        return {to_camel(str(k)): camelize_keys(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [camelize_keys(v) for v in value]
    return value


def _enum_table(enum_cls) -> Dict[str, Any]:
    return {member.name: member.value for member in enum_cls}


def build_frontend_constants() -> Dict[str, Any]:
    """Every shared table as a JSON-serialisable, camelCase dictionary"""
    data = {
        "api_endpoints": dict(API_ENDPOINTS),
        "env_var_names": {
            framework.value: {k: v for k, v in asdict(names).items() if v is not None}
            for framework, names in ENV_VAR_NAMES.items()
        },
        "cli_config": dict(CLI_CONFIG),
        "event_types": _enum_table(EventType),
        "http_status": {member.name: int(member) for member in HttpStatus},
        "api_routes": get_route_templates(),
        "deprecated_routes": [key.value for key, entry in API_ROUTES.items() if entry.deprecated],
        "onboarding_steps": _enum_table(OnboardingStep),
        "cli_token_status": _enum_table(CliTokenStatus),
        "user_roles": _enum_table(UserRole),
        "framework_packages": {k.value: v for k, v in FRAMEWORK_PACKAGES.items()},
        "framework_patterns": {k.value: asdict(v) for k, v in FRAMEWORK_PATTERNS.items()},
        "rate_limits": {k: asdict(v) for k, v in RATE_LIMITS.items()},
        "legacy_rate_limits": {k: asdict(v) for k, v in LEGACY_RATE_LIMITS.items()},
        "plans": {plan_id: plan.to_dict() for plan_id, plan in PLANS.items()},
        "usage_thresholds": asdict(USAGE_THRESHOLDS),
        "error_messages": dict(ERROR_MESSAGES),
        "success_messages": dict(SUCCESS_MESSAGES),
    }
    return camelize_keys(data)


_TS_HELPERS = [
    "",
    "// Helper functions",
    "export type Framework = keyof typeof ENV_VAR_NAMES;",
    "export type ApiRouteKey = keyof typeof API_ROUTES;",
    "",
    "export const isValidFramework = (framework: string): framework is Framework =>",
    "  framework in ENV_VAR_NAMES;",
    "",
    "export const getApiRoute = (route: ApiRouteKey, ...args: string[]): string => {",
    "  let i = 0;",
    "  return API_ROUTES[route].replace(/\\{[^}]+\\}/g, () => args[i++]);",
    "};",
    "",
    "export const isUsageWarning = (current: number, limit: number): boolean =>",
    "  limit > 0 && (current / limit) * 100 >= USAGE_THRESHOLDS.warningPercent;",
    "",
    "export const isUsageCritical = (current: number, limit: number): boolean =>",
    "  limit > 0 && (current / limit) * 100 >= USAGE_THRESHOLDS.criticalPercent;",
]


def render_typescript(data: Dict[str, Any], generated_at: Optional[datetime] = None) -> str:
    """Render the constants dictionary as a TypeScript module"""
    generated_at = generated_at or datetime.now(timezone.utc)
    lines: List[str] = [
        "// AUTO-GENERATED from entrolytics_shared - DO NOT EDIT DIRECTLY",
        "// Run: python -m entrolytics_shared.generate_frontend_constants --write <path>",
        f"// Generated at: {generated_at.isoformat()}",
        "",
    ]
    for key, value in data.items():
        lines.append(f"export const {to_constant_name(key)} = {json.dumps(value, indent=2)} as const;")
        lines.append("")
    lines.extend(_TS_HELPERS)
    return "\n".join(lines) + "\n"


def render_json(data: Dict[str, Any]) -> str:
    return json.dumps(data, indent=2) + "\n"


def _format_limit(value: int) -> str:
    return "Unlimited" if value == UNLIMITED else f"{value:,}"


def build_plan_table() -> Table:
    """Plan comparison matrix for the terminal"""
    table = Table(title="Entrolytics Plans")
    table.add_column("", style="cyan")
    for plan in PLANS.values():
        table.add_column(plan.name, style="bold" if plan.is_popular else None)

    table.add_row("Price", *[
        "Contact sales" if p.is_custom_priced else f"${p.price_monthly / 100:,.0f}/mo"
        for p in PLANS.values()
    ])
    for limit in LimitId:
        table.add_row(limit.value, *[_format_limit(p.limits.get(limit.value)) for p in PLANS.values()])
    for feature in FeatureId:
        table.add_row(feature.value, *[
            "[green]✓[/]" if p.features.has(feature.value) else "[dim]-[/]"
            for p in PLANS.values()
        ])
    return table


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate frontend constants from entrolytics_shared.")
    parser.add_argument("--format", choices=("ts", "json"), default="ts", help="Output format")
    parser.add_argument("--write", type=Path, default=None, help="Write to this path instead of stdout")
    parser.add_argument("--plans", action="store_true", help="Print the plan comparison table and exit")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Generate and optionally write the frontend constants"""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    args = parse_args(argv)

    if args.plans:
        console.print(build_plan_table())
        return 0

    data = build_frontend_constants()
    content = render_json(data) if args.format == "json" else render_typescript(data)

    if args.write is None:
        console.print(content, markup=False, highlight=False, soft_wrap=True)
        return 0

    args.write.parent.mkdir(parents=True, exist_ok=True)
    args.write.write_text(content, encoding="utf-8")
    logger.info(f"Wrote {args.format} constants to {args.write}")
    console.print(f"[green]✓ Generated:[/] {args.write}")
    console.print(f"   Plans: {', '.join(PLANS.keys())}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
