"""
API Routes - Single Source of Truth

ALL Entrolytics API paths are defined here. The CLI, SDKs, dashboard and
integrations build request paths from this table instead of hardcoding them.

Every entry is either a fixed path (LiteralRoute) or a path template with
named segments (TemplateRoute). Resolution dispatches on the entry type:

    get_api_route("health")                  # "/api/health"
    get_api_route("website_by_id", "42")     # "/api/websites/42"
    get_api_route("websiteById", "42")       # same route, JavaScript spelling

To add a new route:
1. Add a member to ApiRoute
2. Add the entry to API_ROUTES
3. Regenerate the frontend constants:
   python -m entrolytics_shared.generate_frontend_constants --write <path>
"""

from dataclasses import dataclass, field
from enum import Enum
from string import Formatter
from types import MappingProxyType
from typing import Dict, Tuple, Union

from entrolytics_shared.constants import to_snake


def build_endpoint(template: str, **kwargs) -> str:
    """Build endpoint path from template with parameters"""
    result = template
    for key, value in kwargs.items():
        result = result.replace(f"{{{key}}}", str(value))
    return result


@dataclass(frozen=True)
class LiteralRoute:
    """A fixed path. Extra arguments are ignored when rendering."""
    path: str
    deprecated: bool = False

    is_template = False

    def render(self, *args: str) -> str:
        return self.path


@dataclass(frozen=True)
class TemplateRoute:
    """A path with named segments, filled positionally in declaration order"""
    template: str
    deprecated: bool = False
    params: Tuple[str, ...] = field(init=False)

    is_template = True

    def __post_init__(self):
        names = tuple(name for _, name, _, _ in Formatter().parse(self.template) if name)
        if not names:
            raise ValueError(f"Route template has no placeholders: {self.template}")
        object.__setattr__(self, "params", names)

    def render(self, *args: str) -> str:
        if len(args) < len(self.params):
            raise TypeError(
                f"{self.template} takes {len(self.params)} argument(s) "
                f"({', '.join(self.params)}), got {len(args)}"
            )
        # Surplus arguments are dropped, as the generated TypeScript helper does
        return build_endpoint(self.template, **dict(zip(self.params, args)))


RouteEntry = Union[LiteralRoute, TemplateRoute]


class ApiRoute(str, Enum):
    """Route keys. Values are the stable identifiers shared with other consumers."""

    # ==================== CLI ====================
    CLI_TOKEN = "cli_token"
    CLI_VALIDATE = "cli_validate"

    # ==================== WEBSITES ====================
    WEBSITES = "websites"
    WEBSITE_BY_ID = "website_by_id"
    WEBSITE_EVENTS = "website_events"
    WEBSITE_RECENT_EVENTS = "website_recent_events"
    WEBSITE_STATS = "website_stats"

    # ==================== USER ====================
    USER_ONBOARDING = "user_onboarding"
    USER_PROFILE = "user_profile"

    # ==================== EVENT COLLECTION ====================
    COLLECT = "collect"
    SEND = "send"
    BATCH = "batch"

    # ==================== SHARING & LINKS ====================
    SHARE_BY_ID = "share_by_id"
    LINKS = "links"
    LINK_BY_ID = "link_by_id"
    LINK_REDIRECT = "link_redirect"
    PIXEL_REDIRECT = "pixel_redirect"

    # ==================== HEALTH ====================
    HEALTH = "health"
    HEALTH_INTEGRATIONS = "health_integrations"

    # ==================== LEGACY ====================
    LEGACY_WEBSITE_STATS = "legacy_website_stats"


API_ROUTES: "MappingProxyType[ApiRoute, RouteEntry]" = MappingProxyType({
    ApiRoute.CLI_TOKEN: LiteralRoute("/api/cli/token"),
    ApiRoute.CLI_VALIDATE: LiteralRoute("/api/cli/validate"),

    ApiRoute.WEBSITES: LiteralRoute("/api/websites"),
    ApiRoute.WEBSITE_BY_ID: TemplateRoute("/api/websites/{website_id}"),
    ApiRoute.WEBSITE_EVENTS: TemplateRoute("/api/websites/{website_id}/events"),
    ApiRoute.WEBSITE_RECENT_EVENTS: TemplateRoute("/api/websites/{website_id}/recent-events"),
    ApiRoute.WEBSITE_STATS: TemplateRoute("/api/websites/{website_id}/stats"),

    ApiRoute.USER_ONBOARDING: LiteralRoute("/api/user/onboarding"),
    ApiRoute.USER_PROFILE: LiteralRoute("/api/user/profile"),

    ApiRoute.COLLECT: LiteralRoute("/api/collect"),
    ApiRoute.SEND: LiteralRoute("/api/send", deprecated=True),  # superseded by collect
    ApiRoute.BATCH: LiteralRoute("/api/batch"),

    ApiRoute.SHARE_BY_ID: TemplateRoute("/api/share/{share_id}"),
    ApiRoute.LINKS: LiteralRoute("/api/links"),
    ApiRoute.LINK_BY_ID: TemplateRoute("/api/links/{link_id}"),
    ApiRoute.LINK_REDIRECT: TemplateRoute("/q/{slug}"),
    ApiRoute.PIXEL_REDIRECT: TemplateRoute("/p/{slug}"),

    ApiRoute.HEALTH: LiteralRoute("/api/health"),
    ApiRoute.HEALTH_INTEGRATIONS: LiteralRoute("/api/health/integrations"),

    # Pre-v2 dashboards still call this
    ApiRoute.LEGACY_WEBSITE_STATS: TemplateRoute("/api/website/{website_id}/stats", deprecated=True),
})


def _entry(route: Union[ApiRoute, str]) -> RouteEntry:
    if isinstance(route, str) and not isinstance(route, ApiRoute):
        route = to_snake(route)
    return API_ROUTES[route]


def get_api_route(route: Union[ApiRoute, str], *args: str) -> str:
    """
    Resolve a route key to a concrete path.

    The key may be an ApiRoute member, its snake_case value or the camelCase
    spelling used by the JavaScript side ("websiteById"). Template entries are
    rendered with the leading positional args (too few raises TypeError,
    surplus args are ignored); literal entries are returned unchanged. An
    unknown key raises KeyError.
    """
    return _entry(route).render(*args)


def is_deprecated_route(route: Union[ApiRoute, str]) -> bool:
    """Check if a route is kept only for backward compatibility"""
    return _entry(route).deprecated


def get_route_templates() -> Dict[str, str]:
    """Route keys mapped to their raw path or template (for frontend generation)"""
    return {
        key.value: entry.template if entry.is_template else entry.path
        for key, entry in API_ROUTES.items()
    }
