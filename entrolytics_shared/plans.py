"""
Centralized Plan Configuration - Single Source of Truth
========================================================
All billing plans, limits, feature flags and usage thresholds are defined
here. The dashboard, billing service and CLI derive their configuration
from this file.

To change plan limits/features:
1. Update the PLANS dictionary below
2. Regenerate the frontend constants:
   python -m entrolytics_shared.generate_frontend_constants --write <path>

Usage:
    from entrolytics_shared.plans import PlanManager, PlanId

    # Get plan config
    plan = PlanManager.get_plan("pro")

    # Check feature access
    has_funnels = PlanManager.has_feature("pro", "funnels")

    # Get limit (-1 means unlimited)
    max_websites = PlanManager.get_limit("pro", "websites")

    # Warn before the monthly event quota runs out
    if is_usage_warning(events_this_month, max_events):
        ...
"""

from dataclasses import asdict, dataclass, field, fields
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, List, Optional, Tuple, Union


class PlanId(str, Enum):
    """Available billing plan identifiers"""
    STARTER = "starter"
    PRO = "pro"
    BUSINESS = "business"
    ENTERPRISE = "enterprise"


class LimitId(str, Enum):
    """Limit identifiers for quota checks"""
    WEBSITES = "websites"
    EVENTS_PER_MONTH = "events_per_month"
    TEAM_MEMBERS = "team_members"
    DATA_RETENTION_DAYS = "data_retention_days"
    LINKS = "links"
    PIXELS = "pixels"


class FeatureId(str, Enum):
    """Feature identifiers for plan checks"""
    CUSTOM_EVENTS = "custom_events"
    FUNNELS = "funnels"
    RETENTION = "retention"
    USER_JOURNEYS = "user_journeys"
    REVENUE = "revenue"
    DATA_EXPORT = "data_export"
    API_ACCESS = "api_access"
    CUSTOM_DOMAINS = "custom_domains"
    REMOVE_BRANDING = "remove_branding"
    PRIORITY_SUPPORT = "priority_support"
    SSO = "sso"
    AUDIT_LOGS = "audit_logs"
    SLA = "sla"


class UsageLevel(str, Enum):
    OK = "ok"
    WARNING = "warning"
    CRITICAL = "critical"
    UNLIMITED = "unlimited"


# Use -1 for unlimited values
UNLIMITED = -1

# Use -1 for "contact sales" pricing
CUSTOM_PRICE = -1


@dataclass(frozen=True)
class PlanLimits:
    """Numerical limits for a plan"""
    websites: int = 0
    events_per_month: int = 0
    team_members: int = 1
    data_retention_days: int = 0
    links: int = 0
    pixels: int = 0

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if value < 0 and value != UNLIMITED:
                raise ValueError(f"Limit {f.name} must be >= 0 or UNLIMITED, got {value}")

    def find(self, limit_id: str) -> Optional[int]:
        """Get limit by string ID, or None if this plan has no such limit"""
        if limit_id not in _LIMIT_NAMES:
            return None
        return getattr(self, limit_id)

    def get(self, limit_id: str) -> int:
        """Get limit by string ID (0 when unknown)"""
        value = self.find(limit_id)
        return 0 if value is None else value


_LIMIT_NAMES = frozenset(f.name for f in fields(PlanLimits))


@dataclass(frozen=True)
class PlanFeatures:
    """Feature flags for a plan. None means the plan does not define the flag."""
    custom_events: Optional[bool] = None
    funnels: Optional[bool] = None
    retention: Optional[bool] = None
    user_journeys: Optional[bool] = None
    revenue: Optional[bool] = None
    data_export: Optional[bool] = None
    api_access: Optional[bool] = None
    custom_domains: Optional[bool] = None
    remove_branding: Optional[bool] = None
    priority_support: Optional[bool] = None
    sso: Optional[bool] = None
    audit_logs: Optional[bool] = None
    sla: Optional[bool] = None

    def has(self, feature_id: str) -> bool:
        """Check if feature is enabled by string ID"""
        if feature_id not in _FEATURE_NAMES:
            return False
        return getattr(self, feature_id) is True

    def defined(self) -> Dict[str, bool]:
        """Flags this plan actually declares"""
        return {k: v for k, v in asdict(self).items() if v is not None}


_FEATURE_NAMES = frozenset(f.name for f in fields(PlanFeatures))


@dataclass(frozen=True)
class Plan:
    """Complete plan definition"""
    id: str
    name: str
    description: str

    # Pricing, in cents. CUSTOM_PRICE for contact-sales plans
    price_monthly: int
    currency: str = "USD"

    # Limits and Features
    limits: PlanLimits = field(default_factory=PlanLimits)
    features: PlanFeatures = field(default_factory=PlanFeatures)

    # Display
    is_popular: bool = False
    display_features: Tuple[str, ...] = ()
    support_level: str = "community"

    def __post_init__(self):
        if self.price_monthly < 0 and self.price_monthly != CUSTOM_PRICE:
            raise ValueError(f"Plan {self.id} price must be >= 0 or CUSTOM_PRICE")

    @property
    def is_custom_priced(self) -> bool:
        return self.price_monthly == CUSTOM_PRICE

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses"""
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price_monthly": self.price_monthly,
            "currency": self.currency,
            "is_popular": self.is_popular,
            "limits": asdict(self.limits),
            "features": self.features.defined(),
            "display_features": list(self.display_features),
            "support_level": self.support_level,
        }


@dataclass(frozen=True)
class UsageThresholds:
    """Usage percentages that trigger quota warnings"""
    warning_percent: float
    critical_percent: float

    def __post_init__(self):
        if not 0 < self.warning_percent < self.critical_percent <= 100:
            raise ValueError(
                f"Thresholds must satisfy 0 < warning < critical <= 100, got "
                f"{self.warning_percent}/{self.critical_percent}"
            )


USAGE_THRESHOLDS = UsageThresholds(warning_percent=90, critical_percent=95)


# =============================================================================
# PLAN DEFINITIONS - THE SINGLE SOURCE OF TRUTH
# =============================================================================

PLANS: "MappingProxyType[str, Plan]" = MappingProxyType({
    PlanId.STARTER.value: Plan(
        id="starter",
        name="Starter",
        description="For personal sites and side projects",
        price_monthly=900,  # $9/month
        limits=PlanLimits(
            websites=2,
            events_per_month=50_000,
            team_members=1,
            data_retention_days=180,
            links=5,
            pixels=1,
        ),
        features=PlanFeatures(
            custom_events=True,
            funnels=False,
            retention=False,
            user_journeys=False,
            revenue=False,
            data_export=True,
            api_access=False,
            custom_domains=False,
            remove_branding=False,
        ),
        display_features=(
            "2 websites",
            "50K events per month",
            "6 months data retention",
            "Custom events",
        ),
        support_level="community",
    ),

    PlanId.PRO.value: Plan(
        id="pro",
        name="Pro",
        description="For growing products that need deeper insight",
        price_monthly=2900,  # $29/month
        is_popular=True,
        limits=PlanLimits(
            websites=10,
            events_per_month=250_000,
            team_members=5,
            data_retention_days=730,
            links=50,
            pixels=10,
        ),
        features=PlanFeatures(
            custom_events=True,
            funnels=True,
            retention=True,
            user_journeys=True,
            revenue=False,
            data_export=True,
            api_access=True,
            custom_domains=True,
            remove_branding=True,
            priority_support=False,
        ),
        display_features=(
            "10 websites",
            "250K events per month",
            "2 years data retention",
            "Funnels, retention & journeys",
            "API access",
        ),
        support_level="email",
    ),

    PlanId.BUSINESS.value: Plan(
        id="business",
        name="Business",
        description="For teams running analytics across many properties",
        price_monthly=9900,  # $99/month
        limits=PlanLimits(
            websites=UNLIMITED,
            events_per_month=2_500_000,
            team_members=25,
            data_retention_days=1825,
            links=UNLIMITED,
            pixels=UNLIMITED,
        ),
        features=PlanFeatures(
            custom_events=True,
            funnels=True,
            retention=True,
            user_journeys=True,
            revenue=True,
            data_export=True,
            api_access=True,
            custom_domains=True,
            remove_branding=True,
            priority_support=True,
            sso=False,
            audit_logs=True,
        ),
        display_features=(
            "Unlimited websites",
            "2.5M events per month",
            "5 years data retention",
            "Revenue tracking",
            "Audit logs",
            "Priority support",
        ),
        support_level="priority",
    ),

    PlanId.ENTERPRISE.value: Plan(
        id="enterprise",
        name="Enterprise",
        description="Custom volume, security and support",
        price_monthly=CUSTOM_PRICE,
        limits=PlanLimits(
            websites=UNLIMITED,
            events_per_month=UNLIMITED,
            team_members=UNLIMITED,
            data_retention_days=UNLIMITED,
            links=UNLIMITED,
            pixels=UNLIMITED,
        ),
        features=PlanFeatures(
            custom_events=True,
            funnels=True,
            retention=True,
            user_journeys=True,
            revenue=True,
            data_export=True,
            api_access=True,
            custom_domains=True,
            remove_branding=True,
            priority_support=True,
            sso=True,
            audit_logs=True,
            sla=True,
        ),
        display_features=(
            "Unlimited everything",
            "SSO/SAML",
            "Uptime SLA",
            "Dedicated support",
        ),
        support_level="dedicated",
    ),
})


# =============================================================================
# PLAN MANAGER - API FOR ACCESSING PLAN CONFIGURATION
# =============================================================================

PlanKey = Union[PlanId, str]


class PlanManager:
    """
    Centralized API for accessing plan configuration.
    Use this class instead of directly accessing PLANS dictionary.
    """

    @staticmethod
    def get_plan(plan_id: PlanKey) -> Plan:
        """Get plan configuration by ID. Unknown IDs raise KeyError."""
        return PLANS[plan_id]

    @staticmethod
    def get_all_plans() -> "MappingProxyType[str, Plan]":
        return PLANS

    @staticmethod
    def get_public_plans() -> List[Plan]:
        """Plans offered through self-serve checkout (excludes custom-priced)"""
        return [p for p in PLANS.values() if not p.is_custom_priced]

    @staticmethod
    def has_feature(plan_id: PlanKey, feature_id: str) -> bool:
        """Check if a plan has a specific feature enabled"""
        plan = PLANS.get(plan_id)
        return plan is not None and plan.features.has(feature_id)

    @staticmethod
    def find_limit(plan_id: PlanKey, limit_id: str) -> Optional[int]:
        """Get a limit, or None when the plan or limit does not exist"""
        plan = PLANS.get(plan_id)
        if plan is None:
            return None
        return plan.limits.find(limit_id)

    @staticmethod
    def get_limit(plan_id: PlanKey, limit_id: str) -> int:
        """Get a specific limit value for a plan (0 when not found)"""
        value = PlanManager.find_limit(plan_id, limit_id)
        return 0 if value is None else value

    @staticmethod
    def is_unlimited(plan_id: PlanKey, limit_id: str) -> bool:
        """Check if a limit is unlimited (-1)"""
        return PlanManager.find_limit(plan_id, limit_id) == UNLIMITED

    @staticmethod
    def get_plan_hierarchy() -> List[str]:
        """Get plans in order from lowest to highest tier"""
        return [
            PlanId.STARTER.value,
            PlanId.PRO.value,
            PlanId.BUSINESS.value,
            PlanId.ENTERPRISE.value,
        ]

    @staticmethod
    def is_plan_higher(plan_a: PlanKey, plan_b: PlanKey) -> bool:
        """Check if plan_a is a higher tier than plan_b"""
        hierarchy = PlanManager.get_plan_hierarchy()
        try:
            return hierarchy.index(plan_a) > hierarchy.index(plan_b)
        except ValueError:
            return False

    @staticmethod
    def get_upgrade_options(current_plan: PlanKey) -> List[Plan]:
        """Get available upgrade options for current plan"""
        hierarchy = PlanManager.get_plan_hierarchy()
        try:
            current_index = hierarchy.index(current_plan)
        except ValueError:
            return []
        return [PLANS[pid] for pid in hierarchy[current_index + 1:] if pid in PLANS]

    @staticmethod
    def to_frontend_config() -> Dict[str, Any]:
        """Export configuration for frontend consumption"""
        return {plan_id: plan.to_dict() for plan_id, plan in PLANS.items()}


# =============================================================================
# USAGE EVALUATION
# =============================================================================

def get_usage_percent(current: float, limit: float) -> Optional[float]:
    """Usage as a percentage of limit, or None when the limit is unlimited (<= 0)"""
    if limit <= 0:
        return None
    return current / limit * 100


def is_usage_warning(current: float, limit: float) -> bool:
    """True once usage reaches the warning threshold. Non-positive limits never warn."""
    percent = get_usage_percent(current, limit)
    return percent is not None and percent >= USAGE_THRESHOLDS.warning_percent


def is_usage_critical(current: float, limit: float) -> bool:
    """True once usage reaches the critical threshold. Non-positive limits never warn."""
    percent = get_usage_percent(current, limit)
    return percent is not None and percent >= USAGE_THRESHOLDS.critical_percent


def get_usage_level(current: float, limit: float) -> UsageLevel:
    if limit <= 0:
        return UsageLevel.UNLIMITED
    if is_usage_critical(current, limit):
        return UsageLevel.CRITICAL
    if is_usage_warning(current, limit):
        return UsageLevel.WARNING
    return UsageLevel.OK


# =============================================================================
# FUNCTIONAL API
# =============================================================================

def get_plan(plan_id: PlanKey) -> Plan:
    """Get a plan by ID. Guard unknown input with PlanId first."""
    return PlanManager.get_plan(plan_id)


def is_plan_feature_enabled(plan_id: PlanKey, feature: str) -> bool:
    return PlanManager.has_feature(plan_id, feature)


def get_plan_limit(plan_id: PlanKey, limit: str) -> int:
    """
    Get a numeric limit for a plan.

    Returns UNLIMITED (-1) verbatim. Returns 0 when the plan or limit is
    unknown, which reads the same as a zero allowance; use find_plan_limit
    when the difference matters.
    """
    return PlanManager.get_limit(plan_id, limit)


def find_plan_limit(plan_id: PlanKey, limit: str) -> Optional[int]:
    return PlanManager.find_limit(plan_id, limit)
