"""Subscription plan catalog."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

DEFAULT_DESCRIPTION = "VTranslate Subscription"


@dataclass(frozen=True)
class Plan:
    """A subscription plan as shown on the pricing page."""
    id: str
    name: str
    price: float  # USD per month
    features: Tuple[str, ...] = field(default_factory=tuple)
    popular: bool = False

    @property
    def amount(self) -> int:
        """Monthly price in cents."""
        return int(round(self.price * 100))


PLANS: List[Plan] = [
    Plan(
        id="basic",
        name="Basic",
        price=9.99,
        features=(
            "Up to 1,000 translations per month",
            "Access to 50+ languages",
            "Basic support",
            "No ads",
        ),
    ),
    Plan(
        id="pro",
        name="Professional",
        price=19.99,
        features=(
            "Unlimited translations",
            "Access to all languages",
            "Priority support",
            "No ads",
            "API access",
            "Custom terminology",
        ),
        popular=True,
    ),
    Plan(
        id="enterprise",
        name="Enterprise",
        price=49.99,
        features=(
            "Everything in Professional",
            "Dedicated account manager",
            "Custom AI model training",
            "Advanced analytics",
            "SLA guarantee",
            "Team collaboration tools",
        ),
    ),
]

PLAN_DESCRIPTIONS: Dict[str, str] = {
    "basic": "Basic Plan - Up to 1,000 translations/month",
    "pro": "Professional Plan - Unlimited translations with priority support",
    "enterprise": "Enterprise Plan - Full feature access with dedicated support",
}


def get_plan(plan_id: str) -> Optional[Plan]:
    for plan in PLANS:
        if plan.id == plan_id:
            return plan
    return None


def describe_plan(plan_id: Optional[str]) -> str:
    """Payment description for a plan; unknown ids get the generic one."""
    return PLAN_DESCRIPTIONS.get(plan_id or "", DEFAULT_DESCRIPTION)
