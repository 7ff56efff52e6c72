"""Subscription plans and payment processing."""

from .plans import Plan, PLANS, PLAN_DESCRIPTIONS, get_plan, describe_plan
from .intent import PaymentIntentBridge
from .checkout import CheckoutClient

__all__ = [
    'Plan',
    'PLANS',
    'PLAN_DESCRIPTIONS',
    'get_plan',
    'describe_plan',
    'PaymentIntentBridge',
    'CheckoutClient',
]
