"""Unit tests for the plan catalog."""

import pytest

from vtranslate.payments.plans import PLANS, DEFAULT_DESCRIPTION, get_plan, describe_plan


@pytest.mark.parametrize("plan_id,amount", [
    ("basic", 999),
    ("pro", 1999),
    ("enterprise", 4999),
])
def test_amounts_in_cents(plan_id, amount):
    assert get_plan(plan_id).amount == amount


def test_only_professional_is_popular():
    assert [p.id for p in PLANS if p.popular] == ["pro"]
    assert get_plan("pro").name == "Professional"


def test_unknown_plan():
    assert get_plan("gold") is None


def test_descriptions():
    assert describe_plan("pro") == "Professional Plan - Unlimited translations with priority support"
    assert describe_plan("basic").startswith("Basic Plan")
    assert describe_plan("gold") == DEFAULT_DESCRIPTION
    assert describe_plan(None) == "VTranslate Subscription"
