"""
Tests for server-side payment intent creation.

Stripe calls are patched; no request leaves the process.
"""

from types import SimpleNamespace
from unittest.mock import patch

import pytest
import stripe

from vtranslate.core.exceptions import ConfigurationError, PaymentIntentFailure
from vtranslate.payments.intent import PaymentIntentBridge, PRODUCT_NAME


@pytest.fixture
def bridge():
    return PaymentIntentBridge("sk_test_123")


@pytest.fixture
def stripe_api():
    """Patch the Stripe resources the bridge uses."""
    with patch.object(stripe.PaymentIntent, "create") as create_intent, \
         patch.object(stripe.Customer, "list") as list_customers, \
         patch.object(stripe.Customer, "modify") as modify_customer, \
         patch.object(stripe.Customer, "create") as create_customer:
        create_intent.return_value = SimpleNamespace(id="pi_123", client_secret="pi_123_secret_abc")
        list_customers.return_value = SimpleNamespace(data=[])
        create_customer.return_value = SimpleNamespace(id="cus_new")
        modify_customer.return_value = SimpleNamespace(id="cus_old")
        yield SimpleNamespace(
            create_intent=create_intent,
            list_customers=list_customers,
            modify_customer=modify_customer,
            create_customer=create_customer
        )


def test_requires_secret_key():
    with pytest.raises(ConfigurationError) as exc_info:
        PaymentIntentBridge("")
    assert exc_info.value.env_var == "STRIPE_SECRET_KEY"


def test_professional_plan_intent(bridge, stripe_api):
    secret = bridge.create_payment_intent(1999, "a@b.com", "Ana", "pro")

    assert secret == "pi_123_secret_abc"
    stripe_api.create_intent.assert_called_once_with(
        amount=1999,
        currency="usd",
        payment_method_types=["card"],
        metadata={
            "product": PRODUCT_NAME,
            "plan": "pro",
            "customerName": "Ana",
            "customerEmail": "a@b.com",
        },
        receipt_email="a@b.com",
        description="Professional Plan - Unlimited translations with priority support",
        setup_future_usage="off_session",
        api_key="sk_test_123"
    )


def test_new_customer_is_created(bridge, stripe_api):
    bridge.create_payment_intent(999, "new@b.com", "Neo", "basic")

    stripe_api.list_customers.assert_called_once_with(email="new@b.com", limit=1, api_key="sk_test_123")
    stripe_api.create_customer.assert_called_once_with(
        email="new@b.com",
        name="Neo",
        metadata={"planId": "basic"},
        api_key="sk_test_123"
    )
    stripe_api.modify_customer.assert_not_called()


def test_existing_customer_is_updated(bridge, stripe_api):
    stripe_api.list_customers.return_value = SimpleNamespace(data=[SimpleNamespace(id="cus_old")])

    customer_id = bridge.upsert_customer("a@b.com", "Ana B", "enterprise")

    assert customer_id == "cus_old"
    stripe_api.modify_customer.assert_called_once_with(
        "cus_old",
        name="Ana B",
        metadata={"planId": "enterprise"},
        api_key="sk_test_123"
    )
    stripe_api.create_customer.assert_not_called()


def test_unknown_plan_gets_generic_description(bridge, stripe_api):
    bridge.create_payment_intent(500, "a@b.com", "Ana", "gold")

    kwargs = stripe_api.create_intent.call_args.kwargs
    assert kwargs["description"] == "VTranslate Subscription"


def test_api_version_is_forwarded(stripe_api):
    bridge = PaymentIntentBridge("sk_test_123", api_version="2024-06-20")

    bridge.create_payment_intent(999, "a@b.com", "Ana", "basic")

    assert stripe_api.create_intent.call_args.kwargs["stripe_version"] == "2024-06-20"


@pytest.mark.parametrize("amount", [0, -100, 19.99, "1999", True])
def test_invalid_amount_rejected(bridge, stripe_api, amount):
    with pytest.raises(PaymentIntentFailure):
        bridge.create_payment_intent(amount, "a@b.com", "Ana", "pro")
    stripe_api.create_intent.assert_not_called()


def test_stripe_error_on_intent(bridge, stripe_api):
    stripe_api.create_intent.side_effect = stripe.StripeError("Invalid API Key provided")

    with pytest.raises(PaymentIntentFailure) as exc_info:
        bridge.create_payment_intent(1999, "a@b.com", "Ana", "pro")

    assert exc_info.value.message == "Error creating payment intent"
    assert exc_info.value.plan_id == "pro"
    assert isinstance(exc_info.value.original_error, stripe.StripeError)
    stripe_api.list_customers.assert_not_called()


def test_stripe_error_on_customer(bridge, stripe_api):
    stripe_api.list_customers.side_effect = stripe.StripeError("rate limited")

    with pytest.raises(PaymentIntentFailure):
        bridge.create_payment_intent(1999, "a@b.com", "Ana", "pro")
