"""
Server-side payment intent creation (Stripe).

The bridge holds the secret key and is the only component that talks to
Stripe with it. It creates the intent, upserts the customer keyed by email
and hands back the client secret; the charge itself is confirmed by the
client with the publishable key.
"""

import logging
from typing import Optional

import stripe

from vtranslate.core.exceptions import ConfigurationError, PaymentIntentFailure
from .plans import describe_plan

logger = logging.getLogger(__name__)

PRODUCT_NAME = "VTranslate Subscription"


class PaymentIntentBridge:
    """Create payment intents and keep the matching customer record current."""

    def __init__(
        self,
        secret_key: Optional[str],
        currency: str = "usd",
        api_version: Optional[str] = None
    ):
        if not secret_key:
            raise ConfigurationError(
                "Stripe secret key not configured",
                config_key="payments.secret_key",
                env_var="STRIPE_SECRET_KEY"
            )
        self.secret_key = secret_key
        self.currency = currency
        self.api_version = api_version

    def _auth(self) -> dict:
        # Passed per call so no global stripe.api_key is ever set
        auth = {"api_key": self.secret_key}
        if self.api_version:
            auth["stripe_version"] = self.api_version
        return auth

    def create_payment_intent(self, amount: int, email: str, name: str, plan_id: str) -> str:
        """
        Create a payment intent for a plan and upsert the customer.

        Args:
            amount: Charge in minor currency units (cents)
            email: Customer email, also used as the receipt address
            name: Customer name
            plan_id: Plan identifier (basic/pro/enterprise)

        Returns:
            The intent's client secret

        Raises:
            PaymentIntentFailure: Invalid amount or any Stripe error
        """
        if isinstance(amount, bool) or not isinstance(amount, int) or amount <= 0:
            raise PaymentIntentFailure(f"Invalid amount: {amount!r}", plan_id=plan_id)

        try:
            intent = stripe.PaymentIntent.create(
                amount=amount,
                currency=self.currency,
                payment_method_types=["card"],
                metadata={
                    "product": PRODUCT_NAME,
                    "plan": plan_id,
                    "customerName": name,
                    "customerEmail": email,
                },
                receipt_email=email,
                description=describe_plan(plan_id),
                # Saves the card for the following subscription charges
                setup_future_usage="off_session",
                **self._auth()
            )
        except stripe.StripeError as e:
            logger.error(f"Payment intent creation failed for plan {plan_id}: {e}")
            raise PaymentIntentFailure(
                "Error creating payment intent", plan_id=plan_id, original_error=e
            ) from e

        self.upsert_customer(email, name, plan_id)
        logger.info(f"Created payment intent {intent.id} for plan {plan_id}")
        return intent.client_secret

    def upsert_customer(self, email: str, name: str, plan_id: str) -> str:
        """
        Update the customer with this email, or create one.

        Returns:
            The customer id

        Raises:
            PaymentIntentFailure: Any Stripe error
        """
        try:
            existing = stripe.Customer.list(email=email, limit=1, **self._auth())
            if existing.data:
                customer = stripe.Customer.modify(
                    existing.data[0].id,
                    name=name,
                    metadata={"planId": plan_id},
                    **self._auth()
                )
            else:
                customer = stripe.Customer.create(
                    email=email,
                    name=name,
                    metadata={"planId": plan_id},
                    **self._auth()
                )
        except stripe.StripeError as e:
            logger.error(f"Customer upsert failed for {email}: {e}")
            raise PaymentIntentFailure(
                "Error creating payment intent", plan_id=plan_id, original_error=e
            ) from e

        return customer.id
