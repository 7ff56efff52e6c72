"""
Client side of the subscription checkout.

Requests a client secret from the payment-intent endpoint and confirms the
card payment with the publishable key. Only the publishable key is ever
held here.
"""

import asyncio
import logging
from typing import Optional

import httpx
import stripe

from vtranslate.core.exceptions import CardConfirmationFailure, PaymentIntentFailure
from .plans import Plan

logger = logging.getLogger(__name__)

INTENT_PATH = "/api/create-payment-intent"


def intent_id_from_secret(client_secret: str) -> str:
    """Client secrets have the form `<intent id>_secret_<token>`."""
    return client_secret.split("_secret_", 1)[0]


class CheckoutClient:
    """Drive a plan purchase against a running VTranslate server."""

    def __init__(
        self,
        base_url: str,
        publishable_key: Optional[str] = None,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        self.base_url = base_url.rstrip("/")
        self.publishable_key = publishable_key
        self._http = httpx.AsyncClient(base_url=self.base_url, timeout=timeout, transport=transport)

    async def create_intent(self, plan: Plan, email: str, name: str) -> str:
        """
        Ask the server for a payment intent.

        Returns:
            The intent client secret

        Raises:
            PaymentIntentFailure: Transport error or non-OK response
        """
        payload = {
            "amount": plan.amount,
            "email": email,
            "name": name,
            "planId": plan.id,
        }
        try:
            response = await self._http.post(INTENT_PATH, json=payload)
        except httpx.HTTPError as e:
            raise PaymentIntentFailure(
                "Failed to reach the payment server", plan_id=plan.id, original_error=e
            ) from e

        try:
            data = response.json()
        except ValueError:
            data = None
        if not isinstance(data, dict):
            data = {}

        if response.status_code != 200:
            message = data.get("error") or "Failed to create payment intent"
            raise PaymentIntentFailure(str(message), plan_id=plan.id)

        client_secret = data.get("clientSecret")
        if not client_secret:
            raise PaymentIntentFailure("Payment server returned no client secret", plan_id=plan.id)
        return client_secret

    async def confirm_card_payment(self, client_secret: str, payment_method: str) -> str:
        """
        Confirm the intent with a card payment method.

        Returns:
            The intent status reported by Stripe (e.g. "succeeded")

        Raises:
            CardConfirmationFailure: Declined card or rejected request
        """
        if not self.publishable_key:
            raise CardConfirmationFailure("Stripe publishable key not configured")

        def confirm():
            return stripe.PaymentIntent.confirm(
                intent_id_from_secret(client_secret),
                payment_method=payment_method,
                client_secret=client_secret,
                api_key=self.publishable_key
            )

        loop = asyncio.get_running_loop()
        try:
            intent = await loop.run_in_executor(None, confirm)
        except stripe.CardError as e:
            error = getattr(e, "error", None)
            raise CardConfirmationFailure(
                e.user_message or "Your card was declined.",
                code=e.code,
                decline_code=getattr(error, "decline_code", None)
            ) from e
        except stripe.StripeError as e:
            raise CardConfirmationFailure(
                e.user_message or "An error occurred while processing your payment.",
                code=e.code
            ) from e

        logger.info(f"Payment intent {intent.id} is {intent.status}")
        return intent.status

    async def subscribe(self, plan: Plan, email: str, name: str, payment_method: str) -> str:
        """Create and confirm in one go; returns the final intent status."""
        client_secret = await self.create_intent(plan, email, name)
        return await self.confirm_card_payment(client_secret, payment_method)

    async def aclose(self) -> None:
        await self._http.aclose()
