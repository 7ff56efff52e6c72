"""
HTTP routes: payment intent creation and client configuration.
"""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from vtranslate.payments.intent import PaymentIntentBridge

logger = logging.getLogger(__name__)

router = APIRouter()

GENERIC_ERROR = "Error creating payment intent"


class PaymentIntentRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    amount: int
    email: str
    name: str
    plan_id: str = Field(alias="planId")


class PaymentIntentResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    client_secret: str = Field(alias="clientSecret")


def get_bridge(request: Request) -> PaymentIntentBridge:
    return request.app.state.payment_bridge


@router.post("/create-payment-intent", response_model=PaymentIntentResponse, response_model_by_alias=True)
def create_payment_intent(body: PaymentIntentRequest, request: Request):
    """Create a payment intent for a plan and return its client secret."""
    try:
        bridge = get_bridge(request)
        client_secret = bridge.create_payment_intent(
            amount=body.amount,
            email=body.email,
            name=body.name,
            plan_id=body.plan_id
        )
    except Exception as e:
        # The client only ever sees the generic message
        logger.error(f"Payment intent request failed: {e}")
        return JSONResponse({"error": GENERIC_ERROR}, status_code=500)

    return PaymentIntentResponse(client_secret=client_secret)


@router.get("/config")
def client_config(request: Request):
    """Values the browser side may see."""
    return {"publishableKey": request.app.state.publishable_key or ""}
