"""FastAPI application serving the payment API and, optionally, the GUI."""

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware

from vtranslate import __version__
from vtranslate.core.exceptions import ConfigurationError
from vtranslate.core.services import build_payment_bridge
from vtranslate.payments.intent import PaymentIntentBridge
from vtranslate.utils.config_loader import load_config
from . import routes

logger = logging.getLogger(__name__)

PAYMENT_INTENT_PATH = "/api/create-payment-intent"


def create_app(
    config: Optional[Dict[str, Any]] = None,
    bridge: Optional[PaymentIntentBridge] = None,
    gui: Any = None
) -> FastAPI:
    """
    Build the application.

    Args:
        config: Configuration dictionary (loaded from disk/env when omitted)
        bridge: Payment bridge; built from config when omitted
        gui: Gradio Blocks to mount at "/" (no GUI when omitted)
    """
    config = config if config is not None else load_config()

    app = FastAPI(
        title="VTranslate",
        description="Translation panel and subscription payments",
        version=__version__,
    )

    origins = config.get("server", {}).get("allowed_origins") or []
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if bridge is None:
        try:
            bridge = build_payment_bridge(config)
        except ConfigurationError as e:
            # Translation still works; the payment route answers with 500
            logger.warning(f"Payments disabled: {e}")
    app.state.payment_bridge = bridge
    app.state.publishable_key = config.get("payments", {}).get("publishable_key")

    app.include_router(routes.router, prefix="/api", tags=["payments"])

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        # The payment route never reports field errors to the browser
        if request.url.path.endswith(PAYMENT_INTENT_PATH):
            logger.error(f"Payment intent request rejected: {exc.errors()}")
            return JSONResponse({"error": routes.GENERIC_ERROR}, status_code=500)
        return await request_validation_exception_handler(request, exc)

    @app.get("/health")
    async def health_check():
        return {
            "status": "healthy",
            "service": "VTranslate",
            "payments": bridge is not None,
        }

    if gui is not None:
        import gradio as gr
        app = gr.mount_gradio_app(app, gui, path="/")

    return app
