"""
VTranslate: multi-language text translation with LLMs.

Translate one source text into several target languages at once, keep a
local history with favorites, and sell subscriptions through Stripe.

Usage:
    from vtranslate import TranslationClient, TranslationSession
    from vtranslate.translation.backends import OpenAIChatBackend

    client = TranslationClient(OpenAIChatBackend(api_key="sk-or-..."))
    session = TranslationSession(client)
    results = await session.translate_all("Hello", ["Spanish", "French"])
"""

__version__ = "1.0.0"
__author__ = "VTranslate Team"
__license__ = "MIT"

from vtranslate.core.models import (
    HistoryItem,
    FavoriteItem,
    TranslationError,
    TranslationOutcome,
    ErrorCode
)
from vtranslate.core.exceptions import (
    VTranslateError,
    TranslationFailure,
    DetectionFailure,
    PaymentIntentFailure,
    CardConfirmationFailure,
    ConfigurationError
)
from vtranslate.translation.client import TranslationClient
from vtranslate.core.session import TranslationSession
from vtranslate.core.panel import TranslationPanel
from vtranslate.storage.history import HistoryStore

__all__ = [
    "__version__",
    "__author__",
    "__license__",
    "HistoryItem", "FavoriteItem", "TranslationError", "TranslationOutcome", "ErrorCode",
    "VTranslateError", "TranslationFailure", "DetectionFailure",
    "PaymentIntentFailure", "CardConfirmationFailure", "ConfigurationError",
    "TranslationClient", "TranslationSession", "TranslationPanel", "HistoryStore",
]
