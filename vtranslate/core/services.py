"""Construct the application's services from a configuration dictionary."""

from typing import Dict, Any

from vtranslate.payments.intent import PaymentIntentBridge
from vtranslate.storage.history import HistoryStore
from vtranslate.translation.backends import OpenAIChatBackend
from vtranslate.translation.client import TranslationClient
from .session import TranslationSession


def build_translation_client(config: Dict[str, Any]) -> TranslationClient:
    """Translation client over the configured OpenAI-compatible endpoint."""
    settings = config.get("translation", {})
    backend = OpenAIChatBackend(
        api_key=settings.get("api_key") or None,
        model=settings.get("model") or OpenAIChatBackend.DEFAULT_MODEL,
        base_url=settings.get("base_url") or OpenAIChatBackend.DEFAULT_BASE_URL,
        referer=settings.get("referer", ""),
        app_title=settings.get("app_title", "VTranslate"),
        timeout=float(settings.get("timeout", 30.0))
    )
    return TranslationClient(backend, temperature=float(settings.get("temperature", 0.3)))


def build_session(config: Dict[str, Any], client: TranslationClient = None) -> TranslationSession:
    client = client or build_translation_client(config)
    delay = float(config.get("translation", {}).get("debounce_delay", 0.5))
    return TranslationSession(client, debounce_delay=delay)


def build_history_store(config: Dict[str, Any]) -> HistoryStore:
    settings = config.get("storage", {})
    return HistoryStore(
        settings.get("history_dir", ".cache/vtranslate/history"),
        max_items=int(settings.get("max_history", 100))
    )


def build_payment_bridge(config: Dict[str, Any]) -> PaymentIntentBridge:
    settings = config.get("payments", {})
    return PaymentIntentBridge(
        settings.get("secret_key") or None,
        currency=settings.get("currency", "usd"),
        api_version=settings.get("api_version")
    )
