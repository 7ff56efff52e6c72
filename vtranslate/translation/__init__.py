"""Remote translation: chat backends, prompts, language catalog."""

from .base import ChatBackend, ChatMessage, ChatRequest, ChatResponse
from .client import TranslationClient

__all__ = ['ChatBackend', 'ChatMessage', 'ChatRequest', 'ChatResponse', 'TranslationClient']
