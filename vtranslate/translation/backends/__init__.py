"""Chat backend implementations."""

from .openai_backend import OpenAIChatBackend

__all__ = [
    'OpenAIChatBackend',
]
