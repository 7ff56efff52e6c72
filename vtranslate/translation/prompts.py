"""Prompt construction for translation and language detection."""

from typing import List

from .base import ChatMessage
from .languages import get_language_profile

TRANSLATION_SYSTEM_TEMPLATE = (
    "You are a professional translator. Translate the following text to {name}. "
    "{instructions} Only provide the translation, no explanations or additional text."
)

DETECTION_SYSTEM_PROMPT = (
    "You are a language detector. Detect the language of the following text. "
    "Only respond with the language name in English, no explanations or additional text."
)


def build_translation_messages(text: str, target_language: str) -> List[ChatMessage]:
    """System + user prompt translating `text` into `target_language`."""
    profile = get_language_profile(target_language)
    system = TRANSLATION_SYSTEM_TEMPLATE.format(
        name=profile.name,
        instructions=profile.instructions or ""
    )
    return [
        ChatMessage(role="system", content=system),
        ChatMessage(role="user", content=text),
    ]


def build_detection_messages(text: str) -> List[ChatMessage]:
    """System + user prompt asking for the language name of `text`."""
    return [
        ChatMessage(role="system", content=DETECTION_SYSTEM_PROMPT),
        ChatMessage(role="user", content=text),
    ]
