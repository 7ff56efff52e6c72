"""
Translation panel state.

Everything the translation screen does apart from drawing it: the source
language, the ordered target-language cards and their results, per-card
errors, and saving finished batches to history. The Gradio GUI and the CLI
both drive this class, and tests drive it headlessly.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Sequence, Set

from vtranslate.core.exceptions import DetectionFailure
from vtranslate.core.models import HistoryItem, TranslationOutcome
from vtranslate.core.session import TranslationSession
from vtranslate.storage.history import HistoryStore
from vtranslate.translation.languages import ALL_LANGUAGES

logger = logging.getLogger(__name__)

MAX_SOURCE_CHARS = 5000


def count_words(text: str) -> int:
    return len(text.split()) if text and text.strip() else 0


class TranslationPanel:
    """One source card, N target cards, and the history they feed."""

    def __init__(
        self,
        session: TranslationSession,
        store: Optional[HistoryStore] = None,
        source_language: str = "English",
        target_languages: Sequence[str] = ("Spanish", "French")
    ):
        self.session = session
        self.store = store
        self.source_language = source_language
        self.target_languages: List[str] = list(dict.fromkeys(target_languages))
        self.translations: Dict[str, str] = {}
        self.errors: Dict[str, str] = {}
        # Target languages with a request in flight
        self.loading: Set[str] = set()
        self.is_translating = False

    async def translate(self, text: str) -> Optional[HistoryItem]:
        """
        Translate text into every target language and record the batch.

        Returns:
            The saved history record, or None when nothing was translated
        """
        if not text or not text.strip():
            self.translations = {}
            self.errors = {}
            return None

        text = text[:MAX_SOURCE_CHARS]
        self.is_translating = True
        self.loading.update(self.target_languages)
        try:
            outcomes = await self.session.translate_all(text, self.target_languages)
        finally:
            self.is_translating = False
            self.loading.clear()

        self._apply(outcomes)
        succeeded = {lang: o.text for lang, o in outcomes.items() if o.ok}
        if not succeeded or self.store is None:
            return None

        return self.store.append(HistoryItem(
            source_language=self.source_language,
            source_text=text,
            translations=succeeded,
        ))

    def _apply(self, outcomes: Dict[str, TranslationOutcome]) -> None:
        for language, outcome in outcomes.items():
            if outcome.ok:
                self.translations[language] = outcome.text
                self.errors.pop(language, None)
            else:
                self.errors[language] = outcome.error.message
                logger.warning(f"Translation error for {language}: {outcome.error.message}")

    async def _translate_one(self, text: str, language: str) -> None:
        self.loading.add(language)
        try:
            outcomes = await self.session.translate_all(text, [language])
        finally:
            self.loading.discard(language)
        self._apply(outcomes)

    async def add_language(self, text: str = "") -> Optional[str]:
        """Add the first catalog language not already in use; returns it."""
        used = set(self.target_languages) | {self.source_language}
        available = [lang for lang in ALL_LANGUAGES if lang not in used]
        if not available:
            return None

        language = available[0]
        self.target_languages.append(language)
        if text and text.strip():
            await self._translate_one(text, language)
        return language

    def remove_language(self, index: int) -> Optional[str]:
        """Remove a target card and its result; returns the removed language."""
        if not 0 <= index < len(self.target_languages):
            return None
        language = self.target_languages.pop(index)
        self.translations.pop(language, None)
        self.errors.pop(language, None)
        return language

    async def change_language(self, index: int, language: str, text: str = "") -> None:
        """Swap the language of a target card and translate into it."""
        if not 0 <= index < len(self.target_languages):
            raise IndexError(f"No target card at position {index}")
        old = self.target_languages[index]
        self.target_languages[index] = language
        self.translations.pop(old, None)
        self.errors.pop(old, None)
        if text and text.strip():
            await self._translate_one(text, language)

    async def change_source_language(self, language: str, text: str = "") -> None:
        """Change the source language and retranslate every card."""
        self.source_language = language
        if not text or not text.strip():
            return
        self.loading.update(self.target_languages)
        try:
            outcomes = await self.session.translate_all(text, self.target_languages)
        finally:
            self.loading.clear()
        self._apply(outcomes)

    async def detect_source_language(self, text: str) -> Optional[str]:
        """Detect the source language and select it when it is in the catalog."""
        try:
            detected = await self.session.detect_language(text)
        except DetectionFailure:
            return None
        if detected in ALL_LANGUAGES:
            self.source_language = detected
        return detected

    def live_translate(self, text: str, on_result: Callable[[str, str], None]):
        """
        Debounced preview into the first target card.

        `on_result(language, translation)` is called once the quiet period
        has passed; superseded calls never call it.
        """
        if not self.target_languages:
            return None
        language = self.target_languages[0]

        def apply(translation: str) -> None:
            if translation:
                self.translations[language] = translation
            else:
                self.translations.pop(language, None)
            on_result(language, translation)

        return self.session.debounced_translate(text, language, apply)
