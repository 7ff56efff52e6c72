"""
Integration tests for the translation panel.

Panel, session, client and history store are real; only the chat
backend is stubbed.
"""

import asyncio

import pytest

from vtranslate.core.panel import TranslationPanel, count_words, MAX_SOURCE_CHARS
from vtranslate.core.session import TranslationSession
from vtranslate.translation.client import TranslationClient
from vtranslate.translation.languages import ALL_LANGUAGES


@pytest.fixture
def panel(translation_client, history_store):
    session = TranslationSession(translation_client, debounce_delay=0.01)
    return TranslationPanel(session, history_store)


@pytest.mark.asyncio
async def test_translate_records_one_history_item(panel, history_store):
    record = await panel.translate("Hello")

    assert panel.translations == {"Spanish": "Hola", "French": "Bonjour"}
    assert panel.errors == {}
    assert panel.is_translating is False

    items = history_store.history()
    assert len(items) == 1
    assert items[0].id == record.id
    assert items[0].source_language == "English"
    assert items[0].source_text == "Hello"
    assert items[0].translations == {"Spanish": "Hola", "French": "Bonjour"}
    assert items[0].is_favorite is False


@pytest.mark.asyncio
async def test_partial_failure_records_successes(make_backend, history_store):
    backend = make_backend(replies={"Español": "Hola"}, failures={"Français": RuntimeError("timeout")})
    panel = TranslationPanel(TranslationSession(TranslationClient(backend)), history_store)

    record = await panel.translate("Hello")

    assert panel.translations == {"Spanish": "Hola"}
    assert panel.errors == {"French": "timeout"}
    assert record.translations == {"Spanish": "Hola"}
    assert len(history_store) == 1


@pytest.mark.asyncio
async def test_total_failure_records_nothing(make_backend, history_store):
    backend = make_backend(failures={"Español": RuntimeError("down"), "Français": RuntimeError("down")})
    panel = TranslationPanel(TranslationSession(TranslationClient(backend)), history_store)

    assert await panel.translate("Hello") is None
    assert set(panel.errors) == {"Spanish", "French"}
    assert len(history_store) == 0


@pytest.mark.asyncio
async def test_blank_text_clears_results(panel, stub_backend, history_store):
    await panel.translate("Hello")

    assert await panel.translate("   ") is None
    assert panel.translations == {}
    assert stub_backend.call_count == 2
    assert len(history_store) == 1


@pytest.mark.asyncio
async def test_long_text_is_truncated(panel, stub_backend):
    await panel.translate("a" * (MAX_SOURCE_CHARS + 100))

    assert len(stub_backend.requests[0].messages[1].content) == MAX_SOURCE_CHARS


@pytest.mark.asyncio
async def test_add_language_picks_first_unused(panel):
    added = await panel.add_language("Hello")

    expected = [lang for lang in ALL_LANGUAGES if lang not in ("English", "Spanish", "French")][0]
    assert added == expected
    assert panel.target_languages == ["Spanish", "French", expected]
    assert expected in panel.translations


@pytest.mark.asyncio
async def test_add_language_without_text_does_not_translate(panel, stub_backend):
    await panel.add_language()

    assert len(panel.target_languages) == 3
    assert stub_backend.call_count == 0


@pytest.mark.asyncio
async def test_remove_and_change_language(panel):
    await panel.translate("Hello")

    assert panel.remove_language(1) == "French"
    assert panel.target_languages == ["Spanish"]
    assert "French" not in panel.translations
    assert panel.remove_language(5) is None

    await panel.change_language(0, "French", "Hello")
    assert panel.target_languages == ["French"]
    assert panel.translations == {"French": "Bonjour"}

    with pytest.raises(IndexError):
        await panel.change_language(3, "German")


@pytest.mark.asyncio
async def test_change_source_language_retranslates(panel, stub_backend):
    await panel.change_source_language("German", "Hallo")

    assert panel.source_language == "German"
    assert stub_backend.call_count == 2
    assert panel.translations == {"Spanish": "Hola", "French": "Bonjour"}


@pytest.mark.asyncio
async def test_detect_source_language(make_backend, history_store):
    backend = make_backend(default="French")
    panel = TranslationPanel(TranslationSession(TranslationClient(backend)), history_store)

    assert await panel.detect_source_language("Bonjour") == "French"
    assert panel.source_language == "French"


@pytest.mark.asyncio
async def test_detect_unknown_language_keeps_source(make_backend):
    backend = make_backend(default="Elvish")
    panel = TranslationPanel(TranslationSession(TranslationClient(backend)))

    assert await panel.detect_source_language("Mae govannen") == "Elvish"
    assert panel.source_language == "English"


@pytest.mark.asyncio
async def test_detect_failure_returns_none(make_backend):
    backend = make_backend(failures={"language detector": RuntimeError("down")})
    panel = TranslationPanel(TranslationSession(TranslationClient(backend)))

    assert await panel.detect_source_language("Hola") is None
    assert panel.session.error is not None
    assert panel.source_language == "English"


@pytest.mark.asyncio
async def test_live_translate_updates_first_card(panel, stub_backend):
    seen = []

    panel.live_translate("Hel", lambda lang, text: seen.append((lang, text)))
    task = panel.live_translate("Hello", lambda lang, text: seen.append((lang, text)))
    await asyncio.wait({task})

    assert seen == [("Spanish", "Hola")]
    assert panel.translations == {"Spanish": "Hola"}
    assert stub_backend.call_count == 1


def test_count_words():
    assert count_words("") == 0
    assert count_words("   ") == 0
    assert count_words("Hello  big\nworld") == 3


@pytest.mark.asyncio
async def test_loading_per_language(make_backend):
    backend = make_backend(replies={"Español": "Hola", "Français": "Bonjour"}, delay=0.05)
    panel = TranslationPanel(TranslationSession(TranslationClient(backend)))

    task = asyncio.ensure_future(panel.translate("Hello"))
    await asyncio.sleep(0.01)
    assert panel.loading == {"Spanish", "French"}
    assert panel.is_translating is True

    await task
    assert panel.loading == set()
    assert panel.is_translating is False
