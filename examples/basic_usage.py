"""Basic usage examples for VTranslate."""

import asyncio

from vtranslate.core.panel import TranslationPanel
from vtranslate.core.services import build_history_store, build_session, build_translation_client
from vtranslate.payments.plans import get_plan
from vtranslate.utils.config_loader import load_config
from vtranslate.utils.logger import setup_logger


async def example_1_single_translation(config):
    """Example 1: One text, one language."""

    print("=" * 60)
    print("Example 1: Single Translation")
    print("=" * 60)

    client = build_translation_client(config)
    try:
        result = await client.translate("Good morning, how are you?", "Japanese")
        print(f"✓ Japanese: {result}")
    finally:
        await client.aclose()


async def example_2_panel_with_history(config):
    """Example 2: Several target languages, saved to history."""

    print("\n" + "=" * 60)
    print("Example 2: Panel with History")
    print("=" * 60)

    session = build_session(config)
    store = build_history_store(config)
    panel = TranslationPanel(session, store, target_languages=["Spanish", "French", "German"])
    try:
        record = await panel.translate("Hello")
        for language in panel.target_languages:
            print(f"  {language}: {panel.translations.get(language) or panel.errors.get(language)}")

        if record is not None:
            store.toggle_favorite(record.id)
            print(f"✓ Saved {record.id} and marked it as favorite")
        print(f"✓ {len(store.favorites())} favorites in {store.directory}")
    finally:
        await session.client.aclose()
        store.close()


async def example_3_detect_then_translate(config):
    """Example 3: Detect the source language first."""

    print("\n" + "=" * 60)
    print("Example 3: Detect, then Translate")
    print("=" * 60)

    session = build_session(config)
    panel = TranslationPanel(session, target_languages=["English"])
    try:
        detected = await panel.detect_source_language("Wie spät ist es?")
        print(f"✓ Detected: {detected}")
        await panel.translate("Wie spät ist es?")
        print(f"✓ English: {panel.translations.get('English')}")
    finally:
        await session.client.aclose()


async def example_4_debounced_typing(config):
    """Example 4: Live preview while typing; only the last keystroke is sent."""

    print("\n" + "=" * 60)
    print("Example 4: Debounced Translation")
    print("=" * 60)

    session = build_session(config)
    try:
        task = None
        for partial in ["T", "Thank", "Thank you", "Thank you very much"]:
            task = session.debounced_translate(partial, "Italian", lambda text: print(f"✓ Italian: {text}"))
            await asyncio.sleep(0.1)
        await asyncio.wait({task})
    finally:
        await session.aclose()
        await session.client.aclose()


def example_5_plan_amounts():
    """Example 5: What the checkout would charge."""

    print("\n" + "=" * 60)
    print("Example 5: Plan Amounts")
    print("=" * 60)

    for plan_id in ("basic", "pro", "enterprise"):
        plan = get_plan(plan_id)
        print(f"  {plan.name}: {plan.amount} cents")


async def main():
    setup_logger("WARNING")
    config = load_config()

    await example_1_single_translation(config)
    await example_2_panel_with_history(config)
    await example_3_detect_then_translate(config)
    await example_4_debounced_typing(config)
    example_5_plan_amounts()


if __name__ == "__main__":
    asyncio.run(main())
