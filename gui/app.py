# -*- coding: utf-8 -*-
"""
VTranslate - Translation panel GUI
Translate, History, Favorites and Subscription tabs on top of the API app.
"""

import asyncio
import logging
from typing import Any, Dict, List, Optional

import gradio as gr

from vtranslate.core.exceptions import CardConfirmationFailure, PaymentIntentFailure
from vtranslate.core.panel import TranslationPanel, count_words, MAX_SOURCE_CHARS
from vtranslate.core.services import build_history_store, build_session
from vtranslate.core.session import TranslationSession
from vtranslate.payments.checkout import CheckoutClient
from vtranslate.payments.plans import PLANS, get_plan
from vtranslate.storage.history import HistoryStore
from vtranslate.translation.languages import ALL_LANGUAGES

logger = logging.getLogger(__name__)

HISTORY_COLUMNS = ["ID", "Time", "From", "Source text", "Languages", "★"]
FAVORITE_COLUMNS = ["ID", "Time", "From", "Source text", "Languages"]

PAYMENT_SUCCESS = """
### ✅ Payment Successful!

Thank you for subscribing to VTranslate Premium. Your account has been upgraded
and you now have access to all premium features:

- Unlimited translations
- Access to all languages
- Priority support
"""


class VTranslateGUI:
    """
    Gradio front end over a HistoryStore and one TranslationPanel per visitor.

    Every browser session gets its own panel and TranslationSession, so one
    visitor's keystrokes never cancel another's live preview. The chat client
    and the history store are shared.
    """

    def __init__(
        self,
        config: Dict[str, Any],
        panel: Optional[TranslationPanel] = None,
        store: Optional[HistoryStore] = None,
        checkout: Optional[CheckoutClient] = None
    ):
        self.config = config
        self.store = store or build_history_store(config)
        panel_settings = config.get("panel", {})
        self.panel = panel or TranslationPanel(
            build_session(config),
            self.store,
            source_language=panel_settings.get("source_language", "English"),
            target_languages=panel_settings.get("target_languages", ["Spanish", "French"])
        )
        self._panels: Dict[str, TranslationPanel] = {}

        server = config.get("server", {})
        self.checkout = checkout or CheckoutClient(
            f"http://{server.get('host', '127.0.0.1')}:{server.get('port', 8000)}",
            publishable_key=config.get("payments", {}).get("publishable_key") or None
        )

    def panel_for(self, request: Optional[gr.Request] = None) -> TranslationPanel:
        """The visitor's panel; calls without a browser session use the default one."""
        session_hash = getattr(request, "session_hash", None)
        if not session_hash:
            return self.panel

        panel = self._panels.get(session_hash)
        if panel is None:
            template = self.panel
            panel = TranslationPanel(
                TranslationSession(template.session.client, debounce_delay=template.session.debounce_delay),
                self.store,
                source_language=template.source_language,
                target_languages=template.target_languages
            )
            self._panels[session_hash] = panel
            logger.debug(f"Opened panel for session {session_hash}")
        return panel

    async def on_unload(self, request: gr.Request):
        panel = self._panels.pop(getattr(request, "session_hash", None) or "", None)
        if panel is not None:
            await panel.session.aclose()

    # ------------------------------------------------------------------
    # Rendering helpers
    # ------------------------------------------------------------------

    def render_translations(self, panel: Optional[TranslationPanel] = None) -> str:
        panel = panel or self.panel
        if not panel.target_languages:
            return "_Add a target language to start translating._"

        parts = []
        for language in panel.target_languages:
            parts.append(f"#### {language}")
            if language in panel.errors:
                parts.append(f"⚠️ {panel.errors[language]}")
            else:
                parts.append(panel.translations.get(language) or "_Translation_")
        return "\n\n".join(parts)

    def history_rows(self) -> List[List[str]]:
        return [
            [
                item.id,
                item.timestamp.strftime("%Y-%m-%d %H:%M"),
                item.source_language,
                item.source_text[:80],
                ", ".join(item.translations),
                "★" if item.is_favorite else "",
            ]
            for item in self.store.history()
        ]

    def favorite_rows(self) -> List[List[str]]:
        return [
            [
                item.id,
                item.timestamp.strftime("%Y-%m-%d %H:%M"),
                item.source_language,
                item.source_text[:80],
                ", ".join(item.translations),
            ]
            for item in self.store.favorites()
        ]

    def show_record(self, item_id: str) -> str:
        item = self.store.get((item_id or "").strip())
        if item is None:
            return "_No record with that ID._"
        lines = [f"**{item.source_language}**: {item.source_text}"]
        for language, text in item.translations.items():
            lines.append(f"**{language}**: {text}")
        return "\n\n".join(lines)

    # ------------------------------------------------------------------
    # Translate tab
    # ------------------------------------------------------------------

    async def on_translate(
        self, text: str, source_language: str, targets: List[str], request: gr.Request = None
    ):
        panel = self.panel_for(request)
        panel.source_language = source_language
        panel.target_languages = list(dict.fromkeys(targets or []))
        await panel.translate(text)
        return self.render_translations(panel), self.history_rows()

    async def on_source_change(self, text: str, live: bool, request: gr.Request = None):
        counter = f"{count_words(text)} words · {len(text or '')}/{MAX_SOURCE_CHARS:,} characters"
        if not live:
            return counter, gr.update()

        panel = self.panel_for(request)
        task = panel.live_translate(text, lambda language, translation: None)
        if task is None:
            return counter, self.render_translations(panel)

        await asyncio.wait({task})
        if task.cancelled():
            # A newer keystroke replaced this call
            return counter, gr.update()
        return counter, self.render_translations(panel)

    async def on_detect(self, text: str, request: gr.Request = None):
        panel = self.panel_for(request)
        detected = await panel.detect_source_language(text)
        if detected is None:
            error = panel.session.error
            return gr.update(), f"⚠️ {error.message if error else 'Language detection failed'}"
        if detected in ALL_LANGUAGES:
            return gr.update(value=detected), f"Detected: {detected}"
        return gr.update(), f"Detected: {detected} (not in the language list)"

    async def on_add_language(self, text: str, targets: List[str], request: gr.Request = None):
        panel = self.panel_for(request)
        panel.target_languages = list(dict.fromkeys(targets or []))
        await panel.add_language(text)
        return gr.update(value=list(panel.target_languages)), self.render_translations(panel)

    # ------------------------------------------------------------------
    # History / favorites tabs
    # ------------------------------------------------------------------

    def on_toggle_favorite(self, item_id: str):
        self.store.toggle_favorite((item_id or "").strip())
        return self.history_rows(), self.favorite_rows()

    def on_delete(self, item_id: str):
        self.store.delete((item_id or "").strip())
        return self.history_rows(), self.favorite_rows()

    def on_clear_history(self):
        self.store.clear()
        return self.history_rows(), self.favorite_rows()

    def on_remove_favorite(self, item_id: str):
        self.store.remove_favorite((item_id or "").strip())
        return self.history_rows(), self.favorite_rows()

    def on_clear_favorites(self):
        self.store.clear_favorites()
        return self.history_rows(), self.favorite_rows()

    # ------------------------------------------------------------------
    # Subscription tab
    # ------------------------------------------------------------------

    def plans_markdown(self) -> str:
        blocks = []
        for plan in PLANS:
            title = f"### {plan.name}: ${plan.price:.2f}/month"
            if plan.popular:
                title += " ⭐ Most popular"
            features = "\n".join(f"- {feature}" for feature in plan.features)
            blocks.append(f"{title}\n\n{features}")
        return "\n\n".join(blocks)

    async def on_subscribe(self, plan_id: str, email: str, name: str, payment_method: str) -> str:
        plan = get_plan(plan_id)
        if plan is None:
            return "⚠️ Please choose a plan."
        if not email or not name:
            return "⚠️ Please enter your name and email."

        try:
            status = await self.checkout.subscribe(plan, email.strip(), name.strip(), payment_method.strip())
        except (PaymentIntentFailure, CardConfirmationFailure) as e:
            return f"⚠️ {e.message}"

        if status == "succeeded":
            return PAYMENT_SUCCESS
        return f"Payment status: {status}"

    def create_interface(self) -> gr.Blocks:
        """Build the Blocks layout and wire the events."""
        with gr.Blocks(title="VTranslate") as demo:
            gr.Markdown("# VTranslate")

            with gr.Tabs():
                with gr.Tab("Translate"):
                    with gr.Row():
                        with gr.Column():
                            with gr.Row():
                                source_language = gr.Dropdown(
                                    choices=ALL_LANGUAGES,
                                    value=self.panel.source_language,
                                    label="From",
                                    filterable=True
                                )
                                detect_btn = gr.Button("Detect language", size="sm")
                            source_text = gr.Textbox(
                                label="Text",
                                placeholder="Enter text",
                                lines=8,
                                max_length=MAX_SOURCE_CHARS
                            )
                            counter = gr.Markdown(f"0 words · 0/{MAX_SOURCE_CHARS:,} characters")
                            live = gr.Checkbox(value=False, label="Live preview (first target language)")
                            detect_status = gr.Markdown()
                            translate_btn = gr.Button("Translate", variant="primary")

                        with gr.Column():
                            targets = gr.Dropdown(
                                choices=ALL_LANGUAGES,
                                value=list(self.panel.target_languages),
                                multiselect=True,
                                label="To",
                                filterable=True
                            )
                            add_btn = gr.Button("+ Add language", size="sm")
                            output = gr.Markdown(self.render_translations())

                with gr.Tab("History"):
                    history_table = gr.Dataframe(
                        headers=HISTORY_COLUMNS,
                        value=self.history_rows(),
                        interactive=False,
                        wrap=True
                    )
                    with gr.Row():
                        history_id = gr.Textbox(label="Record ID", scale=2)
                        show_btn = gr.Button("Show")
                        favorite_btn = gr.Button("☆ Toggle favorite")
                        delete_btn = gr.Button("Delete")
                        clear_btn = gr.Button("Clear all history", variant="stop")
                    record_view = gr.Markdown()

                with gr.Tab("Favorites"):
                    favorites_table = gr.Dataframe(
                        headers=FAVORITE_COLUMNS,
                        value=self.favorite_rows(),
                        interactive=False,
                        wrap=True
                    )
                    with gr.Row():
                        favorite_id = gr.Textbox(label="Record ID", scale=2)
                        unfavorite_btn = gr.Button("Remove from favorites")
                        clear_favorites_btn = gr.Button("Clear all favorites", variant="stop")

                with gr.Tab("Subscription"):
                    gr.Markdown(self.plans_markdown())
                    plan_choice = gr.Radio(
                        choices=[(f"{p.name} (${p.price:.2f})", p.id) for p in PLANS],
                        value="pro",
                        label="Plan"
                    )
                    with gr.Row():
                        customer_name = gr.Textbox(label="Name")
                        customer_email = gr.Textbox(label="Email")
                    payment_method = gr.Textbox(
                        label="Payment method",
                        value="pm_card_visa",
                        info="Stripe payment method ID"
                    )
                    subscribe_btn = gr.Button("Subscribe", variant="primary")
                    payment_status = gr.Markdown()

            translate_btn.click(
                fn=self.on_translate,
                inputs=[source_text, source_language, targets],
                outputs=[output, history_table]
            )
            source_text.change(
                fn=self.on_source_change,
                inputs=[source_text, live],
                outputs=[counter, output],
                concurrency_limit=None
            )
            detect_btn.click(fn=self.on_detect, inputs=[source_text], outputs=[source_language, detect_status])
            add_btn.click(fn=self.on_add_language, inputs=[source_text, targets], outputs=[targets, output])

            show_btn.click(fn=self.show_record, inputs=[history_id], outputs=[record_view])
            favorite_btn.click(fn=self.on_toggle_favorite, inputs=[history_id], outputs=[history_table, favorites_table])
            delete_btn.click(fn=self.on_delete, inputs=[history_id], outputs=[history_table, favorites_table])
            clear_btn.click(fn=self.on_clear_history, outputs=[history_table, favorites_table])
            unfavorite_btn.click(fn=self.on_remove_favorite, inputs=[favorite_id], outputs=[history_table, favorites_table])
            clear_favorites_btn.click(fn=self.on_clear_favorites, outputs=[history_table, favorites_table])

            subscribe_btn.click(
                fn=self.on_subscribe,
                inputs=[plan_choice, customer_email, customer_name, payment_method],
                outputs=[payment_status]
            )

            demo.unload(self.on_unload)

        return demo


def launch(config: Optional[Dict[str, Any]] = None, host: Optional[str] = None, port: Optional[int] = None):
    """Serve the GUI and the payment API together."""
    import uvicorn

    from vtranslate.api.app import create_app
    from vtranslate.utils.config_loader import load_config

    config = config if config is not None else load_config()
    server = config.setdefault("server", {})
    if host:
        server["host"] = host
    if port:
        server["port"] = port

    gui = VTranslateGUI(config)
    app = create_app(config, gui=gui.create_interface())

    print(f"\n{'='*60}")
    print(f"🚀 Starting VTranslate at http://{server.get('host', '127.0.0.1')}:{server.get('port', 8000)}")
    print(f"{'='*60}\n")

    uvicorn.run(app, host=server.get("host", "127.0.0.1"), port=int(server.get("port", 8000)))


if __name__ == "__main__":
    launch()
