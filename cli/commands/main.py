"""Main CLI interface using Typer."""

import asyncio
import typer
from typing import List, Optional
from rich.console import Console
from rich.table import Table

from vtranslate.core.exceptions import (
    VTranslateError,
    ConfigurationError,
    PaymentIntentFailure,
    CardConfirmationFailure
)
from vtranslate.core.panel import TranslationPanel
from vtranslate.core.services import build_history_store, build_session
from vtranslate.payments.checkout import CheckoutClient
from vtranslate.payments.plans import PLANS, get_plan
from vtranslate.translation.languages import ALL_LANGUAGES, filter_languages
from vtranslate.utils.config_loader import load_config
from vtranslate.utils.logger import setup_logger

app = typer.Typer(
    name="vtranslate",
    help="VTranslate: translate text into several languages at once",
    add_completion=False
)

history_app = typer.Typer(help="Browse and edit translation history")
app.add_typer(history_app, name="history")

console = Console()

_state = {"config_path": None}


@app.callback()
def main(
    config_path: Optional[str] = typer.Option(None, "--config", "-c", help="Path to a YAML config file"),
    log_level: Optional[str] = typer.Option(None, "--log-level", help="DEBUG/INFO/WARNING/ERROR"),
):
    """Global options."""
    _state["config_path"] = config_path
    config = _config()
    logging_settings = config.get("logging", {})
    setup_logger(log_level or logging_settings.get("level", "WARNING"), logging_settings.get("file"))


def _config():
    return load_config(_state["config_path"])


def _fail(message: str):
    console.print(f"[red]Error: {message}[/red]")
    raise typer.Exit(1)


@app.command()
def translate(
    text: str = typer.Argument(..., help="Text to translate"),
    targets: List[str] = typer.Option(["Spanish", "French"], "-t", "--to", help="Target language (repeatable)"),
    source_lang: str = typer.Option("English", "-s", "--from", help="Source language"),
    detect: bool = typer.Option(False, "--detect", help="Detect the source language first"),
    save: bool = typer.Option(True, "--save/--no-save", help="Save the result to history"),
):
    """Translate text into one or more languages."""
    config = _config()

    async def run():
        session = build_session(config)
        store = build_history_store(config) if save else None
        panel = TranslationPanel(session, store, source_language=source_lang, target_languages=targets)
        try:
            if detect:
                detected = await panel.detect_source_language(text)
                if detected:
                    console.print(f"Detected language: [cyan]{detected}[/cyan]")
            with console.status("[bold blue]Translating..."):
                record = await panel.translate(text)
            return panel, record
        finally:
            await session.aclose()
            await session.client.aclose()
            if store is not None:
                store.close()

    try:
        panel, record = asyncio.run(run())
    except ConfigurationError as e:
        _fail(f"{e.message}\n{e.suggestion or ''}")

    table = Table(title=f"{panel.source_language} → {', '.join(panel.target_languages)}")
    table.add_column("Language", style="cyan")
    table.add_column("Translation")
    for language in panel.target_languages:
        if language in panel.errors:
            table.add_row(language, f"[red]{panel.errors[language]}[/red]")
        else:
            table.add_row(language, panel.translations.get(language, ""))
    console.print(table)

    if record is not None:
        console.print(f"[dim]Saved to history as {record.id}[/dim]")
    if panel.errors:
        raise typer.Exit(1)


@app.command()
def detect(text: str = typer.Argument(..., help="Text to inspect")):
    """Detect the language of a text."""
    config = _config()

    async def run():
        session = build_session(config)
        try:
            return await session.detect_language(text)
        finally:
            await session.client.aclose()

    try:
        language = asyncio.run(run())
    except VTranslateError as e:
        _fail(e.message)
    console.print(language)


@app.command()
def languages(
    search: str = typer.Option("", "--search", "-q", help="Filter by name"),
    supported: bool = typer.Option(False, "--supported", help="Only languages with a dedicated profile"),
):
    """List the language catalog."""
    if supported:
        from vtranslate.translation.languages import SUPPORTED_LANGUAGES
        names = [lang for lang in SUPPORTED_LANGUAGES if search.lower() in lang.lower()]
    else:
        names = filter_languages(search)

    for name in names:
        console.print(name)
    console.print(f"\n[dim]{len(names)} of {len(ALL_LANGUAGES)} languages[/dim]")


@history_app.command("list")
def history_list(
    favorites: bool = typer.Option(False, "--favorites", "-f", help="Only favorites"),
    limit: int = typer.Option(20, "--limit", "-n", help="Rows to show"),
):
    """Show recent translations."""
    store = build_history_store(_config())
    try:
        items = store.favorites() if favorites else store.history()
        table = Table(title="Favorites" if favorites else "History")
        table.add_column("ID", style="dim")
        table.add_column("Time")
        table.add_column("From", style="cyan")
        table.add_column("Source text")
        table.add_column("Translations")
        if not favorites:
            table.add_column("★")

        for item in items[:limit]:
            row = [
                item.id,
                item.timestamp.strftime("%Y-%m-%d %H:%M"),
                item.source_language,
                item.source_text[:60],
                "\n".join(f"{lang}: {text}" for lang, text in item.translations.items()),
            ]
            if not favorites:
                row.append("★" if item.is_favorite else "")
            table.add_row(*row)
        console.print(table)
    finally:
        store.close()


@app.command()
def favorites(
    limit: int = typer.Option(20, "--limit", "-n", help="Rows to show"),
    clear: bool = typer.Option(False, "--clear", help="Unflag every favorite, keeping the history")
):
    """Show favorite translations."""
    if not clear:
        history_list(favorites=True, limit=limit)
        return

    store = build_history_store(_config())
    try:
        changed = store.clear_favorites()
    finally:
        store.close()
    console.print(f"[green]✓ Cleared {changed} favorites[/green]")


@history_app.command("favorite")
def history_favorite(item_id: str = typer.Argument(..., help="Record ID")):
    """Toggle the favorite flag of a record."""
    store = build_history_store(_config())
    try:
        item = store.toggle_favorite(item_id)
    finally:
        store.close()
    if item is None:
        _fail(f"No history record {item_id}")
    state = "added to" if item.is_favorite else "removed from"
    console.print(f"[green]✓ {item_id} {state} favorites[/green]")


@history_app.command("delete")
def history_delete(item_id: str = typer.Argument(..., help="Record ID")):
    """Delete one record."""
    store = build_history_store(_config())
    try:
        deleted = store.delete(item_id)
    finally:
        store.close()
    if not deleted:
        _fail(f"No history record {item_id}")
    console.print(f"[green]✓ Deleted {item_id}[/green]")


@history_app.command("clear")
def history_clear(yes: bool = typer.Option(False, "--yes", "-y", help="Do not ask for confirmation")):
    """Delete every record."""
    if not yes and not typer.confirm("Clear all history?"):
        raise typer.Exit(0)
    store = build_history_store(_config())
    try:
        store.clear()
    finally:
        store.close()
    console.print("[green]✓ History cleared[/green]")


@app.command()
def plans():
    """Show subscription plans."""
    table = Table(title="Subscription plans")
    table.add_column("ID", style="dim")
    table.add_column("Plan", style="cyan")
    table.add_column("Price", justify="right")
    table.add_column("Features")
    for plan in PLANS:
        name = f"{plan.name} ⭐" if plan.popular else plan.name
        table.add_row(plan.id, name, f"${plan.price:.2f}/mo", "\n".join(plan.features))
    console.print(table)


@app.command()
def subscribe(
    plan_id: str = typer.Argument(..., help="Plan ID (basic/pro/enterprise)"),
    email: str = typer.Option(..., "--email", "-e", help="Customer email"),
    name: str = typer.Option(..., "--name", "-n", help="Customer name"),
    payment_method: str = typer.Option("pm_card_visa", "--payment-method", "-p", help="Stripe payment method ID"),
    server: Optional[str] = typer.Option(None, "--server", help="Base URL of a running VTranslate server"),
):
    """Buy a subscription through a running server."""
    plan = get_plan(plan_id)
    if plan is None:
        _fail(f"Unknown plan: {plan_id}. Valid plans: {', '.join(p.id for p in PLANS)}")

    config = _config()
    settings = config.get("server", {})
    base_url = server or f"http://{settings.get('host', '127.0.0.1')}:{settings.get('port', 8000)}"

    async def run():
        checkout = CheckoutClient(base_url, publishable_key=config.get("payments", {}).get("publishable_key") or None)
        try:
            return await checkout.subscribe(plan, email, name, payment_method)
        finally:
            await checkout.aclose()

    try:
        status = asyncio.run(run())
    except (PaymentIntentFailure, CardConfirmationFailure) as e:
        _fail(e.message)

    if status == "succeeded":
        console.print(f"[green]✓ Subscribed to {plan.name}. Thank you![/green]")
    else:
        console.print(f"[yellow]Payment status: {status}[/yellow]")


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", help="Port"),
    no_gui: bool = typer.Option(False, "--no-gui", help="Serve the API only"),
):
    """Run the web server (API and GUI)."""
    config = _config()
    if no_gui:
        import uvicorn
        from vtranslate.api.app import create_app

        settings = config.get("server", {})
        uvicorn.run(
            create_app(config),
            host=host or settings.get("host", "127.0.0.1"),
            port=port or int(settings.get("port", 8000))
        )
        return

    from gui.app import launch
    launch(config, host=host, port=port)


@app.command()
def gui():
    """Launch the Gradio GUI."""
    console.print("[bold blue]Launching VTranslate GUI...[/bold blue]")
    try:
        from gui.app import launch
        launch(_config())
    except ImportError as e:
        console.print(f"[red]Error: {str(e)}[/red]")
        console.print("Install GUI dependencies: pip install gradio uvicorn")
        raise typer.Exit(1)


def cli():
    """Main CLI entry point."""
    app()


if __name__ == "__main__":
    cli()
