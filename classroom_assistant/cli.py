"""Command-line interface for the classroom assistant."""

import asyncio
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config.logging import cli_logger, setup_logging
from .config.settings import Settings
from .content import ExtractedContentProcessor
from .core.exceptions import ClassroomAssistantError
from .embeddings import EmbeddingsFactory, EmbeddingsService, credential_namespace_for
from .models.content import ContentType
from .models.embeddings import CredentialNamespace, ProviderKind
from .preferences import PreferencesService, create_preference_storage

app = typer.Typer(
    name="classroom-assistant",
    help="Classroom Assistant - embeddings and note classification tools",
    add_completion=False,
)
preferences_app = typer.Typer(help="Manage stored preferences and API keys")
app.add_typer(preferences_app, name="preferences")

console = Console()


def _load_settings(debug: bool = False) -> Settings:
    settings = Settings()
    if debug:
        settings.DEBUG = True
        settings.LOG_LEVEL = "DEBUG"
    setup_logging(settings)
    return settings


async def _open_preferences(settings: Settings) -> PreferencesService:
    storage = create_preference_storage(settings)
    await storage.initialize()
    return PreferencesService(storage, settings)


def _mask(key: Optional[str]) -> str:
    if not key:
        return "[dim]not set[/dim]"
    if len(key) <= 8:
        return "****"
    return f"{key[:4]}…{key[-4:]}"


@app.command("embed")
def embed(
    texts: List[str] = typer.Argument(..., help="Texts to embed"),
    provider: Optional[ProviderKind] = typer.Option(
        None, "--provider", "-p", help="Use this provider instead of the stored preference"
    ),
    preview: int = typer.Option(5, "--preview", help="Vector values to print per text"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Embed texts with the configured provider."""
    settings = _load_settings(debug)

    async def _run() -> List[List[float]]:
        preferences = await _open_preferences(settings)
        try:
            if provider is not None:
                # One-off choice; the stored preference is left alone
                api_key = await preferences.get_api_key(credential_namespace_for(provider))
                resolved = EmbeddingsFactory.create_provider(provider, api_key, settings=settings) if api_key else None
            else:
                resolved = await EmbeddingsService(preferences, settings).resolve_provider()
            if resolved is None:
                console.print("[yellow]Embeddings unavailable: no API key for the selected provider[/yellow]")
                raise typer.Exit(code=1)
            return await resolved.embed_text_batch(texts)
        finally:
            await preferences.storage.close()

    try:
        vectors = asyncio.run(_run())
    except ClassroomAssistantError as e:
        cli_logger.error("Embed command failed", error=str(e))
        console.print(f"[red]Embedding failed: {escape(str(e))}[/red]")
        sys.exit(1)

    for text, vector in zip(texts, vectors):
        values = ", ".join(f"{v:.4f}" for v in vector[:preview])
        console.print(f"[bold]{escape(text)}[/bold] dim={len(vector)} [{values}{', …' if len(vector) > preview else ''}]")


@app.command("classify")
def classify(
    file: Optional[Path] = typer.Argument(None, help="File with AI output; reads stdin when omitted"),
    only: Optional[ContentType] = typer.Option(None, "--only", help="Show only this content type"),
) -> None:
    """Split AI output into topics and questions."""
    _load_settings()

    if file is not None:
        if not file.exists():
            console.print(f"[red]File not found: {file}[/red]")
            raise typer.Exit(code=1)
        lines = file.read_text(encoding="utf-8").splitlines()
    else:
        lines = sys.stdin.read().splitlines()

    items = ExtractedContentProcessor.process_ai_response(lines)
    if only is not None:
        items = ExtractedContentProcessor.filter_by_type(items, only)

    table = Table(title=f"Extracted content ({len(items)} items)")
    table.add_column("#", justify="right")
    table.add_column("Type")
    table.add_column("Content")
    for index, item in enumerate(items, start=1):
        style = "blue" if item.type == ContentType.TOPIC else "red"
        table.add_row(str(index), f"[{style}]{item.type_name}[/{style}]", escape(item.content))
    console.print(table)


@preferences_app.command("show")
def show_preferences() -> None:
    """Show the selected provider and which API keys are stored."""
    settings = _load_settings()

    async def _run() -> None:
        preferences = await _open_preferences(settings)
        try:
            kind = await preferences.get_embedding_provider()
            console.print(f"Embedding provider: [green]{kind.value}[/green]")
            console.print(f"Education level: {await preferences.get_education_level()}")
            for namespace in CredentialNamespace:
                key = await preferences.get_api_key(namespace)
                console.print(f"{namespace.value} API key: {_mask(key)}")
        finally:
            await preferences.storage.close()

    asyncio.run(_run())


@preferences_app.command("set-provider")
def set_provider(kind: ProviderKind = typer.Argument(..., help="Embedding provider to use")) -> None:
    """Select the embedding provider."""
    settings = _load_settings()

    async def _run() -> None:
        preferences = await _open_preferences(settings)
        try:
            await preferences.set_embedding_provider(kind)
        finally:
            await preferences.storage.close()

    asyncio.run(_run())
    console.print(f"[green]Embedding provider set to {kind.value}[/green]")


@preferences_app.command("set-key")
def set_key(
    namespace: CredentialNamespace = typer.Argument(..., help="Key namespace (gemini is used for Google embeddings)"),
    key: str = typer.Option(..., "--key", prompt=True, hide_input=True, help="API key"),
) -> None:
    """Store an API key."""
    settings = _load_settings()

    async def _run() -> None:
        preferences = await _open_preferences(settings)
        try:
            await preferences.save_api_key(namespace, key)
        finally:
            await preferences.storage.close()

    try:
        asyncio.run(_run())
    except ClassroomAssistantError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)
    console.print(f"[green]{namespace.value} API key saved[/green]")


@preferences_app.command("delete-key")
def delete_key(namespace: CredentialNamespace = typer.Argument(..., help="Key namespace")) -> None:
    """Delete a stored API key."""
    settings = _load_settings()

    async def _run() -> bool:
        preferences = await _open_preferences(settings)
        try:
            return await preferences.delete_api_key(namespace)
        finally:
            await preferences.storage.close()

    if asyncio.run(_run()):
        console.print(f"[green]{namespace.value} API key deleted[/green]")
    else:
        console.print(f"[yellow]No {namespace.value} API key stored[/yellow]")


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from . import __version__
    console.print(f"Classroom Assistant version {__version__}")


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
