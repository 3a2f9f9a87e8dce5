"""Main CLI application using Typer."""
import asyncio
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..chat import ChatController
from ..llm import PROVIDERS, ChatMessage, get_provider_info, supports_model
from ..logging_config import setup_logging
from .providers import LOG_LEVEL_ENV, SETTINGS_PATH_ENV, StoreBackend, get_controller, get_store

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="aichat",
    help="Terminal chat panel for OpenAI-compatible completion APIs",
    no_args_is_help=True,
    add_completion=True,
)

settings_app = typer.Typer(
    help="Show or change the persisted provider, model and API key",
    no_args_is_help=True,
)
app.add_typer(settings_app, name="settings")

# Console for rich output
console = Console()

STORE_OPTION = typer.Option(
    StoreBackend.JSON,
    "--store",
    "-s",
    help="Settings store: json (persistent) or memory (session only)"
)
SETTINGS_PATH_OPTION = typer.Option(
    None,
    "--settings-path",
    "-p",
    envvar=SETTINGS_PATH_ENV,
    help="Settings file for the json store"
)
LOG_LEVEL_OPTION = typer.Option(
    "warning",
    "--log-level",
    "-l",
    envvar=LOG_LEVEL_ENV,
    help="Log level: debug, info, warning or error"
)


@app.command()
def chat(
    store: StoreBackend = STORE_OPTION,
    settings_path: Path | None = SETTINGS_PATH_OPTION,
    log_level: str = LOG_LEVEL_OPTION,
):
    """Open the interactive chat panel."""
    from ..ui import run_chat_panel

    setup_logging(log_level, tui=True)
    asyncio.run(run_chat_panel(get_store(store, settings_path)))


@app.command()
def ask(
    words: list[str] = typer.Argument(..., help="Message to send"),
    store: StoreBackend = STORE_OPTION,
    settings_path: Path | None = SETTINGS_PATH_OPTION,
    log_level: str = LOG_LEVEL_OPTION,
):
    """Send a single message and print the reply."""
    setup_logging(log_level)
    controller = get_controller(store, settings_path)
    settings = controller.view_model.settings

    if not settings.has_api_key:
        console.print("[red]Error: no API key configured[/red]")
        console.print("[dim]Set one with: aichat settings set --api-key <key>[/dim]")
        raise typer.Exit(code=1)

    message = " ".join(words)
    if not message.strip():
        console.print("[yellow]Nothing to send.[/yellow]")
        raise typer.Exit(code=1)

    async def _ask() -> ChatMessage | None:
        try:
            return await controller.send_message(message)
        finally:
            controller.close()

    reply = asyncio.run(_ask())

    if reply is None:
        error = controller.view_model.error or "no reply received"
        console.print(Text(f"Error: {error}", style="red"))
        raise typer.Exit(code=1)

    console.print(Panel(
        Text(reply.content),
        title=f"{controller.view_model.provider_name} / {settings.model_id}",
        title_align="left",
        border_style="blue",
    ))


@app.command()
def providers():
    """List the supported providers and their models."""
    table = Table(title="Providers")
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Models")
    table.add_column("Endpoint", style="dim")

    for provider in PROVIDERS:
        models = [f"{provider.models[0]} (default)", *provider.models[1:]]
        table.add_row(provider.id, provider.name, "\n".join(models), provider.base_url)

    console.print(table)


@settings_app.command("show")
def settings_show(
    store: StoreBackend = STORE_OPTION,
    settings_path: Path | None = SETTINGS_PATH_OPTION,
):
    """Show the current settings (API key masked)."""
    settings = get_store(store, settings_path).load()

    table = Table(title="Settings", show_header=False)
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("Provider", settings.provider_id)
    table.add_row("Model", settings.model_id)
    table.add_row("API key", settings.masked_api_key() or "[dim]not set[/dim]")
    console.print(table)


@settings_app.command("set")
def settings_set(
    provider: str | None = typer.Option(None, "--provider", help="Provider id"),
    model: str | None = typer.Option(
        None,
        "--model",
        help="Model id (defaults to the provider's first model when the provider changes)"
    ),
    api_key: str | None = typer.Option(None, "--api-key", help="API key for the provider"),
    store: StoreBackend = STORE_OPTION,
    settings_path: Path | None = SETTINGS_PATH_OPTION,
    log_level: str = LOG_LEVEL_OPTION,
):
    """Change the persisted settings."""
    setup_logging(log_level)
    controller = ChatController(get_store(store, settings_path))
    current = controller.load_settings()
    updated = current

    if provider is not None and provider != current.provider_id:
        if get_provider_info(provider) is None:
            console.print(f"[red]Error: Unsupported AI provider: {provider}[/red]")
            raise typer.Exit(code=1)
        updated = updated.with_provider(provider)

    if model is not None:
        if not supports_model(updated.provider_id, model):
            console.print(
                f"[red]Error: model {model} is not offered by {updated.provider_id}[/red]"
            )
            raise typer.Exit(code=1)
        updated = updated.model_copy(update={"model_id": model})

    if api_key is not None:
        updated = updated.model_copy(update={"api_key": api_key})

    if updated == current:
        console.print("[dim]Nothing to change.[/dim]")
        return

    try:
        controller.save_settings(updated)
    except OSError as e:
        console.print(f"[red]Error: could not save settings: {e}[/red]")
        raise typer.Exit(code=1)

    console.print(
        f"[green]Saved:[/green] provider={updated.provider_id} model={updated.model_id}"
    )


if __name__ == "__main__":
    app()
