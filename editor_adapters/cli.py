"""editor-adapters CLI — drive the adapters from a terminal.

Usage:
    editor-adapters notify MESSAGE       Show a notification through the active backend
    editor-adapters select A B C         Pick one item
    editor-adapters multiselect A B C    Pick several items
    editor-adapters backends             Show active backends and plugin availability
    editor-adapters config show          Print the current configuration
    editor-adapters config init          Write a default config file
    editor-adapters config set KEY VAL   Update one config value
"""

import typer
from rich.console import Console
from rich.table import Table

import editor_adapters
from editor_adapters.config import (
    AdaptersConfig,
    get_config_value,
    load_config,
    save_config,
    set_config_value,
)
from editor_adapters.logging_setup import setup_logging
from editor_adapters.selector import InvalidBackend

app = typer.Typer(help="editor-adapters: notify and select through whichever editor plugin is available")
config_app = typer.Typer(help="Configuration management")
app.add_typer(config_app, name="config")
console = Console()


def _bootstrap() -> AdaptersConfig:
    """Load config, start logging and apply backend preferences."""
    config = load_config()
    setup_logging(config)
    for error in config.validate():
        console.print(f"[yellow]Config warning:[/yellow] {error}")
    editor_adapters.setup(config)
    return config


def _force(adapter, backend: str | None) -> None:
    if not backend:
        return
    try:
        adapter.set_backend(backend)
    except InvalidBackend as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(2)


@app.command()
def notify(
    message: str = typer.Argument(help="Message to display"),
    level: str = typer.Option("info", "--level", "-l", help="trace, debug, info, warn or error"),
    title: str = typer.Option(None, "--title", "-t", help="Notification title"),
    backend: str = typer.Option(None, "--backend", "-b", help="Force a backend (noice, snacks, native)"),
):
    """Show a notification through the active backend."""
    _bootstrap()
    adapter = editor_adapters.notification()
    _force(adapter, backend)

    result = adapter.notify(message, level, {"title": title} if title else {})
    if result is None or not result.ok:
        raise typer.Exit(1)


@app.command()
def select(
    items: list[str] = typer.Argument(help="Items to choose from"),
    prompt: str = typer.Option("Select", "--prompt", "-p", help="Prompt text"),
    backend: str = typer.Option(None, "--backend", "-b", help="Force a backend (snacks, telescope, native)"),
):
    """Pick one item and print it."""
    _bootstrap()
    adapter = editor_adapters.picker()
    _force(adapter, backend)

    chosen: list = []
    adapter.select(items, {"prompt": prompt}, chosen.append)
    if not chosen or chosen[0] is None:
        console.print("[yellow]No selection[/yellow]")
        raise typer.Exit(1)
    print(chosen[0])


@app.command()
def multiselect(
    items: list[str] = typer.Argument(help="Items to choose from"),
    prompt: str = typer.Option("Select", "--prompt", "-p", help="Prompt text"),
    backend: str = typer.Option(None, "--backend", "-b", help="Force a backend (snacks, telescope, native)"),
):
    """Pick any number of items and print one per line."""
    _bootstrap()
    adapter = editor_adapters.picker()
    _force(adapter, backend)

    chosen: list = []
    adapter.multiselect(items, {"prompt": prompt}, chosen.append)
    if not chosen or not chosen[0]:
        console.print("[yellow]No selection[/yellow]")
        raise typer.Exit(1)
    for item in chosen[0]:
        print(item)


@app.command()
def backends():
    """Show the active backend and plugin availability for each concern."""
    _bootstrap()

    table = Table(title="Backends")
    table.add_column("Concern", style="bold")
    table.add_column("Backend")
    table.add_column("Available")
    table.add_column("Active")

    for concern, adapter in (
        ("notification", editor_adapters.notification()),
        ("picker", editor_adapters.picker()),
    ):
        active = adapter.get_backend()
        for backend_id, available in adapter.selector.availability().items():
            table.add_row(
                concern,
                backend_id,
                "[green]yes[/green]" if available else "[dim]no[/dim]",
                "[bold green]*[/bold green]" if backend_id == active else "",
            )

    console.print(table)


@config_app.command("show")
def config_show():
    """Print the current configuration."""
    config = load_config()
    for key in ("notification_backend", "picker_backend", "log_level", "log_file"):
        console.print(f"{key} = {get_config_value(config, key)!r}", highlight=False)


@config_app.command("init")
def config_init():
    """Write a default config file."""
    path = save_config(AdaptersConfig())
    console.print(f"[green]✓[/green] Config written to {path}")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(help="Config key"),
    value: str = typer.Argument(help="New value"),
):
    """Update one config value."""
    config = load_config()
    try:
        set_config_value(config, key, value)
    except KeyError as e:
        console.print(f"[red]{e.args[0]}[/red]")
        raise typer.Exit(1)

    errors = config.validate()
    if errors:
        for error in errors:
            console.print(f"[red]{error}[/red]")
        raise typer.Exit(1)

    path = save_config(config)
    console.print(f"[green]✓[/green] {key} = {value} ({path})")


def main():
    app()


if __name__ == "__main__":
    main()
