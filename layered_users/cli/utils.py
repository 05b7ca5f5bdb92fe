"""Helpers shared by the CLI command groups."""

import typer
from rich.console import Console

from layered_users.api.http.app_data import ApplicationDependencies, build_dependencies
from layered_users.runtime.logging_config import configure_logging
from layered_users.runtime.settings import get_settings

console = Console()


def load_dependencies() -> ApplicationDependencies:
    """Read settings from the environment and build the storage backend."""
    settings = get_settings()
    configure_logging(settings)
    try:
        settings.validate_runtime()
    except ValueError as e:
        console.print(f"[red]Invalid configuration: {e}[/red]")
        raise typer.Exit(code=1) from e

    if not settings.uses_database:
        console.print(
            "[yellow]DATABASE_URL is not set; changes are kept in memory "
            "and discarded when the command exits[/yellow]"
        )
    return build_dependencies(settings)
