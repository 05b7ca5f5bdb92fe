"""Database CLI commands."""

import typer

from layered_users.cli.utils import console, load_dependencies

db_app = typer.Typer(help="Manage the user database")


@db_app.command("init")
def init_db() -> None:
    """Create the database tables for the configured DATABASE_URL."""
    app_deps = load_dependencies()
    try:
        if app_deps.database is None:
            console.print("[red]DATABASE_URL must be set to initialize a database[/red]")
            raise typer.Exit(code=1)
        app_deps.database.create_all()
    finally:
        app_deps.close()

    console.print("[green]Database initialized[/green]")
