"""User management CLI commands."""

import typer
from rich.table import Table

from layered_users.api.http.app_data import open_user_controller
from layered_users.cli.utils import console, load_dependencies
from layered_users.runtime.db import MAX_ROW_ID

# Create the users subcommand app
users_app = typer.Typer(help="Create, inspect and delete users")


@users_app.command("create")
def create_user(
    username: str = typer.Argument(..., help="Username for the new user"),
    email: str = typer.Option(..., "--email", "-e", help="Email address"),
) -> None:
    """Create a new user."""
    app_deps = load_dependencies()
    try:
        with open_user_controller(app_deps) as controller:
            user = controller.create_user(username, email)
    except Exception as e:
        console.print(f"[red]Failed to create user: {e}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        app_deps.close()

    console.print(f"[green]Created user '{user.username}' with id {user.id}[/green]")


@users_app.command("get")
def get_user(
    user_id: int = typer.Argument(..., min=1, max=MAX_ROW_ID, help="ID of the user to show"),
) -> None:
    """Show a single user."""
    app_deps = load_dependencies()
    try:
        with open_user_controller(app_deps) as controller:
            user = controller.get_user(user_id)
    except Exception as e:
        console.print(f"[red]Failed to load user: {e}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        app_deps.close()

    if user is None:
        console.print(f"[yellow]User {user_id} not found[/yellow]")
        raise typer.Exit(code=1)

    console.print(f"{user.id}\t{user.username}\t{user.email}")


@users_app.command("list")
def list_users() -> None:
    """List all users."""
    app_deps = load_dependencies()
    try:
        with open_user_controller(app_deps) as controller:
            users = controller.get_all_users()
    except Exception as e:
        console.print(f"[red]Failed to list users: {e}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        app_deps.close()

    if not users:
        console.print("[yellow]No users found[/yellow]")
        return

    table = Table(title="Users")
    table.add_column("ID", style="cyan")
    table.add_column("Username", style="green")
    table.add_column("Email", style="blue")
    for user in users:
        table.add_row(str(user.id), user.username, user.email)

    console.print(table)
    console.print(f"\n[green]Found {len(users)} users[/green]")


@users_app.command("delete")
def delete_user(
    user_id: int = typer.Argument(..., min=1, max=MAX_ROW_ID, help="ID of the user to delete"),
) -> None:
    """Delete a user. Unknown ids are ignored."""
    app_deps = load_dependencies()
    try:
        with open_user_controller(app_deps) as controller:
            controller.delete_user(user_id)
    except Exception as e:
        console.print(f"[red]Failed to delete user: {e}[/red]")
        raise typer.Exit(code=1) from e
    finally:
        app_deps.close()

    console.print(f"[green]Deleted user {user_id}[/green]")
