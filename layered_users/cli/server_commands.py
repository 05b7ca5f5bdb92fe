"""Command that runs the HTTP API."""

import typer
import uvicorn

from layered_users.runtime.settings import get_settings


def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address (default: HOST setting)"),
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port (default: PORT setting)"),
    reload: bool = typer.Option(False, "--reload", help="Restart on code changes"),
) -> None:
    """Run the user API with uvicorn."""
    settings = get_settings()
    uvicorn.run(
        "layered_users.api.http.app:create_app",
        factory=True,
        host=host if host is not None else settings.host,
        port=port if port is not None else settings.port,
        reload=reload,
        access_log=False,  # Request logging middleware handles this
    )
