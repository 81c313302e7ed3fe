"""Development server command."""

import typer
import uvicorn

from src.shopkart.runtime.context import get_config

from .utils import console


def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address"),
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    app_config = get_config().app
    host = host or app_config.host
    port = port or app_config.port

    console.print(f"[blue]Server will be available at:[/blue] http://{host}:{port}")
    console.print("[dim]Press Ctrl+C to stop the server[/dim]")

    uvicorn.run(
        "src.shopkart.api.http.app:app",
        host=host,
        port=port,
        reload=reload,
        access_log=False,
    )
