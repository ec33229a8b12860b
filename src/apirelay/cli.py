"""Command line interface for apirelay."""

import asyncio
from typing import Optional

import httpx
import typer
from rich.console import Console
from rich.table import Table

from .config import settings
from .routes import ROUTES
from .services.prober import probe_upstreams

app = typer.Typer(help="apirelay - prefix-based reverse proxy for API hosts")
console = Console()


def setup_logging(debug: bool = False) -> None:
    """Set up structured logging."""
    from .app import configure_logging

    app_settings = settings.model_copy(update={"log_level": "DEBUG"}) if debug else settings
    configure_logging(app_settings, console=True)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Host to bind to"),
    port: Optional[int] = typer.Option(None, "--port", help="Port to bind to"),
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Start the proxy server."""
    setup_logging(debug)

    import uvicorn

    host = host or settings.api_host
    port = port or settings.api_port
    console.print(f"[bold blue]Starting apirelay on {host}:{port}[/bold blue]")
    console.print(f"   Routes: {len(ROUTES)}")
    console.print(f"   Health: http://{host}:{port}/health")

    uvicorn.run(
        "apirelay.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level="debug" if debug else settings.log_level.lower(),
    )


@app.command()
def routes() -> None:
    """List the route table in matching order."""
    table = Table(title="Routes")
    table.add_column("Prefix", style="cyan")
    table.add_column("Upstream", style="green")
    table.add_column("Auth", style="yellow")

    for route in ROUTES:
        table.add_row(route.prefix, route.upstream_base, route.auth)

    console.print(table)


@app.command()
def probe(
    timeout: float = typer.Option(
        settings.probe_timeout, "--timeout", min=0.1, help="Per-probe timeout in seconds"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Probe every upstream with a HEAD request."""
    setup_logging(debug)

    async def _probe():
        async with httpx.AsyncClient(follow_redirects=False) as client:
            return await probe_upstreams(client, timeout=timeout)

    results = asyncio.run(_probe())

    table = Table(title="Upstream Status")
    table.add_column("Name", style="cyan")
    table.add_column("Target")
    table.add_column("Status")
    table.add_column("Latency", justify="right")

    for result in results:
        if result.ok:
            status = f"[green]✓ {result.status}[/green]"
            latency = f"{result.latency_ms}ms"
        elif result.status is not None:
            status = f"[red]✗ {result.status}[/red]"
            latency = f"{result.latency_ms}ms"
        else:
            status = "[red]✗ unreachable[/red]"
            latency = "-"
        table.add_row(result.name, result.target, status, latency)

    console.print(table)

    reachable = sum(1 for result in results if result.ok)
    console.print(f"{reachable}/{len(results)} upstreams reachable")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
