"""CLI for the Dynamic Alarm System.

Developer CLI to run the HTTP server, plan an alarm offline through the same
service code path the API uses, and check a running server's health.
"""

import json
import sys

import httpx
import typer
import uvicorn
from loguru import logger
from rich.console import Console
from rich.json import JSON
from rich.panel import Panel
from rich.text import Text

from dynalarm.core.settings import settings
from dynalarm.schemas.alarm import AlarmResponse
from dynalarm.services.alarm_planner import make_rng, plan_alarm
from dynalarm.sleep.errors import AlarmError

console = Console()

app = typer.Typer(
    name="dynalarm",
    help="Dynamic Alarm System CLI",
    add_completion=False,
)

DEFAULT_HOST = settings.host
DEFAULT_PORT = settings.port


def _setup_logging(debug: bool = False) -> None:
    """Set up console logging for CLI commands."""
    logger.remove()
    log_level = "DEBUG" if debug else "WARNING"
    logger.add(
        sys.stderr,
        format=(
            "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{file.name}</cyan>:<cyan>{line}</cyan> - "
            "<level>{message}</level>"
        ),
        level=log_level,
        colorize=True,
    )


@app.command()
def server(
    host: str = typer.Option(DEFAULT_HOST, "--host", "-h", help="Host to bind to"),
    port: int = typer.Option(DEFAULT_PORT, "--port", "-p", help="Port to bind to"),
    reload: bool = typer.Option(False, "--reload", help="Enable auto-reload"),
) -> None:
    """Run the FastAPI server."""
    logger.info(f"Starting FastAPI server on {host}:{port} (reload={reload})")
    uvicorn.run("dynalarm.main:app", host=host, port=port, reload=reload)


@app.command()
def plan(
    soft: str = typer.Option(..., "--soft", "-s", help="Soft limit (ISO 8601)"),
    hard: str = typer.Option(..., "--hard", "-H", help="Hard limit (ISO 8601)"),
    seed: int | None = typer.Option(None, "--seed", help="Seed for a reproducible plan"),
    pretty: bool = typer.Option(True, "--pretty/--raw", help="Pretty-print JSON output"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Plan an alarm offline and print the API response payload."""
    _setup_logging(debug)
    rng = make_rng(seed if seed is not None else settings.random_seed)

    try:
        alarm_plan = plan_alarm(soft, hard, rng, max_array_size=settings.max_array_size)
    except AlarmError as e:
        console.print(
            Panel(
                Text(e.message, style="bold red"),
                title=e.code,
                border_style="red",
            )
        )
        raise typer.Exit(code=1) from e

    payload = AlarmResponse.from_plan(alarm_plan).to_wire()
    if pretty:
        console.print(JSON(json.dumps(payload)))
    else:
        typer.echo(json.dumps(payload))


@app.command()
def check(
    url: str = typer.Option(f"http://localhost:{DEFAULT_PORT}", "--url", help="Base URL of a running server"),
) -> None:
    """Verify a running server answers its health check."""
    try:
        response = httpx.get(f"{url}/health", timeout=2.0)
        response.raise_for_status()
    except httpx.HTTPStatusError as e:
        console.print(f"[red]Server at {url} returned error: {e.response.status_code}[/red]")
        raise typer.Exit(code=1) from e
    except httpx.RequestError as e:
        console.print(f"[red]Server not reachable at {url}: {e}[/red]")
        raise typer.Exit(code=1) from e

    body = response.json()
    console.print(
        Panel(
            Text(body.get("message", "OK"), style="bold green"),
            subtitle=body.get("timestamp", {}).get("utc", ""),
            border_style="green",
        )
    )


if __name__ == "__main__":
    app()
