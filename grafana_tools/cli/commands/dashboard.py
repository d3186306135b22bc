"""
Dashboard Commands.

Pull a dashboard from Grafana into a local JSON file, or push a local
JSON file to Grafana.
"""

import asyncio
import traceback
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from grafana_tools.client import GrafanaClient
from grafana_tools.core.config import ClientConfig, build_client_config
from grafana_tools.files import resolve_dashboard_path
from grafana_tools.services.dashboard import DashboardService

console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)

API_KEY_HELP = "The API key to use when accessing the Grafana API"
HOSTNAME_HELP = "The hostname Grafana runs on (default from application.yaml)"
SCHEME_HELP = "URL scheme, http or https (default from application.yaml)"


def _report_error(error: Exception) -> None:
    """Print an error and its traceback to stderr."""
    err_console.print(str(error), style="red", markup=False, highlight=False)
    stack = traceback.format_exception(type(error), error, error.__traceback__)[:-1]
    if stack:
        err_console.print("".join(stack).rstrip(), style="dim", markup=False, highlight=False)


def pull(
    name: str = typer.Argument(..., help="Slug of the dashboard to pull"),
    file: str = typer.Argument(..., help="Local file to save the dashboard JSON to"),
    api_key: Optional[str] = typer.Option(
        None, "--api-key", "-a", envvar="GRAFANA_API_KEY", help=API_KEY_HELP,
    ),
    hostname: Optional[str] = typer.Option(None, "--hostname", "-H", help=HOSTNAME_HELP),
    scheme: Optional[str] = typer.Option(None, "--scheme", help=SCHEME_HELP),
) -> None:
    """
    Pull down JSON for an existing dashboard and save it.

    Examples:
        grafana pull home-dashboard dashboards/home
        grafana pull home-dashboard home.json -H grafana.example.com --scheme https
    """
    path = resolve_dashboard_path(file)

    console.print(f'Pulling dashboard "{name}" from Grafana', style="cyan underline", markup=False, highlight=False)
    console.print(f'Will save to local file: "{path}"', markup=False, highlight=False)

    try:
        config = build_client_config(api_key=api_key, hostname=hostname, scheme=scheme)
        asyncio.run(_pull(config, name, path))
    except Exception as e:
        _report_error(e)
        raise typer.Exit(1)

    console.print("Pulled dashboard successfully", style="green")


async def _pull(config: ClientConfig, name: str, path: Path) -> None:
    """Async implementation of pull command."""
    async with GrafanaClient(config) as client:
        await DashboardService(client).pull(name, path)


def push(
    name: str = typer.Argument(..., help="Slug of the dashboard to push"),
    file: str = typer.Argument(..., help="Local file to read the dashboard JSON from"),
    api_key: Optional[str] = typer.Option(
        None, "--api-key", "-a", envvar="GRAFANA_API_KEY", help=API_KEY_HELP,
    ),
    hostname: Optional[str] = typer.Option(None, "--hostname", "-H", help=HOSTNAME_HELP),
    scheme: Optional[str] = typer.Option(None, "--scheme", help=SCHEME_HELP),
    overwrite: bool = typer.Option(
        False, "--overwrite", "-o", help="Whether to overwrite any changes on the server",
    ),
) -> None:
    """
    Push local JSON to an existing dashboard.

    Examples:
        grafana push home-dashboard dashboards/home
        grafana push home-dashboard home.json --overwrite
    """
    path = resolve_dashboard_path(file)

    console.print(f'Pushing dashboard "{name}" to Grafana', style="cyan underline", markup=False, highlight=False)
    console.print(f'Will source from local file: "{path}"', markup=False, highlight=False)

    try:
        config = build_client_config(api_key=api_key, hostname=hostname, scheme=scheme)
        asyncio.run(_push(config, path, overwrite))
    except Exception as e:
        _report_error(e)
        raise typer.Exit(1)

    console.print("Pushed dashboard successfully", style="green")


async def _push(config: ClientConfig, path: Path, overwrite: bool) -> None:
    """Async implementation of push command."""
    async with GrafanaClient(config) as client:
        await DashboardService(client).push(path, overwrite)
