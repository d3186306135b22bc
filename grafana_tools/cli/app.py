"""
grafana-tools CLI.

Command-line client for moving dashboard JSON between Grafana and local files.
Built with Typer for type-safe commands and Rich for formatted output.

Usage:
    grafana --help                                  # Show help
    grafana pull <slug> <file>                      # Save a dashboard locally
    grafana push <slug> <file> [--overwrite]        # Publish a local dashboard

Options:
    --verbose, -v     Enable verbose output (INFO level logging)
    --debug, -d       Enable debug mode (DEBUG level logging)
    --version         Show the version and exit
"""

import typer
from rich.console import Console

from grafana_tools import __version__
from grafana_tools.cli.commands import pull, push
from grafana_tools.core.logging import setup_logging

app = typer.Typer(
    name="grafana",
    help="Grafana dashboard tools - pull dashboards to JSON files and push them back.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

console = Console()

app.command("pull")(pull)
app.command("push")(push)


def _version_callback(value: bool) -> None:
    if value:
        console.print(__version__)
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose output (INFO level logging)",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        "-d",
        help="Enable debug mode (DEBUG level logging)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """
    Grafana dashboard tools.

    Pull dashboard JSON from Grafana into local files and push it back.
    """
    if debug:
        setup_logging(level="DEBUG", format_type="console")
        console.print("[dim]Debug mode enabled[/dim]")
    elif verbose:
        setup_logging(level="INFO", format_type="console")
    else:
        setup_logging()


def run() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    run()
