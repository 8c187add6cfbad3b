#!/usr/bin/env python3
"""
Instrument CLI - time-travel history tooling

Main entrypoint for the instrument command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from instrument.config import InstrumentConfig
from instrument.logging_config import setup_logging
from instrument.metrics import start_metrics_server

from cli.commands import history, replay, snapshot

app = typer.Typer(
    name="instrument",
    help="Time-travel debugging tools for reducer-driven stores",
    add_completion=False,
)

console = Console()

app.add_typer(snapshot.app, name="snapshot", help="Snapshot inspection")
app.add_typer(history.app, name="history", help="Time-travel operations on snapshots")

app.command("replay")(replay.replay_command)


@app.callback()
def configure():
    """Configure logging and metrics from the environment."""
    config = InstrumentConfig.from_env()
    setup_logging(config)
    start_metrics_server(enabled=config.metrics_enabled, port=config.metrics_port)


@app.command()
def version():
    """Show version information."""
    from cli import __version__
    from instrument import __version__ as engine_version

    table = Table(show_header=False, box=None)
    table.add_row("[bold]Instrument CLI[/bold]", f"v{__version__}")
    table.add_row("Engine", f"v{engine_version}")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
