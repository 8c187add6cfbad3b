"""
Snapshot commands: show
"""

import json

import typer
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from instrument.core.canonical import canonical_json_str
from instrument.core.errors import InstrumentError
from instrument.core.state import LiftedState
from instrument.lifted import operations
from instrument.snapshot import LiftedSnapshot, compute_snapshot_hash, read_snapshot_document

app = typer.Typer()
console = Console()


def history_table(title: str, lifted: LiftedState) -> Table:
    """Rich table of staged positions with skip flags, states and errors."""
    table = Table(title=title)
    table.add_column("Pos", style="cyan", justify="right")
    table.add_column("Id", style="cyan", justify="right")
    table.add_column("Type", style="green")
    table.add_column("Skipped", style="yellow")
    table.add_column("State")
    table.add_column("Error", style="red")

    for position, action_id in enumerate(lifted.index.staged):
        entry = lifted.computed_states[position] if position < len(lifted.computed_states) else None
        marker = " ◀" if position == lifted.current_state_index else ""
        table.add_row(
            f"{position}{marker}",
            str(action_id),
            str(lifted.log.get(action_id).action.get("type")),
            "yes" if lifted.index.is_skipped(action_id) else "",
            canonical_json_str(entry.state) if entry else "-",
            (entry.error or "") if entry else "",
        )
    return table


def adopt(snapshot: dict) -> LiftedState:
    """LiftedState holding the snapshot as-is (no reducer, no recompute)."""
    lifted = LiftedState()
    operations.import_state(lifted, LiftedSnapshot.parse(snapshot))
    return lifted


@app.command()
def show(
    path: str = typer.Argument(..., help="Path to snapshot JSON file"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Show the history recorded in a snapshot.

    The snapshot hash covers the file contents as stored.

    Examples:
        instrument snapshot show history.json
        instrument snapshot show history.json --json
    """
    try:
        document = read_snapshot_document(path)
        lifted = adopt(document)
        snapshot_hash = compute_snapshot_hash(document)

        if json_output:
            output = {
                "staged_action_ids": lifted.index.staged,
                "skipped_action_ids": lifted.index.skipped,
                "current_state_index": lifted.current_state_index,
                "visible_state": lifted.visible_state(),
                "errors": {
                    str(lifted.index.staged[i]): entry.error
                    for i, entry in enumerate(lifted.computed_states)
                    if entry.error
                },
                "snapshot_hash": snapshot_hash,
            }
            print(canonical_json_str(output, indent=2))
        else:
            console.print(history_table(f"Snapshot: {path}", lifted))
            console.print(f"  Current index: [cyan]{lifted.current_state_index}[/cyan]")
            console.print(f"  Snapshot hash: [yellow]{snapshot_hash}[/yellow]")
            console.print("\n[bold]Visible state:[/bold]")
            console.print(Syntax(json.dumps(lifted.visible_state(), indent=2), "json", theme="monokai"))

        raise typer.Exit(0)

    except FileNotFoundError:
        if json_output:
            print(json.dumps({"error": "Snapshot file not found", "path": path}))
        else:
            console.print(f"[red]Error: Snapshot file not found:[/red] {path}")
        raise typer.Exit(2)
    except (InstrumentError, ValueError) as e:
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)
