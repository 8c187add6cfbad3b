"""
Replay command: recompute a snapshot under a reducer
"""

import json

import typer
from rich.console import Console

from instrument.core.actions import ActionCreators
from instrument.core.canonical import canonical_json_str
from instrument.core.errors import InstrumentError
from instrument.lifted import InstrumentedStore, instrument
from instrument.snapshot import compute_snapshot_hash, load_snapshot
from instrument.store import create_store

from ..loader import load_reducer
from .snapshot import history_table

console = Console()


def replay_snapshot(path: str, reducer_ref: str) -> InstrumentedStore:
    """Fresh instrumented store that has imported (and recomputed) the snapshot."""
    store = create_store(load_reducer(reducer_ref), None, instrument())
    store.lifted_store.dispatch(ActionCreators.import_state(load_snapshot(path)))
    return store


def replay_command(
    path: str = typer.Argument(..., help="Path to snapshot JSON file"),
    reducer: str = typer.Option(..., "--reducer", "-r", help="Reducer as module:function"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Replay a snapshot's history under a reducer.

    Examples:
        instrument replay history.json --reducer app.reducers:counter
        instrument replay history.json -r app.reducers:counter --json
    """
    try:
        store = replay_snapshot(path, reducer)
        lifted = store.get_lifted_state()
        exported = store.export_state()
        errors = sum(1 for entry in lifted.computed_states if entry.error)

        if json_output:
            output = {
                "success": errors == 0,
                "positions_replayed": len(lifted.computed_states),
                "computed_states": exported["computedStates"],
                "visible_state": store.get_state(),
                "errors": errors,
                "snapshot_hash": compute_snapshot_hash(exported),
            }
            print(canonical_json_str(output, indent=2))
        else:
            console.print("[bold]Replaying snapshot...[/bold]")
            console.print(history_table(f"Replay: {path}", lifted))
            if errors:
                console.print(f"[red]✗ {errors} positions in error[/red]")
            else:
                console.print(f"[green]✓ Replayed {len(lifted.computed_states)} positions successfully[/green]")
            console.print(f"  Visible state: [cyan]{canonical_json_str(store.get_state())}[/cyan]")

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
