"""
History commands: apply a time-travel operation to a snapshot
"""

import json
from enum import Enum
from typing import Optional

import typer
from rich.console import Console

from instrument.core.actions import ActionCreators
from instrument.core.errors import InstrumentError
from instrument.snapshot import save_snapshot, snapshot_to_json

from .replay import replay_snapshot

app = typer.Typer()
console = Console()


class Operation(str, Enum):
    toggle = "toggle"
    sweep = "sweep"
    commit = "commit"
    rollback = "rollback"
    reset = "reset"
    jump = "jump"
    jump_action = "jump-action"


NEEDS_ARG = {Operation.toggle, Operation.jump, Operation.jump_action}


def monitor_action(operation: Operation, arg: Optional[int]) -> dict:
    if operation in NEEDS_ARG and arg is None:
        raise typer.BadParameter(f"'{operation.value}' needs --arg")
    if operation is Operation.toggle:
        return ActionCreators.toggle_action(arg)
    if operation is Operation.jump:
        return ActionCreators.jump_to_state(arg)
    if operation is Operation.jump_action:
        return ActionCreators.jump_to_action(arg)
    if operation is Operation.sweep:
        return ActionCreators.sweep()
    if operation is Operation.commit:
        return ActionCreators.commit()
    if operation is Operation.rollback:
        return ActionCreators.rollback()
    return ActionCreators.reset()


@app.command("apply")
def apply_operation(
    operation: Operation = typer.Argument(..., help="Operation to apply"),
    path: str = typer.Argument(..., help="Path to snapshot JSON file"),
    reducer: str = typer.Option(..., "--reducer", "-r", help="Reducer as module:function"),
    arg: Optional[int] = typer.Option(None, "--arg", "-a", help="Action id (toggle, jump-action) or state index (jump)"),
    out: Optional[str] = typer.Option(None, "--out", "-o", help="Write resulting snapshot here (default: stdout)"),
):
    """
    Apply a time-travel operation and emit the resulting snapshot.

    Examples:
        instrument history apply toggle history.json -r app.reducers:counter --arg 2
        instrument history apply sweep history.json -r app.reducers:counter -o swept.json
    """
    try:
        action = monitor_action(operation, arg)
        store = replay_snapshot(path, reducer)
        store.lifted_store.dispatch(action)
        exported = store.export_state()

        if out:
            written = save_snapshot(out, exported)
            console.print(f"[green]✓ {operation.value} applied[/green], snapshot written to {written}")
        else:
            print(snapshot_to_json(exported, indent=2))

        raise typer.Exit(0)

    except FileNotFoundError:
        console.print(f"[red]Error: Snapshot file not found:[/red] {path}")
        raise typer.Exit(2)
    except (InstrumentError, ValueError) as e:
        print(json.dumps({"error": str(e)}))
        raise typer.Exit(2)
