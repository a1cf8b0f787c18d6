"""Editor CLI commands."""

import click

from cli.utils.connection import CliContext, emit_result, handle_bridge_errors, run_async
from services.tools.connect import connect as connect_tool
from services.tools.describe_actor import describe_actor
from services.tools.editor_command import editor_command


@click.command("connect")
@handle_bridge_errors
def connect():
    """Check that the editor's Remote Control API is reachable.

    \b
    Examples:
        ue5-bridge connect
        ue5-bridge --host 192.168.1.20 --port 30010 connect
    """
    result = run_async(connect_tool(CliContext()))
    emit_result(result)


@click.command("command")
@click.argument("name")
@handle_bridge_errors
def command(name: str):
    """Run a named editor command.

    \b
    Available commands:
        play, simulate, stop, save_current_level, save_all,
        undo, redo, select_none, delete_selected, duplicate_selected

    \b
    Examples:
        ue5-bridge command play
        ue5-bridge command save_all
    """
    result = run_async(editor_command(CliContext(), command=name))
    emit_result(result)


@click.command("describe")
@click.argument("actor_path")
@handle_bridge_errors
def describe(actor_path: str):
    """Dump an actor's properties and functions.

    \b
    Examples:
        ue5-bridge describe "/Game/Maps/Main.Main:PersistentLevel.Cube_1"
    """
    result = run_async(describe_actor(CliContext(), actor_path=actor_path))
    emit_result(result)
