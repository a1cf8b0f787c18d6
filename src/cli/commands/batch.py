"""Batch CLI command."""

import json
import sys

import click

from cli.utils.connection import CliContext, emit_result, handle_bridge_errors, run_async
from cli.utils.output import print_error
from services.tools.batch import batch as batch_tool


@click.command("batch")
@click.argument("operations_file", type=click.File("r"))
@handle_bridge_errors
def batch(operations_file):
    """Send a JSON list of operations as one batch request.

    Use '-' to read the operations from stdin.

    \b
    Example file:
        [
          {"type": "call", "object_path": "/Game/Map.Map:PersistentLevel.Cube_1",
           "function_name": "SetActorHiddenInGame", "parameters": {"bNewHidden": true}},
          {"type": "property", "object_path": "/Game/Map.Map:PersistentLevel.Cube_1",
           "property_name": "bCanBeDamaged", "property_value": false}
        ]
    """
    try:
        operations = json.load(operations_file)
    except json.JSONDecodeError as e:
        print_error(f"Invalid JSON in {operations_file.name}: {e}")
        sys.exit(1)
    if not isinstance(operations, list):
        print_error("Batch file must contain a JSON list of operations")
        sys.exit(1)

    result = run_async(batch_tool(CliContext(), operations=operations))
    emit_result(result)
