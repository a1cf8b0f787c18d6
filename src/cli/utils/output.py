"""Output helpers for CLI commands."""
import json
from typing import Any

import click


def format_output(result: Any, fmt: str = "text") -> str:
    if fmt == "json":
        return json.dumps(result, indent=2, default=str)
    if isinstance(result, dict) and "message" in result:
        return str(result["message"])
    return str(result)


def print_error(message: str) -> None:
    click.secho(f"✗ {message}", fg="red", err=True)