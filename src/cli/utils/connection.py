"""Bridges synchronous click commands to the async services."""
import asyncio
import functools
import sys

import click
from typing import Any, Awaitable, Callable, TypeVar

from cli.utils.config import get_config
from cli.utils.output import format_output, print_error
from core.errors import BridgeError
from transport.rc_client import RemoteControlClient, set_rc_client

T = TypeVar("T")


def run_async(coro: Awaitable[T]) -> T:
    """Point the bridge at the configured editor and run ``coro`` to completion."""
    cfg = get_config()
    set_rc_client(RemoteControlClient(cfg.base_url, cfg.timeout_s))
    return asyncio.run(coro)


def handle_bridge_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """Turn bridge errors into a red message and exit code 1."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except BridgeError as e:
            print_error(str(e))
            sys.exit(1)

    return wrapper


class CliContext:
    """Stand-in for the MCP request context when tools run from the terminal."""

    async def info(self, message: str) -> None:
        click.secho(message, dim=True, err=True)


def emit_result(result: dict[str, Any]) -> None:
    """Print a tool result and exit with status 1 when it failed."""
    cfg = get_config()
    output = format_output(result, cfg.format)
    if result.get("success"):
        click.echo(output)
        return
    if cfg.format == "json":
        click.echo(output)
    else:
        print_error(output)
    sys.exit(1)
