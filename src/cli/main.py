"""ue5-bridge command-line entry point."""

import click
from typing import Optional

from cli.commands.actor import spawn
from cli.commands.batch import batch
from cli.commands.editor import command, connect, describe
from cli.utils.config import build_config, set_config


@click.group()
@click.option("--host", default=None, help="Editor host (overrides UE5_HOST).")
@click.option("--port", default=None, type=int, help="Remote Control HTTP port (overrides UE5_RC_PORT).")
@click.option("--json", "as_json", is_flag=True, help="Print raw JSON results.")
def cli(host: Optional[str], port: Optional[int], as_json: bool):
    """Drive a running UE5 editor through its Remote Control API."""
    set_config(build_config(host, port, "json" if as_json else "text"))


cli.add_command(connect)
cli.add_command(command)
cli.add_command(describe)
cli.add_command(spawn)
cli.add_command(batch)


if __name__ == "__main__":
    cli()
