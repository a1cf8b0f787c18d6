"""Entry point for the UE5 Remote Control MCP server."""
import argparse
import logging
import sys

from fastmcp import FastMCP

from core.config import config
from services.resources import register_all_resources
from services.tools import register_all_tools

logger = logging.getLogger("ue5-remote-bridge")

SERVER_INSTRUCTIONS = """\
This server drives a running Unreal Engine 5 editor through its Remote Control API.

- Use ue5_connect first to confirm the editor is reachable.
- ue5_spawn_actor and ue5_modify_actor report every step; steps that fail show up as warnings
  while the rest still run.
- ue5_batch sends up to 50 calls/property sets in one request and reports each one.
- Failed calls are never retried automatically; re-issue them explicitly if needed.
"""


def configure_logging(level: str) -> None:
    # stdout carries the MCP stdio protocol, so logs go to stderr.
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    # httpx logs every request at INFO; keep it quiet unless debugging.
    logging.getLogger("httpx").setLevel(logging.WARNING)


def create_mcp_server() -> FastMCP:
    mcp = FastMCP(name="ue5-remote-bridge", instructions=SERVER_INSTRUCTIONS)
    register_all_tools(mcp)
    register_all_resources(mcp)
    return mcp


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="UE5 Remote Control MCP server")
    parser.add_argument(
        "--transport",
        choices=("stdio", "http"),
        default=config.transport,
        help="MCP transport (default from UE5_BRIDGE_TRANSPORT, else stdio)",
    )
    parser.add_argument("--http-host", default="127.0.0.1", help="Bind host for the http transport")
    parser.add_argument("--http-port", type=int, default=8080, help="Bind port for the http transport")
    parser.add_argument("--log-level", default=config.log_level, help="Logging level (default: INFO)")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)
    logger.info("Starting UE5 remote bridge (editor at %s, transport=%s)", config.base_url, args.transport)

    mcp = create_mcp_server()
    if args.transport == "http":
        mcp.run(transport="http", host=args.http_host, port=args.http_port)
    else:
        mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
