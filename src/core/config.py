"""Process-wide configuration for the UE5 remote control bridge.

Values are read from the environment once, when this module is first
imported, and never change afterwards:

    UE5_HOST               editor host (default: localhost)
    UE5_RC_PORT            Remote Control HTTP port (default: 30010)
    UE5_BRIDGE_LOG_LEVEL   logging level name (default: INFO)
    UE5_BRIDGE_TRANSPORT   MCP transport, "stdio" or "http" (default: stdio)

Usage in other modules:
    from core.config import config

    url = config.base_url
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

logger = logging.getLogger("ue5-remote-bridge")

DEFAULT_HOST = "localhost"
DEFAULT_RC_PORT = 30010
REQUEST_TIMEOUT_SECONDS = 10.0

_TRANSPORTS = ("stdio", "http")


@dataclass(frozen=True)
class BridgeConfig:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_RC_PORT
    log_level: str = "INFO"
    transport: str = "stdio"
    request_timeout_s: float = REQUEST_TIMEOUT_SECONDS

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"


def _parse_port(raw: str | None) -> int:
    if raw is None or not raw.strip():
        return DEFAULT_RC_PORT
    try:
        port = int(raw.strip())
    except ValueError:
        logger.warning("Ignoring invalid UE5_RC_PORT=%r, using %d", raw, DEFAULT_RC_PORT)
        return DEFAULT_RC_PORT
    if not 0 < port < 65536:
        logger.warning("UE5_RC_PORT=%d out of range, using %d", port, DEFAULT_RC_PORT)
        return DEFAULT_RC_PORT
    return port


def load_config(environ: Mapping[str, str] | None = None) -> BridgeConfig:
    """Build a BridgeConfig from environment-style settings."""
    env = os.environ if environ is None else environ

    host = (env.get("UE5_HOST") or "").strip() or DEFAULT_HOST
    port = _parse_port(env.get("UE5_RC_PORT"))
    log_level = (env.get("UE5_BRIDGE_LOG_LEVEL") or "INFO").strip().upper()

    transport = (env.get("UE5_BRIDGE_TRANSPORT") or "stdio").strip().lower()
    if transport not in _TRANSPORTS:
        logger.warning("Unknown UE5_BRIDGE_TRANSPORT=%r, falling back to stdio", transport)
        transport = "stdio"

    return BridgeConfig(host=host, port=port, log_level=log_level, transport=transport)


config = load_config()
