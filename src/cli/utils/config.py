"""CLI configuration shared by all commands of one invocation."""
from dataclasses import dataclass

from core.config import config as bridge_config
from utils.network import resolve_rc_base_url


@dataclass
class CLIConfig:
    base_url: str
    format: str = "text"
    timeout_s: float = bridge_config.request_timeout_s


_config: CLIConfig | None = None


def build_config(host: str | None = None, port: int | None = None, fmt: str = "text") -> CLIConfig:
    base_url = resolve_rc_base_url(host, port, bridge_config.host, bridge_config.port)
    return CLIConfig(base_url=base_url, format=fmt)


def get_config() -> CLIConfig:
    global _config
    if _config is None:
        _config = build_config()
    return _config


def set_config(cfg: CLIConfig | None) -> None:
    global _config
    _config = cfg
