from core.config import DEFAULT_HOST, DEFAULT_RC_PORT


def resolve_http_host(arg_host: str | None, env_host: str | None) -> str:
    """Resolve the editor host from arguments/env with a localhost default."""

    if arg_host:
        return arg_host
    if env_host:
        return env_host

    return DEFAULT_HOST


def resolve_rc_base_url(
    arg_host: str | None,
    arg_port: int | None,
    env_host: str | None,
    env_port: int | None,
) -> str:
    host = resolve_http_host(arg_host, env_host)
    port = arg_port or env_port or DEFAULT_RC_PORT
    return f"http://{host}:{port}"
