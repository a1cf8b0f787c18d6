"""Decorator-based tool registry; tools are attached to FastMCP at start-up."""
from typing import Any, Callable

_tool_registry: list[dict[str, Any]] = []


def bridge_tool(
    name: str | None = None,
    description: str | None = None,
    **kwargs,
) -> Callable:
    """Mark a function as an MCP tool.

    Args:
        name: Tool name (defaults to the function name)
        description: Tool description shown to clients
        **kwargs: Extra arguments forwarded to FastMCP's ``tool()`` (e.g. annotations)
    """
    def decorator(func: Callable) -> Callable:
        _tool_registry.append({
            "func": func,
            "name": name or func.__name__,
            "description": description,
            "kwargs": kwargs,
        })
        return func

    return decorator


def get_registered_tools() -> list[dict[str, Any]]:
    return list(_tool_registry)
