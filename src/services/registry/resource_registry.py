"""Decorator-based resource registry, mirroring the tool registry."""
from typing import Any, Callable

_resource_registry: list[dict[str, Any]] = []


def bridge_resource(
    uri: str,
    name: str | None = None,
    description: str | None = None,
    **kwargs,
) -> Callable:
    def decorator(func: Callable) -> Callable:
        _resource_registry.append({
            "func": func,
            "uri": uri,
            "name": name or func.__name__,
            "description": description,
            "kwargs": kwargs,
        })
        return func

    return decorator


def get_registered_resources() -> list[dict[str, Any]]:
    return list(_resource_registry)
