from .resource_registry import bridge_resource, get_registered_resources
from .tool_registry import bridge_tool, get_registered_tools

__all__ = [
    "bridge_tool",
    "get_registered_tools",
    "bridge_resource",
    "get_registered_resources",
]
