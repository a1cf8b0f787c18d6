"""
MCP tools for driving the UE5 editor through the Remote Control API.
"""
import importlib
import logging
import pkgutil

from fastmcp import FastMCP

from services.registry import get_registered_tools

logger = logging.getLogger("ue5-remote-bridge")

__all__ = ["register_all_tools"]


def _import_tool_modules() -> None:
    package = importlib.import_module(__name__)
    for module_info in pkgutil.iter_modules(package.__path__):
        if module_info.name.startswith("_") or module_info.name == "utils":
            continue
        importlib.import_module(f"{__name__}.{module_info.name}")


def register_all_tools(mcp: FastMCP) -> None:
    """Import every tool module and attach its registered tools to ``mcp``."""
    _import_tool_modules()
    tools = get_registered_tools()
    if not tools:
        logger.warning("No tools found in registry")
        return

    for tool_info in tools:
        mcp.tool(
            name=tool_info["name"],
            description=tool_info["description"],
            **tool_info["kwargs"],
        )(tool_info["func"])
        logger.debug("Registered tool: %s", tool_info["name"])

    logger.info("Registered %d MCP tools", len(tools))
