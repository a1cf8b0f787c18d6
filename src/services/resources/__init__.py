"""
MCP resources exposing the bridge's static lookup tables.
"""
import importlib
import logging
import pkgutil

from fastmcp import FastMCP

from services.registry import get_registered_resources

logger = logging.getLogger("ue5-remote-bridge")

__all__ = ["register_all_resources"]


def register_all_resources(mcp: FastMCP) -> None:
    package = importlib.import_module(__name__)
    for module_info in pkgutil.iter_modules(package.__path__):
        if not module_info.name.startswith("_"):
            importlib.import_module(f"{__name__}.{module_info.name}")

    resources = get_registered_resources()
    for resource_info in resources:
        mcp.resource(
            resource_info["uri"],
            name=resource_info["name"],
            description=resource_info["description"],
            **resource_info["kwargs"],
        )(resource_info["func"])
        logger.debug("Registered resource: %s", resource_info["uri"])

    logger.info("Registered %d MCP resources", len(resources))
