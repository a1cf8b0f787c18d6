from typing import Annotated, Any

from fastmcp import Context
from mcp.types import ToolAnnotations

from core.errors import BridgeError
from services.registry import bridge_tool
from services.tools.utils import error_result, success_result, to_json
from transport.rc_client import DESCRIBE_ENDPOINT, rc_fetch

MAX_PROPERTIES = 100
MAX_FUNCTIONS = 50
MAX_VALUE_CHARS = 80


def _format_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        text = to_json(value)
    else:
        text = "" if value is None else str(value)
    if len(text) > MAX_VALUE_CHARS:
        text = text[:MAX_VALUE_CHARS - 3] + "..."
    return text


def format_description(actor_path: str, data: Any) -> str:
    """Render a describe payload as a markdown summary (properties table + function list)."""
    output = f"## Actor: `{actor_path}`\n\n"
    if not isinstance(data, dict):
        return output + f"{data}\n"

    if data.get("Name"):
        output += f"- **Name**: {data['Name']}\n"
    if data.get("Class"):
        output += f"- **Class**: {data['Class']}\n"

    properties = data.get("Properties")
    if isinstance(properties, list):
        output += f"\n### Properties ({len(properties)})\n\n"
        output += "| Name | Type | Value |\n|------|------|-------|\n"
        for prop in properties[:MAX_PROPERTIES]:
            if not isinstance(prop, dict):
                continue
            output += f"| {prop.get('Name', '')} | {prop.get('Type') or ''} | {_format_value(prop.get('Value'))} |\n"
        if len(properties) > MAX_PROPERTIES:
            output += f"\n*...and {len(properties) - MAX_PROPERTIES} more properties*\n"

    functions = data.get("Functions")
    if isinstance(functions, list):
        output += f"\n### Functions ({len(functions)})\n\n"
        for fn in functions[:MAX_FUNCTIONS]:
            name = fn.get("Name", fn) if isinstance(fn, dict) else fn
            output += f"- `{name}`\n"
        if len(functions) > MAX_FUNCTIONS:
            output += f"\n*...and {len(functions) - MAX_FUNCTIONS} more functions*\n"

    return output


@bridge_tool(
    name="ue5_describe_actor",
    description="Get a full property dump of an actor via the Remote Control describe endpoint.",
    annotations=ToolAnnotations(
        title="Describe UE5 Actor",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def describe_actor(
    ctx: Context,
    actor_path: Annotated[str, "Full object path of the actor"],
) -> dict[str, Any]:
    try:
        response = await rc_fetch(DESCRIBE_ENDPOINT, "PUT", {"objectPath": actor_path})
    except BridgeError as e:
        return error_result(str(e))

    if not response.ok:
        return error_result(f"Describe failed (HTTP {response.status}): {to_json(response.data)}")

    return success_result(format_description(actor_path, response.data), data=response.data)
