from typing import Any

from fastmcp import Context
from mcp.types import ToolAnnotations

from core.errors import BridgeError
from services.registry import bridge_tool
from services.tools.utils import error_result, success_result, to_json
from transport.rc_client import INFO_ENDPOINT, get_rc_client, rc_fetch


@bridge_tool(
    name="ue5_connect",
    description="Test connectivity to the UE5 editor's Remote Control API. Returns editor info and version if connected.",
    annotations=ToolAnnotations(
        title="Test UE5 Editor Connection",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def connect(ctx: Context) -> dict[str, Any]:
    try:
        response = await rc_fetch(INFO_ENDPOINT, "GET")
    except BridgeError as e:
        return error_result(str(e))

    if not response.ok:
        return error_result(f"Editor returned HTTP {response.status}: {to_json(response.data)}")

    endpoint = get_rc_client().base_url.removeprefix("http://")
    output = "## UE5 Editor Connected\n\n"
    output += f"- **Endpoint**: {endpoint}\n"
    if isinstance(response.data, dict):
        for key, value in response.data.items():
            output += f"- **{key}**: {to_json(value)}\n"
    output += "\nRemote Control API is active and responding."
    return success_result(output, data={"endpoint": endpoint, "info": response.data})
