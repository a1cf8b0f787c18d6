from typing import Annotated, Any

from fastmcp import Context
from mcp.types import ToolAnnotations

from core.errors import BridgeError
from services import editor_commands
from services.registry import bridge_tool
from services.tools.utils import error_result, success_result, to_json


@bridge_tool(
    name="ue5_editor_command",
    description=f"Execute a common editor command: {', '.join(editor_commands.COMMAND_NAMES)}",
    annotations=ToolAnnotations(
        title="Run UE5 Editor Command",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def editor_command(
    ctx: Context,
    command: Annotated[str, f"Editor command to execute ({', '.join(editor_commands.COMMAND_NAMES)})"],
) -> dict[str, Any]:
    try:
        descriptor, response = await editor_commands.run_command(command)
    except BridgeError as e:
        return error_result(str(e))
    except Exception as e:
        return error_result(f"Python error running editor command: {e}")

    if not response.ok:
        return error_result(
            f'Command "{command}" failed (HTTP {response.status}): {to_json(response.data)}',
            data={"status": response.status},
        )

    return success_result(f"Executed: **{descriptor.description}**", data={"command": command})
