from typing import Annotated, Any

from fastmcp import Context
from mcp.types import ToolAnnotations

from core.errors import BridgeError
from services.orchestrator import ACTOR_SUBSYSTEM
from services.registry import bridge_tool
from services.tools.utils import error_result, success_result, to_json
from transport.rc_client import rc_call


@bridge_tool(
    name="ue5_delete_actor",
    description="Delete an actor from the current level by its object path.",
    annotations=ToolAnnotations(
        title="Delete Actor from UE5 Level",
        readOnlyHint=False,
        destructiveHint=True,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def delete_actor(
    ctx: Context,
    actor_path: Annotated[str, "Full object path of the actor to delete"],
) -> dict[str, Any]:
    try:
        response = await rc_call(ACTOR_SUBSYSTEM, "DestroyActor", {"ActorToDestroy": actor_path})
    except BridgeError as e:
        return error_result(str(e))

    if not response.ok:
        return error_result(f"Delete failed (HTTP {response.status}): {to_json(response.data)}")

    return success_result(f"Deleted actor: `{actor_path}`", data={"actor_path": actor_path})
