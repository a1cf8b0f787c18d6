from typing import Annotated, Any

from fastmcp import Context
from mcp.types import ToolAnnotations

from core.errors import BridgeError
from services.orchestrator import ACTOR_SUBSYSTEM
from services.registry import bridge_tool
from services.tools.utils import clamp, coerce_int, error_result, success_result, to_json
from transport.rc_client import rc_call

DEFAULT_LIMIT = 50
MAX_LIMIT = 500


@bridge_tool(
    name="ue5_list_actors",
    description="List all actors in the current level. Optionally filter by class name substring.",
    annotations=ToolAnnotations(
        title="List Actors in UE5 Level",
        readOnlyHint=True,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def list_actors(
    ctx: Context,
    class_filter: Annotated[str,
                            "Filter actors by class name substring (e.g., 'StaticMesh', 'Light')"] | None = None,
    limit: Annotated[int | str, "Maximum number of actors to return (1-500, default 50)"] | None = None,
) -> dict[str, Any]:
    limit = clamp(coerce_int(limit, default=DEFAULT_LIMIT), 1, MAX_LIMIT)

    try:
        response = await rc_call(ACTOR_SUBSYSTEM, "GetAllLevelActors")
    except BridgeError as e:
        return error_result(str(e))

    if not response.ok:
        return error_result(f"Failed to list actors (HTTP {response.status}): {to_json(response.data)}")

    actors = response.data.get("ReturnValue") if isinstance(response.data, dict) else None
    actors = [str(a) for a in actors or []]

    if class_filter:
        needle = class_filter.lower()
        actors = [a for a in actors if needle in a.lower()]

    total = len(actors)
    shown = actors[:limit]

    output = "## Level Actors"
    if class_filter:
        output += f' (filter: "{class_filter}")'
    output += f"\n\nShowing {len(shown)} of {total} actors\n\n"
    output += "".join(f"{i}. `{a}`\n" for i, a in enumerate(shown, start=1))
    return success_result(output, data={"actors": shown, "total": total})
