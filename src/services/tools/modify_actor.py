from typing import Annotated, Any

from fastmcp import Context
from mcp.types import ToolAnnotations

from core.errors import BridgeError
from models import Location, Rotation, Scale
from services import orchestrator
from services.registry import bridge_tool
from services.tools.utils import error_result, render_steps, success_result


@bridge_tool(
    name="ue5_modify_actor",
    description="Modify an existing actor: change location, rotation, scale, label, or set arbitrary properties. "
    "Each change is applied in order and reported individually.",
    annotations=ToolAnnotations(
        title="Modify Actor in UE5 Level",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def modify_actor(
    ctx: Context,
    actor_path: Annotated[str, "Full object path of the actor"],
    location: Annotated[Location, "World location {x, y, z}"] | None = None,
    rotation: Annotated[Rotation, "Rotation {pitch, yaw, roll} in degrees"] | None = None,
    scale: Annotated[Scale, "Scale {x, y, z}"] | None = None,
    label: Annotated[str, "New display label"] | None = None,
    properties: Annotated[dict[str, Any],
                          "Arbitrary properties to set as {propertyName: value} pairs"] | None = None,
) -> dict[str, Any]:
    try:
        result = await orchestrator.modify_actor(
            actor_path,
            location=location,
            rotation=rotation,
            scale=scale,
            label=label,
            properties=properties,
        )
    except BridgeError as e:
        return error_result(str(e))
    except Exception as e:
        return error_result(f"Python error modifying actor: {e}")

    if not result.steps:
        return success_result("No modifications specified.", data={"actor_path": actor_path, "steps": []})

    output = f"## Modified `{actor_path}`\n\n"
    output += render_steps(result.steps)
    return success_result(output, data={
        "actor_path": actor_path,
        "steps": [step.model_dump() for step in result.steps],
        "warnings": len(result.warnings),
    })
