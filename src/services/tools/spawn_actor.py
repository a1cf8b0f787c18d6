from typing import Annotated, Any

from fastmcp import Context
from mcp.types import ToolAnnotations

from core.errors import BridgeError
from models import Location, Rotation, Scale
from services import orchestrator
from services.name_resolver import actor_class_names, mesh_names
from services.registry import bridge_tool
from services.tools.utils import coerce_bool, error_result, render_steps, success_result


@bridge_tool(
    name="ue5_spawn_actor",
    description="Spawn an actor in the current level. Optionally set mesh (Cube/Sphere/Cylinder/Cone/Plane "
    "or full path), label, location, rotation, scale, and physics simulation. Returns the spawned actor path "
    "and a step-by-step report; configuration steps that fail are reported as warnings.",
    annotations=ToolAnnotations(
        title="Spawn Actor in UE5 Editor",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=False,
        openWorldHint=True,
    ),
)
async def spawn_actor(
    ctx: Context,
    actor_class: Annotated[str,
                           f"Actor class shorthand ({', '.join(actor_class_names())}) or full /Script/... path"] = "StaticMeshActor",
    mesh: Annotated[str,
                    f"Mesh shorthand ({', '.join(mesh_names())}) or full asset path"] | None = None,
    label: Annotated[str, "Display label for the actor"] | None = None,
    location: Annotated[Location, "World location {x, y, z}"] | None = None,
    rotation: Annotated[Rotation, "Rotation {pitch, yaw, roll} in degrees"] | None = None,
    scale: Annotated[Scale, "Scale {x, y, z}"] | None = None,
    simulate_physics: Annotated[bool | str,
                                "Enable physics simulation (sets Mobility to Movable, enables gravity)"] = False,
) -> dict[str, Any]:
    try:
        result = await orchestrator.spawn_actor(
            actor_class=actor_class,
            mesh=mesh,
            label=label,
            location=location,
            rotation=rotation,
            scale=scale,
            simulate_physics=bool(coerce_bool(simulate_physics, default=False)),
        )
    except BridgeError as e:
        return error_result(str(e))
    except Exception as e:
        return error_result(f"Python error spawning actor: {e}")

    steps = [step.model_dump() for step in result.steps]
    if not result.succeeded:
        return error_result(result.steps[0].description, data={"steps": steps})

    await ctx.info(f"Spawned {result.identifier} ({len(result.warnings)} warnings)")
    output = "## Actor Spawned\n\n"
    output += f"- **Path**: `{result.identifier}`\n"
    output += render_steps(result.steps)
    return success_result(output, data={
        "actor_path": result.identifier,
        "steps": steps,
        "warnings": len(result.warnings),
    })
