from typing import Annotated, Any

from fastmcp import Context
from mcp.types import ToolAnnotations

from core.errors import BridgeError
from services.name_resolver import mesh_names, resolve_mesh
from services.orchestrator import DEFAULT_MESH_COMPONENT
from services.registry import bridge_tool
from services.tools.utils import error_result, success_result, to_json
from transport.rc_client import rc_property


@bridge_tool(
    name="ue5_set_mesh",
    description=f"Change the static mesh on an actor. Use shorthand ({', '.join(mesh_names())}) or a full asset path.",
    annotations=ToolAnnotations(
        title="Set Static Mesh on UE5 Actor",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def set_mesh(
    ctx: Context,
    actor_path: Annotated[str, "Full object path of the actor"],
    mesh: Annotated[str, f"Mesh shorthand ({', '.join(mesh_names())}) or full asset path"],
    component_name: Annotated[str, "Mesh component name"] = DEFAULT_MESH_COMPONENT,
) -> dict[str, Any]:
    mesh_path = resolve_mesh(mesh)
    component_path = f"{actor_path}.{component_name or DEFAULT_MESH_COMPONENT}"

    try:
        response = await rc_property(component_path, "StaticMesh", mesh_path)
    except BridgeError as e:
        return error_result(str(e))

    if not response.ok:
        return error_result(f"Set mesh failed (HTTP {response.status}): {to_json(response.data)}")

    return success_result(
        f"Set mesh on `{component_path}` → `{mesh_path}`",
        data={"component_path": component_path, "mesh_path": mesh_path},
    )
