from typing import Annotated, Any

from fastmcp import Context
from mcp.types import ToolAnnotations

from core.errors import BridgeError
from services.orchestrator import DEFAULT_MESH_COMPONENT
from services.registry import bridge_tool
from services.tools.utils import coerce_int, error_result, success_result, to_json
from transport.rc_client import rc_call


@bridge_tool(
    name="ue5_set_material",
    description="Set a material on an actor's mesh component by material asset path and slot index.",
    annotations=ToolAnnotations(
        title="Set Material on UE5 Actor",
        readOnlyHint=False,
        destructiveHint=False,
        idempotentHint=True,
        openWorldHint=True,
    ),
)
async def set_material(
    ctx: Context,
    actor_path: Annotated[str, "Full object path of the actor"],
    material_path: Annotated[str, "Material asset path (e.g., /Game/Materials/M_Red)"],
    slot_index: Annotated[int | str, "Material slot index (default: 0)"] | None = None,
    component_name: Annotated[str, "Mesh component name"] = DEFAULT_MESH_COMPONENT,
) -> dict[str, Any]:
    slot = coerce_int(slot_index, default=0)
    component_path = f"{actor_path}.{component_name or DEFAULT_MESH_COMPONENT}"

    try:
        response = await rc_call(component_path, "SetMaterial", {
            "ElementIndex": slot,
            "Material": material_path,
        })
    except BridgeError as e:
        return error_result(str(e))

    if not response.ok:
        return error_result(f"SetMaterial failed (HTTP {response.status}): {to_json(response.data)}")

    return success_result(
        f"Set material on `{component_path}` slot {slot} → `{material_path}`",
        data={"component_path": component_path, "slot_index": slot, "material_path": material_path},
    )
