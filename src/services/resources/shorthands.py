from models import MCPResponse
from services.name_resolver import ACTOR_CLASSES, ENGINE_MESHES, LIGHT_CLASSES
from services.registry import bridge_resource


class GetShorthandsResponse(MCPResponse):
    data: dict[str, dict[str, str]] = {}


@bridge_resource(
    uri="ue5://shorthands",
    name="get_shorthands",
    description="Shorthand names accepted for actor classes, light kinds and primitive meshes, "
    "with the full paths they resolve to.",
)
async def get_shorthands() -> GetShorthandsResponse:
    return GetShorthandsResponse(
        success=True,
        data={
            "actor_classes": dict(ACTOR_CLASSES),
            "lights": dict(LIGHT_CLASSES),
            "meshes": dict(ENGINE_MESHES),
        },
    )
