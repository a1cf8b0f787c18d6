from models import MCPResponse
from services.editor_commands import EDITOR_COMMANDS
from services.registry import bridge_resource


class GetEditorCommandsResponse(MCPResponse):
    data: dict[str, dict] = {}


@bridge_resource(
    uri="ue5://editor-commands",
    name="get_editor_commands",
    description="Lists the named editor commands accepted by ue5_editor_command, with their targets.",
)
async def get_editor_commands() -> GetEditorCommandsResponse:
    return GetEditorCommandsResponse(
        success=True,
        message=f"{len(EDITOR_COMMANDS)} editor commands",
        data={name: descriptor.model_dump() for name, descriptor in EDITOR_COMMANDS.items()},
    )
