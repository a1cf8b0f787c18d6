"""Named one-shot editor actions (play, undo, save, ...).

Each name maps to a fixed object/function/parameters triple. Lookups of
unknown names fail before anything is sent to the editor.
"""
import logging
from types import MappingProxyType

from core.errors import UnknownCommandError
from models import CommandDescriptor, RcEnvelope
from transport.rc_client import rc_call

logger = logging.getLogger("ue5-remote-bridge")

_EDITOR_SUBSYSTEM = "/Script/UnrealEd.Default__UnrealEditorSubsystem"
_LOADING_AND_SAVING = "/Script/UnrealEd.Default__EditorLoadingAndSavingUtils"
_ACTOR_SUBSYSTEM = "/Script/UnrealEd.Default__EditorActorSubsystem"

EDITOR_COMMANDS = MappingProxyType({
    "play": CommandDescriptor(
        object_path=_EDITOR_SUBSYSTEM,
        function_name="StartPIE",
        parameters={"bSimulateInEditor": False},
        description="Start Play In Editor (PIE)",
    ),
    "simulate": CommandDescriptor(
        object_path=_EDITOR_SUBSYSTEM,
        function_name="StartPIE",
        parameters={"bSimulateInEditor": True},
        description="Start Simulate In Editor",
    ),
    "stop": CommandDescriptor(
        object_path=_EDITOR_SUBSYSTEM,
        function_name="EndPIE",
        description="Stop Play In Editor",
    ),
    "save_current_level": CommandDescriptor(
        object_path=_LOADING_AND_SAVING,
        function_name="SaveCurrentLevel",
        description="Save the current level",
    ),
    "save_all": CommandDescriptor(
        object_path=_LOADING_AND_SAVING,
        function_name="SaveDirtyPackages",
        parameters={"bPromptUserToSave": False, "bSaveMapPackages": True, "bSaveContentPackages": True},
        description="Save all dirty packages",
    ),
    "undo": CommandDescriptor(
        object_path=_EDITOR_SUBSYSTEM,
        function_name="Undo",
        description="Undo the last action",
    ),
    "redo": CommandDescriptor(
        object_path=_EDITOR_SUBSYSTEM,
        function_name="Redo",
        description="Redo the last undone action",
    ),
    "select_none": CommandDescriptor(
        object_path=_ACTOR_SUBSYSTEM,
        function_name="ClearActorSelectionSet",
        description="Deselect all actors",
    ),
    "delete_selected": CommandDescriptor(
        object_path=_ACTOR_SUBSYSTEM,
        function_name="DestroySelectedActors",
        description="Delete all selected actors",
    ),
    "duplicate_selected": CommandDescriptor(
        object_path=_ACTOR_SUBSYSTEM,
        function_name="DuplicateSelectedActors",
        description="Duplicate all selected actors",
    ),
})

COMMAND_NAMES: tuple[str, ...] = tuple(EDITOR_COMMANDS)


def get_command(name: str) -> CommandDescriptor:
    try:
        return EDITOR_COMMANDS[name]
    except KeyError:
        raise UnknownCommandError(name, EDITOR_COMMANDS) from None


async def run_command(name: str) -> tuple[CommandDescriptor, RcEnvelope]:
    """Look up ``name`` and issue its single call.

    Raises UnknownCommandError without touching the network when the name is
    not registered. The envelope is returned as-is; callers decide how to
    report a host-side failure.
    """
    descriptor = get_command(name)
    logger.info("Editor command %s -> %s.%s", name, descriptor.object_path, descriptor.function_name)
    envelope = await rc_call(descriptor.object_path, descriptor.function_name, descriptor.parameters)
    return descriptor, envelope
