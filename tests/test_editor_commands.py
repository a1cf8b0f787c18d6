"""Tests for the named editor command registry."""
import pytest
from pydantic import ValidationError

from core.errors import UnknownCommandError
from services import editor_commands
from services.editor_commands import EDITOR_COMMANDS, get_command, run_command
from tests.integration.test_helpers import FakeEditor, fail


def test_registry_contains_expected_commands():
    assert set(EDITOR_COMMANDS) == {
        "play", "simulate", "stop", "save_current_level", "save_all",
        "undo", "redo", "select_none", "delete_selected", "duplicate_selected",
    }


def test_registry_is_immutable():
    with pytest.raises(TypeError):
        EDITOR_COMMANDS["explode"] = EDITOR_COMMANDS["play"]
    with pytest.raises(ValidationError):
        EDITOR_COMMANDS["play"].function_name = "EndPIE"


def test_unknown_command_lists_known_names():
    with pytest.raises(UnknownCommandError) as exc_info:
        get_command("explode")
    assert exc_info.value.name == "explode"
    assert "play" in str(exc_info.value)


@pytest.mark.asyncio
async def test_unknown_command_makes_no_network_call(monkeypatch):
    editor = FakeEditor()
    monkeypatch.setattr(editor_commands, "rc_call", editor.call)

    with pytest.raises(UnknownCommandError):
        await run_command("launch_rockets")

    assert editor.calls == []


@pytest.mark.asyncio
async def test_play_issues_exactly_one_call_to_fixed_triple(monkeypatch):
    editor = FakeEditor()
    monkeypatch.setattr(editor_commands, "rc_call", editor.call)

    descriptor, envelope = await run_command("play")

    assert editor.calls == [
        ("/Script/UnrealEd.Default__UnrealEditorSubsystem", "StartPIE", {"bSimulateInEditor": False}),
    ]
    assert envelope.ok is True
    assert descriptor.description == "Start Play In Editor (PIE)"


@pytest.mark.asyncio
async def test_host_failure_is_returned_to_caller(monkeypatch):
    editor = FakeEditor({"Undo": fail(400)})
    monkeypatch.setattr(editor_commands, "rc_call", editor.call)

    _, envelope = await run_command("undo")

    assert envelope.ok is False
    assert envelope.status == 400
