"""
Tests for the ue5_spawn_actor and ue5_modify_actor tools.

Validates argument coercion, report rendering and failure handling.
"""
import pytest

from core.errors import RemoteControlConnectionError
from services import orchestrator
from .test_helpers import DummyContext, FakeEditor, fail, ok
import services.tools.modify_actor as modify_mod
import services.tools.spawn_actor as spawn_mod

ACTOR = "/Game/Maps/Main.Main:PersistentLevel.StaticMeshActor_3"


def install(monkeypatch, editor: FakeEditor) -> FakeEditor:
    monkeypatch.setattr(orchestrator, "rc_call", editor.call)
    monkeypatch.setattr(orchestrator, "rc_property", editor.property)
    return editor


@pytest.mark.asyncio
async def test_spawn_reports_every_step(monkeypatch):
    editor = install(monkeypatch, FakeEditor({"SpawnActorFromClass": ok({"ReturnValue": ACTOR})}))
    ctx = DummyContext()

    resp = await spawn_mod.spawn_actor(
        ctx=ctx,
        mesh="Cube",
        label="Box1",
        simulate_physics="true",
    )

    assert resp["success"] is True
    assert resp["data"]["actor_path"] == ACTOR
    assert resp["data"]["warnings"] == 0
    assert len(resp["data"]["steps"]) == 6
    assert resp["message"].startswith("## Actor Spawned")
    assert f"- **Path**: `{ACTOR}`" in resp["message"]
    assert '- Set label: "Box1"' in resp["message"]
    assert "SetSimulatePhysics" in editor.function_names
    assert ctx.log_info


@pytest.mark.asyncio
async def test_spawn_string_false_skips_physics(monkeypatch):
    editor = install(monkeypatch, FakeEditor({"SpawnActorFromClass": ok({"ReturnValue": ACTOR})}))

    resp = await spawn_mod.spawn_actor(ctx=DummyContext(), simulate_physics="false")

    assert resp["success"] is True
    assert editor.function_names == ["SpawnActorFromClass"]


@pytest.mark.asyncio
async def test_spawn_degraded_success_lists_warnings(monkeypatch):
    install(monkeypatch, FakeEditor({
        "SpawnActorFromClass": ok({"ReturnValue": ACTOR}),
        "SetStaticMesh": fail(404),
    }))

    resp = await spawn_mod.spawn_actor(ctx=DummyContext(), mesh="/Game/Missing.Missing", label="Crate")

    assert resp["success"] is True
    assert resp["data"]["warnings"] == 1
    assert "- Warning: Failed to set mesh (404)" in resp["message"]
    assert '- Set label: "Crate"' in resp["message"]


@pytest.mark.asyncio
async def test_spawn_primary_failure_is_error(monkeypatch):
    install(monkeypatch, FakeEditor({"SpawnActorFromClass": fail(400)}))

    resp = await spawn_mod.spawn_actor(ctx=DummyContext(), actor_class="NotAClass")

    assert resp["success"] is False
    assert resp["message"].startswith("Error: Spawn failed (HTTP 400)")
    assert len(resp["data"]["steps"]) == 1


@pytest.mark.asyncio
async def test_spawn_connection_failure_is_error(monkeypatch):
    error = RemoteControlConnectionError("http://localhost:30010/remote/object/call", "connection refused")
    install(monkeypatch, FakeEditor({"SpawnActorFromClass": error}))

    resp = await spawn_mod.spawn_actor(ctx=DummyContext())

    assert resp["success"] is False
    assert resp["message"] == f"Error: {error}"


@pytest.mark.asyncio
async def test_modify_without_changes(monkeypatch):
    editor = install(monkeypatch, FakeEditor())

    resp = await modify_mod.modify_actor(ctx=DummyContext(), actor_path=ACTOR)

    assert resp["success"] is True
    assert resp["message"] == "No modifications specified."
    assert editor.calls == []


@pytest.mark.asyncio
async def test_modify_accepts_plain_mappings(monkeypatch):
    editor = install(monkeypatch, FakeEditor({"SetActorLabel": fail(500)}))

    resp = await modify_mod.modify_actor(
        ctx=DummyContext(),
        actor_path=ACTOR,
        location={"x": 10, "y": 20, "z": 30},
        label="Moved",
        properties={"bHidden": False},
    )

    assert resp["success"] is True
    assert editor.function_names == ["K2_SetActorLocation", "SetActorLabel", "bHidden"]
    assert resp["data"]["warnings"] == 1
    assert "- Location → (10, 20, 30)" in resp["message"]
    assert "- Warning: Failed to set label (500)" in resp["message"]
