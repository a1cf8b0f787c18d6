import pytest

from services.resources.editor_commands import get_editor_commands
from services.resources.shorthands import get_shorthands


@pytest.mark.asyncio
async def test_editor_commands_resource_lists_every_command():
    resp = await get_editor_commands()

    assert resp.success is True
    assert set(resp.data) >= {"play", "stop", "undo", "save_all"}
    assert resp.data["play"]["function_name"] == "StartPIE"


@pytest.mark.asyncio
async def test_shorthands_resource():
    resp = await get_shorthands()

    assert resp.data["meshes"]["Cube"] == "/Engine/BasicShapes/Cube.Cube"
    assert resp.data["lights"]["SkyLight"] == "/Script/Engine.SkyLight"
    assert "PlayerStart" in resp.data["actor_classes"]
