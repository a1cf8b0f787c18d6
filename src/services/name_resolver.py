"""Shorthand tokens for actor classes, light kinds and engine primitive meshes.

Anything not in the tables is assumed to already be a full path and is
returned unchanged, so ``resolve`` never fails.
"""
from types import MappingProxyType

from models import ResolvedReference

ACTOR_CLASSES = MappingProxyType({
    "StaticMeshActor": "/Script/Engine.StaticMeshActor",
    "CameraActor": "/Script/Engine.CameraActor",
    "PlayerStart": "/Script/Engine.PlayerStart",
    "TriggerBox": "/Script/Engine.TriggerBox",
    "TriggerSphere": "/Script/Engine.TriggerSphere",
    "BlockingVolume": "/Script/Engine.BlockingVolume",
    "ExponentialHeightFog": "/Script/Engine.ExponentialHeightFog",
    "DecalActor": "/Script/Engine.DecalActor",
    "Note": "/Script/Engine.Note",
    "TextRenderActor": "/Script/Engine.TextRenderActor",
})

LIGHT_CLASSES = MappingProxyType({
    "PointLight": "/Script/Engine.PointLight",
    "SpotLight": "/Script/Engine.SpotLight",
    "DirectionalLight": "/Script/Engine.DirectionalLight",
    "SkyLight": "/Script/Engine.SkyLight",
})

ENGINE_MESHES = MappingProxyType({
    "Cube": "/Engine/BasicShapes/Cube.Cube",
    "Sphere": "/Engine/BasicShapes/Sphere.Sphere",
    "Cylinder": "/Engine/BasicShapes/Cylinder.Cylinder",
    "Cone": "/Engine/BasicShapes/Cone.Cone",
    "Plane": "/Engine/BasicShapes/Plane.Plane",
})

# Tokens are unique across the three tables.
_ALL_SHORTHANDS = MappingProxyType({**ACTOR_CLASSES, **LIGHT_CLASSES, **ENGINE_MESHES})


def resolve_actor_class(token: str) -> str:
    """Map an actor class or light kind shorthand to its /Script path."""
    return ACTOR_CLASSES.get(token) or LIGHT_CLASSES.get(token) or token


def resolve_mesh(token: str) -> str:
    return ENGINE_MESHES.get(token, token)


def resolve(token: str) -> str:
    return _ALL_SHORTHANDS.get(token, token)


def resolve_reference(token: str) -> ResolvedReference:
    return ResolvedReference(token=token, canonical_path=resolve(token))


def actor_class_names() -> list[str]:
    return [*ACTOR_CLASSES, *LIGHT_CLASSES]


def mesh_names() -> list[str]:
    return list(ENGINE_MESHES)
