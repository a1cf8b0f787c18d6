"""
Composite actor operations.

A composite operation is one mandatory primary call followed by optional
configuration calls in a fixed order. Calls are awaited strictly one after
another and every outcome lands in a StepLog:

- primary failure (or a primary result without an actor path) ends the
  operation with a single-entry log and nothing else is sent;
- once the primary call succeeded, a failing configuration step is logged as
  a warning and the remaining steps still run;
- timeouts and connection failures are raised and end the operation.

Nothing is rolled back when configuration steps fail.
"""
import json
import logging
from typing import Any, Mapping, TypeVar

from pydantic import BaseModel

from models import CompositeResult, Location, OperationStep, RcEnvelope, Rotation, Scale
from services.name_resolver import resolve_actor_class, resolve_mesh
from transport.rc_client import rc_call, rc_property

logger = logging.getLogger("ue5-remote-bridge")

ACTOR_SUBSYSTEM = "/Engine/Transient.EditorActorSubsystem"
DEFAULT_MESH_COMPONENT = "StaticMeshComponent0"

M = TypeVar("M", bound=BaseModel)


def coerce_model(model: type[M], value: M | Mapping[str, Any] | None) -> M | None:
    """Accept either a model instance or a plain mapping (as sent by MCP clients)."""
    if value is None or isinstance(value, model):
        return value
    return model.model_validate(value)


def _fmt(value: float) -> str:
    return f"{value:g}"


class StepLog:
    """Append-only record of (description, outcome) pairs for one invocation."""

    def __init__(self) -> None:
        self._steps: list[OperationStep] = []

    def success(self, description: str) -> None:
        self._steps.append(OperationStep(description=description))

    def warning(self, message: str) -> None:
        logger.warning("Composite step failed: %s", message)
        self._steps.append(OperationStep(description=message, warning=message))

    def record(self, envelope: RcEnvelope, description: str, failure: str) -> bool:
        """Log ``description`` on success, else ``Failed to <failure> (<status>)``."""
        if envelope.ok:
            self.success(description)
        else:
            self.warning(f"Failed to {failure} ({envelope.status})")
        return envelope.ok

    @property
    def steps(self) -> list[OperationStep]:
        return list(self._steps)


async def spawn_actor(
    actor_class: str = "StaticMeshActor",
    mesh: str | None = None,
    label: str | None = None,
    location: Location | Mapping[str, Any] | None = None,
    rotation: Rotation | Mapping[str, Any] | None = None,
    scale: Scale | Mapping[str, Any] | None = None,
    simulate_physics: bool = False,
) -> CompositeResult:
    """Spawn an actor, then apply mesh, physics, label, rotation and scale in that order."""
    location = coerce_model(Location, location) or Location()
    rotation = coerce_model(Rotation, rotation)
    scale = coerce_model(Scale, scale)

    class_path = resolve_actor_class(actor_class)
    log = StepLog()

    spawn = await rc_call(ACTOR_SUBSYSTEM, "SpawnActorFromClass", {
        "ActorClass": class_path,
        "Location": location.to_rc(),
    })
    if not spawn.ok:
        log.warning(f"Spawn failed (HTTP {spawn.status}): {json.dumps(spawn.data, default=str)}")
        return CompositeResult(identifier=None, steps=log.steps)

    actor_path = spawn.data.get("ReturnValue") if isinstance(spawn.data, dict) else None
    if not isinstance(actor_path, str) or not actor_path:
        log.warning(f"Spawn returned no actor path. Response: {json.dumps(spawn.data, default=str)}")
        return CompositeResult(identifier=None, steps=log.steps)

    log.success(f"Spawned `{class_path}` → `{actor_path}`")
    logger.info("Spawned %s at %s", class_path, actor_path)
    mesh_component = f"{actor_path}.{DEFAULT_MESH_COMPONENT}"

    if mesh:
        mesh_path = resolve_mesh(mesh)
        res = await rc_call(mesh_component, "SetStaticMesh", {"NewMesh": mesh_path})
        log.record(res, f"Set mesh: {mesh_path}", "set mesh")

    if simulate_physics:
        # Mobility must be Movable before physics simulation can be enabled.
        res = await rc_call(mesh_component, "SetMobility", {"NewMobility": "Movable"})
        log.record(res, "Set mobility: Movable", "set mobility")
        res = await rc_call(mesh_component, "SetSimulatePhysics", {"bSimulate": True})
        log.record(res, "Enabled physics simulation", "enable physics")
        res = await rc_call(mesh_component, "SetEnableGravity", {"bGravityEnabled": True})
        log.record(res, "Enabled gravity", "enable gravity")

    if label:
        res = await rc_call(actor_path, "SetActorLabel", {"NewActorLabel": label})
        log.record(res, f'Set label: "{label}"', "set label")

    if rotation is not None:
        res = await rc_call(actor_path, "K2_SetActorRotation", {
            "NewRotation": rotation.to_rc(),
            "bTeleportPhysics": True,
        })
        log.record(
            res,
            f"Set rotation: pitch={_fmt(rotation.pitch)} yaw={_fmt(rotation.yaw)} roll={_fmt(rotation.roll)}",
            "set rotation",
        )

    if scale is not None:
        res = await rc_call(actor_path, "SetActorScale3D", {"NewScale3D": scale.to_rc()})
        log.record(res, f"Set scale: {_fmt(scale.x)}, {_fmt(scale.y)}, {_fmt(scale.z)}", "set scale")

    return CompositeResult(identifier=actor_path, steps=log.steps)


async def modify_actor(
    actor_path: str,
    location: Location | Mapping[str, Any] | None = None,
    rotation: Rotation | Mapping[str, Any] | None = None,
    scale: Scale | Mapping[str, Any] | None = None,
    label: str | None = None,
    properties: Mapping[str, Any] | None = None,
) -> CompositeResult:
    """Apply transform, label and property changes to an existing actor.

    There is no primary call: the actor already exists, so every step is
    optional and a failing step never stops the ones after it.
    """
    location = coerce_model(Location, location)
    rotation = coerce_model(Rotation, rotation)
    scale = coerce_model(Scale, scale)
    log = StepLog()

    if location is not None:
        res = await rc_call(actor_path, "K2_SetActorLocation", {
            "NewLocation": location.to_rc(),
            "bSweep": False,
            "bTeleport": True,
        })
        log.record(res, f"Location → ({_fmt(location.x)}, {_fmt(location.y)}, {_fmt(location.z)})", "set location")

    if rotation is not None:
        res = await rc_call(actor_path, "K2_SetActorRotation", {
            "NewRotation": rotation.to_rc(),
            "bTeleportPhysics": True,
        })
        log.record(
            res,
            f"Rotation → ({_fmt(rotation.pitch)}, {_fmt(rotation.yaw)}, {_fmt(rotation.roll)})",
            "set rotation",
        )

    if scale is not None:
        res = await rc_call(actor_path, "SetActorScale3D", {"NewScale3D": scale.to_rc()})
        log.record(res, f"Scale → ({_fmt(scale.x)}, {_fmt(scale.y)}, {_fmt(scale.z)})", "set scale")

    if label:
        res = await rc_call(actor_path, "SetActorLabel", {"NewActorLabel": label})
        log.record(res, f'Label → "{label}"', "set label")

    for name, value in (properties or {}).items():
        res = await rc_property(actor_path, name, value)
        log.record(res, f"{name} → {json.dumps(value, default=str)}", f"set {name}")

    return CompositeResult(identifier=actor_path, steps=log.steps)
