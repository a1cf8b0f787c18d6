"""Actor CLI commands."""

import click
from typing import Optional

from cli.utils.connection import CliContext, emit_result, handle_bridge_errors, run_async
from services.tools.spawn_actor import spawn_actor


def _parse_triplet(value: Optional[str], keys: tuple[str, str, str], option: str) -> Optional[dict[str, float]]:
    if value is None:
        return None
    parts = [p.strip() for p in value.split(",")]
    if len(parts) != 3:
        raise click.BadParameter(f"expected three comma-separated numbers, got {value!r}", param_hint=option)
    try:
        return dict(zip(keys, (float(p) for p in parts)))
    except ValueError:
        raise click.BadParameter(f"expected numbers, got {value!r}", param_hint=option) from None


@click.command("spawn")
@click.argument("actor_class", default="StaticMeshActor")
@click.option("--mesh", "-m", default=None, help="Mesh shorthand (Cube, Sphere, ...) or asset path.")
@click.option("--label", "-l", default=None, help="Display label for the actor.")
@click.option("--location", default=None, help="World location as x,y,z.")
@click.option("--rotation", default=None, help="Rotation as pitch,yaw,roll in degrees.")
@click.option("--scale", default=None, help="Scale as x,y,z.")
@click.option("--physics", is_flag=True, help="Enable physics simulation and gravity.")
@handle_bridge_errors
def spawn(
    actor_class: str,
    mesh: Optional[str],
    label: Optional[str],
    location: Optional[str],
    rotation: Optional[str],
    scale: Optional[str],
    physics: bool,
):
    """Spawn an actor and configure it step by step.

    \b
    Examples:
        ue5-bridge spawn --mesh Cube --label Box1 --physics
        ue5-bridge spawn PointLight --location 0,0,300
    """
    result = run_async(spawn_actor(
        CliContext(),
        actor_class=actor_class,
        mesh=mesh,
        label=label,
        location=_parse_triplet(location, ("x", "y", "z"), "--location"),
        rotation=_parse_triplet(rotation, ("pitch", "yaw", "roll"), "--rotation"),
        scale=_parse_triplet(scale, ("x", "y", "z"), "--scale"),
        simulate_physics=physics,
    ))
    emit_result(result)
