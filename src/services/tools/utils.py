"""Shared helpers for tool argument coercion and result formatting."""
import json
from typing import Any

from models import MCPResponse, OperationStep

_TRUTHY = {"true", "1", "yes", "on"}
_FALSY = {"false", "0", "no", "off"}


def coerce_bool(value: Any, default: bool | None = None) -> bool | None:
    """Accept real booleans and the string forms some clients send."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return bool(value)
    text = str(value).strip().lower()
    if text in _TRUTHY:
        return True
    if text in _FALSY:
        return False
    return default


def coerce_int(value: Any, default: int | None = None) -> int | None:
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    try:
        s = str(value).strip()
        if s.lower() in ("", "none", "null"):
            return default
        return int(float(s))
    except (TypeError, ValueError):
        return default


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(value, high))


def to_json(value: Any) -> str:
    return json.dumps(value, default=str)


def render_steps(steps: list[OperationStep]) -> str:
    return "\n".join(f"- {step.render()}" for step in steps)


def success_result(message: str, data: Any = None) -> dict[str, Any]:
    return MCPResponse(success=True, message=message, data=data).model_dump(exclude_none=True)


def error_result(message: str, data: Any = None) -> dict[str, Any]:
    return MCPResponse(success=False, message=f"Error: {message}", data=data).model_dump(exclude_none=True)
