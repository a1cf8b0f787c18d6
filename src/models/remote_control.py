"""
Data models for Remote Control API traffic.

RcEnvelope is the normalized result of every single HTTP call. BatchOperation
is a tagged union (discriminated on ``type``) so each variant carries exactly
the fields it needs.
"""
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, model_validator

MAX_BATCH_OPERATIONS = 50


class RcEnvelope(BaseModel):
    """Normalized {ok, status, data} result of one Remote Control call."""
    ok: bool
    status: int
    data: Any = None

    @classmethod
    def from_status(cls, status: int, data: Any) -> "RcEnvelope":
        return cls(ok=200 <= status < 300, status=status, data=data)

    @model_validator(mode="after")
    def _ok_matches_status(self) -> "RcEnvelope":
        if self.ok != (200 <= self.status < 300):
            raise ValueError(f"ok={self.ok} contradicts HTTP status {self.status}")
        return self


class OperationStep(BaseModel):
    """One entry of a composite operation's step log."""
    description: str
    warning: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.warning is None

    def render(self) -> str:
        return self.description if self.warning is None else f"Warning: {self.warning}"


class CompositeResult(BaseModel):
    """Created identifier (None when the primary action failed) plus the ordered step log."""
    identifier: str | None = None
    steps: list[OperationStep] = Field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.identifier is not None

    @property
    def warnings(self) -> list[OperationStep]:
        return [step for step in self.steps if not step.succeeded]


class ResolvedReference(BaseModel):
    model_config = ConfigDict(frozen=True)

    token: str
    canonical_path: str


class CommandDescriptor(BaseModel):
    model_config = ConfigDict(frozen=True)

    object_path: str
    function_name: str
    parameters: dict[str, Any] | None = None
    description: str


# --- Transform values -------------------------------------------------------

class Location(BaseModel):
    x: float = 0
    y: float = 0
    z: float = 0

    def to_rc(self) -> dict[str, float]:
        return {"X": self.x, "Y": self.y, "Z": self.z}


class Rotation(BaseModel):
    pitch: float = 0
    yaw: float = 0
    roll: float = 0

    def to_rc(self) -> dict[str, float]:
        return {"Pitch": self.pitch, "Yaw": self.yaw, "Roll": self.roll}


class Scale(BaseModel):
    x: float = 1
    y: float = 1
    z: float = 1

    def to_rc(self) -> dict[str, float]:
        return {"X": self.x, "Y": self.y, "Z": self.z}


# --- Batch ------------------------------------------------------------------

class CallOperation(BaseModel):
    type: Literal["call"] = "call"
    object_path: str
    function_name: str
    parameters: dict[str, Any] = Field(default_factory=dict)

    def describe(self) -> str:
        return f"call `{self.object_path}`.{self.function_name}()"


class PropertyOperation(BaseModel):
    type: Literal["property"] = "property"
    object_path: str
    property_name: str
    property_value: Any = None

    def describe(self) -> str:
        return f"set `{self.object_path}`.{self.property_name}"


BatchOperation = Annotated[Union[CallOperation, PropertyOperation], Field(discriminator="type")]

batch_operations_adapter = TypeAdapter(list[BatchOperation])


class BatchVerdict(BaseModel):
    request_id: int
    operation: str
    status: int | None = None
    ok: bool = False
    error: str | None = None

    def render(self) -> str:
        icon = "OK" if self.ok else "FAIL"
        status = self.status if self.status is not None else "?"
        line = f"{self.request_id + 1}. [{icon}] {self.operation} — {status}"
        if self.error:
            line += f" ({self.error})"
        return line
