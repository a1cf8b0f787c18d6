from .models import MCPResponse
from .remote_control import (
    MAX_BATCH_OPERATIONS,
    BatchOperation,
    BatchVerdict,
    CallOperation,
    CommandDescriptor,
    CompositeResult,
    Location,
    OperationStep,
    PropertyOperation,
    RcEnvelope,
    ResolvedReference,
    Rotation,
    Scale,
    batch_operations_adapter,
)

__all__ = [
    "MCPResponse",
    "MAX_BATCH_OPERATIONS",
    "BatchOperation",
    "BatchVerdict",
    "CallOperation",
    "CommandDescriptor",
    "CompositeResult",
    "Location",
    "OperationStep",
    "PropertyOperation",
    "RcEnvelope",
    "ResolvedReference",
    "Rotation",
    "Scale",
    "batch_operations_adapter",
]
