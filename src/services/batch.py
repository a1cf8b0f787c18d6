"""
Batch translation for the Remote Control ``/remote/batch`` endpoint.

Operations are tagged with RequestId = submission index. The editor may answer
out of order, so verdicts are matched back by RequestId. Policies:

- transport failure or a non-2xx batch response: every operation fails;
- a response entry without RequestId is matched by its position;
- an operation with no matching entry (truncated response) fails.
"""
import logging
from typing import Any, Sequence

from pydantic import ValidationError

from core.errors import BatchValidationError, RemoteControlError
from models import (
    MAX_BATCH_OPERATIONS,
    BatchVerdict,
    CallOperation,
    PropertyOperation,
    batch_operations_adapter,
)
from transport.rc_client import BATCH_ENDPOINT, CALL_ENDPOINT, PROPERTY_ENDPOINT, rc_fetch

logger = logging.getLogger("ue5-remote-bridge")

BatchOp = CallOperation | PropertyOperation


def parse_operations(operations: Sequence[Any]) -> list[BatchOp]:
    """Validate raw operations (dicts or models) into the tagged union."""
    if not operations:
        raise BatchValidationError("Batch requires at least one operation")
    if len(operations) > MAX_BATCH_OPERATIONS:
        raise BatchValidationError(
            f"Batch accepts at most {MAX_BATCH_OPERATIONS} operations, got {len(operations)}"
        )
    raw = [op.model_dump() if isinstance(op, (CallOperation, PropertyOperation)) else op for op in operations]
    try:
        return batch_operations_adapter.validate_python(raw)
    except ValidationError as exc:
        raise BatchValidationError(f"Invalid batch operation: {exc}") from exc


def translate_operation(op: BatchOp, request_id: int) -> dict[str, Any]:
    if isinstance(op, CallOperation):
        return {
            "RequestId": request_id,
            "URL": CALL_ENDPOINT,
            "Verb": "PUT",
            "Body": {
                "objectPath": op.object_path,
                "functionName": op.function_name,
                "parameters": op.parameters or {},
                "generateTransaction": True,
            },
        }
    if isinstance(op, PropertyOperation):
        return {
            "RequestId": request_id,
            "URL": PROPERTY_ENDPOINT,
            "Verb": "PUT",
            "Body": {
                "objectPath": op.object_path,
                "propertyName": op.property_name,
                "propertyValue": op.property_value,
            },
        }
    raise TypeError(f"Unsupported batch operation: {type(op).__name__}")


def build_batch_request(operations: Sequence[BatchOp]) -> dict[str, Any]:
    return {"Requests": [translate_operation(op, index) for index, op in enumerate(operations)]}


def _status_of(entry: Any) -> int | None:
    if not isinstance(entry, dict):
        return None
    status = entry.get("StatusCode") or entry.get("status")
    try:
        return int(status) if status is not None else None
    except (TypeError, ValueError):
        return None


def _response_entries(data: Any) -> list[Any]:
    if isinstance(data, dict):
        data = data.get("Responses", [])
    return data if isinstance(data, list) else []


def correlate_responses(operations: Sequence[BatchOp], data: Any) -> list[BatchVerdict]:
    """Produce one verdict per operation, in submission order."""
    entries = _response_entries(data)
    by_id: dict[int, Any] = {}
    for entry in entries:
        if isinstance(entry, dict) and entry.get("RequestId") is not None:
            try:
                by_id.setdefault(int(entry["RequestId"]), entry)
            except (TypeError, ValueError):
                continue

    verdicts = []
    for index, op in enumerate(operations):
        entry = by_id.get(index)
        if entry is None and index < len(entries):
            positional = entries[index]
            if not (isinstance(positional, dict) and positional.get("RequestId") is not None):
                entry = positional

        if entry is None:
            verdicts.append(BatchVerdict(
                request_id=index, operation=op.describe(), error="no response entry",
            ))
            continue

        status = _status_of(entry)
        ok = status is not None and 200 <= status < 300
        verdicts.append(BatchVerdict(request_id=index, operation=op.describe(), status=status, ok=ok))
    return verdicts


def _all_failed(operations: Sequence[BatchOp], error: str, status: int | None = None) -> list[BatchVerdict]:
    return [
        BatchVerdict(request_id=index, operation=op.describe(), status=status, error=error)
        for index, op in enumerate(operations)
    ]


async def run_batch(operations: Sequence[Any]) -> tuple[list[BatchVerdict], str | None]:
    """Submit ``operations`` as one batch request.

    Returns the verdicts (always one per operation) and, when the round trip
    itself failed, the reason. Raises BatchValidationError before sending
    anything if the operations are malformed or out of bounds.
    """
    ops = parse_operations(operations)
    payload = build_batch_request(ops)
    logger.info("Submitting batch of %d operations", len(ops))

    try:
        envelope = await rc_fetch(BATCH_ENDPOINT, "PUT", payload)
    except RemoteControlError as exc:
        return _all_failed(ops, "batch request failed"), str(exc)

    if not envelope.ok:
        reason = f"Batch request failed (HTTP {envelope.status}): {envelope.data}"
        logger.warning(reason)
        return _all_failed(ops, "batch rejected", envelope.status), reason

    verdicts = correlate_responses(ops, envelope.data)
    failed = sum(1 for v in verdicts if not v.ok)
    if failed:
        logger.warning("Batch finished with %d/%d failed operations", failed, len(verdicts))
    return verdicts, None
