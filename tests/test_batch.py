"""Tests for batch translation and response correlation."""
import pytest

from core.errors import BatchValidationError, RemoteControlConnectionError, RemoteControlTimeoutError
from models import CallOperation, PropertyOperation
from services import batch
from tests.integration.test_helpers import fail, ok

CUBE = "/Game/Maps/Main.Main:PersistentLevel.Cube_1"
LIGHT = "/Game/Maps/Main.Main:PersistentLevel.PointLight_2"


class FakeBatchEndpoint:
    def __init__(self, result):
        self.result = result
        self.requests = []

    async def __call__(self, path, method="GET", body=None):
        self.requests.append((path, method, body))
        if isinstance(self.result, BaseException):
            raise self.result
        return self.result


def install(monkeypatch, result) -> FakeBatchEndpoint:
    endpoint = FakeBatchEndpoint(result)
    monkeypatch.setattr(batch, "rc_fetch", endpoint)
    return endpoint


def three_ops():
    return [
        {"type": "call", "object_path": CUBE, "function_name": "K2_DestroyActor"},
        {"type": "property", "object_path": LIGHT, "property_name": "Intensity", "property_value": 5000},
        {"type": "call", "object_path": LIGHT, "function_name": "SetActorHiddenInGame",
         "parameters": {"bNewHidden": True}},
    ]


class TestTranslation:
    def test_call_operation_shape(self):
        op = CallOperation(object_path=CUBE, function_name="K2_DestroyActor")

        assert batch.translate_operation(op, 4) == {
            "RequestId": 4,
            "URL": "/remote/object/call",
            "Verb": "PUT",
            "Body": {
                "objectPath": CUBE,
                "functionName": "K2_DestroyActor",
                "parameters": {},
                "generateTransaction": True,
            },
        }

    def test_property_operation_shape(self):
        op = PropertyOperation(object_path=LIGHT, property_name="Intensity", property_value=5000)

        assert batch.translate_operation(op, 0) == {
            "RequestId": 0,
            "URL": "/remote/object/property",
            "Verb": "PUT",
            "Body": {"objectPath": LIGHT, "propertyName": "Intensity", "propertyValue": 5000},
        }

    def test_unknown_operation_type_is_rejected(self):
        with pytest.raises(TypeError):
            batch.translate_operation(object(), 0)

    def test_request_ids_are_submission_indices(self):
        payload = batch.build_batch_request(batch.parse_operations(three_ops()))

        assert [r["RequestId"] for r in payload["Requests"]] == [0, 1, 2]
        assert [r["URL"] for r in payload["Requests"]] == [
            "/remote/object/call", "/remote/object/property", "/remote/object/call",
        ]


class TestValidation:
    @pytest.mark.asyncio
    async def test_empty_batch_rejected_without_network(self, monkeypatch):
        endpoint = install(monkeypatch, ok())

        with pytest.raises(BatchValidationError):
            await batch.run_batch([])

        assert endpoint.requests == []

    @pytest.mark.asyncio
    async def test_oversized_batch_rejected_without_network(self, monkeypatch):
        endpoint = install(monkeypatch, ok())
        ops = [{"type": "call", "object_path": CUBE, "function_name": "K2_DestroyActor"}] * 51

        with pytest.raises(BatchValidationError, match="at most 50"):
            await batch.run_batch(ops)

        assert endpoint.requests == []

    def test_fifty_operations_accepted(self):
        ops = [{"type": "call", "object_path": CUBE, "function_name": "K2_DestroyActor"}] * 50

        assert len(batch.parse_operations(ops)) == 50

    @pytest.mark.parametrize("raw", [
        {"type": "teleport", "object_path": CUBE},
        {"type": "call", "object_path": CUBE},
        {"type": "property", "property_name": "Intensity"},
    ])
    def test_malformed_operation_rejected(self, raw):
        with pytest.raises(BatchValidationError, match="Invalid batch operation"):
            batch.parse_operations([raw])

    def test_models_and_dicts_can_be_mixed(self):
        ops = batch.parse_operations([
            CallOperation(object_path=CUBE, function_name="K2_DestroyActor"),
            {"type": "property", "object_path": LIGHT, "property_name": "Intensity"},
        ])

        assert isinstance(ops[0], CallOperation)
        assert isinstance(ops[1], PropertyOperation)


class TestRunBatch:
    @pytest.mark.asyncio
    async def test_out_of_order_responses_are_correlated(self, monkeypatch):
        endpoint = install(monkeypatch, ok({"Responses": [
            {"RequestId": 2, "ResponseCode": 200, "StatusCode": 200},
            {"RequestId": 0, "StatusCode": 200},
            {"RequestId": 1, "StatusCode": 404},
        ]}))

        verdicts, failure = await batch.run_batch(three_ops())

        assert failure is None
        assert [(v.request_id, v.status, v.ok) for v in verdicts] == [
            (0, 200, True), (1, 404, False), (2, 200, True),
        ]
        assert len(endpoint.requests) == 1
        path, method, body = endpoint.requests[0]
        assert (path, method) == ("/remote/batch", "PUT")
        assert len(body["Requests"]) == 3

    @pytest.mark.asyncio
    async def test_null_status_code_falls_back_to_status(self, monkeypatch):
        install(monkeypatch, ok({"Responses": [{"RequestId": 0, "StatusCode": None, "status": 200}]}))

        verdicts, _ = await batch.run_batch(three_ops()[:1])

        assert verdicts[0].status == 200
        assert verdicts[0].ok is True

    @pytest.mark.asyncio
    async def test_lowercase_status_field_is_read(self, monkeypatch):
        install(monkeypatch, ok({"Responses": [{"RequestId": 0, "status": 204}]}))

        verdicts, _ = await batch.run_batch(three_ops()[:1])

        assert verdicts[0].ok is True
        assert verdicts[0].status == 204

    @pytest.mark.asyncio
    async def test_bare_list_response_is_accepted(self, monkeypatch):
        install(monkeypatch, ok([{"RequestId": 1, "StatusCode": 200}, {"RequestId": 0, "StatusCode": 500}]))

        verdicts, _ = await batch.run_batch(three_ops()[:2])

        assert [v.ok for v in verdicts] == [False, True]

    @pytest.mark.asyncio
    async def test_entries_without_request_id_match_by_position(self, monkeypatch):
        install(monkeypatch, ok({"Responses": [
            {"StatusCode": 200},
            {"StatusCode": 500},
            {"StatusCode": 200},
        ]}))

        verdicts, _ = await batch.run_batch(three_ops())

        assert [v.ok for v in verdicts] == [True, False, True]

    @pytest.mark.asyncio
    async def test_truncated_response_fails_missing_operations(self, monkeypatch):
        install(monkeypatch, ok({"Responses": [{"RequestId": 0, "StatusCode": 200}]}))

        verdicts, failure = await batch.run_batch(three_ops())

        assert failure is None
        assert len(verdicts) == 3
        assert verdicts[0].ok is True
        assert [v.error for v in verdicts[1:]] == ["no response entry", "no response entry"]
        assert all(v.status is None and not v.ok for v in verdicts[1:])

    @pytest.mark.asyncio
    async def test_identified_entry_is_not_reused_positionally(self, monkeypatch):
        install(monkeypatch, ok({"Responses": [{"RequestId": 1, "StatusCode": 200}]}))

        verdicts, _ = await batch.run_batch(three_ops()[:2])

        assert verdicts[0].ok is False
        assert verdicts[0].error == "no response entry"
        assert verdicts[1].ok is True

    @pytest.mark.asyncio
    async def test_rejected_batch_fails_every_operation(self, monkeypatch):
        install(monkeypatch, fail(500, "Internal error"))

        verdicts, failure = await batch.run_batch(three_ops())

        assert failure.startswith("Batch request failed (HTTP 500)")
        assert len(verdicts) == 3
        assert all(not v.ok and v.status == 500 for v in verdicts)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("error", [
        RemoteControlTimeoutError("http://localhost:30010/remote/batch", 10.0),
        RemoteControlConnectionError("http://localhost:30010/remote/batch", "connection refused"),
    ])
    async def test_transport_failure_fails_every_operation(self, monkeypatch, error):
        install(monkeypatch, error)

        verdicts, failure = await batch.run_batch(three_ops())

        assert failure == str(error)
        assert len(verdicts) == 3
        assert all(not v.ok for v in verdicts)
        assert [v.request_id for v in verdicts] == [0, 1, 2]

    @pytest.mark.asyncio
    async def test_verdict_render(self, monkeypatch):
        install(monkeypatch, ok({"Responses": [{"RequestId": 0, "StatusCode": 200}]}))

        verdicts, _ = await batch.run_batch(three_ops()[:2])

        assert verdicts[0].render() == f"1. [OK] call `{CUBE}`.K2_DestroyActor() — 200"
        assert verdicts[1].render() == f"2. [FAIL] set `{LIGHT}`.Intensity — ? (no response entry)"
