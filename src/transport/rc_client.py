"""HTTP client for the UE5 Remote Control API.

Every call is bounded by a fixed timeout and is never retried: a side-effecting
request (spawn, destroy) must not be duplicated silently. Non-2xx responses are
returned as envelopes with ok=False; only timeouts and transport failures raise.
"""
from __future__ import annotations

import asyncio
import json
import logging
from threading import RLock
from typing import Any, Literal

import httpx

from core.config import config
from core.errors import RemoteControlConnectionError, RemoteControlTimeoutError
from models import RcEnvelope

logger = logging.getLogger("ue5-remote-bridge")

HttpMethod = Literal["GET", "PUT", "POST", "DELETE"]

CALL_ENDPOINT = "/remote/object/call"
PROPERTY_ENDPOINT = "/remote/object/property"
DESCRIBE_ENDPOINT = "/remote/object/describe"
SEARCH_ENDPOINT = "/remote/search/assets"
BATCH_ENDPOINT = "/remote/batch"
INFO_ENDPOINT = "/remote/info"

READ_ACCESS = "READ_ACCESS"

_UNSET: Any = object()


def _parse_body(text: str) -> Any:
    try:
        return json.loads(text)
    except ValueError:
        return text


class RemoteControlClient:
    """Issues single Remote Control requests and normalizes them into RcEnvelope."""

    def __init__(
        self,
        base_url: str,
        timeout_s: float = config.request_timeout_s,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout_s = timeout_s
        # Injected in tests (httpx.MockTransport); None means a real network transport.
        self._transport = transport

    async def fetch(self, path: str, method: HttpMethod = "GET", body: Any = None) -> RcEnvelope:
        url = f"{self.base_url}{path}"
        logger.debug("RC %s %s body=%s", method, url, body)
        try:
            envelope = await asyncio.wait_for(self._send(url, method, body), timeout=self.timeout_s)
        except asyncio.TimeoutError as exc:
            logger.warning("RC %s %s timed out after %.1fs", method, url, self.timeout_s)
            raise RemoteControlTimeoutError(url, self.timeout_s) from exc
        except httpx.TimeoutException as exc:
            logger.warning("RC %s %s timed out in transport", method, url)
            raise RemoteControlTimeoutError(url, self.timeout_s) from exc
        except httpx.RequestError as exc:
            # NOTE: some httpx errors have an empty str(); fall back to the class name.
            reason = str(exc) or type(exc).__name__
            logger.warning("RC %s %s connection failed: %s", method, url, reason)
            raise RemoteControlConnectionError(url, reason) from exc

        if not envelope.ok:
            logger.info("RC %s %s returned HTTP %d", method, url, envelope.status)
        return envelope

    async def _send(self, url: str, method: HttpMethod, body: Any) -> RcEnvelope:
        # The overall bound is enforced by wait_for in fetch().
        async with httpx.AsyncClient(transport=self._transport, timeout=None) as client:
            if body is None:
                response = await client.request(method, url)
            else:
                response = await client.request(method, url, json=body)
        return RcEnvelope.from_status(response.status_code, _parse_body(response.text))

    async def call(
        self,
        object_path: str,
        function_name: str,
        parameters: dict[str, Any] | None = None,
    ) -> RcEnvelope:
        """Invoke a function on a remote object, grouped into an editor transaction."""
        return await self.fetch(CALL_ENDPOINT, "PUT", {
            "objectPath": object_path,
            "functionName": function_name,
            "parameters": parameters or {},
            "generateTransaction": True,
        })

    async def property(self, object_path: str, property_name: str, value: Any = _UNSET) -> RcEnvelope:
        """Write ``value`` to a property, or read it when no value is given."""
        body: dict[str, Any] = {"objectPath": object_path, "propertyName": property_name}
        if value is _UNSET:
            body["access"] = READ_ACCESS
        else:
            body["propertyValue"] = value
        return await self.fetch(PROPERTY_ENDPOINT, "PUT", body)


# Lazily created from config on first use; tests swap it with set_rc_client().
_rc_client: RemoteControlClient | None = None
_client_lock = RLock()


def get_rc_client() -> RemoteControlClient:
    global _rc_client
    if _rc_client is None:
        with _client_lock:
            if _rc_client is None:
                _rc_client = RemoteControlClient(config.base_url, config.request_timeout_s)
                logger.info("Remote Control endpoint: %s", config.base_url)
    return _rc_client


def set_rc_client(client: RemoteControlClient | None) -> None:
    """Replace the process-wide client (None resets to the config default)."""
    global _rc_client
    with _client_lock:
        _rc_client = client


async def rc_fetch(path: str, method: HttpMethod = "GET", body: Any = None) -> RcEnvelope:
    return await get_rc_client().fetch(path, method, body)


async def rc_call(object_path: str, function_name: str, parameters: dict[str, Any] | None = None) -> RcEnvelope:
    return await get_rc_client().call(object_path, function_name, parameters)


async def rc_property(object_path: str, property_name: str, value: Any = _UNSET) -> RcEnvelope:
    return await get_rc_client().property(object_path, property_name, value)
