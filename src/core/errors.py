"""Exception taxonomy for the bridge.

Only conditions the caller cannot recover from locally are exceptions.
Host-reported failures travel inside RcEnvelope (ok=False) and are decided
on by the orchestration layer.
"""
from __future__ import annotations

from typing import Iterable


class BridgeError(Exception):
    """Base class for every error the bridge raises on purpose."""


class RemoteControlError(BridgeError):
    """The round trip to the editor did not complete."""

    def __init__(self, message: str, url: str):
        super().__init__(message)
        self.url = url


class RemoteControlTimeoutError(RemoteControlError):
    def __init__(self, url: str, timeout_s: float):
        super().__init__(f"Request to {url} timed out after {timeout_s:g}s", url)
        self.timeout_s = timeout_s


class RemoteControlConnectionError(RemoteControlError):
    def __init__(self, url: str, reason: str):
        super().__init__(f"Failed to connect to UE5 editor at {url}: {reason}", url)
        self.reason = reason


class UnknownCommandError(BridgeError):
    def __init__(self, name: str, known: Iterable[str] = ()):
        known = sorted(known)
        message = f"Unknown command: {name}"
        if known:
            message += f". Available commands: {', '.join(known)}"
        super().__init__(message)
        self.name = name


class BatchValidationError(BridgeError):
    """Batch rejected before anything was sent."""
