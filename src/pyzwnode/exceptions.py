"""Custom exception hierarchy for pyzwnode."""

from __future__ import annotations


class ZWaveNodeError(Exception):
    """Base exception for all pyzwnode errors."""


class ZWaveConfigError(ZWaveNodeError):
    """Invalid or missing configuration."""


class DuplicateValueBindingError(ZWaveNodeError):
    """A second property tried to claim a value key that is already bound."""

    def __init__(
        self,
        message: str,
        *,
        value_key: str = "",
        existing: str = "",
    ) -> None:
        self.value_key = value_key
        self.existing = existing
        super().__init__(message)


class PropertyNotBoundError(ZWaveNodeError):
    """Write requested on a property that has no value key."""


class DeferredWriteError(ZWaveNodeError):
    """A pending write did not complete."""

    def __init__(self, message: str, *, property_name: str = "") -> None:
        self.property_name = property_name
        super().__init__(message)


class DeferredWriteTimeoutError(DeferredWriteError):
    """No value-changed confirmation arrived within the write timeout."""

    def __init__(
        self,
        message: str,
        *,
        property_name: str = "",
        timeout: float | None = None,
    ) -> None:
        self.timeout = timeout
        super().__init__(message, property_name=property_name)


class DeferredWriteCancelledError(DeferredWriteError):
    """A pending write was abandoned before the hardware confirmed it.

    Raised when a newer write supersedes it, or when the value it targets
    is removed from the node.
    """
