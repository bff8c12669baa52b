"""Generic device and property contract.

These are the pieces the Z-Wave layer builds on: cached value storage,
change-notification dispatch and a serializable snapshot.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any


class Property:
    """A named attribute of a device with a cached value."""

    def __init__(self, device: Device, name: str, *, description: dict[str, Any] | None = None) -> None:
        self.device = device
        self.name = name
        self.description: dict[str, Any] = dict(description or {})
        self.value: Any = None

    def set_cached_value(self, value: Any) -> Any:
        self.value = value
        return value

    def as_dict(self) -> dict[str, Any]:
        return {**self.description, "name": self.name, "value": self.value}


PropertyListener = Callable[[Property], None]


class Device:
    """A controllable thing exposing properties."""

    def __init__(self, device_id: str) -> None:
        self.id = device_id
        self.name = ""
        self.description = ""
        self.properties: dict[str, Property] = {}
        self._listeners: list[PropertyListener] = []

    def add_property(self, prop: Property) -> Property:
        self.properties[prop.name] = prop
        return prop

    def get_property(self, name: str) -> Property | None:
        return self.properties.get(name)

    def add_listener(self, listener: PropertyListener) -> None:
        """Register a callback invoked on every property change."""
        self._listeners.append(listener)

    def remove_listener(self, listener: PropertyListener) -> None:
        self._listeners = [cand for cand in self._listeners if cand is not listener]

    def notify_property_changed(self, prop: Property) -> None:
        for listener in list(self._listeners):
            listener(prop)

    def as_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "properties": {name: prop.as_dict() for name, prop in self.properties.items()},
        }
