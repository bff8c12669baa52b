"""Data models for Z-Wave transport payloads."""

from pyzwnode.models._base import ZWaveBaseModel, ZWaveStrEnum
from pyzwnode.models.node import NodeMetadata, NodeStatus
from pyzwnode.models.value import RawValue, ValueGenre, ValueKey

__all__ = [
    "NodeMetadata",
    "NodeStatus",
    "RawValue",
    "ValueGenre",
    "ValueKey",
    "ZWaveBaseModel",
    "ZWaveStrEnum",
]
