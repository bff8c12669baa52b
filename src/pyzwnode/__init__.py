"""pyzwnode - Z-Wave node value to property synchronization."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyzwnode")
except PackageNotFoundError:
    __version__ = "0+local"
from pyzwnode.config import NodeConfig
from pyzwnode.deferred import DeferredSet
from pyzwnode.device import Device, Property
from pyzwnode.exceptions import (
    DeferredWriteCancelledError,
    DeferredWriteError,
    DeferredWriteTimeoutError,
    DuplicateValueBindingError,
    PropertyNotBoundError,
    ZWaveConfigError,
    ZWaveNodeError,
)
from pyzwnode.ingestion.events import ValueEvent, ValueEventKind
from pyzwnode.ingestion.openzwave import build_metadata_patch, build_value_event
from pyzwnode.models import NodeMetadata, NodeStatus, RawValue, ValueGenre, ValueKey
from pyzwnode.node import ZWaveNode
from pyzwnode.property import BooleanProperty, LevelProperty, ZWaveProperty
from pyzwnode.registry import NodeRegistry
from pyzwnode.transport import ZWaveTransport

__all__ = [
    "__version__",
    "BooleanProperty",
    "DeferredSet",
    "DeferredWriteCancelledError",
    "DeferredWriteError",
    "DeferredWriteTimeoutError",
    "Device",
    "DuplicateValueBindingError",
    "LevelProperty",
    "NodeConfig",
    "NodeMetadata",
    "NodeRegistry",
    "NodeStatus",
    "Property",
    "PropertyNotBoundError",
    "RawValue",
    "ValueEvent",
    "ValueEventKind",
    "ValueGenre",
    "ValueKey",
    "ZWaveConfigError",
    "ZWaveNode",
    "ZWaveNodeError",
    "ZWaveProperty",
    "ZWaveTransport",
    "build_metadata_patch",
    "build_value_event",
]
