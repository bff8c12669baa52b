"""Properties bound to raw Z-Wave values."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pyzwnode.deferred import DeferredSet
from pyzwnode.device import Property
from pyzwnode.exceptions import DeferredWriteTimeoutError, PropertyNotBoundError
from pyzwnode.models.value import ValueKey

if TYPE_CHECKING:
    from pyzwnode.node import ZWaveNode

_logger = logging.getLogger(__name__)

# Multilevel switches report 0-99, with 99 meaning fully on.
_LEVEL_MAX = 99


class ZWaveProperty(Property):
    """A property whose value mirrors one raw value of its node.

    ``value_key`` may be ``None`` while the value is not (or no longer)
    reported by the hardware.
    """

    device: ZWaveNode

    def __init__(
        self,
        device: ZWaveNode,
        name: str,
        *,
        value_key: ValueKey | str | None = None,
        description: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(device, name, description=description)
        self.value_key: ValueKey | None = ValueKey.coerce(value_key) if value_key is not None else None
        self.deferred_set: DeferredSet | None = None

    def parse_zw_value(self, zw_value: Any) -> tuple[Any, str]:
        """Convert a transport value into ``(typed_value, display_string)``."""
        return zw_value, str(zw_value)

    def to_zw_value(self, value: Any) -> Any:
        """Convert a typed value into what the transport expects."""
        return value

    def unbind(self) -> None:
        self.value_key = None
        self.value = None

    def as_dict(self) -> dict[str, Any]:
        result = super().as_dict()
        result["value_key"] = str(self.value_key) if self.value_key is not None else None
        return result

    async def set_value(self, value: Any) -> Any:
        """Write *value* and wait until the hardware reports it back.

        Returns the confirmed value, which may differ from the requested
        one if the device clamps it.

        Raises
        ------
        PropertyNotBoundError
            If the property has no value key.
        DeferredWriteTimeoutError
            If no confirmation arrives within the node's configured timeout.
        DeferredWriteCancelledError
            If a newer write supersedes this one, or the value is removed.
        """
        if self.value_key is None:
            raise PropertyNotBoundError(f"property {self.name!r} of {self.device.id} is not bound to a value")

        previous = self.deferred_set
        if previous is not None:
            previous.cancel("superseded by a newer write")

        deferred = DeferredSet(self.name, value)
        self.deferred_set = deferred
        timeout = self.device.config.deferred_set_timeout
        try:
            self.device.transport.set_value(self.value_key, self.to_zw_value(value))
            return await deferred.wait(timeout)
        except DeferredWriteTimeoutError:
            _logger.warning(
                "node%d setValue: %s property: %s = %s not confirmed within %ss",
                self.device.node_id,
                self.value_key,
                self.name,
                value,
                timeout,
            )
            raise
        finally:
            if self.deferred_set is deferred:
                self.deferred_set = None


class BooleanProperty(ZWaveProperty):
    """An on/off property."""

    def parse_zw_value(self, zw_value: Any) -> tuple[Any, str]:
        value = bool(zw_value)
        return value, "on" if value else "off"

    def to_zw_value(self, value: Any) -> Any:
        return bool(value)


class LevelProperty(ZWaveProperty):
    """A 0-100 percentage backed by a 0-99 multilevel value."""

    def parse_zw_value(self, zw_value: Any) -> tuple[Any, str]:
        level = float(zw_value)
        percent = 100.0 if level >= _LEVEL_MAX else max(0.0, level)
        return percent, f"{percent:.1f}%"

    def to_zw_value(self, value: Any) -> Any:
        percent = min(100.0, max(0.0, float(value)))
        return min(_LEVEL_MAX, round(percent))
