"""A node on the Z-Wave network.

The node keeps the last reported state of every raw value, and mirrors
values into the :class:`~pyzwnode.property.ZWaveProperty` bound to them.
The transport drives it through :meth:`ZWaveNode.value_added`,
:meth:`ZWaveNode.value_changed` and :meth:`ZWaveNode.value_removed`; those
handlers are not reentrant and must be called from one thread.
"""

from __future__ import annotations

import logging
from typing import Any

from pyzwnode._constants import (
    BASIC_TYPE_WIDTH,
    LOCATION_WIDTH,
    NAME_WIDTH,
    NODE_ID_WIDTH,
    PRODUCT_WIDTH,
    STATUS_WIDTH,
    TYPE_WIDTH,
    basic_type_name,
)
from pyzwnode.config import NodeConfig
from pyzwnode.device import Device, Property
from pyzwnode.exceptions import DuplicateValueBindingError, ZWaveConfigError
from pyzwnode.models.node import NodeMetadata, NodeStatus
from pyzwnode.models.value import RawValue, ValueKey
from pyzwnode.property import ZWaveProperty
from pyzwnode.transport import ZWaveTransport

_logger = logging.getLogger(__name__)


class ZWaveNode(Device):
    """One node of a Z-Wave controller.

    ``node_id`` (1-255) is only unique within its controller, so the device
    id is ``<controller id in hex>-<node id>``.
    """

    properties: dict[str, ZWaveProperty]  # type: ignore[assignment]

    def __init__(
        self,
        controller_id: int,
        node_id: int,
        *,
        transport: ZWaveTransport,
        config: NodeConfig | None = None,
    ) -> None:
        super().__init__(f"{controller_id:x}-{node_id}")
        self.controller_id = controller_id
        self.node_id = node_id
        self.transport = transport
        self.config = config or NodeConfig()
        self.metadata = NodeMetadata(node_id=node_id)
        self.command_classes: list[int] = []
        self.raw_values: dict[ValueKey, RawValue] = {}
        self.status = NodeStatus.CONSTRUCTED
        self.ready = False
        self._default_name: str | None = None

    # ------------------------------------------------------------------
    # Identity
    # ------------------------------------------------------------------

    @property
    def default_name(self) -> str | None:
        return self._default_name

    @property
    def default_name_claimed(self) -> bool:
        return self._default_name is not None

    def _claim_default_name(self, label: str) -> bool:
        if self._default_name is not None:
            return False
        # The label of the first user value tells otherwise identical
        # nodes apart.
        self._default_name = f"{self.id}-{label}"
        if not self.name:
            self.name = self._default_name
        return True

    def update_metadata(self, **fields: Any) -> None:
        """Overwrite the given metadata fields.

        The patch is validated as a whole; a rejected patch changes nothing.
        Raises :class:`ZWaveConfigError` for names that are not metadata
        fields, and for ``node_id``, which is fixed at construction.
        """
        unknown = set(fields) - (set(NodeMetadata.model_fields) - {"node_id"})
        if unknown:
            raise ZWaveConfigError(f"cannot update node metadata fields: {', '.join(sorted(unknown))}")
        self.metadata = NodeMetadata.model_validate({**self.metadata.model_dump(), **fields})
        _logger.debug("node%d metadata: %s", self.node_id, fields)

    def as_dict(self) -> dict[str, Any]:
        result = super().as_dict()
        result["status"] = str(self.status)
        result["metadata"] = self.metadata.model_dump()
        result["command_classes"] = list(self.command_classes)
        result["raw_values"] = {str(key): value.as_dict() for key, value in self.raw_values.items()}
        return result

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    def add_property(self, prop: Property) -> Property:
        """Register *prop*, refusing a second claim on one value key.

        The check only runs when ``config.enforce_unique_bindings`` is set.
        Otherwise the first registered property wins lookups.
        """
        if self.config.enforce_unique_bindings and isinstance(prop, ZWaveProperty) and prop.value_key is not None:
            existing = self.find_property_from_value_id(prop.value_key)
            if existing is not None and existing is not prop:
                raise DuplicateValueBindingError(
                    f"value {prop.value_key} of {self.id} is already bound to property {existing.name!r}",
                    value_key=str(prop.value_key),
                    existing=existing.name,
                )
        return super().add_property(prop)

    def find_value_id(
        self,
        command_class: int,
        instance: int | None = None,
        index: int | None = None,
    ) -> ValueKey | None:
        """Return the key of the first value matching the criteria.

        ``instance`` and ``index`` match anything when omitted.  With several
        matches, which one comes first is unspecified.
        """
        for value_key, value in self.raw_values.items():
            if (
                value.class_id == command_class
                and (instance is None or value.instance == instance)
                and (index is None or value.index == index)
            ):
                return value_key
        return None

    def find_property_from_value_id(self, value_id: ValueKey | str) -> ZWaveProperty | None:
        try:
            value_key = ValueKey.coerce(value_id)
        except ValueError:
            # Not a well-formed key, so nothing can be bound to it.
            return None
        for prop in self.properties.values():
            if getattr(prop, "value_key", None) == value_key:
                return prop
        return None

    def _bound_properties(self, value_key: ValueKey) -> list[ZWaveProperty]:
        return [prop for prop in self.properties.values() if getattr(prop, "value_key", None) == value_key]

    def notify_property_changed(self, prop: Property) -> None:
        """Complete a pending write on *prop*, then dispatch the change.

        A write counts as done once the hardware reports the value back,
        so this is the only place a :class:`DeferredSet` gets resolved.
        """
        deferred = getattr(prop, "deferred_set", None)
        if deferred is not None:
            prop.deferred_set = None  # type: ignore[attr-defined]
            deferred.resolve(prop.value)
        super().notify_property_changed(prop)

    # ------------------------------------------------------------------
    # Value notifications
    # ------------------------------------------------------------------

    def _store_value(self, command_class: int, zw_value: RawValue) -> None:
        if command_class not in self.command_classes:
            self.command_classes.append(command_class)
        self.raw_values[zw_value.value_key] = zw_value

    def value_added(self, command_class: int, zw_value: RawValue) -> None:
        self.status = NodeStatus.VALUE_ADDED
        self._store_value(command_class, zw_value)
        value_key = zw_value.value_key
        units = zw_value.units_suffix

        properties = self._bound_properties(value_key)
        for prop in properties:
            value, log_value = prop.parse_zw_value(zw_value.value)
            prop.set_cached_value(value)
            _logger.info(
                "node%d valueAdded: %s:%s property: %s = %s%s",
                self.node_id,
                value_key,
                zw_value.label,
                prop.name,
                log_value,
                units,
            )
        if not properties and (zw_value.is_user or self.config.debug):
            _logger.info(
                "node%d valueAdded: %s:%s = %s%s",
                self.node_id,
                value_key,
                zw_value.label,
                zw_value.value,
                units,
            )

        if zw_value.is_user:
            self._claim_default_name(zw_value.label)

    def value_changed(self, command_class: int, zw_value: RawValue) -> None:
        self.status = NodeStatus.VALUE_CHANGED
        self._store_value(command_class, zw_value)
        value_key = zw_value.value_key
        units = zw_value.units_suffix

        properties = self._bound_properties(value_key)
        for prop in properties:
            value, log_value = prop.parse_zw_value(zw_value.value)
            prop.set_cached_value(value)
            _logger.info(
                "node%d valueChanged: %s:%s property: %s = %s%s",
                self.node_id,
                value_key,
                zw_value.label,
                prop.name,
                log_value,
                units,
            )
            self.notify_property_changed(prop)
        # Unlike value_added, unmatched changes are always logged.
        if not properties:
            _logger.info(
                "node%d valueChanged: %s:%s = %s%s",
                self.node_id,
                value_key,
                zw_value.label,
                zw_value.value,
                units,
            )

    def value_removed(self, command_class: int, instance: int, index: int) -> None:
        self.status = NodeStatus.VALUE_REMOVED
        value_key = ValueKey(self.node_id, command_class, instance, index)
        zw_value = self.raw_values.pop(value_key, None)
        if zw_value is None:
            _logger.info("node%d valueRemoved unknown valueId: %s", self.node_id, value_key)
            return

        # command_classes is left alone even if this was the class's last value.
        units = zw_value.units_suffix
        properties = self._bound_properties(value_key)
        for prop in properties:
            _value, log_value = prop.parse_zw_value(zw_value.value)
            prop.unbind()
            deferred = prop.deferred_set
            if deferred is not None:
                prop.deferred_set = None
                deferred.cancel(f"value {value_key} was removed")
            _logger.info(
                "node%d valueRemoved: %s:%s property: %s = %s%s",
                self.node_id,
                value_key,
                zw_value.label,
                prop.name,
                log_value,
                units,
            )
        if not properties:
            _logger.info(
                "node%d valueRemoved: %s:%s = %s%s",
                self.node_id,
                value_key,
                zw_value.label,
                zw_value.value,
                units,
            )

    # ------------------------------------------------------------------
    # Summary table
    # ------------------------------------------------------------------

    @staticmethod
    def one_line_header(line: int) -> str:
        """Column titles for ``line == 0``, a dash separator otherwise."""
        if line == 0:
            return " ".join(
                (
                    "Node",
                    "LastStat",
                    "Basic Type".ljust(BASIC_TYPE_WIDTH),
                    "Type".ljust(TYPE_WIDTH),
                    "Product Name".ljust(PRODUCT_WIDTH),
                    "Name".ljust(NAME_WIDTH),
                    "Location",
                )
            )
        widths = (
            NODE_ID_WIDTH + 1,
            STATUS_WIDTH,
            BASIC_TYPE_WIDTH,
            TYPE_WIDTH,
            PRODUCT_WIDTH,
            NAME_WIDTH,
            LOCATION_WIDTH,
        )
        return " ".join("-" * width for width in widths)

    def one_line_summary(self) -> str:
        basic = self.transport.get_node_basic(self.node_id)
        return (
            f"{str(self.node_id).rjust(NODE_ID_WIDTH)}: "
            f"{str(self.status).ljust(STATUS_WIDTH)} "
            f"{basic_type_name(basic).ljust(BASIC_TYPE_WIDTH)} "
            f"{self.metadata.type.ljust(TYPE_WIDTH)} "
            f"{self.metadata.product.ljust(PRODUCT_WIDTH)} "
            f"{self.name.ljust(NAME_WIDTH)} "
            f"{self.metadata.location}"
        )
