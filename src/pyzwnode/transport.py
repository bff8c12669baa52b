"""Interface of the hardware transport a node talks to."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from pyzwnode.models.value import ValueKey


@runtime_checkable
class ZWaveTransport(Protocol):
    """The driver side of a node.

    Value notifications flow *from* the transport into
    :class:`pyzwnode.node.ZWaveNode`; these are the calls flowing the
    other way.
    """

    def get_node_basic(self, node_id: int) -> int:
        """Return the basic device type code of *node_id*."""
        ...

    def set_value(self, value_key: ValueKey, value: Any) -> None:
        """Issue a write.  Completion is reported as a value change."""
        ...
