"""Per-controller node registry.

This is the only component that applies :class:`ValueEvent`s to nodes.
Each node owns its own values and properties; nothing is shared between
nodes.
"""

from __future__ import annotations

import logging
from typing import Any

from pyzwnode.config import NodeConfig
from pyzwnode.ingestion.events import ValueEvent, ValueEventKind
from pyzwnode.ingestion.openzwave import build_metadata_patch, build_value_event
from pyzwnode.node import ZWaveNode
from pyzwnode.transport import ZWaveTransport

_logger = logging.getLogger(__name__)


class NodeRegistry:
    """The nodes of one controller."""

    def __init__(
        self,
        controller_id: int,
        *,
        transport: ZWaveTransport,
        config: NodeConfig | None = None,
    ) -> None:
        self.controller_id = controller_id
        self._transport = transport
        self._config = config or NodeConfig()
        self._nodes: dict[int, ZWaveNode] = {}

    def add_node(self, node_id: int) -> ZWaveNode:
        """Return the node for *node_id*, creating it on first use."""
        node = self._nodes.get(node_id)
        if node is None:
            node = ZWaveNode(
                self.controller_id,
                node_id,
                transport=self._transport,
                config=self._config,
            )
            self._nodes[node_id] = node
        return node

    def get_node(self, node_id: int) -> ZWaveNode | None:
        return self._nodes.get(node_id)

    def remove_node(self, node_id: int) -> ZWaveNode | None:
        """Forget a node, cancelling any write still waiting on it."""
        node = self._nodes.pop(node_id, None)
        if node is None:
            return None
        for prop in node.properties.values():
            deferred = getattr(prop, "deferred_set", None)
            if deferred is not None:
                prop.deferred_set = None  # type: ignore[attr-defined]
                deferred.cancel(f"node {node.id} was removed")
        return node

    def nodes(self) -> list[ZWaveNode]:
        return [self._nodes[node_id] for node_id in sorted(self._nodes)]

    def apply(self, event: ValueEvent) -> bool:
        """Route *event* to its node.

        Returns ``False`` when the node is unknown.
        """
        node = self._nodes.get(event.node_id)
        if node is None:
            _logger.debug("Dropping %s event for unknown node %d", event.kind, event.node_id)
            return False

        if event.kind == ValueEventKind.REMOVED:
            # _check_shape guarantees instance and index for removals.
            node.value_removed(event.command_class, event.instance, event.index)  # type: ignore[arg-type]
        elif event.kind == ValueEventKind.ADDED:
            node.value_added(event.command_class, event.value)  # type: ignore[arg-type]
        else:
            node.value_changed(event.command_class, event.value)  # type: ignore[arg-type]
        return True

    def apply_payload(self, kind: ValueEventKind | str, payload: dict[str, Any]) -> ValueEvent:
        """Build an event from a transport payload and apply it."""
        event = build_value_event(kind, payload)
        self.apply(event)
        return event

    def apply_node_info(self, node_id: int, node_info: dict[str, Any]) -> bool:
        """Merge a transport node-info report into the node's metadata."""
        node = self._nodes.get(node_id)
        if node is None:
            _logger.debug("Dropping node info for unknown node %d", node_id)
            return False
        patch = build_metadata_patch(node_info)
        if patch:
            node.update_metadata(**patch)
        return True

    def summary_lines(self) -> list[str]:
        """Header, separator, then one row per node in node id order."""
        lines = [ZWaveNode.one_line_header(0), ZWaveNode.one_line_header(1)]
        lines.extend(node.one_line_summary() for node in self.nodes())
        return lines
