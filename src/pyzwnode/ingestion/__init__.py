"""Ingestion layer.

This package turns transport notifications into normalized
:class:`~pyzwnode.ingestion.events.ValueEvent` objects.  Only
:class:`pyzwnode.registry.NodeRegistry` applies them to nodes.
"""

__all__: list[str] = []
