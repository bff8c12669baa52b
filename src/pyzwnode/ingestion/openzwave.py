"""Build value events from OpenZWave-style notification payloads.

Value payloads are the dicts the OpenZWave bindings hand to their
``value added`` / ``value changed`` callbacks::

    {"value_id": "3-37-1-0", "node_id": 3, "class_id": 37, "instance": 1,
     "index": 0, "label": "Switch", "genre": "user", "value": True, ...}

Removals only carry the address: ``{"node_id", "class_id", "instance",
"index"}``.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from pyzwnode.ingestion.events import ValueEvent, ValueEventKind
from pyzwnode.models._base import ZWaveBaseModel
from pyzwnode.models.value import RawValue


class _RemovedValueRef(ZWaveBaseModel):
    node_id: int = Field(..., ge=0)
    class_id: int = Field(..., ge=0)
    instance: int = Field(..., ge=0)
    index: int = Field(..., ge=0)


# OpenZWave node-info keys -> NodeMetadata fields.
_NODE_INFO_FIELDS: dict[str, str] = {
    "loc": "location",
    "manufacturer": "manufacturer",
    "manufacturerid": "manufacturer_id",
    "product": "product",
    "productid": "product_id",
    "producttype": "product_type",
    "type": "type",
}


def build_value_event(kind: ValueEventKind | str, payload: dict[str, Any]) -> ValueEvent:
    """Convert a transport payload into a :class:`ValueEvent`.

    Raises :class:`pydantic.ValidationError` for malformed payloads.
    """
    event_kind = ValueEventKind(kind)
    if event_kind == ValueEventKind.REMOVED:
        ref = _RemovedValueRef.model_validate(payload)
        return ValueEvent(
            node_id=ref.node_id,
            kind=event_kind,
            command_class=ref.class_id,
            instance=ref.instance,
            index=ref.index,
        )

    value = RawValue.model_validate(payload)
    return ValueEvent(
        node_id=value.node_id,
        kind=event_kind,
        command_class=value.class_id,
        value=value,
    )


def build_metadata_patch(node_info: dict[str, Any]) -> dict[str, str]:
    """Extract :class:`~pyzwnode.models.node.NodeMetadata` fields from node info.

    Keys with no metadata counterpart and empty values are dropped, so a
    partial report never blanks a known field.
    """
    patch: dict[str, str] = {}
    for key, field_name in _NODE_INFO_FIELDS.items():
        value = node_info.get(key)
        if value is None or value == "":
            continue
        patch[field_name] = str(value)
    return patch
