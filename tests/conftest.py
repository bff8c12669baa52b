from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from pyzwnode.models.value import RawValue, ValueKey
from pyzwnode.node import ZWaveNode

CONTROLLER_ID = 0xC0FFEE
NODE_ID = 3


class FakeTransport:
    """Records writes and answers basic-type queries from a table."""

    def __init__(self, basic: dict[int, int] | None = None) -> None:
        self.basic = basic or {}
        self.writes: list[tuple[ValueKey, Any]] = []

    def get_node_basic(self, node_id: int) -> int:
        return self.basic.get(node_id, 0)

    def set_value(self, value_key: ValueKey, value: Any) -> None:
        self.writes.append((value_key, value))


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture
def node(transport: FakeTransport) -> ZWaveNode:
    return ZWaveNode(CONTROLLER_ID, NODE_ID, transport=transport)


@pytest.fixture
def make_value() -> Callable[..., RawValue]:
    def _make(class_id: int = 37, instance: int = 1, index: int = 0, **fields: Any) -> RawValue:
        payload: dict[str, Any] = {
            "node_id": fields.pop("node_id", NODE_ID),
            "class_id": class_id,
            "instance": instance,
            "index": index,
            "label": "Switch",
            "genre": "user",
            "value": False,
        }
        payload["value_id"] = f"{payload['node_id']}-{class_id}-{instance}-{index}"
        payload.update(fields)
        return RawValue.model_validate(payload)

    return _make
