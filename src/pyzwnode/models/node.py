"""Node descriptive models."""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict


class NodeStatus(enum.StrEnum):
    """Kind of the last mutation applied to a node."""

    CONSTRUCTED = "constructed"
    VALUE_ADDED = "value-added"
    VALUE_CHANGED = "value-changed"
    VALUE_REMOVED = "value-removed"


class NodeMetadata(BaseModel):
    """Descriptive node fields, discovered asynchronously.

    Fields are independent; the last write to each one wins.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    location: str = ""
    node_id: int
    manufacturer: str = ""
    manufacturer_id: str = ""
    product: str = ""
    product_id: str = ""
    product_type: str = ""
    type: str = ""
