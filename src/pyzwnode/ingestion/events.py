"""Normalized value events.

Every transport notification about a raw value is converted into one of
these before it reaches a node.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from pyzwnode.models.value import RawValue, ValueKey


class ValueEventKind(StrEnum):
    ADDED = "added"
    CHANGED = "changed"
    REMOVED = "removed"


class ValueEvent(BaseModel):
    """A raw value notification for one node.

    ``added`` and ``changed`` events carry the full ``value``; ``removed``
    events only carry its address (``instance`` and ``index``).
    """

    model_config = ConfigDict(frozen=True)

    node_id: int = Field(..., ge=1, le=255, description="Node id within its controller")
    kind: ValueEventKind
    command_class: int = Field(..., ge=0)
    value: RawValue | None = None
    instance: int | None = Field(default=None, ge=0)
    index: int | None = Field(default=None, ge=0)
    observed_at: datetime = Field(default_factory=lambda: datetime.now(UTC))

    @field_validator("observed_at")
    @classmethod
    def _ensure_tz_aware(cls, value: datetime) -> datetime:
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    @model_validator(mode="after")
    def _check_shape(self) -> ValueEvent:
        if self.kind == ValueEventKind.REMOVED:
            if self.instance is None or self.index is None:
                raise ValueError("removed events need instance and index")
            return self
        if self.value is None:
            raise ValueError(f"{self.kind} events need a value")
        if self.value.node_id != self.node_id:
            raise ValueError(f"value belongs to node {self.value.node_id}, not {self.node_id}")
        return self

    @property
    def value_key(self) -> ValueKey:
        if self.value is not None:
            return self.value.value_key
        # _check_shape guarantees both are set for removals.
        return ValueKey(self.node_id, self.command_class, self.instance or 0, self.index or 0)
