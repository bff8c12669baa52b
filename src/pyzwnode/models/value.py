"""Raw value models.

A raw value is one typed, indexed datum the hardware reports for a node,
addressed by (node, command class, instance, index).
"""

from __future__ import annotations

import dataclasses
from typing import Any

from pydantic import Field, field_validator

from pyzwnode._constants import USER_GENRE
from pyzwnode.models._base import ZWaveBaseModel, ZWaveStrEnum


@dataclasses.dataclass(frozen=True, slots=True, order=True)
class ValueKey:
    """Composite address of a raw value.

    The string form ``<node>-<class>-<instance>-<index>`` matches the
    ``value_id`` the transport reports and is what log lines show.  Parts
    are non-negative so that form parses back to the same key.
    """

    node_id: int
    command_class: int
    instance: int
    index: int

    def __post_init__(self) -> None:
        for field in dataclasses.fields(self):
            if getattr(self, field.name) < 0:
                raise ValueError(f"value key {field.name} must not be negative, got {getattr(self, field.name)}")

    def __str__(self) -> str:
        return f"{self.node_id}-{self.command_class}-{self.instance}-{self.index}"

    @classmethod
    def parse(cls, text: str) -> ValueKey:
        """Parse the ``<node>-<class>-<instance>-<index>`` string form.

        Raises :class:`ValueError` if *text* is not four dash-separated
        integers.
        """
        parts = text.strip().split("-")
        if len(parts) != 4:
            raise ValueError(f"value key must have 4 parts, got {text!r}")
        try:
            node_id, command_class, instance, index = (int(part) for part in parts)
        except ValueError as exc:
            raise ValueError(f"value key parts must be integers, got {text!r}") from exc
        return cls(node_id, command_class, instance, index)

    @classmethod
    def coerce(cls, value: ValueKey | str) -> ValueKey:
        if isinstance(value, ValueKey):
            return value
        return cls.parse(value)


class ValueGenre(ZWaveStrEnum):
    """Classification of a raw value."""

    BASIC = "basic"
    USER = USER_GENRE
    CONFIG = "config"
    SYSTEM = "system"
    UNKNOWN = "unknown"


class RawValue(ZWaveBaseModel):
    """A value as last reported by the transport."""

    node_id: int = Field(..., ge=0)
    class_id: int = Field(..., ge=0)
    instance: int = Field(default=1, ge=0)
    index: int = Field(default=0, ge=0)
    value_id: str = ""
    label: str = ""
    value: Any = None
    units: str = ""
    genre: ValueGenre = ValueGenre.UNKNOWN
    type: str = ""
    read_only: bool = False
    help: str = Field(default="", repr=False)

    @field_validator("genre", mode="before")
    @classmethod
    def _coerce_genre(cls, value: Any) -> Any:
        if isinstance(value, str):
            return ValueGenre(value)
        return value

    @property
    def value_key(self) -> ValueKey:
        return ValueKey(self.node_id, self.class_id, self.instance, self.index)

    @property
    def is_user(self) -> bool:
        return self.genre == ValueGenre.USER

    @property
    def units_suffix(self) -> str:
        """Units with a leading space, or ``""`` when there are none."""
        return f" {self.units}" if self.units else ""

    def as_dict(self) -> dict[str, Any]:
        """JSON-friendly view without the raw payload."""
        return self.model_dump(mode="json", exclude={"raw"})
