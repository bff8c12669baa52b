"""Base model and enum for Z-Wave transport payloads.

Every payload model inherits from :class:`ZWaveBaseModel` which
provides:

* ``alias_generator=to_camel`` with ``populate_by_name`` so both the
  snake_case keys of the OpenZWave bindings (``class_id``) and the
  camelCase keys of newer drivers (``classId``) are accepted.
* A ``model_validator(mode="before")`` that drops ``None`` entries so
  the field default is used.
* A ``raw`` dict that captures the original payload.

String enums inherit from :class:`ZWaveStrEnum`, which resolves any
unmapped value to its ``UNKNOWN`` member instead of raising.
"""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


class ZWaveStrEnum(enum.StrEnum):
    """Base for transport string enums.

    Every subclass **must** define ``UNKNOWN``.
    """

    @classmethod
    def _missing_(cls, value: object) -> ZWaveStrEnum:
        if isinstance(value, str):
            lowered = value.strip().lower()
            for member in cls:
                if member.value == lowered:
                    return member
        # noinspection PyUnresolvedReferences
        # pylint: disable=no-member
        unknown: ZWaveStrEnum = cls.UNKNOWN  # type: ignore[attr-defined]
        return unknown


class ZWaveBaseModel(BaseModel):
    """Base for transport payload models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    raw: dict[str, Any] = Field(default_factory=dict)
    """Original transport payload."""

    @model_validator(mode="before")
    @classmethod
    def _drop_missing(cls, values: Any) -> Any:
        """Drop ``None`` entries and stash the raw payload."""
        if not isinstance(values, dict):
            return values
        cleaned = {key: value for key, value in values.items() if value is not None}
        # Only auto-stash raw when not explicitly provided, so kwargs
        # construction with raw= keeps the caller's value.
        if "raw" not in values:
            cleaned["raw"] = dict(values)
        return cleaned
