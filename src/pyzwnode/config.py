"""Node configuration for pyzwnode."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyzwnode.exceptions import ZWaveConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_float(name: str, value: str) -> float:
    try:
        return float(value)
    except ValueError as exc:
        raise ZWaveConfigError(f"{name} must be a number, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class NodeConfig:
    """Per-node behaviour switches.

    Parameters
    ----------
    debug : bool
        Log every unmatched value on ``value_added``, not only
        user-genre ones.
    deferred_set_timeout : float
        Seconds a property write waits for the hardware to confirm it
        with a value-changed notification.  ``0`` or less waits forever.
    enforce_unique_bindings : bool
        Refuse to register a property whose value key is already claimed
        by another property of the same node.
    """

    debug: bool = False
    deferred_set_timeout: float = 30.0
    enforce_unique_bindings: bool = True

    @classmethod
    def from_env(cls, **overrides: Any) -> NodeConfig:
        """Create configuration from environment variables.

        Reads ``ZWNODE_DEBUG``, ``ZWNODE_DEFERRED_SET_TIMEOUT`` and
        ``ZWNODE_ENFORCE_UNIQUE_BINDINGS``.  Explicit keyword arguments
        override environment values.

        Raises
        ------
        ZWaveConfigError
            If a numeric variable cannot be parsed.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        if "debug" not in overrides:
            config_kwargs["debug"] = _env_bool(env.get("ZWNODE_DEBUG"), False)

        timeout_env = env.get("ZWNODE_DEFERRED_SET_TIMEOUT")
        if timeout_env is not None and "deferred_set_timeout" not in overrides:
            config_kwargs["deferred_set_timeout"] = _env_float("ZWNODE_DEFERRED_SET_TIMEOUT", timeout_env)

        if "enforce_unique_bindings" not in overrides:
            config_kwargs["enforce_unique_bindings"] = _env_bool(
                env.get("ZWNODE_ENFORCE_UNIQUE_BINDINGS"),
                True,
            )

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
