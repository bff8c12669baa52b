"""Pending property writes.

A write is acknowledged only when the hardware reports the new value back
through a value-changed notification.  :class:`DeferredSet` is the handle a
property holds while it waits for that confirmation.
"""

from __future__ import annotations

import asyncio
import time
from typing import Any

from pyzwnode.exceptions import DeferredWriteCancelledError, DeferredWriteTimeoutError


class DeferredSet:
    """A write awaiting hardware confirmation.

    Must be created while an event loop is running.
    """

    def __init__(self, property_name: str, requested: Any) -> None:
        self.property_name = property_name
        self.requested = requested
        self.created_at = time.monotonic()
        self._future: asyncio.Future[Any] = asyncio.get_running_loop().create_future()

    @property
    def done(self) -> bool:
        return self._future.done()

    def resolve(self, value: Any) -> bool:
        """Complete the write with the confirmed *value*.

        Returns ``False`` if the handle was already settled.
        """
        if self._future.done():
            return False
        self._future.set_result(value)
        return True

    def cancel(self, reason: str) -> bool:
        """Fail the write with :class:`DeferredWriteCancelledError`."""
        if self._future.done():
            return False
        self._future.set_exception(
            DeferredWriteCancelledError(
                f"write to {self.property_name!r} cancelled: {reason}",
                property_name=self.property_name,
            )
        )
        return True

    async def wait(self, timeout: float | None) -> Any:
        """Wait for the confirmed value.

        ``None`` or a non-positive *timeout* waits forever.
        """
        if timeout is None or timeout <= 0:
            return await self._future
        try:
            return await asyncio.wait_for(self._future, timeout)
        except TimeoutError as exc:
            raise DeferredWriteTimeoutError(
                f"no confirmation for write to {self.property_name!r} within {timeout}s",
                property_name=self.property_name,
                timeout=timeout,
            ) from exc
