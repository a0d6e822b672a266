from __future__ import annotations

from datetime import UTC, datetime, timedelta

from order_pipeline.application.ports import TimeProvider


class SystemTimeProvider(TimeProvider):
    """Time provider backed by the system clock."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FrozenTimeProvider(TimeProvider):
    """Time provider that only moves when told to.

    NOT thread-safe; intended for single-threaded tests and demos.
    """

    def __init__(self, frozen_at: datetime) -> None:
        if frozen_at.tzinfo is not UTC:
            raise ValueError(f"datetime must have tzinfo=UTC, got tzinfo={frozen_at.tzinfo}")
        self._current = frozen_at

    def now(self) -> datetime:
        return self._current

    def advance(self, delta: timedelta) -> None:
        self._current += delta
