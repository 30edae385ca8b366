"""Clocks for stamping transactions and refunds."""

from datetime import UTC, datetime, timedelta

from payment_orchestrator.application.ports import TimeProvider


class SystemTimeProvider(TimeProvider):
    def now(self) -> datetime:
        return datetime.now(UTC)


class FixedTimeProvider(TimeProvider):
    """Stands still until advanced; lets tests pin record timestamps."""

    def __init__(self, start: datetime) -> None:
        if start.tzinfo is not UTC:
            raise ValueError(f"Clock start must be UTC, got tzinfo={start.tzinfo}")
        self._current = start

    def now(self) -> datetime:
        return self._current

    def advance(self, delta: timedelta) -> None:
        self._current += delta
