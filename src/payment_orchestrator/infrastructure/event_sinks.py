from __future__ import annotations

from typing import TYPE_CHECKING

from payment_orchestrator.application.ports import EventSink
from payment_orchestrator.domain.events import PaymentConfirmation
from payment_orchestrator.logging_config import get_logger

if TYPE_CHECKING:
    import structlog

    from payment_orchestrator.domain.events import DomainEvent


class StructlogEventSink(EventSink):
    """Default sink: every event becomes one structured log line.

    The event name is the log event; event fields become key/value pairs.
    Confirmation events also carry the rendered user-facing message.
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger or get_logger("payment_orchestrator.events")

    def emit(self, event: DomainEvent) -> None:
        fields = event.as_fields()
        if isinstance(event, PaymentConfirmation):
            fields["message"] = event.message
        self._logger.info(event.name, **fields)


class InMemoryEventSink(EventSink):
    """Sink that keeps events in emission order, for tests and inspection.

    NOT thread-safe.
    """

    def __init__(self) -> None:
        self._events: list[DomainEvent] = []

    @property
    def events(self) -> list[DomainEvent]:
        return list(self._events)

    def of_type(self, event_type: type[DomainEvent]) -> list[DomainEvent]:
        return [event for event in self._events if isinstance(event, event_type)]

    def emit(self, event: DomainEvent) -> None:
        self._events.append(event)

    def clear(self) -> None:
        self._events.clear()
