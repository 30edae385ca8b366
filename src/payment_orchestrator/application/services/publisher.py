from __future__ import annotations

from typing import TYPE_CHECKING

from payment_orchestrator.logging_config import get_logger

if TYPE_CHECKING:
    from payment_orchestrator.application.ports import EventSink
    from payment_orchestrator.domain.events import DomainEvent

logger = get_logger(__name__)


class BestEffortPublisher:
    """Wraps an EventSink so that emission can never fail the caller.

    Failures are captured and reported (logged with traceback at warning
    level) instead of propagating. publish() tells the caller whether the
    sink accepted the event.
    """

    def __init__(self, sink: EventSink) -> None:
        self._sink = sink

    def publish(self, event: DomainEvent) -> bool:
        try:
            self._sink.emit(event)
        except Exception:
            logger.warning("side_effect_failed", event_name=event.name, exc_info=True)
            return False
        return True
