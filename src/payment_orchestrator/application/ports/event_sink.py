from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payment_orchestrator.domain.events import DomainEvent


class EventSink(ABC):
    """Port for observability events (risk, confirmation, analytics).

    Contract:
    - emit() accepts any DomainEvent; transport and format are up to the
      implementation
    - Emission is best effort: the orchestrator logs and discards any
      exception raised here, so a failing sink never fails a payment
    - No delivery confirmation is expected or returned
    """

    @abstractmethod
    def emit(self, event: DomainEvent) -> None:
        """Publish a single event."""
