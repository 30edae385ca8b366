from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from payment_orchestrator.application.dtos import GatewayResponse
    from payment_orchestrator.domain.entities import Refund, Transaction


class PaymentGateway(ABC):
    """Port for the external payment-processing endpoint.

    Contract:
    - post() is a single blocking call: it returns or raises before the
      orchestrator proceeds
    - Failures MUST be raised (GatewayDispatchError or a subclass); a
      returned GatewayResponse means the gateway accepted the body
    - Retry, timeouts and circuit breaking belong to the implementation;
      the orchestrator never retries

    The orchestrator never constructs its own transport: an implementation
    is supplied by the caller at construction.
    """

    @abstractmethod
    def post(self, endpoint: str, body: Transaction | Refund) -> GatewayResponse:
        """Send a record to the gateway.

        Args:
            endpoint: Endpoint path, e.g. "/payments/credit".
            body: The immutable Transaction or Refund being dispatched.

        Returns:
            The gateway's acknowledgement.

        Raises:
            GatewayDispatchError: The gateway rejected or failed the request.
        """
