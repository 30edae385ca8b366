from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING
from uuid import uuid4

from payment_orchestrator.application.dtos import GatewayResponse
from payment_orchestrator.application.ports import PaymentGateway

if TYPE_CHECKING:
    from payment_orchestrator.domain.entities import Refund, Transaction


@dataclass(frozen=True, slots=True)
class GatewayCall:
    endpoint: str
    body: Transaction | Refund


class InMemoryPaymentGateway(PaymentGateway):
    """In-memory gateway that accepts every post and records it.

    Implementation notes:
    - Records (endpoint, body) pairs in call order
    - Bodies are stored as-is; Transaction and Refund are immutable
    - Each response carries a fresh uuid4 reference
    - NOT thread-safe; intended for tests and local wiring
    """

    def __init__(self) -> None:
        self._calls: list[GatewayCall] = []

    @property
    def calls(self) -> list[GatewayCall]:
        return list(self._calls)

    def post(self, endpoint: str, body: Transaction | Refund) -> GatewayResponse:
        self._calls.append(GatewayCall(endpoint=endpoint, body=body))
        return GatewayResponse(status="accepted", reference=str(uuid4()))
