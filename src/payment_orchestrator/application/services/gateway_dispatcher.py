"""
Routes immutable records to the injected payment gateway.

Gateway errors are not caught here: they reach the use case, and from there
the caller, exactly as the gateway raised them.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from payment_orchestrator.domain.services.routing import REFUND_ENDPOINT, endpoint_for
from payment_orchestrator.logging_config import get_logger

if TYPE_CHECKING:
    from payment_orchestrator.application.dtos import GatewayResponse
    from payment_orchestrator.application.ports import PaymentGateway
    from payment_orchestrator.domain.entities import Refund, Transaction
    from payment_orchestrator.domain.value_objects import PaymentMethod


logger = get_logger(__name__)


class GatewayDispatcher:
    def __init__(self, gateway: PaymentGateway) -> None:
        self._gateway = gateway

    def dispatch(self, method: PaymentMethod, transaction: Transaction) -> GatewayResponse:
        endpoint = endpoint_for(method)
        logger.info(
            "payment_dispatch_request",
            endpoint=endpoint,
            user_id=transaction.user_id,
            final_amount=str(transaction.final_amount),
            currency=transaction.currency,
        )
        response = self._gateway.post(endpoint, transaction)
        logger.info("payment_dispatch_response", endpoint=endpoint, status=getattr(response, "status", None))
        return response

    def dispatch_refund(self, refund: Refund) -> GatewayResponse:
        logger.info(
            "refund_dispatch_request",
            endpoint=REFUND_ENDPOINT,
            transaction_id=refund.transaction_id,
            net_amount=str(refund.net_amount),
        )
        response = self._gateway.post(REFUND_ENDPOINT, refund)
        logger.info("refund_dispatch_response", endpoint=REFUND_ENDPOINT, status=getattr(response, "status", None))
        return response
