"""Order submission orchestration.

This module coordinates a single order through payment, optional
shipping, and auditing. It uses ports but contains no adapter-specific
logic.
"""

import logging
from collections.abc import Iterable

from .models import Order, OrderResponse, ShippingResult, SubmissionStage
from .ports import AuditPort, OrderSubmissionPort, PaymentPort, ShippingPort

logger = logging.getLogger(__name__)


class OrdersController(OrderSubmissionPort):
    """Submits orders: pay, ship if paid, audit, respond.

    `stages` holds the path taken by the most recent submission and is
    reset at the start of each one.
    """

    def __init__(
        self,
        payment_service: PaymentPort,
        shipping_service: ShippingPort,
        audit_logger: AuditPort,
    ):
        self.payment_service = payment_service
        self.shipping_service = shipping_service
        self.audit_logger = audit_logger
        self.stages: list[SubmissionStage] = []

    @property
    def last_stage(self) -> SubmissionStage | None:
        """Stage reached just before DONE in the most recent submission."""
        if len(self.stages) < 2:
            return None
        return self.stages[-2]

    def submit(self, order: Order) -> OrderResponse:
        """Pay for, ship, and audit an order.

        Steps:
        1. Charge the order via the payment port
        2. Ship it if payment succeeded, otherwise skip shipping
        3. Build the response from both results
        4. Hand order and response to the audit port
        5. Return the response

        Any exception raised by a port during steps 1-4 ends the
        submission with OrderResponse.failed(). Audit is not reached in
        that case and the exception is not re-raised.
        """
        self.stages = [SubmissionStage.START]
        try:
            payment_result = self.payment_service.pay(order)
            self.stages.append(SubmissionStage.PAYMENT_ATTEMPTED)

            shipping_result: ShippingResult | None = None
            if payment_result.success:
                shipping_result = self.shipping_service.ship(order)
                self.stages.append(SubmissionStage.SHIPPING_ATTEMPTED)
            else:
                self.stages.append(SubmissionStage.SHIPPING_SKIPPED)

            response = OrderResponse.from_results(payment_result, shipping_result)

            self.audit_logger.log_order(order, response)
            self.stages.append(SubmissionStage.AUDITED)
        except Exception:
            response = OrderResponse.failed()
        else:
            logger.debug(
                f"Order {order.order_id or '<unnamed>'} submitted: "
                f"success={response.success}"
            )

        self.stages.append(SubmissionStage.DONE)
        return response

    def submit_many(self, orders: Iterable[Order]) -> list[OrderResponse]:
        """Submit each order in turn; one failure does not affect the rest."""
        return [self.submit(order) for order in orders]
