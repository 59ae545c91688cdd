"""Stubbed payment vendor adapter.

Implements PaymentPort by validating the order's payment method and
asking a fake vendor to approve the charge. No money moves and no
network call is made.
"""

import logging

from orderflow.core.errors import InvalidPaymentMethodError
from orderflow.core.models import Order, PaymentResult
from orderflow.core.ports import PaymentPort

logger = logging.getLogger(__name__)


class PaymentService(PaymentPort):
    """Charges orders against a stubbed payment vendor."""

    def __init__(
        self,
        vendor_approves: bool = True,
        preserve_discarded_result: bool = False,
    ):
        """Initialize the payment service.

        Args:
            vendor_approves: Answer the fake vendor gives for every charge.
            preserve_discarded_result: If True, compute the vendor answer
                but return a default PaymentResult (success=False).
                If False, return the vendor answer.
        """
        self.vendor_approves = vendor_approves
        self.preserve_discarded_result = preserve_discarded_result

    def pay(self, order: Order) -> PaymentResult:
        """Charge an order.

        Raises:
            InvalidPaymentMethodError: If the payment method is None or empty.
        """
        if not order.payment_method:
            logger.warning(
                f"Rejected payment for order {order.order_id or '<unnamed>'}: "
                f"no payment method"
            )
            raise InvalidPaymentMethodError("Must provide valid payment method.")

        result = PaymentResult(success=self._call_payment_vendor(order.payment_method))
        logger.debug(
            f"Vendor answered {result.success} for payment method "
            f"{order.payment_method!r}"
        )

        if self.preserve_discarded_result:
            return PaymentResult()
        return result

    def _call_payment_vendor(self, payment_method: str) -> bool:
        return self.vendor_approves
