"""Fake carrier shipping adapter.

Implements ShippingPort by validating the order's shipping address and
then reporting the parcel as shipped. Nothing leaves the process.
"""

import logging

from orderflow.core.models import Order, ShippingResult
from orderflow.core.ports import AddressValidatorPort, ShippingPort

logger = logging.getLogger(__name__)


class ShippingService(ShippingPort):
    """Ships paid orders through a fake carrier."""

    def __init__(self, address_validator: AddressValidatorPort, carrier: str = "fake-carrier"):
        """Initialize the shipping service.

        Args:
            address_validator: Validates the order's shipping address
                before anything is shipped.
            carrier: Carrier name used in log output.
        """
        self.address_validator = address_validator
        self.carrier = carrier

    def ship(self, order: Order) -> ShippingResult:
        """Ship an order.

        Raises:
            InvalidAddressError: Propagated from the address validator.
        """
        self.address_validator.validate_address(order.shipping_address)
        logger.info(
            f"Shipping order {order.order_id or '<unnamed>'} "
            f"({len(order.order_items)} items) via {self.carrier}"
        )
        return ShippingResult(success=True)
