"""Port interfaces for the orderflow order-submission workflow.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package; in-memory test doubles live in tests/fakes/.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - PaymentPort: Charge an order
   - ShippingPort: Ship a paid order
   - AuditPort: Record the outcome of a submission
   - AddressValidatorPort: Check a shipping address

2. **Driving Ports** (adapters/external systems call into core)
   - OrderSubmissionPort: Entry point for submitting orders
"""

from abc import ABC, abstractmethod

from .models import Order, OrderResponse, PaymentResult, ShippingResult


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class PaymentPort(ABC):
    """Port for charging an order.

    Implementations own all validation of the order's payment details;
    the workflow passes the order through untouched.
    """

    @abstractmethod
    def pay(self, order: Order) -> PaymentResult:
        """Attempt payment for an order.

        Args:
            order: The order to charge.

        Returns:
            PaymentResult describing whether payment succeeded.

        Raises:
            Exception: If the order cannot be charged (e.g. missing
                payment method). The workflow absorbs it.
        """


class ShippingPort(ABC):
    """Port for shipping an order whose payment succeeded."""

    @abstractmethod
    def ship(self, order: Order) -> ShippingResult:
        """Ship an order.

        Args:
            order: The paid order.

        Returns:
            ShippingResult describing whether shipping succeeded.

        Raises:
            Exception: On any shipping failure.
        """


class AuditPort(ABC):
    """Port for recording submission outcomes.

    Called once per submission that reaches the end of the sequence,
    with the response that is about to be returned.
    """

    @abstractmethod
    def log_order(self, order: Order, response: OrderResponse) -> None:
        """Record an order and its response.

        Args:
            order: The submitted order.
            response: The response the workflow is returning.

        Raises:
            Exception: If the record cannot be written.
        """


class AddressValidatorPort(ABC):
    """Port for validating shipping addresses."""

    @abstractmethod
    def validate_address(self, address: str | None) -> bool:
        """Validate an address.

        Args:
            address: Free-form address text.

        Returns:
            True if the address is acceptable.

        Raises:
            InvalidAddressError: If the address is missing or blank.
        """


# ============================================================================
# DRIVING PORTS (External systems call into core)
# ============================================================================


class OrderSubmissionPort(ABC):
    """Port for submitting orders to the workflow."""

    @abstractmethod
    def submit(self, order: Order) -> OrderResponse:
        """Submit one order.

        Never raises: every failure is reported as a response whose
        success flag is False.
        """

    @abstractmethod
    def submit_many(self, orders: list[Order]) -> list[OrderResponse]:
        """Submit several orders independently, preserving their order."""
