"""Core domain logic for the orderflow order-submission workflow.

This package contains zero external dependencies and represents
the pure business logic of the application. All concrete capabilities
are handled by the adapters package.
"""

from .errors import InvalidAddressError, InvalidPaymentMethodError, OrderflowError
from .models import (
    Order,
    OrderResponse,
    PaymentResult,
    ShippingResult,
    SubmissionStage,
)

__all__ = [
    "InvalidAddressError",
    "InvalidPaymentMethodError",
    "Order",
    "OrderResponse",
    "OrderflowError",
    "PaymentResult",
    "ShippingResult",
    "SubmissionStage",
]
