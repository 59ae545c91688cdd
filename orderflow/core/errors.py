"""Errors raised by orderflow capabilities.

The workflow itself never raises these to its caller; they are absorbed
at the submission boundary. They exist so adapters and tests can name
what went wrong.
"""


class OrderflowError(Exception):
    """Base class for orderflow errors."""


class InvalidPaymentMethodError(OrderflowError, ValueError):
    """Raised when an order has no usable payment method."""


class InvalidAddressError(OrderflowError, ValueError):
    """Raised when a shipping address fails validation."""
