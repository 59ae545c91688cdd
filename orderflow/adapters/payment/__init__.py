"""Payment adapters for charging orders."""

from .vendor import PaymentService

__all__ = ["PaymentService"]
