"""Shipping adapters for dispatching paid orders."""

from .carrier import ShippingService

__all__ = ["ShippingService"]
