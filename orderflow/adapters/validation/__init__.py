"""Validation adapters."""

from .address import AddressValidator

__all__ = ["AddressValidator"]
