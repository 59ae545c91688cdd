"""Adapter implementations for orderflow ports.

Each subpackage provides concrete capabilities the core depends on:
- payment: Stubbed payment vendor
- shipping: Fake carrier
- validation: Address validation
- audit: Stdout, logging and JSON Lines audit trails
"""
