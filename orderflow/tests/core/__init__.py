"""Unit tests for core domain logic.

These tests exercise the order-submission workflow without real adapters.
All external ports are replaced with in-memory fakes from tests/fakes/
or unittest.mock doubles.
"""
