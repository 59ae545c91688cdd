"""Tests for adapter implementations.

These tests exercise the concrete payment, shipping, validation,
audit and CLI adapters and their translation to and from core models.
"""
