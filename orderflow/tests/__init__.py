"""Test suite for orderflow.

Organized into three categories:

1. core/: Unit tests for the order-submission workflow and models
   - No adapters, fast execution
   - Uses in-memory fakes for ports, plus unittest.mock doubles

2. adapters/: Tests for concrete payment, shipping, validation,
   audit and CLI adapters

3. fakes/: Port implementations for testing
   - In-memory implementations of PaymentPort, ShippingPort, etc.
   - Used by core unit tests

Shared test data comes from factories.py (factory_boy) and
strategies.py (hypothesis).
"""
