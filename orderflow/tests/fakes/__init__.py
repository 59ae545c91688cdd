"""Fake implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without real adapters:

- FakePaymentPort: Configurable payment outcome
- FakeShippingPort: Configurable shipping outcome
- FakeAuditPort: Captured audit records for assertion
- FakeAddressValidatorPort: Accept-all or reject-all validator
- FakeOrderSubmissionPort: Canned responses for driving adapters
"""

from .address import FakeAddressValidatorPort
from .audit import FakeAuditPort
from .payment import FakePaymentPort
from .shipping import FakeShippingPort
from .submission import FakeOrderSubmissionPort

__all__ = [
    "FakeAddressValidatorPort",
    "FakeAuditPort",
    "FakeOrderSubmissionPort",
    "FakePaymentPort",
    "FakeShippingPort",
]
