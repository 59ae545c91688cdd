"""Domain models for the orderflow order-submission workflow.

All models in this module use only Python standard library types,
ensuring zero external dependencies in the core domain.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum


@dataclass(frozen=True)
class Order:
    """A purchase request handed to the workflow by the caller.

    Immutable for the duration of a submission. Validation of the
    payment method is the payment capability's job, not the model's.
    """

    customer_name: str
    order_items: tuple[str, ...]  # item identifiers, in order
    total_price: Decimal
    payment_method: str | None = None
    order_id: str = ""
    shipping_address: str | None = None

    def __post_init__(self) -> None:
        """Normalize items to a tuple and validate the price."""
        if not isinstance(self.order_items, tuple):
            object.__setattr__(self, "order_items", tuple(self.order_items))
        if not isinstance(self.total_price, Decimal):
            try:
                price = Decimal(str(self.total_price))
            except InvalidOperation as e:
                raise ValueError(f"Invalid total_price: {self.total_price!r}") from e
            object.__setattr__(self, "total_price", price)
        if not self.total_price.is_finite():
            raise ValueError(f"total_price must be finite, got {self.total_price}")
        if self.total_price < 0:
            raise ValueError(
                f"total_price must be non-negative, got {self.total_price}"
            )


@dataclass(frozen=True)
class PaymentResult:
    """Outcome of a payment attempt."""

    success: bool = False


@dataclass(frozen=True)
class ShippingResult:
    """Outcome of a shipping attempt."""

    success: bool = False


@dataclass(frozen=True)
class OrderResponse:
    """The workflow's result for one submission.

    Invariants:
        - shipping_result is present iff payment_result.success is True
        - success is True iff payment and shipping both succeeded
        - a failed submission caught at the error boundary carries
          neither result
    """

    success: bool = False
    payment_result: PaymentResult | None = None
    shipping_result: ShippingResult | None = None

    def __post_init__(self) -> None:
        """Validate response invariants on creation."""
        if self.payment_result is None:
            if self.shipping_result is not None:
                raise ValueError(
                    "shipping_result cannot be present without a payment_result"
                )
            if self.success:
                raise ValueError("success requires a payment_result")
            return

        if self.payment_result.success != (self.shipping_result is not None):
            raise ValueError(
                "shipping_result must be present iff payment succeeded "
                f"(payment success={self.payment_result.success}, "
                f"shipping present={self.shipping_result is not None})"
            )

        expected = (
            self.payment_result.success
            and self.shipping_result is not None
            and self.shipping_result.success
        )
        if self.success != expected:
            raise ValueError(
                f"success must be {expected} for the given results, got {self.success}"
            )

    @classmethod
    def from_results(
        cls,
        payment_result: PaymentResult,
        shipping_result: ShippingResult | None,
    ) -> "OrderResponse":
        """Build a response whose success flag is derived from the results."""
        success = (
            payment_result.success
            and shipping_result is not None
            and shipping_result.success
        )
        return cls(
            success=success,
            payment_result=payment_result,
            shipping_result=shipping_result,
        )

    @classmethod
    def failed(cls) -> "OrderResponse":
        """Response returned when the submission raised at any step."""
        return cls(success=False, payment_result=None, shipping_result=None)


class SubmissionStage(Enum):
    """Stages a single submission passes through.

    START → PAYMENT_ATTEMPTED → {SHIPPING_SKIPPED | SHIPPING_ATTEMPTED}
    → AUDITED → DONE. An error at any stage goes straight to DONE.
    """

    START = "start"
    PAYMENT_ATTEMPTED = "payment_attempted"
    SHIPPING_SKIPPED = "shipping_skipped"
    SHIPPING_ATTEMPTED = "shipping_attempted"
    AUDITED = "audited"
    DONE = "done"
