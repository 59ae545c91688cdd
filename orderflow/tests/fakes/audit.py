"""Fake AuditPort implementation for testing."""

from orderflow.core.models import Order, OrderResponse
from orderflow.core.ports import AuditPort


class FakeAuditPort(AuditPort):
    """In-memory audit trail for testing.

    Captures all audit records sent through this port for test assertions.
    """

    def __init__(self):
        """Initialize with empty audit history."""
        self.logged: list[tuple[Order, OrderResponse]] = []
        self.log_call_count = 0
        self.should_fail: bool = False
        self.fail_message: str = "Audit failed"

    def log_order(self, order: Order, response: OrderResponse) -> None:
        """Record an order and its response."""
        self.log_call_count += 1

        if self.should_fail:
            raise RuntimeError(self.fail_message)

        self.logged.append((order, response))

    def get_last_record(self) -> tuple[Order, OrderResponse] | None:
        """Get the most recent audit record, if any."""
        if self.logged:
            return self.logged[-1]
        return None

    def get_records_for_order(self, order_id: str) -> list[tuple[Order, OrderResponse]]:
        """Get all audit records for a specific order."""
        return [
            (order, response)
            for order, response in self.logged
            if order.order_id == order_id
        ]

    def set_should_fail(self, should_fail: bool, message: str = "Audit failed") -> None:
        """Configure the adapter to raise on the next operation."""
        self.should_fail = should_fail
        self.fail_message = message

    def reset(self) -> None:
        """Reset all collected records and state."""
        self.logged.clear()
        self.log_call_count = 0
        self.should_fail = False
        self.fail_message = "Audit failed"
