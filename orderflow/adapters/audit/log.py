"""Logging audit adapter.

Implements AuditPort by emitting one record per submission through the
standard logging module, so audit output follows whatever handlers the
application configured.
"""

import logging

from orderflow.adapters.serialization import order_to_dict, response_to_dict
from orderflow.core.models import Order, OrderResponse
from orderflow.core.ports import AuditPort

logger = logging.getLogger(__name__)


class LoggingAuditLogger(AuditPort):
    """Writes audit records to a logger."""

    def __init__(self, logger_name: str | None = None, level: int = logging.INFO):
        """Initialize logging audit logger.

        Args:
            logger_name: Name of the logger to write to. Defaults to this
                module's logger.
            level: Log level for audit records.
        """
        self.audit_log = logging.getLogger(logger_name) if logger_name else logger
        self.level = level

    def log_order(self, order: Order, response: OrderResponse) -> None:
        """Log one submission."""
        outcome = "succeeded" if response.success else "failed"
        self.audit_log.log(
            self.level,
            f"Order {order.order_id or '<unnamed>'} for {order.customer_name} {outcome}",
            extra={
                "order": order_to_dict(order),
                "response": response_to_dict(response),
            },
        )
