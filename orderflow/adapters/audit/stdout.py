"""Stdout audit adapter.

Implements AuditPort by printing each submission to the terminal with
human-readable formatting.
"""

import logging
import sys
from typing import TextIO

from orderflow.core.models import Order, OrderResponse
from orderflow.core.ports import AuditPort

logger = logging.getLogger(__name__)


class StdoutAuditLogger(AuditPort):
    """Prints submitted orders and their outcome to a terminal stream."""

    def __init__(self, verbose: bool = False, stream: TextIO | None = None):
        """Initialize stdout audit logger.

        Args:
            verbose: If True, include the item list and address in output.
            stream: Stream to print to. Defaults to sys.stdout at the time
                of each call.
        """
        self.verbose = verbose
        self.stream = stream

    def log_order(self, order: Order, response: OrderResponse) -> None:
        """Print an audit block for one submission."""
        stream = self.stream or sys.stdout
        print(self._format_header(order), file=stream)
        print(self._format_order_details(order, self.verbose), file=stream)
        print(self._format_outcome(response), file=stream)
        print(self._format_footer(), file=stream)

    @staticmethod
    def _format_header(order: Order) -> str:
        """Format the audit header."""
        lines = [
            "=" * 80,
            "ORDER AUDIT",
            "=" * 80,
            f"Order ID: {order.order_id or '-'}",
            f"Customer: {order.customer_name}",
        ]
        return "\n".join(lines)

    @staticmethod
    def _format_order_details(order: Order, verbose: bool) -> str:
        """Format order details section."""
        lines = [
            "",
            "-" * 80,
            "ORDER",
            "-" * 80,
            f"Total Price: {order.total_price:.2f}",
            f"Payment Method: {order.payment_method or '-'}",
            f"Items: {len(order.order_items)}",
        ]

        if verbose:
            for i, item in enumerate(order.order_items, 1):
                lines.append(f"  {i}. {item}")
            lines.append(f"Shipping Address: {order.shipping_address or '-'}")

        return "\n".join(lines)

    @staticmethod
    def _format_outcome(response: OrderResponse) -> str:
        """Format outcome section."""

        def _describe(result) -> str:
            if result is None:
                return "NOT ATTEMPTED"
            return "OK" if result.success else "FAILED"

        lines = [
            "",
            "-" * 80,
            "OUTCOME",
            "-" * 80,
            f"Payment: {_describe(response.payment_result)}",
            f"Shipping: {_describe(response.shipping_result)}",
            f"Result: {'SUCCESS' if response.success else 'FAILURE'}",
        ]
        return "\n".join(lines)

    @staticmethod
    def _format_footer() -> str:
        """Format the audit footer."""
        return "=" * 80
