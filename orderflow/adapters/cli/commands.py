"""CLI command implementations for orderflow.

Provides human-initiated order submission through the command line.

This adapter maps CLI arguments to an Order and hands it to an
OrderSubmissionPort. It handles CLI-specific formatting of the result.
"""

import json
import logging
import uuid
from decimal import Decimal, InvalidOperation
from typing import Any

from orderflow.adapters.serialization import order_to_dict, response_to_dict
from orderflow.core.models import Order
from orderflow.core.ports import OrderSubmissionPort

logger = logging.getLogger(__name__)


class CLICommandHandler:
    """Handles CLI commands by delegating to OrderSubmissionPort."""

    def __init__(self, submission: OrderSubmissionPort):
        """Initialize the CLI command handler.

        Args:
            submission: OrderSubmissionPort implementation to submit orders to.
        """
        self.submission = submission

    def submit_order(
        self,
        customer_name: str,
        items: list[str],
        total_price: str,
        payment_method: str | None = None,
        shipping_address: str | None = None,
        order_id: str | None = None,
    ) -> dict[str, Any]:
        """Build an order from CLI arguments and submit it.

        Args:
            customer_name: Customer placing the order.
            items: Item identifiers, in order.
            total_price: Decimal price as typed on the command line.
            payment_method: Payment method identifier (may be empty).
            shipping_address: Address to ship to.
            order_id: Identifier for the order; generated if omitted.

        Returns:
            Dictionary with status, the submitted order and the response.

        Raises:
            ValueError: If total_price is not a valid non-negative decimal.
        """
        try:
            price = Decimal(total_price)
        except InvalidOperation as e:
            raise ValueError(f"Invalid total price: {total_price!r}") from e

        order = Order(
            order_id=order_id or str(uuid.uuid4()),
            customer_name=customer_name,
            order_items=tuple(items),
            total_price=price,
            payment_method=payment_method,
            shipping_address=shipping_address,
        )

        response = self.submission.submit(order)
        logger.info(
            f"Submitted order {order.order_id}: "
            f"{'success' if response.success else 'failed'}"
        )

        return {
            "status": "success" if response.success else "failed",
            "operation": "submit",
            "order": order_to_dict(order),
            "response": response_to_dict(response),
        }

    @staticmethod
    def format_result(result: dict[str, Any], output_format: str = "json") -> str:
        """Render a command result for the terminal.

        Args:
            result: Dictionary returned by a command method.
            output_format: "json" or "text".

        Returns:
            The rendered result.
        """
        if output_format == "json":
            return json.dumps(result, indent=2, default=str)

        order = result["order"]
        response = result["response"]
        lines = [
            f"Order {order['order_id']} ({order['customer_name']})",
            f"  Status: {result['status'].upper()}",
            f"  Payment: {_describe(response['payment_result'])}",
            f"  Shipping: {_describe(response['shipping_result'])}",
        ]
        return "\n".join(lines)


def _describe(result: dict[str, Any] | None) -> str:
    if result is None:
        return "not attempted"
    return "ok" if result["success"] else "failed"
