"""Conversion of domain models to JSON-friendly dictionaries.

Shared by the audit adapters and the command-line driver so that every
surface renders orders and responses the same way.
"""

from typing import Any

from orderflow.core.models import Order, OrderResponse


def order_to_dict(order: Order) -> dict[str, Any]:
    """Render an order. Decimal prices become strings to keep precision."""
    return {
        "order_id": order.order_id,
        "customer_name": order.customer_name,
        "order_items": list(order.order_items),
        "total_price": str(order.total_price),
        "payment_method": order.payment_method,
        "shipping_address": order.shipping_address,
    }


def response_to_dict(response: OrderResponse) -> dict[str, Any]:
    """Render a response; absent results become None."""
    return {
        "success": response.success,
        "payment_result": (
            {"success": response.payment_result.success}
            if response.payment_result is not None
            else None
        ),
        "shipping_result": (
            {"success": response.shipping_result.success}
            if response.shipping_result is not None
            else None
        ),
    }
