"""Composition root for orderflow.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Dependency injection
- Command-line entry point
"""

import argparse
import logging
import sys
from typing import TextIO

from pydantic import ValidationError

from orderflow.adapters.audit import (
    JsonLinesAuditLogger,
    LoggingAuditLogger,
    StdoutAuditLogger,
)
from orderflow.adapters.cli.commands import CLICommandHandler
from orderflow.adapters.payment import PaymentService
from orderflow.adapters.shipping import ShippingService
from orderflow.adapters.validation import AddressValidator
from orderflow.config import Settings, load_settings
from orderflow.core.orders_controller import OrdersController
from orderflow.core.ports import AuditPort


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )


def build_audit_logger(settings: Settings, audit_stream: TextIO | None = None) -> AuditPort:
    """Select the audit adapter named by the configuration.

    Args:
        settings: Loaded application settings.
        audit_stream: Stream for the stdout backend. None means sys.stdout.

    Raises:
        ValueError: If the audit backend is unknown.
    """
    logger = logging.getLogger(__name__)

    if settings.audit_backend == "stdout":
        logger.info("Audit adapter: Stdout")
        return StdoutAuditLogger(verbose=settings.debug, stream=audit_stream)
    elif settings.audit_backend == "log":
        logger.info("Audit adapter: Logging")
        return LoggingAuditLogger()
    elif settings.audit_backend == "jsonl":
        logger.info(f"Audit adapter: JSON Lines ({settings.audit_output_path})")
        return JsonLinesAuditLogger(output_path=settings.audit_output_path)
    else:
        raise ValueError(f"Unknown audit backend: {settings.audit_backend}")


def build_controller(settings: Settings, audit_stream: TextIO | None = None) -> OrdersController:
    """Instantiate adapters and wire them into an OrdersController.

    This is the composition root: the single place where all components
    are instantiated and wired together.
    """
    logger = logging.getLogger(__name__)
    logger.info("Initializing adapters...")

    payment = PaymentService(
        vendor_approves=settings.payment_vendor_approves,
        preserve_discarded_result=settings.payment_preserve_discarded_result,
    )
    shipping = ShippingService(
        address_validator=AddressValidator(),
        carrier=settings.shipping_carrier,
    )
    audit = build_audit_logger(settings, audit_stream)

    return OrdersController(
        payment_service=payment,
        shipping_service=shipping,
        audit_logger=audit,
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the orderflow command."""
    parser = argparse.ArgumentParser(
        prog="orderflow",
        description="Submit an order through payment, shipping and audit.",
    )
    parser.add_argument("--customer", required=True, help="Customer name")
    parser.add_argument(
        "--item",
        dest="items",
        action="append",
        default=[],
        help="Item identifier (repeat for several items)",
    )
    parser.add_argument("--total", required=True, help="Total price, e.g. 19.99")
    parser.add_argument(
        "--payment-method",
        default=None,
        help="Payment method identifier; omit to see payment rejected",
    )
    parser.add_argument("--address", default=None, help="Shipping address")
    parser.add_argument("--order-id", default=None, help="Order identifier")
    parser.add_argument(
        "--format",
        choices=["json", "text"],
        default="json",
        help="Output format for the result",
    )
    parser.add_argument("--env-file", default=None, help="Path to a .env file")
    return parser


def run(argv: list[str] | None = None) -> int:
    """Parse arguments, wire the application and submit one order.

    The formatted result is the only thing written to stdout; log lines
    and the stdout audit block go to stderr.

    Returns:
        Process exit code: 0 if the order succeeded, 1 otherwise.
    """
    args = build_parser().parse_args(argv)
    logger = logging.getLogger(__name__)

    try:
        settings = load_settings(args.env_file)
    except ValidationError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    configure_logging(settings.log_level, settings.log_format)

    try:
        controller = build_controller(settings, audit_stream=sys.stderr)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to initialize adapters: {e}", exc_info=True)
        return 1

    cli_handler = CLICommandHandler(controller)
    try:
        result = cli_handler.submit_order(
            customer_name=args.customer,
            items=args.items,
            total_price=args.total,
            payment_method=args.payment_method,
            shipping_address=args.address,
            order_id=args.order_id,
        )
    except ValueError as e:
        logger.error(f"Invalid order: {e}")
        return 1

    print(cli_handler.format_result(result, args.format))
    return 0 if result["status"] == "success" else 1


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Order submitted successfully
        1: Order failed, or a configuration/adapter error occurred
        2: Invalid command-line arguments
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        sys.exit(run())
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)


if __name__ == "__main__":
    main()
